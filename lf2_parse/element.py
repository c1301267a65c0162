"""
Frame elements: typed sub-records attached to a frame.

Each element is a dataclass whose fields default to what LF2 uses when the
tag is omitted, and a tag table mapping tag rules to field setters.
"""
from dataclasses import dataclass
from typing import Dict, Union

from lf2_parse.grammar import Node, Rule
from lf2_parse.kinds import (
    BdyKind, CPointKind, Effect, ItrKind, OPointFacing, OPointKind, WPointKind,
)
from lf2_parse.object_data_parser import (
    SubRuleFn, convert_bool, convert_i32, convert_i64, convert_u32, converter,
    expect_one_of, parse_as_type, parse_each, tag_dispatch, tag_field,
)
from lf2_parse.values import FrameNumber, FrameNumberNext, ObjectId, WeaponStrengthIndex

ITR_Z_WIDTH_DEFAULT = 13

convert_frame_number = converter(FrameNumber.parse)
convert_frame_number_next = converter(FrameNumberNext.parse)


@dataclass
class Bdy:
    """Hittable body volume."""
    kind: BdyKind = BdyKind.NORMAL
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


@dataclass
class BPoint:
    """Where blood appears when the object is hit."""
    x: int = 0
    y: int = 0


@dataclass
class CPoint:
    """
    Catch point, aligning a catcher with the object it holds.

    `cover`, `decrease`, `dir_control`, `hurtable`, `injury`, the actions and
    the throw values apply to the catcher; `front_hurt_act` and
    `back_hurt_act` apply to the caught object.
    """
    kind: CPointKind = CPointKind.CATCHER
    x: int = 0
    y: int = 0
    cover: bool = False
    decrease: int = 0
    dir_control: bool = False
    hurtable: bool = False
    injury: int = 0
    a_action: FrameNumberNext = FrameNumberNext(0)
    j_action: FrameNumberNext = FrameNumberNext(0)
    v_action: FrameNumber = FrameNumber(0)
    t_action: FrameNumberNext = FrameNumberNext(0)
    throw_injury: int = 0
    throw_vx: int = 0
    throw_vy: int = 0
    throw_vz: int = 0
    front_hurt_act: FrameNumberNext = FrameNumberNext(0)
    back_hurt_act: FrameNumberNext = FrameNumberNext(0)


@dataclass
class Itr:
    """Interaction area, e.g. an attack's hit box."""
    kind: ItrKind = ItrKind.NORMAL
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    z_width: int = ITR_Z_WIDTH_DEFAULT
    d_vx: int = 0
    d_vy: int = 0
    a_rest: int = 0
    v_rest: int = 0
    fall: int = 0
    b_defend: int = 0
    injury: int = 0
    effect: Effect = Effect.NORMAL
    catching_act: int = 0
    caught_act: int = 0


@dataclass
class OPoint:
    """Spawns another object."""
    kind: OPointKind = OPointKind.SPAWN
    x: int = 0
    y: int = 0
    action: FrameNumberNext = FrameNumberNext(0)
    d_vx: int = 0
    d_vy: int = 0
    object_id: ObjectId = ObjectId(0)
    facing: OPointFacing = OPointFacing()


@dataclass
class WPoint:
    """Where a held weapon is drawn, and how it behaves."""
    kind: WPointKind = WPointKind.HOLDING
    x: int = 0
    y: int = 0
    weapon_act: FrameNumberNext = FrameNumberNext(0)
    attacking: WeaponStrengthIndex = WeaponStrengthIndex(0)
    d_vx: int = 0
    d_vy: int = 0


Element = Union[Bdy, BPoint, CPoint, Itr, OPoint, WPoint]


# ── Tag tables ───────────────────────────────────────────────────────

BDY_TAGS: Dict[Rule, SubRuleFn] = {
    Rule.TAG_KIND: tag_field('bdy: kind:', 'kind', converter(BdyKind.parse)),
    Rule.TAG_X: tag_field('bdy: x:', 'x', convert_i32),
    Rule.TAG_Y: tag_field('bdy: y:', 'y', convert_i32),
    Rule.TAG_W: tag_field('bdy: w:', 'w', convert_u32),
    Rule.TAG_H: tag_field('bdy: h:', 'h', convert_u32),
}

B_POINT_TAGS: Dict[Rule, SubRuleFn] = {
    Rule.TAG_X: tag_field('bpoint: x:', 'x', convert_i32),
    Rule.TAG_Y: tag_field('bpoint: y:', 'y', convert_i32),
}

C_POINT_TAGS: Dict[Rule, SubRuleFn] = {
    Rule.TAG_KIND: tag_field('cpoint: kind:', 'kind', converter(CPointKind.parse)),
    Rule.TAG_X: tag_field('cpoint: x:', 'x', convert_i32),
    Rule.TAG_Y: tag_field('cpoint: y:', 'y', convert_i32),
    Rule.TAG_INJURY: tag_field('cpoint: injury:', 'injury', convert_i32),
    Rule.TAG_COVER: tag_field('cpoint: cover:', 'cover', convert_bool),
    Rule.TAG_DECREASE: tag_field('cpoint: decrease:', 'decrease', convert_i32),
    Rule.TAG_DIR_CONTROL: tag_field('cpoint: dircontrol:', 'dir_control', convert_bool),
    Rule.TAG_HURTABLE: tag_field('cpoint: hurtable:', 'hurtable', convert_bool),
    Rule.TAG_V_ACTION: tag_field('cpoint: vaction:', 'v_action', convert_frame_number),
    Rule.TAG_A_ACTION: tag_field('cpoint: aaction:', 'a_action', convert_frame_number_next),
    Rule.TAG_J_ACTION: tag_field('cpoint: jaction:', 'j_action', convert_frame_number_next),
    Rule.TAG_T_ACTION: tag_field('cpoint: taction:', 't_action', convert_frame_number_next),
    Rule.TAG_THROW_VX: tag_field('cpoint: throwvx:', 'throw_vx', convert_i32),
    Rule.TAG_THROW_VY: tag_field('cpoint: throwvy:', 'throw_vy', convert_i32),
    Rule.TAG_THROW_VZ: tag_field('cpoint: throwvz:', 'throw_vz', convert_i32),
    Rule.TAG_THROW_INJURY: tag_field('cpoint: throwinjury:', 'throw_injury', convert_i32),
    Rule.TAG_FRONT_HURT_ACT: tag_field(
        'cpoint: fronthurtact:', 'front_hurt_act', convert_frame_number_next),
    Rule.TAG_BACK_HURT_ACT: tag_field(
        'cpoint: backhurtact:', 'back_hurt_act', convert_frame_number_next),
}

ITR_TAGS: Dict[Rule, SubRuleFn] = {
    Rule.TAG_KIND: tag_field('itr: kind:', 'kind', converter(ItrKind.parse)),
    Rule.TAG_X: tag_field('itr: x:', 'x', convert_i32),
    Rule.TAG_Y: tag_field('itr: y:', 'y', convert_i32),
    Rule.TAG_W: tag_field('itr: w:', 'w', convert_u32),
    Rule.TAG_H: tag_field('itr: h:', 'h', convert_u32),
    Rule.TAG_Z_WIDTH: tag_field('itr: zwidth:', 'z_width', convert_u32),
    Rule.TAG_DVX: tag_field('itr: dvx:', 'd_vx', convert_i64),
    Rule.TAG_DVY: tag_field('itr: dvy:', 'd_vy', convert_i64),
    Rule.TAG_A_REST: tag_field('itr: arest:', 'a_rest', convert_u32),
    Rule.TAG_V_REST: tag_field('itr: vrest:', 'v_rest', convert_u32),
    Rule.TAG_FALL: tag_field('itr: fall:', 'fall', convert_i32),
    Rule.TAG_B_DEFEND: tag_field('itr: bdefend:', 'b_defend', convert_i32),
    Rule.TAG_INJURY: tag_field('itr: injury:', 'injury', convert_i32),
    Rule.TAG_EFFECT: tag_field('itr: effect:', 'effect', converter(Effect.parse)),
    # Both carry two values in LF2 data; the first is the action.
    Rule.TAG_CATCHING_ACT: tag_field('itr: catchingact:', 'catching_act', convert_i32),
    Rule.TAG_CAUGHT_ACT: tag_field('itr: caughtact:', 'caught_act', convert_i32),
}

O_POINT_TAGS: Dict[Rule, SubRuleFn] = {
    Rule.TAG_KIND: tag_field('opoint: kind:', 'kind', converter(OPointKind.parse)),
    Rule.TAG_X: tag_field('opoint: x:', 'x', convert_i32),
    Rule.TAG_Y: tag_field('opoint: y:', 'y', convert_i32),
    Rule.TAG_ACTION: tag_field('opoint: action:', 'action', convert_frame_number_next),
    Rule.TAG_DVX: tag_field('opoint: dvx:', 'd_vx', convert_i64),
    Rule.TAG_DVY: tag_field('opoint: dvy:', 'd_vy', convert_i64),
    Rule.TAG_OID: tag_field('opoint: oid:', 'object_id', converter(ObjectId.parse)),
    Rule.TAG_FACING: tag_field('opoint: facing:', 'facing', converter(OPointFacing.parse)),
}

W_POINT_TAGS: Dict[Rule, SubRuleFn] = {
    Rule.TAG_KIND: tag_field('wpoint: kind:', 'kind', converter(WPointKind.parse)),
    Rule.TAG_X: tag_field('wpoint: x:', 'x', convert_i32),
    Rule.TAG_Y: tag_field('wpoint: y:', 'y', convert_i32),
    Rule.TAG_WEAPON_ACT: tag_field(
        'wpoint: weaponact:', 'weapon_act', convert_frame_number_next),
    Rule.TAG_ATTACKING: tag_field(
        'wpoint: attacking:', 'attacking', converter(WeaponStrengthIndex.parse)),
    Rule.TAG_DVX: tag_field('wpoint: dvx:', 'd_vx', convert_i64),
    Rule.TAG_DVY: tag_field('wpoint: dvy:', 'd_vy', convert_i64),
}

ELEMENT_TYPES = {
    Rule.BDY: (Bdy, BDY_TAGS),
    Rule.B_POINT: (BPoint, B_POINT_TAGS),
    Rule.C_POINT: (CPoint, C_POINT_TAGS),
    Rule.ITR: (Itr, ITR_TAGS),
    Rule.O_POINT: (OPoint, O_POINT_TAGS),
    Rule.W_POINT: (WPoint, W_POINT_TAGS),
}


# ── Dispatch ─────────────────────────────────────────────────────────

def parse_element(node: Node) -> Element:
    """Builds the element variant named by the ELEMENT node's inner child."""
    def parse_variant(_, variant_node):
        variant_node = expect_one_of(variant_node, ELEMENT_TYPES)
        element_cls, tags = ELEMENT_TYPES[variant_node.rule]
        return parse_each(element_cls(), variant_node, variant_node.rule, tag_dispatch(tags))

    return parse_as_type(None, node, Rule.ELEMENT, [parse_variant])
