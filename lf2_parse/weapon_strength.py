"""Weapon strength list: per-attack hit values of weapons, indexed by `wpoint: attacking:`."""
from dataclasses import dataclass
from typing import Dict, List

from lf2_parse.grammar import Node, Rule
from lf2_parse.object_data_parser import (
    SubRuleFn, convert_i32, convert_i64, convert_u32, converter, parse_as_type,
    parse_each, tag_dispatch, tag_field,
)
from lf2_parse.values import WeaponStrengthIndex


@dataclass
class WeaponStrength:
    entry: WeaponStrengthIndex = WeaponStrengthIndex(0)
    name: str = ''
    d_vx: int = 0
    d_vy: int = 0
    a_rest: int = 0
    v_rest: int = 0
    fall: int = 0
    b_defend: int = 0
    injury: int = 0

    @classmethod
    def from_node(cls, node: Node) -> 'WeaponStrength':
        return parse_as_type(cls(), node, Rule.WEAPON_STRENGTH, [
            _parse_entry,
            _parse_name,
            lambda strength, body: parse_each(
                strength, body, Rule.WEAPON_STRENGTH_BODY, _parse_tag),
        ])


def _parse_entry(strength: WeaponStrength, node: Node) -> WeaponStrength:
    strength.entry = converter(WeaponStrengthIndex.parse)('entry', node)
    return strength


def _parse_name(strength: WeaponStrength, node: Node) -> WeaponStrength:
    strength.name = node.text
    return strength


WEAPON_STRENGTH_TAGS: Dict[Rule, SubRuleFn] = {
    Rule.TAG_DVX: tag_field('dvx', 'd_vx', convert_i64),
    Rule.TAG_DVY: tag_field('dvy', 'd_vy', convert_i64),
    Rule.TAG_A_REST: tag_field('arest', 'a_rest', convert_u32),
    Rule.TAG_V_REST: tag_field('vrest', 'v_rest', convert_u32),
    Rule.TAG_FALL: tag_field('fall', 'fall', convert_i32),
    Rule.TAG_B_DEFEND: tag_field('bdefend', 'b_defend', convert_i32),
    Rule.TAG_INJURY: tag_field('injury', 'injury', convert_i32),
}

_parse_tag = tag_dispatch(WEAPON_STRENGTH_TAGS)


def parse_weapon_strength_list(node: Node) -> List[WeaponStrength]:
    """The list node is always present; it has no children when the object has no list."""
    def parse_entry(strengths, entry_node):
        strengths.append(WeaponStrength.from_node(entry_node))
        return strengths

    return parse_each([], node, Rule.WEAPON_STRENGTH_LIST, parse_entry)
