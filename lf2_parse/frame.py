"""One animation frame of an object."""
from dataclasses import dataclass, field
from pathlib import PureWindowsPath
from typing import Dict, List, Optional

from lf2_parse.element import Element, convert_frame_number_next, parse_element
from lf2_parse.errors import GrammarError
from lf2_parse.grammar import Node, Rule
from lf2_parse.object_data_parser import (
    SubRuleFn, convert_i64, convert_path, converter, parse_as_type, parse_each,
    tag_dispatch, tag_field,
)
from lf2_parse.state import State
from lf2_parse.values import FrameNumber, FrameNumberNext, Pic, Wait


@dataclass
class Frame:
    number: FrameNumber = FrameNumber(0)
    name: str = ''
    center_x: int = 0
    center_y: int = 0
    d_vx: int = 0
    d_vy: int = 0
    d_vz: int = 0
    hit_a: FrameNumberNext = FrameNumberNext(0)
    hit_d: FrameNumberNext = FrameNumberNext(0)
    hit_da: FrameNumberNext = FrameNumberNext(0)
    hit_dj: FrameNumberNext = FrameNumberNext(0)
    hit_fa: FrameNumberNext = FrameNumberNext(0)
    hit_fj: FrameNumberNext = FrameNumberNext(0)
    hit_j: FrameNumberNext = FrameNumberNext(0)
    hit_ja: FrameNumberNext = FrameNumberNext(0)
    hit_ua: FrameNumberNext = FrameNumberNext(0)
    hit_uj: FrameNumberNext = FrameNumberNext(0)
    mp: int = 0
    next_frame: FrameNumberNext = FrameNumberNext(0)
    pic: Pic = Pic(0)
    sound: Optional[PureWindowsPath] = None
    state: State = State.STANDING
    wait: Wait = Wait()
    elements: List[Element] = field(default_factory=list)

    @classmethod
    def from_node(cls, node: Node) -> 'Frame':
        return parse_as_type(cls(), node, Rule.FRAME, [
            _parse_number,
            _parse_name,
            _parse_body,
        ])


def _parse_number(frame: Frame, node: Node) -> Frame:
    if node.rule is not Rule.FRAME_NUMBER:
        raise GrammarError([Rule.FRAME_NUMBER], node)
    frame.number = converter(FrameNumber.parse)('frame number', node)
    return frame


def _parse_name(frame: Frame, node: Node) -> Frame:
    if node.rule is not Rule.FRAME_NAME:
        raise GrammarError([Rule.FRAME_NAME], node)
    frame.name = node.text
    return frame


def _parse_body(frame: Frame, node: Node) -> Frame:
    return parse_each(frame, node, Rule.FRAME_BODY, _parse_body_item)


def _parse_body_item(frame: Frame, node: Node) -> Frame:
    if node.rule is Rule.FRAME_TAG:
        return parse_as_type(frame, node, Rule.FRAME_TAG, [_parse_tag])
    if node.rule is Rule.ELEMENT:
        frame.elements.append(parse_element(node))
        return frame
    raise GrammarError([Rule.FRAME_TAG, Rule.ELEMENT], node)


convert_hit = convert_frame_number_next

FRAME_TAGS: Dict[Rule, SubRuleFn] = {
    Rule.TAG_CENTER_X: tag_field('centerx', 'center_x', convert_i64),
    Rule.TAG_CENTER_Y: tag_field('centery', 'center_y', convert_i64),
    Rule.TAG_DVX: tag_field('dvx', 'd_vx', convert_i64),
    Rule.TAG_DVY: tag_field('dvy', 'd_vy', convert_i64),
    Rule.TAG_DVZ: tag_field('dvz', 'd_vz', convert_i64),
    Rule.TAG_HIT_A: tag_field('hit_a', 'hit_a', convert_hit),
    Rule.TAG_HIT_D: tag_field('hit_d', 'hit_d', convert_hit),
    Rule.TAG_HIT_DA: tag_field('hit_Da', 'hit_da', convert_hit),
    Rule.TAG_HIT_DJ: tag_field('hit_Dj', 'hit_dj', convert_hit),
    Rule.TAG_HIT_FA: tag_field('hit_Fa', 'hit_fa', convert_hit),
    Rule.TAG_HIT_FJ: tag_field('hit_Fj', 'hit_fj', convert_hit),
    Rule.TAG_HIT_J: tag_field('hit_j', 'hit_j', convert_hit),
    Rule.TAG_HIT_JA: tag_field('hit_ja', 'hit_ja', convert_hit),
    Rule.TAG_HIT_UA: tag_field('hit_Ua', 'hit_ua', convert_hit),
    Rule.TAG_HIT_UJ: tag_field('hit_Uj', 'hit_uj', convert_hit),
    Rule.TAG_MP: tag_field('mp', 'mp', convert_i64),
    Rule.TAG_NEXT: tag_field('next', 'next_frame', convert_hit),
    Rule.TAG_PIC: tag_field('pic', 'pic', converter(Pic.parse)),
    Rule.TAG_SOUND: tag_field('sound', 'sound', convert_path),
    Rule.TAG_STATE: tag_field('state', 'state', converter(State.parse)),
    Rule.TAG_WAIT: tag_field('wait', 'wait', converter(Wait.parse)),
}

_parse_tag = tag_dispatch(FRAME_TAGS)
