"""
Object header: display name, sprite sheets and movement constants.

The header has no sensible defaults, so it is collected in a HeaderBuilder
and `build()` fails naming the first field that never appeared.
"""
from dataclasses import dataclass, fields
from pathlib import PureWindowsPath
from typing import Dict, List

from lf2_parse.errors import DataBuildFailed
from lf2_parse.grammar import Node, Rule
from lf2_parse.object_data_parser import (
    SubRuleFn, convert_f32, convert_path, convert_str, convert_u32, parse_as_type,
    parse_each, tag_dispatch, tag_field,
)


@dataclass
class SpriteFile:
    """A sprite sheet: pictures `first` to `last`, laid out in a `row` x `col` grid."""
    path: PureWindowsPath
    first: int
    last: int
    w: int
    h: int
    row: int
    col: int

    @classmethod
    def from_node(cls, node: Node) -> 'SpriteFile':
        values = parse_as_type({}, node, Rule.SPRITE_FILE, [
            _positional('first', 'file', convert_u32),
            _positional('last', 'file', convert_u32),
            _positional('path', 'file', convert_path),
            _sprite_tag('w', Rule.TAG_W),
            _sprite_tag('h', Rule.TAG_H),
            _sprite_tag('row', Rule.TAG_ROW),
            _sprite_tag('col', Rule.TAG_COL),
        ])
        return cls(**values)


def _positional(attr, field, convert) -> SubRuleFn:
    def parse(values, node):
        values[attr] = convert(field, node)
        return values
    return parse


def _sprite_tag(attr, rule) -> SubRuleFn:
    def parse(values, node):
        return parse_as_type(values, node, rule, [_positional(attr, f'file {attr}:', convert_u32)])
    return parse


@dataclass
class Header:
    name: str
    head: PureWindowsPath
    small: PureWindowsPath
    sprite_files: List[SpriteFile]
    walking_frame_rate: int
    walking_speed: float
    walking_speed_z: float
    running_frame_rate: int
    running_speed: float
    running_speed_z: float
    heavy_walking_speed: float
    heavy_walking_speed_z: float
    heavy_running_speed: float
    heavy_running_speed_z: float
    jump_height: float
    jump_distance: float
    jump_distance_z: float
    dash_height: float
    dash_distance: float
    dash_distance_z: float
    rowing_height: float
    rowing_distance: float

    @classmethod
    def from_node(cls, node: Node) -> 'Header':
        builder = parse_each(HeaderBuilder(), node, Rule.HEADER, _parse_header_item)
        return builder.build()


class HeaderBuilder:
    """Collects header fields; every field starts unset."""

    def __init__(self):
        for f in fields(Header):
            setattr(self, f.name, None)
        self.sprite_files = []

    def build(self) -> Header:
        values = {f.name: getattr(self, f.name) for f in fields(Header)}
        for name, value in values.items():
            if value is None or (name == 'sprite_files' and not value):
                raise DataBuildFailed('Header', name)
        return Header(**values)


def _parse_header_item(builder: HeaderBuilder, node: Node) -> HeaderBuilder:
    if node.rule is Rule.SPRITE_FILE:
        builder.sprite_files.append(SpriteFile.from_node(node))
        return builder
    return parse_as_type(builder, node, Rule.HEADER_TAG, [_parse_tag])


HEADER_TAGS: Dict[Rule, SubRuleFn] = {
    Rule.TAG_NAME: tag_field('name', 'name', convert_str),
    Rule.TAG_HEAD: tag_field('head', 'head', convert_path),
    Rule.TAG_SMALL: tag_field('small', 'small', convert_path),
    Rule.TAG_WALKING_FRAME_RATE: tag_field(
        'walking_frame_rate', 'walking_frame_rate', convert_u32),
    Rule.TAG_WALKING_SPEED: tag_field('walking_speed', 'walking_speed', convert_f32),
    Rule.TAG_WALKING_SPEED_Z: tag_field('walking_speedz', 'walking_speed_z', convert_f32),
    Rule.TAG_RUNNING_FRAME_RATE: tag_field(
        'running_frame_rate', 'running_frame_rate', convert_u32),
    Rule.TAG_RUNNING_SPEED: tag_field('running_speed', 'running_speed', convert_f32),
    Rule.TAG_RUNNING_SPEED_Z: tag_field('running_speedz', 'running_speed_z', convert_f32),
    Rule.TAG_HEAVY_WALKING_SPEED: tag_field(
        'heavy_walking_speed', 'heavy_walking_speed', convert_f32),
    Rule.TAG_HEAVY_WALKING_SPEED_Z: tag_field(
        'heavy_walking_speedz', 'heavy_walking_speed_z', convert_f32),
    Rule.TAG_HEAVY_RUNNING_SPEED: tag_field(
        'heavy_running_speed', 'heavy_running_speed', convert_f32),
    Rule.TAG_HEAVY_RUNNING_SPEED_Z: tag_field(
        'heavy_running_speedz', 'heavy_running_speed_z', convert_f32),
    Rule.TAG_JUMP_HEIGHT: tag_field('jump_height', 'jump_height', convert_f32),
    Rule.TAG_JUMP_DISTANCE: tag_field('jump_distance', 'jump_distance', convert_f32),
    Rule.TAG_JUMP_DISTANCE_Z: tag_field('jump_distancez', 'jump_distance_z', convert_f32),
    Rule.TAG_DASH_HEIGHT: tag_field('dash_height', 'dash_height', convert_f32),
    Rule.TAG_DASH_DISTANCE: tag_field('dash_distance', 'dash_distance', convert_f32),
    Rule.TAG_DASH_DISTANCE_Z: tag_field('dash_distancez', 'dash_distance_z', convert_f32),
    Rule.TAG_ROWING_HEIGHT: tag_field('rowing_height', 'rowing_height', convert_f32),
    Rule.TAG_ROWING_DISTANCE: tag_field('rowing_distance', 'rowing_distance', convert_f32),
}

_parse_tag = tag_dispatch(HEADER_TAGS)
