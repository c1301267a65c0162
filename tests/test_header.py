from pathlib import PureWindowsPath

import numpy as np
import pytest

from lf2_parse.errors import DataBuildFailed, ParsePathError, ParseValueError
from lf2_parse.grammar import Rule
from lf2_parse.header import Header, SpriteFile
from conftest import HEADER_TEXT, parse_node


def parse_header(text):
    return Header.from_node(parse_node(Rule.HEADER, text))


def test_frozen_header():
    header = parse_header(HEADER_TEXT)
    assert header.name == 'Frozen'
    assert header.head == PureWindowsPath('frozen', 'frozen_f.bmp')
    assert header.small == PureWindowsPath('frozen', 'frozen_s.bmp')
    assert len(header.sprite_files) == 3
    assert header.walking_speed == 5.0
    assert header.walking_frame_rate == 3
    assert header.walking_speed_z == float(np.float32(2.57))
    assert header.jump_height == -16.0
    assert header.dash_height == -11.5
    assert header.rowing_distance == 6.0


def test_sprite_files():
    header = parse_header(HEADER_TEXT)
    assert header.sprite_files[1] == SpriteFile(
        path=PureWindowsPath('frozen', 'frozen_1.bmp'), first=70, last=139,
        w=79, h=79, row=10, col=7)


def test_unknown_header_tags_are_ignored():
    text = HEADER_TEXT.replace('<bmp_end>', 'weapon_hp: 150\n<bmp_end>')
    assert parse_header(text) == parse_header(HEADER_TEXT)


def test_missing_field_names_first_missing():
    text = HEADER_TEXT.replace('walking_frame_rate 3\n', '').replace('dash_height -11.500000\n', '')
    with pytest.raises(DataBuildFailed) as excinfo:
        parse_header(text)
    assert excinfo.value.field == 'walking_frame_rate'
    assert '`walking_frame_rate` must be initialized' in str(excinfo.value)


def test_missing_sprite_files():
    text = '\n'.join(line for line in HEADER_TEXT.splitlines() if not line.startswith('file('))
    with pytest.raises(DataBuildFailed) as excinfo:
        parse_header(text)
    assert excinfo.value.field == 'sprite_files'


def test_bad_float():
    text = HEADER_TEXT.replace('walking_speed 5.000000', 'walking_speed fast')
    with pytest.raises(ParseValueError) as excinfo:
        parse_header(text)
    assert excinfo.value.field == 'walking_speed'
    assert excinfo.value.value == 'fast'
    assert excinfo.value.line == 9


def test_bad_path():
    text = HEADER_TEXT.replace(r'head: frozen\frozen_f.bmp', 'head: frozen|f.bmp')
    with pytest.raises(ParsePathError) as excinfo:
        parse_header(text)
    assert excinfo.value.field == 'head'
    assert 'as a path' in str(excinfo.value)


def test_bad_sprite_file_size():
    text = HEADER_TEXT.replace('file(0-69): frozen\\frozen_0.bmp  w: 79', 'file(0-69): frozen\\frozen_0.bmp  w: big')
    with pytest.raises(ParseValueError) as excinfo:
        parse_header(text)
    assert excinfo.value.field == 'file w:'
