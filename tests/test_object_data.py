import pytest

from lf2_parse import codec
from lf2_parse.errors import (
    DecodeError, DecodedDataInvalidUtf8, FileOpenError, GrammarSyntaxError,
    ObjectDataExpected, ObjectDataSurplus,
)
from lf2_parse.object_data import ObjectData
from lf2_parse.weapon_strength import WeaponStrength
from conftest import HEADER_TEXT, OBJECT_TEXT, STAND_FRAME_TEXT, WEAPON_STRENGTH_TEXT


def test_try_from():
    object_data = ObjectData.try_from(OBJECT_TEXT)
    assert object_data.header.name == 'Frozen'
    assert [frame.number for frame in object_data.frames] == [0, 60, 120]
    assert object_data.weapon_strength_list == []


def test_parse_is_idempotent():
    assert ObjectData.try_from(OBJECT_TEXT) == ObjectData.try_from(OBJECT_TEXT)


def test_no_frames():
    object_data = ObjectData.try_from(HEADER_TEXT)
    assert len(object_data.frames) == 0


def test_weapon_strength_list():
    object_data = ObjectData.try_from(HEADER_TEXT + WEAPON_STRENGTH_TEXT + STAND_FRAME_TEXT)
    assert object_data.weapon_strength_list == [
        WeaponStrength(entry=1, name='normal', d_vx=8, fall=40, v_rest=15, b_defend=16, injury=30),
        WeaponStrength(entry=2, name='jump', d_vx=10, d_vy=-3, fall=70, a_rest=20, b_defend=16,
                       injury=40),
    ]
    assert len(object_data.frames) == 1


def test_nothing_to_parse():
    with pytest.raises(ObjectDataExpected):
        ObjectData.try_from('')
    with pytest.raises(ObjectDataExpected):
        ObjectData.try_from('\n\n')


def test_surplus_carries_parsed_object():
    with pytest.raises(ObjectDataSurplus) as excinfo:
        ObjectData.try_from(OBJECT_TEXT + '\n' + OBJECT_TEXT)
    assert excinfo.value.object_data == ObjectData.try_from(OBJECT_TEXT)
    assert len(excinfo.value.surplus_nodes) == 1
    assert '<bmp_begin>' in str(excinfo.value)


def test_syntax_error():
    with pytest.raises(GrammarSyntaxError) as excinfo:
        ObjectData.try_from(OBJECT_TEXT + 'trailing words')
    assert excinfo.value.line == OBJECT_TEXT.count('\n') + 1


def test_open_text(tmp_path):
    path = tmp_path / 'frozen.txt'
    path.write_bytes(OBJECT_TEXT.encode())
    assert ObjectData.open(path) == OBJECT_TEXT


def test_dat_and_txt_parse_the_same(tmp_path):
    dat_path = tmp_path / 'frozen.dat'
    txt_path = tmp_path / 'frozen.txt'
    dat_path.write_bytes(codec.encode(OBJECT_TEXT.encode()))
    txt_path.write_bytes(OBJECT_TEXT.encode())
    assert ObjectData.open(dat_path) == OBJECT_TEXT
    assert ObjectData.load(dat_path) == ObjectData.load(txt_path)


def test_dat_suffix_is_case_insensitive(tmp_path):
    path = tmp_path / 'FROZEN.DAT'
    path.write_bytes(codec.encode(OBJECT_TEXT.encode()))
    assert ObjectData.open(str(path)) == OBJECT_TEXT


def test_missing_file(tmp_path):
    with pytest.raises(FileOpenError) as excinfo:
        ObjectData.open(tmp_path / 'missing.dat')
    assert 'missing.dat' in str(excinfo.value)


def test_short_dat(tmp_path):
    path = tmp_path / 'broken.dat'
    path.write_bytes(b'abc')
    with pytest.raises(DecodeError):
        ObjectData.open(path)


def test_invalid_utf8(tmp_path):
    path = tmp_path / 'broken.txt'
    path.write_bytes(b'<bmp_begin>\xff\xfe')
    with pytest.raises(DecodedDataInvalidUtf8) as excinfo:
        ObjectData.open(path)
    assert 'Try redownloading the object' in str(excinfo.value)
