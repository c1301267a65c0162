import logging

import pytest

from lf2_parse.errors import FrameNumberNonUnique, ParseValueError
from lf2_parse.frames import FRAME_COUNT_HINT, Frames
from lf2_parse.grammar import Rule
from conftest import DUPLICATE_FRAMES_TEXT, frame_text, parse_node


def parse_frames(text):
    return Frames.from_node(parse_node(Rule.FRAMES, text))


def test_distinct_numbers():
    frames = parse_frames(frame_text(0) + frame_text(1) + frame_text(5))
    assert [frame.number for frame in frames] == [0, 1, 5]
    assert frames.find(5).number == 5
    assert frames.find(2) is None


def test_empty():
    assert parse_frames('') == Frames()


def test_duplicate_numbers_report_every_frame():
    with pytest.raises(FrameNumberNonUnique) as excinfo:
        parse_frames(DUPLICATE_FRAMES_TEXT)
    error = excinfo.value
    assert error.frame_number == 5
    assert error.positions == [(1, 1), (5, 1)]
    message = str(error)
    assert '`5` is used multiple times' in message
    assert '- `<frame> 5 first` at position `1:1`' in message
    assert '- `<frame> 5 second` at position `5:1`' in message


def test_three_way_duplicate():
    text = frame_text(3, 'a') + frame_text(4) + frame_text(3, 'b') + frame_text(3, 'c')
    with pytest.raises(FrameNumberNonUnique) as excinfo:
        parse_frames(text)
    assert excinfo.value.frame_number == 3
    assert len(excinfo.value.frame_nodes) == 3


def test_smallest_duplicate_is_reported():
    text = frame_text(9) + frame_text(2) + frame_text(9) + frame_text(2)
    with pytest.raises(FrameNumberNonUnique) as excinfo:
        parse_frames(text)
    assert excinfo.value.frame_number == 2


def test_frame_error_propagates():
    with pytest.raises(ParseValueError):
        parse_frames(frame_text(0) + frame_text(1, body='pic: nope'))


def test_frame_count_hint_is_not_a_limit(caplog):
    text = ''.join(frame_text(n) for n in range(FRAME_COUNT_HINT + 1))
    with caplog.at_level(logging.WARNING, logger='lf2_parse.frames'):
        frames = parse_frames(text)
    assert len(frames) == FRAME_COUNT_HINT + 1
    assert 'LF2 only loads the first 400' in caplog.text
