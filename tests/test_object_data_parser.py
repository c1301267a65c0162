from types import SimpleNamespace

import pytest

from lf2_parse.errors import (
    GrammarDesyncError, GrammarError, NodeExpected, ParsePathError, ParseValueError,
    ValueExpected,
)
from lf2_parse.grammar import Node, Rule
from lf2_parse.object_data_parser import (
    convert_bool, convert_f32, convert_i32, convert_path, parse_as_type, parse_each,
    tag_dispatch, tag_field, value_of,
)


SOURCE = 'pic: 12 wait: x'


def value_node(start, end):
    return Node(Rule.VALUE, SOURCE, start, end)


def tag_node(rule, start, end, values=()):
    return Node(rule, SOURCE, start, end, values)


def collect(acc, node):
    return acc + [node.text]


def test_parse_as_type_feeds_children_in_order():
    node = Node(Rule.FRAME_TAG, SOURCE, 0, 7, [value_node(5, 7), value_node(14, 15)])
    assert parse_as_type([], node, Rule.FRAME_TAG, [collect, collect]) == ['12', 'x']


def test_parse_as_type_rule_mismatch():
    node = Node(Rule.HEADER, SOURCE, 0, 7)
    with pytest.raises(GrammarError) as excinfo:
        parse_as_type([], node, Rule.FRAME, [collect])
    assert excinfo.value.rules_expected == (Rule.FRAME,)
    assert excinfo.value.node_found is node
    assert 'grammar parsed a `HEADER`' in str(excinfo.value)
    assert 'at position: `1:1`' in str(excinfo.value)


def test_parse_as_type_missing_child():
    node = Node(Rule.FRAME_TAG, SOURCE, 0, 7, [value_node(5, 7)])
    with pytest.raises(NodeExpected) as excinfo:
        parse_as_type([], node, Rule.FRAME_TAG, [collect, collect])
    assert isinstance(excinfo.value, GrammarDesyncError)
    assert excinfo.value.parent_node is node
    assert excinfo.value.index == 1
    message = str(excinfo.value)
    assert 'Expected child node 2 of the `FRAME_TAG` at position: `1:1`' in message
    assert 'nothing is found' in message


def test_parse_as_type_stops_at_first_failure():
    calls = []

    def fail(acc, node):
        calls.append(node.text)
        raise ParseValueError('pic', node, ValueError('bad'))

    node = Node(Rule.FRAME_TAG, SOURCE, 0, 7, [value_node(5, 7), value_node(14, 15)])
    with pytest.raises(ParseValueError):
        parse_as_type([], node, Rule.FRAME_TAG, [fail, collect])
    assert calls == ['12']


def test_parse_each():
    node = Node(Rule.FRAME_BODY, SOURCE, 0, 15, [value_node(5, 7), value_node(14, 15)])
    assert parse_each([], node, Rule.FRAME_BODY, collect) == ['12', 'x']
    with pytest.raises(GrammarError):
        parse_each([], node, Rule.HEADER, collect)


def test_value_of():
    tag = tag_node(Rule.TAG_PIC, 0, 7, [value_node(5, 7)])
    assert value_of(tag).text == '12'
    with pytest.raises(ValueExpected) as excinfo:
        value_of(tag_node(Rule.TAG_WAIT, 8, 13))
    assert isinstance(excinfo.value, GrammarDesyncError)
    assert '`TAG_WAIT`' in str(excinfo.value)
    assert '1:9' in str(excinfo.value)


def test_converters_carry_field_text_and_position():
    with pytest.raises(ParseValueError) as excinfo:
        convert_i32('wait', value_node(14, 15))
    error = excinfo.value
    assert (error.field, error.value, error.line, error.col) == ('wait', 'x', 1, 15)
    assert 'Failed to parse `wait` value `x` at position: `1:15`.' in str(error)
    assert not isinstance(error, GrammarDesyncError)


def test_convert_values():
    assert convert_i32('pic', value_node(5, 7)) == 12
    assert convert_f32('pic', value_node(5, 7)) == 12.0
    assert convert_bool('pic', value_node(5, 7)) is True
    with pytest.raises(ParsePathError):
        convert_path('sound', Node(Rule.VALUE, 'a<b', 0, 3))


def test_tag_dispatch_skips_unknown_tags():
    parse_tag = tag_dispatch({Rule.TAG_PIC: tag_field('pic', 'pic', convert_i32)})
    acc = SimpleNamespace(pic=0)
    acc = parse_tag(acc, tag_node(Rule.TAG_PIC, 0, 7, [value_node(5, 7)]))
    acc = parse_tag(acc, tag_node(Rule.TAG_UNKNOWN, 8, 15, [value_node(14, 15)]))
    assert acc.pic == 12
