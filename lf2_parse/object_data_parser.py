"""
Generic tree walking driver.

Every layer of the model is built the same way: check a node's rule, then
feed its children to sub-rule functions, threading an accumulator through.
A sub-rule function has the signature `fn(acc, node) -> acc`.
"""
from typing import Callable, Dict, Iterable, Sequence, TypeVar

from lf2_parse.errors import (
    GrammarError, NodeExpected, ParsePathError, ParseValueError, ValueExpected,
)
from lf2_parse.grammar import Node, Rule
from lf2_parse.values import (
    parse_f32, parse_i32, parse_i64, parse_path, parse_u32,
)

T = TypeVar('T')
SubRuleFn = Callable[[T, Node], T]
Convert = Callable[[str, Node], object]


def parse_as_type(acc: T, node: Node, rule_expected: Rule,
                  sub_rule_fns: Sequence[SubRuleFn]) -> T:
    """Feeds the children of `node` positionally to `sub_rule_fns`."""
    if node.rule is not rule_expected:
        raise GrammarError([rule_expected], node)
    children = iter(node.children)
    for index, sub_rule_fn in enumerate(sub_rule_fns):
        child = next(children, None)
        if child is None:
            raise NodeExpected(node, index)
        acc = sub_rule_fn(acc, child)
    return acc


def parse_each(acc: T, node: Node, rule_expected: Rule, sub_rule_fn: SubRuleFn) -> T:
    """Feeds every child of `node` to the same sub-rule function."""
    if node.rule is not rule_expected:
        raise GrammarError([rule_expected], node)
    for child in node.children:
        acc = sub_rule_fn(acc, child)
    return acc


def value_of(tag_node: Node) -> Node:
    """Returns the (first) value node of a tag."""
    if not tag_node.children:
        raise ValueExpected(tag_node)
    return tag_node.children[0]


def expect_one_of(node: Node, rules: Iterable[Rule]) -> Node:
    rules = tuple(rules)
    if node.rule not in rules:
        raise GrammarError(rules, node)
    return node


# ── Value converters ─────────────────────────────────────────────────
# Converters take the field's display name and the value node, and raise
# ParseValueError carrying both on failure.

def converter(parse: Callable[[str], object]) -> Convert:
    def convert(field: str, node: Node):
        try:
            return parse(node.text)
        except ValueError as e:
            raise ParseValueError(field, node, e) from e
    return convert


def convert_path(field: str, node: Node):
    try:
        return parse_path(node.text)
    except ValueError as e:
        raise ParsePathError(field, node) from e


def convert_str(field: str, node: Node) -> str:
    return node.text


def convert_bool(field: str, node: Node) -> bool:
    """Boolean tags are integers where anything other than 0 is true."""
    return convert_i32(field, node) != 0


convert_i32 = converter(parse_i32)
convert_i64 = converter(parse_i64)
convert_u32 = converter(parse_u32)
convert_f32 = converter(parse_f32)


# ── Tag tables ───────────────────────────────────────────────────────

def tag_field(field: str, attr: str, convert: Convert) -> SubRuleFn:
    """Sub-rule function that stores a tag's converted value on `acc.<attr>`."""
    def parse_tag(acc, tag_node: Node):
        setattr(acc, attr, convert(field, value_of(tag_node)))
        return acc
    return parse_tag


def tag_dispatch(table: Dict[Rule, SubRuleFn]) -> SubRuleFn:
    """
    Sub-rule function that looks up a tag's rule in `table`. Tags that are
    not in the table are skipped, so unknown tags are forward compatible.
    """
    def parse_tag(acc, tag_node: Node):
        sub_rule_fn = table.get(tag_node.rule)
        if sub_rule_fn is None:
            return acc
        return sub_rule_fn(acc, tag_node)
    return parse_tag
