"""
Lexical grammar for LF2 object data text.

Produces a tree of positioned Nodes, each tagged with a Rule. The semantic
parsers walk this tree; they never look at raw characters.
"""
import enum
from typing import Dict, List

import pyparsing as pp

from lf2_parse.errors import GrammarSyntaxError


class Rule(enum.Enum):
    OBJECT = enum.auto()
    HEADER = enum.auto()
    HEADER_TAG = enum.auto()
    SPRITE_FILE = enum.auto()
    WEAPON_STRENGTH_LIST = enum.auto()
    WEAPON_STRENGTH = enum.auto()
    WEAPON_STRENGTH_BODY = enum.auto()
    FRAMES = enum.auto()
    FRAME = enum.auto()
    FRAME_NUMBER = enum.auto()
    FRAME_NAME = enum.auto()
    FRAME_BODY = enum.auto()
    FRAME_TAG = enum.auto()
    ELEMENT = enum.auto()
    BDY = enum.auto()
    B_POINT = enum.auto()
    C_POINT = enum.auto()
    ITR = enum.auto()
    O_POINT = enum.auto()
    W_POINT = enum.auto()
    VALUE = enum.auto()

    # Header tags
    TAG_NAME = enum.auto()
    TAG_HEAD = enum.auto()
    TAG_SMALL = enum.auto()
    TAG_WALKING_FRAME_RATE = enum.auto()
    TAG_WALKING_SPEED = enum.auto()
    TAG_WALKING_SPEED_Z = enum.auto()
    TAG_RUNNING_FRAME_RATE = enum.auto()
    TAG_RUNNING_SPEED = enum.auto()
    TAG_RUNNING_SPEED_Z = enum.auto()
    TAG_HEAVY_WALKING_SPEED = enum.auto()
    TAG_HEAVY_WALKING_SPEED_Z = enum.auto()
    TAG_HEAVY_RUNNING_SPEED = enum.auto()
    TAG_HEAVY_RUNNING_SPEED_Z = enum.auto()
    TAG_JUMP_HEIGHT = enum.auto()
    TAG_JUMP_DISTANCE = enum.auto()
    TAG_JUMP_DISTANCE_Z = enum.auto()
    TAG_DASH_HEIGHT = enum.auto()
    TAG_DASH_DISTANCE = enum.auto()
    TAG_DASH_DISTANCE_Z = enum.auto()
    TAG_ROWING_HEIGHT = enum.auto()
    TAG_ROWING_DISTANCE = enum.auto()

    # Sprite file tags
    TAG_ROW = enum.auto()
    TAG_COL = enum.auto()

    # Frame tags
    TAG_CENTER_X = enum.auto()
    TAG_CENTER_Y = enum.auto()
    TAG_DVX = enum.auto()
    TAG_DVY = enum.auto()
    TAG_DVZ = enum.auto()
    TAG_HIT_A = enum.auto()
    TAG_HIT_D = enum.auto()
    TAG_HIT_DA = enum.auto()
    TAG_HIT_DJ = enum.auto()
    TAG_HIT_FA = enum.auto()
    TAG_HIT_FJ = enum.auto()
    TAG_HIT_J = enum.auto()
    TAG_HIT_JA = enum.auto()
    TAG_HIT_UA = enum.auto()
    TAG_HIT_UJ = enum.auto()
    TAG_MP = enum.auto()
    TAG_NEXT = enum.auto()
    TAG_PIC = enum.auto()
    TAG_SOUND = enum.auto()
    TAG_STATE = enum.auto()
    TAG_WAIT = enum.auto()

    # Element and weapon strength tags
    TAG_KIND = enum.auto()
    TAG_X = enum.auto()
    TAG_Y = enum.auto()
    TAG_W = enum.auto()
    TAG_H = enum.auto()
    TAG_Z_WIDTH = enum.auto()
    TAG_A_REST = enum.auto()
    TAG_V_REST = enum.auto()
    TAG_FALL = enum.auto()
    TAG_B_DEFEND = enum.auto()
    TAG_INJURY = enum.auto()
    TAG_EFFECT = enum.auto()
    TAG_CATCHING_ACT = enum.auto()
    TAG_CAUGHT_ACT = enum.auto()
    TAG_COVER = enum.auto()
    TAG_DECREASE = enum.auto()
    TAG_DIR_CONTROL = enum.auto()
    TAG_HURTABLE = enum.auto()
    TAG_A_ACTION = enum.auto()
    TAG_J_ACTION = enum.auto()
    TAG_V_ACTION = enum.auto()
    TAG_T_ACTION = enum.auto()
    TAG_THROW_VX = enum.auto()
    TAG_THROW_VY = enum.auto()
    TAG_THROW_VZ = enum.auto()
    TAG_THROW_INJURY = enum.auto()
    TAG_FRONT_HURT_ACT = enum.auto()
    TAG_BACK_HURT_ACT = enum.auto()
    TAG_ACTION = enum.auto()
    TAG_OID = enum.auto()
    TAG_FACING = enum.auto()
    TAG_WEAPON_ACT = enum.auto()
    TAG_ATTACKING = enum.auto()

    TAG_UNKNOWN = enum.auto()


# ── Tag name → Rule mapping ──────────────────────────────────────────

TAG_RULES: Dict[str, Rule] = {
    'name': Rule.TAG_NAME,
    'head': Rule.TAG_HEAD,
    'small': Rule.TAG_SMALL,
    'walking_frame_rate': Rule.TAG_WALKING_FRAME_RATE,
    'walking_speed': Rule.TAG_WALKING_SPEED,
    'walking_speedz': Rule.TAG_WALKING_SPEED_Z,
    'running_frame_rate': Rule.TAG_RUNNING_FRAME_RATE,
    'running_speed': Rule.TAG_RUNNING_SPEED,
    'running_speedz': Rule.TAG_RUNNING_SPEED_Z,
    'heavy_walking_speed': Rule.TAG_HEAVY_WALKING_SPEED,
    'heavy_walking_speedz': Rule.TAG_HEAVY_WALKING_SPEED_Z,
    'heavy_running_speed': Rule.TAG_HEAVY_RUNNING_SPEED,
    'heavy_running_speedz': Rule.TAG_HEAVY_RUNNING_SPEED_Z,
    'jump_height': Rule.TAG_JUMP_HEIGHT,
    'jump_distance': Rule.TAG_JUMP_DISTANCE,
    'jump_distancez': Rule.TAG_JUMP_DISTANCE_Z,
    'dash_height': Rule.TAG_DASH_HEIGHT,
    'dash_distance': Rule.TAG_DASH_DISTANCE,
    'dash_distancez': Rule.TAG_DASH_DISTANCE_Z,
    'rowing_height': Rule.TAG_ROWING_HEIGHT,
    'rowing_distance': Rule.TAG_ROWING_DISTANCE,

    'centerx': Rule.TAG_CENTER_X,
    'centery': Rule.TAG_CENTER_Y,
    'dvx': Rule.TAG_DVX,
    'dvy': Rule.TAG_DVY,
    'dvz': Rule.TAG_DVZ,
    'hit_a': Rule.TAG_HIT_A,
    'hit_d': Rule.TAG_HIT_D,
    'hit_Da': Rule.TAG_HIT_DA,
    'hit_Dj': Rule.TAG_HIT_DJ,
    'hit_Fa': Rule.TAG_HIT_FA,
    'hit_Fj': Rule.TAG_HIT_FJ,
    'hit_j': Rule.TAG_HIT_J,
    'hit_ja': Rule.TAG_HIT_JA,
    'hit_Ua': Rule.TAG_HIT_UA,
    'hit_Uj': Rule.TAG_HIT_UJ,
    'mp': Rule.TAG_MP,
    'next': Rule.TAG_NEXT,
    'pic': Rule.TAG_PIC,
    'sound': Rule.TAG_SOUND,
    'state': Rule.TAG_STATE,
    'wait': Rule.TAG_WAIT,

    'kind': Rule.TAG_KIND,
    'x': Rule.TAG_X,
    'y': Rule.TAG_Y,
    'w': Rule.TAG_W,
    'h': Rule.TAG_H,
    'zwidth': Rule.TAG_Z_WIDTH,
    'arest': Rule.TAG_A_REST,
    'vrest': Rule.TAG_V_REST,
    'fall': Rule.TAG_FALL,
    'bdefend': Rule.TAG_B_DEFEND,
    'injury': Rule.TAG_INJURY,
    'effect': Rule.TAG_EFFECT,
    'catchingact': Rule.TAG_CATCHING_ACT,
    'caughtact': Rule.TAG_CAUGHT_ACT,
    'cover': Rule.TAG_COVER,
    'decrease': Rule.TAG_DECREASE,
    'dircontrol': Rule.TAG_DIR_CONTROL,
    'hurtable': Rule.TAG_HURTABLE,
    'aaction': Rule.TAG_A_ACTION,
    'jaction': Rule.TAG_J_ACTION,
    'vaction': Rule.TAG_V_ACTION,
    'taction': Rule.TAG_T_ACTION,
    'throwvx': Rule.TAG_THROW_VX,
    'throwvy': Rule.TAG_THROW_VY,
    'throwvz': Rule.TAG_THROW_VZ,
    'throwinjury': Rule.TAG_THROW_INJURY,
    'fronthurtact': Rule.TAG_FRONT_HURT_ACT,
    'backhurtact': Rule.TAG_BACK_HURT_ACT,
    'action': Rule.TAG_ACTION,
    'oid': Rule.TAG_OID,
    'facing': Rule.TAG_FACING,
    'weaponact': Rule.TAG_WEAPON_ACT,
    'attacking': Rule.TAG_ATTACKING,
}


# ── Syntax tree ──────────────────────────────────────────────────────

class Node:
    """Positioned syntax tree node. `text` is the matched slice of the source."""
    __slots__ = ('rule', 'source', 'start', 'end', 'children')

    def __init__(self, rule: Rule, source: str, start: int, end: int, children=()):
        self.rule = rule
        self.source = source
        self.start = start
        self.end = end
        self.children: List['Node'] = list(children)

    @property
    def text(self) -> str:
        return self.source[self.start:self.end]

    @property
    def line(self) -> int:
        return pp.lineno(self.start, self.source)

    @property
    def col(self) -> int:
        return pp.col(self.start, self.source)

    @property
    def first_line(self) -> str:
        lines = self.text.splitlines()
        return lines[0].strip() if lines else ''

    def __repr__(self):
        return f'Node({self.rule.name}, {self.text[:30]!r}, {self.line}:{self.col})'


def _node_action(rule):
    def action(s, loc, toks):
        children = [token for token in toks['value'] if isinstance(token, Node)]
        return Node(rule, s, toks['locn_start'], toks['locn_end'], children)
    return action


def _tag_action(s, loc, toks):
    key, *values = toks['value']
    rule = TAG_RULES.get(key.rstrip(':'), Rule.TAG_UNKNOWN)
    return Node(rule, s, toks['locn_start'], toks['locn_end'], values)


def _located(rule: Rule, expr: pp.ParserElement) -> pp.ParserElement:
    return pp.Located(expr).set_parse_action(_node_action(rule)).set_name(rule.name)


def _fixed_tag(key: str, rule: Rule) -> pp.ParserElement:
    return _located(rule, pp.Suppress(pp.Literal(key)) + VALUE)


def _tag(key: pp.ParserElement, values: pp.ParserElement) -> pp.ParserElement:
    return pp.Located(key + values).set_parse_action(_tag_action)


def _block(rule: Rule, begin: str, body: pp.ParserElement, end: str) -> pp.ParserElement:
    return _located(rule, pp.Suppress(pp.Literal(begin)) - body - pp.Suppress(pp.Literal(end)))


# ── Values ───────────────────────────────────────────────────────────

# A whitespace delimited word that is neither a `<section>` marker nor a `key:`.
VALUE_PATTERN = pp.Regex(r'(?!<)\S*[^\s:](?!\S)').set_name('value')
VALUE = _located(Rule.VALUE, VALUE_PATTERN)
RANGE_NUMBER = _located(Rule.VALUE, pp.Regex(r'[^\s()\-:]+').set_name('number'))

TAG_KEY = pp.Regex(r'(?!\w+_end:)[A-Za-z_]\w*:').set_name('tag')
HEADER_TAG_KEY = pp.Regex(r'[A-Za-z_]\w*:?').set_name('header tag')
WEAPON_STRENGTH_TAG_KEY = pp.Regex(r'(?!entry:)[A-Za-z_]\w*:').set_name('tag')


# ── Header ───────────────────────────────────────────────────────────

SPRITE_FILE = _located(
    Rule.SPRITE_FILE,
    pp.Suppress(pp.Literal('file(')) - RANGE_NUMBER - pp.Suppress('-') - RANGE_NUMBER
    - pp.Suppress(')') - pp.Suppress(':') - VALUE
    - _fixed_tag('w:', Rule.TAG_W) - _fixed_tag('h:', Rule.TAG_H)
    - _fixed_tag('row:', Rule.TAG_ROW) - _fixed_tag('col:', Rule.TAG_COL))

HEADER_TAG = _located(Rule.HEADER_TAG, _tag(HEADER_TAG_KEY, VALUE))

HEADER = _block(Rule.HEADER, '<bmp_begin>', pp.ZeroOrMore(SPRITE_FILE | HEADER_TAG), '<bmp_end>')


# ── Weapon strength list ─────────────────────────────────────────────

WEAPON_STRENGTH = _located(
    Rule.WEAPON_STRENGTH,
    pp.Suppress(pp.Literal('entry:')) - VALUE - VALUE
    - _located(Rule.WEAPON_STRENGTH_BODY,
               pp.ZeroOrMore(_tag(WEAPON_STRENGTH_TAG_KEY, pp.OneOrMore(VALUE)))))

WEAPON_STRENGTH_LIST = _located(
    Rule.WEAPON_STRENGTH_LIST,
    pp.Opt(pp.Suppress(pp.Literal('<weapon_strength_list>'))
           - pp.ZeroOrMore(WEAPON_STRENGTH)
           - pp.Suppress(pp.Literal('<weapon_strength_list_end>'))))


# ── Elements ─────────────────────────────────────────────────────────

ELEMENT_TAG = _tag(TAG_KEY, pp.OneOrMore(VALUE))


def _element(rule: Rule, name: str) -> pp.ParserElement:
    return _block(rule, f'{name}:', pp.ZeroOrMore(ELEMENT_TAG), f'{name}_end:')


ELEMENT = _located(
    Rule.ELEMENT,
    _element(Rule.BDY, 'bdy')
    | _element(Rule.B_POINT, 'bpoint')
    | _element(Rule.C_POINT, 'cpoint')
    | _element(Rule.ITR, 'itr')
    | _element(Rule.O_POINT, 'opoint')
    | _element(Rule.W_POINT, 'wpoint'))


# ── Frames ───────────────────────────────────────────────────────────

FRAME_TAG = _located(Rule.FRAME_TAG, _tag(TAG_KEY, pp.OneOrMore(VALUE)))

FRAME = _located(
    Rule.FRAME,
    pp.Suppress(pp.Literal('<frame>'))
    - _located(Rule.FRAME_NUMBER, pp.Regex(r'(?!<)\S+').set_name('frame number'))
    - _located(Rule.FRAME_NAME, VALUE_PATTERN.copy().set_name('frame name'))
    - _located(Rule.FRAME_BODY, pp.ZeroOrMore(ELEMENT | FRAME_TAG))
    - pp.Suppress(pp.Literal('<frame_end>')))

FRAMES = _located(Rule.FRAMES, pp.ZeroOrMore(FRAME))

OBJECT = _located(Rule.OBJECT, HEADER + WEAPON_STRENGTH_LIST + FRAMES)

DOCUMENT = (pp.ZeroOrMore(OBJECT) + pp.StringEnd()).parse_with_tabs()


# ── Entry points ─────────────────────────────────────────────────────

_ROOT_EXPRS = {
    Rule.OBJECT: OBJECT,
    Rule.HEADER: HEADER,
    Rule.SPRITE_FILE: SPRITE_FILE,
    Rule.WEAPON_STRENGTH_LIST: WEAPON_STRENGTH_LIST,
    Rule.WEAPON_STRENGTH: WEAPON_STRENGTH,
    Rule.FRAMES: FRAMES,
    Rule.FRAME: FRAME,
    Rule.ELEMENT: ELEMENT,
}
_ROOTS = {rule: (expr + pp.StringEnd()).parse_with_tabs() for rule, expr in _ROOT_EXPRS.items()}


def _parse_string(expr: pp.ParserElement, text: str) -> pp.ParseResults:
    try:
        return expr.parse_string(text, parse_all=True)
    except pp.ParseBaseException as e:
        raise GrammarSyntaxError(e) from e


def parse_document(text: str) -> List[Node]:
    """Parses a whole object data text into its OBJECT nodes."""
    return list(_parse_string(DOCUMENT, text))


def parse(rule: Rule, text: str) -> Node:
    """Parses `text` as a single node of `rule`, e.g. one frame or one header."""
    if rule not in _ROOTS:
        raise KeyError(f"Rule {rule.name} cannot be parsed on its own")
    return _parse_string(_ROOTS[rule], text)[0]
