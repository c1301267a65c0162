"""
Numeric coded tag types used by frame elements.

Each type parses in two phases: the text is parsed as an integer, then the
integer is matched against the known codes. Unknown codes produce an error
listing every valid value.
"""
import enum
import itertools
import re
from dataclasses import dataclass
from typing import Optional

from lf2_parse.values import FrameNumberNext, parse_i32, parse_u32


class KindParseError(ValueError):
    """Text is not a valid code for a kind enumeration."""

    kind_name = 'Kind'

    def __init__(self, text: str, code: Optional[int] = None,
                 error: Optional[ValueError] = None, valid_values: str = ''):
        self.text = text
        self.code = code
        self.error = error
        if error is not None:
            message = str(error)
        else:
            message = (f'`{code}` is not recognized as a valid `{self.kind_name}` value.\n'
                       f'Valid values are:\n\n{valid_values}\n')
        super().__init__(message)


class BdyKindParseError(KindParseError):
    kind_name = 'BdyKind'


class CPointKindParseError(KindParseError):
    kind_name = 'CPointKind'


class EffectParseError(KindParseError):
    kind_name = 'Effect'


class ItrKindParseError(KindParseError):
    kind_name = 'ItrKind'


class OPointKindParseError(KindParseError):
    kind_name = 'OPointKind'


class OPointFacingParseError(KindParseError):
    kind_name = 'OPointFacing'


class WPointKindParseError(KindParseError):
    kind_name = 'WPointKind'


def display_name(member: enum.Enum) -> str:
    """`CATCH_STUNNED` -> `CatchStunned`."""
    return ''.join(part.capitalize() if not part.isdigit() else part
                   for part in member.name.split('_'))


_NUMBERED_RE = re.compile(r'(.*?)_?(\d+)$')


def _numbered_run_key(indexed_member):
    """Groups members named `PREFIX_NN` that have consecutive codes."""
    index, member = indexed_member
    match = _NUMBERED_RE.fullmatch(member.name)
    if match is None or not match.group(1):
        return member.name, None
    return match.group(1), member.value - index


class CodedEnum(enum.IntEnum):
    """IntEnum parsed from its numeric code in object data text."""

    @classmethod
    def parse_error(cls):
        return PARSE_ERRORS[cls]

    @classmethod
    def valid_values(cls) -> str:
        lines = []
        for _, group in itertools.groupby(enumerate(cls), key=_numbered_run_key):
            members = [member for _, member in group]
            first, last = members[0], members[-1]
            if first is last:
                lines.append(f'- {first.value} ({display_name(first)}),\n')
            else:
                lines.append(f'- {first.value} to {last.value} '
                             f'({display_name(first)} to {display_name(last)}),\n')
        return ''.join(lines)

    @classmethod
    def parse(cls, text: str):
        error_cls = cls.parse_error()
        try:
            code = parse_u32(text)
        except ValueError as e:
            raise error_cls(text, error=e) from e
        try:
            return cls(code)
        except ValueError:
            raise error_cls(text, code=code, valid_values=cls.valid_values()) from None


# ── CPoint ───────────────────────────────────────────────────────────

class CPointKind(CodedEnum):
    """Role of a catch point."""
    CATCHER = 1
    CAUGHT = 2


# ── Itr ──────────────────────────────────────────────────────────────

class ItrKind(CodedEnum):
    """Behaviour of an interaction area."""
    NORMAL = 0
    CATCH_STUNNED = 1
    WEAPON_PICK = 2
    CATCH_FORCE = 3
    FALLING = 4
    WEAPON_STRENGTH = 5
    SUPER_PUNCH = 6
    ROLL_WEAPON_PICK = 7
    HEAL_BALL = 8
    REFLECTIVE_SHIELD = 9
    SONATA_OF_DEATH = 10
    SONATA_OF_DEATH2 = 11
    WALL = 14
    WHIRLWIND_WIND = 15
    WHIRLWIND_ICE = 16


class Effect(CodedEnum):
    """Visual and behavioural effect of a hit."""
    NORMAL = 0
    BLOOD = 1
    FIRE = 2
    ICE = 3
    REFLECT = 4
    REFLECTS = 5
    FIRE_GROUND = 20
    FIRE_BREATH = 21
    FIRE_EXPLODE = 22
    POWER_EXPLODE = 23
    ICICLE = 30


# ── OPoint ───────────────────────────────────────────────────────────

class OPointKind(CodedEnum):
    SPAWN = 1
    HOLD_LIGHT_WEAPON = 2


class OPointFacingDir(enum.Enum):
    """Facing direction of a spawned object."""
    PARENT_SAME = 'parent_same'
    PARENT_OPPOSITE = 'parent_opposite'
    RIGHT = 'right'


@dataclass(frozen=True)
class OPointFacing:
    """Number of objects to spawn, and their facing direction."""
    count: int = 1
    direction: OPointFacingDir = OPointFacingDir.PARENT_SAME

    @classmethod
    def parse(cls, text: str) -> 'OPointFacing':
        try:
            value = parse_u32(text)
        except ValueError as e:
            raise OPointFacingParseError(text, error=e) from e
        if value == 0:
            return cls(1, OPointFacingDir.PARENT_SAME)
        if value == 1:
            return cls(1, OPointFacingDir.PARENT_OPPOSITE)
        if value == 10:
            # `facing: 10` spawns a single object always facing right.
            return cls(1, OPointFacingDir.RIGHT)
        direction = OPointFacingDir.PARENT_OPPOSITE if value & 1 else OPointFacingDir.PARENT_SAME
        return cls(value // 10, direction)


# ── WPoint ───────────────────────────────────────────────────────────

class WPointKind(CodedEnum):
    HOLDING = 1
    HELD = 2
    DROPPING = 3


PARSE_ERRORS = {
    CPointKind: CPointKindParseError,
    ItrKind: ItrKindParseError,
    Effect: EffectParseError,
    OPointKind: OPointKindParseError,
    WPointKind: WPointKindParseError,
}


# ── Bdy ──────────────────────────────────────────────────────────────

BDY_HOSTAGE_OFFSET = 1000
BDY_HOSTAGE_MAX = 1999


@dataclass(frozen=True)
class BdyKind:
    """
    Kind of a hittable body volume.

    `0` is a normal body. `1000` to `1999` is a hostage body: when hit, the
    hitter goes to frame `code - 1000`. `-1000` to `-1999` does the same and
    also switches facing, so `freed_frame` is a negative `FrameNumberNext`.
    """
    freed_frame: Optional[FrameNumberNext] = None

    @property
    def is_hostage(self) -> bool:
        return self.freed_frame is not None

    @property
    def code(self) -> int:
        if self.freed_frame is None:
            return 0
        if self.freed_frame < 0:
            return self.freed_frame - BDY_HOSTAGE_OFFSET
        return self.freed_frame + BDY_HOSTAGE_OFFSET

    @classmethod
    def hostage(cls, freed_frame: int) -> 'BdyKind':
        return cls(FrameNumberNext(freed_frame))

    @classmethod
    def parse(cls, text: str) -> 'BdyKind':
        try:
            value = parse_i32(text)
        except ValueError as e:
            raise BdyKindParseError(text, error=e) from e
        if value == 0:
            return cls.NORMAL
        if BDY_HOSTAGE_OFFSET <= value <= BDY_HOSTAGE_MAX:
            return cls.hostage(value - BDY_HOSTAGE_OFFSET)
        if -BDY_HOSTAGE_MAX <= value <= -BDY_HOSTAGE_OFFSET:
            return cls.hostage(value + BDY_HOSTAGE_OFFSET)
        raise BdyKindParseError(text, code=value, valid_values=(
            '* 0: Normal\n'
            '* 1000 to 1999: Go to frame 0 - 999\n'
            '* -1000 to -1999: Go to frame 0 - 999, change facing'))

    def __repr__(self):
        if self.freed_frame is None:
            return 'BdyKind.NORMAL'
        return f'BdyKind.hostage({int(self.freed_frame)})'


BdyKind.NORMAL = BdyKind()
