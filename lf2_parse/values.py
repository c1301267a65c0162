"""
Primitive value types of the object data format.

Integer wrappers encode the format's sentinels: a negative "next frame" or
picture index means "also flip facing", and a wait of zero means one tick.
"""
import re
from pathlib import PureWindowsPath

import numpy as np


WAIT_DEFAULT = 1

_INT_RE = re.compile(r'[+-]?[0-9]+')
_FLOAT_RE = re.compile(
    r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)',
    re.IGNORECASE)
_PATH_INVALID_RE = re.compile(r'[<>"|?*\x00-\x1f]')


# ── Text parsers ─────────────────────────────────────────────────────

def parse_int(text: str, bits: int = 32, signed: bool = True) -> int:
    """Parses an integer that must fit in a fixed width machine type."""
    if not text:
        raise ValueError('cannot parse integer from empty string')
    if not _INT_RE.fullmatch(text) or (not signed and text.startswith('-')):
        raise ValueError('invalid digit found in string')
    info = np.iinfo(f'int{bits}' if signed else f'uint{bits}')
    value = int(text)
    if value > info.max:
        raise ValueError('number too large to fit in target type')
    if value < info.min:
        raise ValueError('number too small to fit in target type')
    return value


def parse_i32(text: str) -> int:
    return parse_int(text, 32, signed=True)


def parse_i64(text: str) -> int:
    return parse_int(text, 64, signed=True)


def parse_u32(text: str) -> int:
    return parse_int(text, 32, signed=False)


def parse_usize(text: str) -> int:
    return parse_int(text, 64, signed=False)


def parse_isize(text: str) -> int:
    return parse_int(text, 64, signed=True)


def parse_f32(text: str) -> float:
    """Parses a single precision float, rounding the result to f32."""
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError('invalid float literal')
    with np.errstate(over='ignore'):
        return float(np.float32(float(text)))


def parse_path(text: str) -> PureWindowsPath:
    """Object data paths are relative Windows paths, e.g. `sprite\\sys\\bat.bmp`."""
    if not text or _PATH_INVALID_RE.search(text):
        raise ValueError(f'`{text}` is not a valid path')
    return PureWindowsPath(text)


# ── Value types ──────────────────────────────────────────────────────

class FrameNumber(int):
    """Number of a frame within an object, non-negative."""

    def __new__(cls, value=0):
        value = int.__new__(cls, value)
        if value < 0:
            raise ValueError(f'`{int(value)}` is not a valid frame number')
        return value

    @classmethod
    def parse(cls, text: str) -> 'FrameNumber':
        return cls(parse_usize(text))

    def __repr__(self):
        return f'{type(self).__name__}({int(self)})'

    __str__ = int.__repr__


class ObjectId(FrameNumber):
    """ID of an object as listed in `data.txt`."""


class WeaponStrengthIndex(FrameNumber):
    """Entry of the weapon strength list used when attacking."""


class FrameNumberNext(int):
    """
    Frame to switch to. A negative value means go to `abs(value)` and switch
    facing direction.

    Special values: 0 is the default (no switch), 999 means "go back to
    standing" and 1000 deletes the object.
    """

    def __new__(cls, value=0):
        return int.__new__(cls, value)

    @classmethod
    def parse(cls, text: str) -> 'FrameNumberNext':
        return cls(parse_isize(text))

    def __abs__(self) -> FrameNumber:
        return FrameNumber(int.__abs__(self))

    @property
    def facing_switch(self) -> bool:
        return self < 0

    def __repr__(self):
        return f'{type(self).__name__}({int(self)})'

    __str__ = int.__repr__


class Pic(int):
    """Sprite index. A negative value means use `abs(value)` and flip the sprite."""

    def __new__(cls, value=0):
        return int.__new__(cls, value)

    @classmethod
    def parse(cls, text: str) -> 'Pic':
        return cls(parse_isize(text))

    def __abs__(self) -> int:
        return int.__abs__(self)

    @property
    def facing_switch(self) -> bool:
        return self < 0

    def __repr__(self):
        return f'Pic({int(self)})'

    __str__ = int.__repr__


class Wait(int):
    """Number of ticks (TU) to stay in a frame. Always at least 1."""

    def __new__(cls, value=WAIT_DEFAULT):
        value = int.__new__(cls, value)
        if value <= 0:
            raise ValueError(f'`{int(value)}` is not a valid wait, it must be positive')
        return value

    @classmethod
    def parse(cls, text: str) -> 'Wait':
        value = parse_u32(text)
        return cls(value if value != 0 else WAIT_DEFAULT)

    def __repr__(self):
        return f'Wait({int(self)})'

    __str__ = int.__repr__
