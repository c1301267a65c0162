"""
Entry point for parsing a whole object data file.

    text = ObjectData.open('data/frozen.dat')
    object_data = ObjectData.try_from(text)
"""
import logging
import os
from dataclasses import dataclass, field
from typing import List

from lf2_parse import codec, grammar
from lf2_parse.errors import (
    DecodeError, DecodedDataInvalidUtf8, FileOpenError, FileReadError,
    ObjectDataExpected, ObjectDataSurplus,
)
from lf2_parse.frames import Frames
from lf2_parse.grammar import Node, Rule
from lf2_parse.header import Header
from lf2_parse.object_data_parser import parse_as_type
from lf2_parse.weapon_strength import WeaponStrength, parse_weapon_strength_list

logger = logging.getLogger(__name__)

ENCODED_SUFFIX = '.dat'


@dataclass
class ObjectData:
    header: Header
    frames: Frames
    weapon_strength_list: List[WeaponStrength] = field(default_factory=list)

    @classmethod
    def from_node(cls, node: Node) -> 'ObjectData':
        parts = parse_as_type({}, node, Rule.OBJECT, [
            lambda parts, n: dict(parts, header=Header.from_node(n)),
            lambda parts, n: dict(parts, weapon_strength_list=parse_weapon_strength_list(n)),
            lambda parts, n: dict(parts, frames=Frames.from_node(n)),
        ])
        return cls(**parts)

    @classmethod
    def try_from(cls, text: str) -> 'ObjectData':
        """
        Parses object data text.

        Raises ObjectDataExpected if the text holds no object, and
        ObjectDataSurplus (carrying the first object) if it holds more than one.
        """
        nodes = grammar.parse_document(text)
        if not nodes:
            raise ObjectDataExpected()
        object_data = cls.from_node(nodes[0])
        if len(nodes) > 1:
            raise ObjectDataSurplus(object_data, nodes[1:])
        return object_data

    @staticmethod
    def open(path) -> str:
        """Reads an object data file as text, decoding `.dat` files first."""
        try:
            f = open(path, 'rb')
        except OSError as e:
            raise FileOpenError(path, e) from e
        with f:
            try:
                data = f.read()
            except OSError as e:
                raise FileReadError(path, e) from e
        logger.debug('Read %d bytes from %s', len(data), path)

        if os.fspath(path).lower().endswith(ENCODED_SUFFIX):
            try:
                data = codec.decode(data)
            except codec.CodecError as e:
                raise DecodeError(path, e) from e
            logger.debug('Decoded %s to %d bytes', path, len(data))

        try:
            return data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise DecodedDataInvalidUtf8(e) from e

    @classmethod
    def load(cls, path) -> 'ObjectData':
        return cls.try_from(cls.open(path))
