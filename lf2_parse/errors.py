"""
Error taxonomy for object data parsing.

Every error derives from ObjectDataError and renders a user facing message
through str(). Errors copy the source text and positions they report, so
they stay valid after the source text is released.
"""
from typing import List, Optional, Sequence


class ObjectDataError(Exception):
    """Base class for all object data errors."""


def _position(node) -> str:
    return f'{node.line}:{node.col}'


# ── I/O ──────────────────────────────────────────────────────────────

class FileOpenError(ObjectDataError):
    def __init__(self, path, error: OSError):
        self.path = path
        self.error = error
        super().__init__(f'Failed to open file: `{path}`. Error: {error}')


class FileReadError(ObjectDataError):
    def __init__(self, path, error: OSError):
        self.path = path
        self.error = error
        super().__init__(f'Failed to read file: `{path}`. Error: {error}')


# ── Decoding ─────────────────────────────────────────────────────────

class DecodeError(ObjectDataError):
    def __init__(self, path, error: Exception):
        self.path = path
        self.error = error
        super().__init__(f'Failed to decode object data file: `{path}`. Error: {error}')


class DecodedDataInvalidUtf8(ObjectDataError):
    def __init__(self, error: UnicodeDecodeError):
        self.error = error
        super().__init__(
            'Decoded object data is not valid UTF8.\n'
            "Try redownloading the object. If it doesn't work, then it likely cannot be used.\n"
            f'Underlying error: {error}')


# ── Grammar ──────────────────────────────────────────────────────────

class GrammarSyntaxError(ObjectDataError):
    """The text does not match the object data grammar."""

    def __init__(self, error):
        self.error = error
        self.line = error.lineno
        self.col = error.col
        self.line_text = error.line
        super().__init__(
            f'Failed to parse object data at position `{self.line}:{self.col}`: {error.msg}\n'
            f'  {self.line_text}\n'
            f'  {" " * (self.col - 1)}^')


class GrammarDesyncError(ObjectDataError):
    """
    The syntax tree and the semantic parser disagree.

    These indicate a bug in the grammar or the dispatch tables, not a
    problem with the object data.
    """


class GrammarError(GrammarDesyncError):
    def __init__(self, rules_expected: Sequence, node_found=None):
        self.rules_expected = tuple(rules_expected)
        self.node_found = node_found
        rules = ', '.join(f'`{rule.name}`' for rule in self.rules_expected)
        if node_found is not None:
            found = (f' at position: `{_position(node_found)}`, '
                     f'but grammar parsed a `{node_found.rule.name}`.')
        else:
            found = ', but nothing is found.'
        super().__init__(
            f'Expected one of {rules}{found}\n'
            'This means there is a bug where the subrule functions do not match '
            'the object data grammar.')


class NodeExpected(GrammarDesyncError):
    """A node has fewer children than its sub-rule functions expect."""

    def __init__(self, parent_node, index: int):
        self.parent_node = parent_node
        self.index = index
        super().__init__(
            f'Expected child node {index + 1} of the `{parent_node.rule.name}` at position: '
            f'`{_position(parent_node)}`, but nothing is found.\n'
            'This means there is a bug where the subrule functions do not match '
            'the object data grammar.')


class ValueExpected(GrammarDesyncError):
    def __init__(self, tag_node):
        self.tag_node = tag_node
        super().__init__(
            f'Expected value for the `{tag_node.rule.name}` tag at position: '
            f'`{_position(tag_node)}`, but nothing is found.')


# ── Values ───────────────────────────────────────────────────────────

class ParseValueError(ObjectDataError):
    """A field's text could not be converted into its value type."""

    def __init__(self, field: str, value_node, error: Optional[Exception]):
        self.field = field
        self.value = value_node.text
        self.line = value_node.line
        self.col = value_node.col
        self.error = error
        super().__init__(self._message())

    def _message(self) -> str:
        return (f'Failed to parse `{self.field}` value `{self.value}` at position: '
                f'`{self.line}:{self.col}`. Error: `{self.error}`.')


class ParsePathError(ParseValueError):
    def __init__(self, field: str, value_node):
        super().__init__(field, value_node, None)

    def _message(self) -> str:
        return (f'Failed to parse `{self.field}` value `{self.value}` as a path at position: '
                f'`{self.line}:{self.col}`.')


# ── Structure ────────────────────────────────────────────────────────

class FrameNumberNonUnique(ObjectDataError):
    def __init__(self, frame_number: int, frame_nodes: List):
        self.frame_number = frame_number
        self.frame_nodes = list(frame_nodes)
        self.positions = [(node.line, node.col) for node in self.frame_nodes]
        lines = [f'Frame numbers must only be used once, but `{frame_number}` '
                 'is used multiple times:', '']
        for node in self.frame_nodes:
            lines.append(f'- `{node.first_line}` at position `{_position(node)}`')
        super().__init__('\n'.join(lines))


class ObjectDataExpected(ObjectDataError):
    def __init__(self):
        super().__init__('Expected to parse object data, but got nothing.')


class ObjectDataSurplus(ObjectDataError):
    """Object data parsed, but more objects follow it in the text."""

    def __init__(self, object_data, surplus_nodes: List):
        self.object_data = object_data
        self.surplus_nodes = list(surplus_nodes)
        lines = ['Object data successfully parsed, but surplus pairs exist. Surplus:', '']
        for node in self.surplus_nodes:
            lines.append(f'- `{node.first_line}` at position `{_position(node)}`')
        super().__init__('\n'.join(lines))


# ── Build ────────────────────────────────────────────────────────────

class DataBuildFailed(ObjectDataError):
    def __init__(self, type_name: str, field: str):
        self.type_name = type_name
        self.field = field
        super().__init__(f'Failed to build `{type_name}`: `{field}` must be initialized.')
