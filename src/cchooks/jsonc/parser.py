"""Error-tolerant parser producing a syntax tree with source offsets.

Every node records the exact span of text it was parsed from, which is what
lets the editor replace or delete a node without re-serializing the rest of
the document. Syntax errors are collected, never raised.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from cchooks.jsonc.scanner import TRIVIA_KINDS, ScanError, Scanner, Token, TokenKind

JSONPath = Sequence[str | int]


class NodeType(Enum):
    OBJECT = "object"
    ARRAY = "array"
    PROPERTY = "property"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


class ParseErrorCode(Enum):
    INVALID_SYMBOL = "invalid symbol"
    INVALID_NUMBER_FORMAT = "invalid number format"
    PROPERTY_NAME_EXPECTED = "property name expected"
    VALUE_EXPECTED = "value expected"
    COLON_EXPECTED = "colon expected"
    COMMA_EXPECTED = "comma expected"
    CLOSE_BRACE_EXPECTED = "closing brace expected"
    CLOSE_BRACKET_EXPECTED = "closing bracket expected"
    END_OF_FILE_EXPECTED = "end of file expected"
    UNEXPECTED_END_OF_COMMENT = "unexpected end of comment"
    UNEXPECTED_END_OF_STRING = "unexpected end of string"
    UNEXPECTED_END_OF_NUMBER = "unexpected end of number"
    INVALID_ESCAPE_CHARACTER = "invalid escape character"


_SCAN_ERROR_CODES = {
    ScanError.UNEXPECTED_END_OF_COMMENT: ParseErrorCode.UNEXPECTED_END_OF_COMMENT,
    ScanError.UNEXPECTED_END_OF_STRING: ParseErrorCode.UNEXPECTED_END_OF_STRING,
    ScanError.UNEXPECTED_END_OF_NUMBER: ParseErrorCode.UNEXPECTED_END_OF_NUMBER,
    ScanError.INVALID_ESCAPE: ParseErrorCode.INVALID_ESCAPE_CHARACTER,
    ScanError.INVALID_CHARACTER: ParseErrorCode.INVALID_SYMBOL,
}

_VALUE_START_KINDS = frozenset(
    {
        TokenKind.OPEN_BRACE,
        TokenKind.OPEN_BRACKET,
        TokenKind.STRING,
        TokenKind.NUMBER,
        TokenKind.TRUE,
        TokenKind.FALSE,
        TokenKind.NULL,
    }
)


@dataclass(frozen=True)
class ParseError:
    """A syntax problem found while parsing. Never raised."""

    code: ParseErrorCode
    offset: int
    length: int

    def describe(self, text: str) -> str:
        line = text.count("\n", 0, self.offset) + 1
        column = self.offset - (text.rfind("\n", 0, self.offset) + 1) + 1
        return f"{self.code.value} at line {line}, column {column} (offset {self.offset})"


@dataclass(eq=False)
class Node:
    """A node in the syntax tree.

    Property nodes hold the key node as their first child and, when the
    document supplied one, the value node as their second child.
    """

    type: NodeType
    offset: int
    length: int = 0
    value: Any = None
    parent: "Node | None" = field(default=None, repr=False)
    children: list["Node"] = field(default_factory=list, repr=False)
    colon_offset: int = -1
    complete: bool = True

    @property
    def end(self) -> int:
        return self.offset + self.length

    @property
    def is_container(self) -> bool:
        return self.type in (NodeType.OBJECT, NodeType.ARRAY)

    def property_value(self) -> "Node | None":
        if self.type is not NodeType.PROPERTY or len(self.children) < 2:
            return None
        return self.children[1]


@dataclass(frozen=True)
class ParseResult:
    root: Node | None
    errors: tuple[ParseError, ...]

    @property
    def ok(self) -> bool:
        return not self.errors


class _Parser:
    def __init__(self, text: str) -> None:
        self._scanner = Scanner(text)
        self._errors: list[ParseError] = []
        self._token = Token(TokenKind.EOF, 0, 0, "")
        self._last_end = 0

    def parse(self) -> ParseResult:
        self._advance()
        if self._token.kind is TokenKind.EOF:
            return ParseResult(None, tuple(self._errors))

        root = self._parse_value(None)
        if root is None:
            self._error(ParseErrorCode.VALUE_EXPECTED)
        elif self._token.kind is not TokenKind.EOF:
            self._error(ParseErrorCode.END_OF_FILE_EXPECTED)
        return ParseResult(root, tuple(self._errors))

    def _advance(self) -> Token:
        self._last_end = self._token.end
        while True:
            token = self._scanner.scan()
            if token.error is not ScanError.NONE:
                self._errors.append(
                    ParseError(_SCAN_ERROR_CODES[token.error], token.offset, token.length)
                )
            if token.kind in TRIVIA_KINDS:
                continue
            if token.kind is TokenKind.UNKNOWN:
                if token.error is ScanError.NONE:
                    self._errors.append(
                        ParseError(ParseErrorCode.INVALID_SYMBOL, token.offset, token.length)
                    )
                continue
            self._token = token
            return token

    def _error(
        self,
        code: ParseErrorCode,
        skip_until: frozenset[TokenKind] = frozenset(),
    ) -> None:
        self._errors.append(ParseError(code, self._token.offset, self._token.length))
        if not skip_until:
            return
        while self._token.kind is not TokenKind.EOF and self._token.kind not in skip_until:
            self._advance()

    def _parse_value(self, parent: Node | None) -> Node | None:
        kind = self._token.kind
        if kind is TokenKind.OPEN_BRACE:
            return self._parse_object(parent)
        if kind is TokenKind.OPEN_BRACKET:
            return self._parse_array(parent)
        if kind in _VALUE_START_KINDS:
            return self._parse_literal(parent)
        return None

    def _parse_literal(self, parent: Node | None) -> Node:
        token = self._token
        if token.kind is TokenKind.STRING:
            node = Node(NodeType.STRING, token.offset, token.length, token.value, parent)
        elif token.kind is TokenKind.NUMBER:
            node = Node(NodeType.NUMBER, token.offset, token.length, _number(token.value), parent)
            if token.error is ScanError.NONE and node.value is None:
                self._errors.append(
                    ParseError(ParseErrorCode.INVALID_NUMBER_FORMAT, token.offset, token.length)
                )
                node.value = 0
        elif token.kind is TokenKind.NULL:
            node = Node(NodeType.NULL, token.offset, token.length, None, parent)
        else:
            value = token.kind is TokenKind.TRUE
            node = Node(NodeType.BOOLEAN, token.offset, token.length, value, parent)
        self._advance()
        return node

    def _parse_object(self, parent: Node | None) -> Node:
        node = Node(NodeType.OBJECT, self._token.offset, parent=parent)
        self._advance()
        stop = frozenset({TokenKind.CLOSE_BRACE, TokenKind.COMMA})
        needs_comma = False

        while self._token.kind not in (TokenKind.CLOSE_BRACE, TokenKind.EOF):
            if self._token.kind is TokenKind.COMMA:
                if not needs_comma:
                    self._error(ParseErrorCode.VALUE_EXPECTED)
                self._advance()
                if self._token.kind is TokenKind.CLOSE_BRACE:
                    break
            elif needs_comma:
                self._error(ParseErrorCode.COMMA_EXPECTED)
            self._parse_property(node, stop)
            needs_comma = True

        self._close(node, TokenKind.CLOSE_BRACE, ParseErrorCode.CLOSE_BRACE_EXPECTED)
        return node

    def _parse_property(self, obj: Node, stop: frozenset[TokenKind]) -> None:
        token = self._token
        if token.kind is not TokenKind.STRING:
            self._error(ParseErrorCode.PROPERTY_NAME_EXPECTED, stop)
            return

        prop = Node(NodeType.PROPERTY, token.offset, parent=obj)
        key = Node(NodeType.STRING, token.offset, token.length, token.value, prop)
        prop.children.append(key)
        obj.children.append(prop)
        self._advance()

        if self._token.kind is TokenKind.COLON:
            prop.colon_offset = self._token.offset
            self._advance()
            value = self._parse_value(prop)
            if value is None:
                self._error(ParseErrorCode.VALUE_EXPECTED, stop)
            else:
                prop.children.append(value)
        else:
            self._error(ParseErrorCode.COLON_EXPECTED, stop)

        last = prop.children[-1]
        prop.length = last.end - prop.offset

    def _parse_array(self, parent: Node | None) -> Node:
        node = Node(NodeType.ARRAY, self._token.offset, parent=parent)
        self._advance()
        stop = frozenset({TokenKind.CLOSE_BRACKET, TokenKind.COMMA})
        needs_comma = False

        while self._token.kind not in (TokenKind.CLOSE_BRACKET, TokenKind.EOF):
            if self._token.kind is TokenKind.COMMA:
                if not needs_comma:
                    self._error(ParseErrorCode.VALUE_EXPECTED)
                self._advance()
                if self._token.kind is TokenKind.CLOSE_BRACKET:
                    break
            elif needs_comma:
                self._error(ParseErrorCode.COMMA_EXPECTED)
            value = self._parse_value(node)
            if value is None:
                self._error(ParseErrorCode.VALUE_EXPECTED, stop)
            else:
                node.children.append(value)
            needs_comma = True

        self._close(node, TokenKind.CLOSE_BRACKET, ParseErrorCode.CLOSE_BRACKET_EXPECTED)
        return node

    def _close(self, node: Node, closing: TokenKind, code: ParseErrorCode) -> None:
        if self._token.kind is closing:
            node.length = self._token.end - node.offset
            self._advance()
            return
        self._error(code)
        node.complete = False
        node.length = self._last_end - node.offset


def _number(literal: str) -> int | float | None:
    try:
        if any(ch in literal for ch in ".eE"):
            return float(literal)
        return int(literal)
    except ValueError:
        return None


def parse_tree(text: str) -> ParseResult:
    """Parse a JSONC document into a syntax tree, collecting errors."""
    return _Parser(text).parse()


def node_value(node: Node | None) -> Any:
    """Convert a syntax tree node into plain Python data.

    Properties without a value are dropped; later duplicate keys win.
    """
    if node is None:
        return None
    if node.type is NodeType.OBJECT:
        result: dict[str, Any] = {}
        for prop in node.children:
            value = prop.property_value()
            if value is not None:
                result[prop.children[0].value] = node_value(value)
        return result
    if node.type is NodeType.ARRAY:
        return [node_value(child) for child in node.children]
    if node.type is NodeType.PROPERTY:
        return node_value(node.property_value())
    return node.value


def parse(text: str) -> tuple[Any, tuple[ParseError, ...]]:
    """Parse a JSONC document into plain Python data plus any syntax errors."""
    result = parse_tree(text)
    return node_value(result.root), result.errors


def find_property(obj: Node, key: str) -> Node | None:
    """Return the first property node of ``obj`` named ``key``."""
    if obj.type is not NodeType.OBJECT:
        return None
    for prop in obj.children:
        if prop.children and prop.children[0].value == key:
            return prop
    return None


def find_node_at_location(root: Node | None, path: JSONPath) -> Node | None:
    """Follow ``path`` from ``root``, returning None if any segment is missing."""
    node = root
    for segment in path:
        if node is None:
            return None
        if isinstance(segment, str):
            prop = find_property(node, segment)
            node = prop.property_value() if prop is not None else None
        else:
            if node.type is not NodeType.ARRAY or not 0 <= segment < len(node.children):
                return None
            node = node.children[segment]
    return node
