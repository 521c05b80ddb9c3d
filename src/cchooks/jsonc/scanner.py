"""Tokenizer for JSON with comments.

The scanner never drops input: whitespace, line breaks and comments are
returned as tokens so callers can reason about exact character offsets.
"""

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    OPEN_BRACE = "{"
    CLOSE_BRACE = "}"
    OPEN_BRACKET = "["
    CLOSE_BRACKET = "]"
    COMMA = ","
    COLON = ":"
    NULL = "null"
    TRUE = "true"
    FALSE = "false"
    STRING = "string"
    NUMBER = "number"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"
    LINE_BREAK = "line_break"
    TRIVIA = "trivia"
    UNKNOWN = "unknown"
    EOF = "eof"


class ScanError(Enum):
    NONE = "none"
    UNEXPECTED_END_OF_STRING = "unexpected_end_of_string"
    UNEXPECTED_END_OF_COMMENT = "unexpected_end_of_comment"
    UNEXPECTED_END_OF_NUMBER = "unexpected_end_of_number"
    INVALID_ESCAPE = "invalid_escape"
    INVALID_CHARACTER = "invalid_character"


TRIVIA_KINDS = frozenset(
    {TokenKind.TRIVIA, TokenKind.LINE_BREAK, TokenKind.LINE_COMMENT, TokenKind.BLOCK_COMMENT}
)

_KEYWORDS = {
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "null": TokenKind.NULL,
}

_PUNCTUATION = {
    "{": TokenKind.OPEN_BRACE,
    "}": TokenKind.CLOSE_BRACE,
    "[": TokenKind.OPEN_BRACKET,
    "]": TokenKind.CLOSE_BRACKET,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
}

_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


@dataclass(frozen=True)
class Token:
    """A token and the exact span of source text it covers.

    For strings, ``value`` is the decoded string; for numbers it is the
    numeric literal text. Other tokens carry their raw text.
    """

    kind: TokenKind
    offset: int
    length: int
    value: str
    error: ScanError = ScanError.NONE

    @property
    def end(self) -> int:
        return self.offset + self.length


def is_line_break(ch: str) -> bool:
    return ch in ("\n", "\r")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_whitespace(ch: str) -> bool:
    return ch in (" ", "\t", "\v", "\f", "\u00a0", "\ufeff")


class Scanner:
    """Scans a JSONC document one token at a time."""

    def __init__(self, text: str, position: int = 0) -> None:
        self._text = text
        self._pos = position

    @property
    def position(self) -> int:
        return self._pos

    def scan(self) -> Token:
        text = self._text
        start = self._pos

        if start >= len(text):
            return Token(TokenKind.EOF, start, 0, "")

        ch = text[start]

        if _is_whitespace(ch):
            end = start + 1
            while end < len(text) and _is_whitespace(text[end]):
                end += 1
            return self._emit(TokenKind.TRIVIA, start, end)

        if is_line_break(ch):
            end = start + 1
            if ch == "\r" and end < len(text) and text[end] == "\n":
                end += 1
            return self._emit(TokenKind.LINE_BREAK, start, end)

        if ch in _PUNCTUATION:
            return self._emit(_PUNCTUATION[ch], start, start + 1)

        if ch == '"':
            return self._scan_string(start)

        if ch == "/":
            return self._scan_comment(start)

        if ch == "-" or _is_digit(ch):
            return self._scan_number(start)

        end = start
        while end < len(text) and (text[end].isalnum() or text[end] == "_"):
            end += 1
        if end > start:
            word = text[start:end]
            return self._emit(_KEYWORDS.get(word, TokenKind.UNKNOWN), start, end)

        return self._emit(TokenKind.UNKNOWN, start, start + 1, ScanError.INVALID_CHARACTER)

    def _emit(
        self, kind: TokenKind, start: int, end: int, error: ScanError = ScanError.NONE
    ) -> Token:
        self._pos = end
        return Token(kind, start, end - start, self._text[start:end], error)

    def _scan_string(self, start: int) -> Token:
        text = self._text
        pos = start + 1
        chunks: list[str] = []
        error = ScanError.NONE

        while True:
            if pos >= len(text):
                error = ScanError.UNEXPECTED_END_OF_STRING
                break
            ch = text[pos]
            if ch == '"':
                pos += 1
                break
            if is_line_break(ch):
                error = ScanError.UNEXPECTED_END_OF_STRING
                break
            if ch == "\\":
                pos += 1
                if pos >= len(text):
                    error = ScanError.UNEXPECTED_END_OF_STRING
                    break
                esc = text[pos]
                if esc in _SIMPLE_ESCAPES:
                    chunks.append(_SIMPLE_ESCAPES[esc])
                    pos += 1
                elif esc == "u":
                    digits = text[pos + 1 : pos + 5]
                    if len(digits) == 4 and all(d in _HEX_DIGITS for d in digits):
                        chunks.append(chr(int(digits, 16)))
                        pos += 5
                    else:
                        error = ScanError.INVALID_ESCAPE
                        pos += 1
                else:
                    error = ScanError.INVALID_ESCAPE
                    pos += 1
                continue
            chunks.append(ch)
            pos += 1

        self._pos = pos
        return Token(TokenKind.STRING, start, pos - start, _join_surrogates("".join(chunks)), error)

    def _scan_comment(self, start: int) -> Token:
        text = self._text
        nxt = text[start + 1] if start + 1 < len(text) else ""

        if nxt == "/":
            end = start + 2
            while end < len(text) and not is_line_break(text[end]):
                end += 1
            return self._emit(TokenKind.LINE_COMMENT, start, end)

        if nxt == "*":
            close = text.find("*/", start + 2)
            if close == -1:
                return self._emit(
                    TokenKind.BLOCK_COMMENT, start, len(text), ScanError.UNEXPECTED_END_OF_COMMENT
                )
            return self._emit(TokenKind.BLOCK_COMMENT, start, close + 2)

        return self._emit(TokenKind.UNKNOWN, start, start + 1, ScanError.INVALID_CHARACTER)

    def _scan_number(self, start: int) -> Token:
        text = self._text
        pos = start
        if text[pos] == "-":
            pos += 1
        digits_start = pos
        while pos < len(text) and _is_digit(text[pos]):
            pos += 1
        if pos == digits_start:
            return self._emit(TokenKind.UNKNOWN, start, pos, ScanError.UNEXPECTED_END_OF_NUMBER)

        if pos < len(text) and text[pos] == ".":
            pos += 1
            fraction_start = pos
            while pos < len(text) and _is_digit(text[pos]):
                pos += 1
            if pos == fraction_start:
                return self._emit(TokenKind.NUMBER, start, pos, ScanError.UNEXPECTED_END_OF_NUMBER)

        if pos < len(text) and text[pos] in "eE":
            pos += 1
            if pos < len(text) and text[pos] in "+-":
                pos += 1
            exponent_start = pos
            while pos < len(text) and _is_digit(text[pos]):
                pos += 1
            if pos == exponent_start:
                return self._emit(TokenKind.NUMBER, start, pos, ScanError.UNEXPECTED_END_OF_NUMBER)

        return self._emit(TokenKind.NUMBER, start, pos)


def _join_surrogates(value: str) -> str:
    """Combine UTF-16 surrogate pairs produced by \\uXXXX escapes."""
    if not any("\ud800" <= ch <= "\udfff" for ch in value):
        return value
    return value.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


def tokenize(text: str) -> list[Token]:
    """Scan the whole document, excluding the final EOF token."""
    scanner = Scanner(text)
    tokens: list[Token] = []
    while True:
        token = scanner.scan()
        if token.kind is TokenKind.EOF:
            return tokens
        tokens.append(token)
