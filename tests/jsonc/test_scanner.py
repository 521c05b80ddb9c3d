"""Tests for the JSONC tokenizer."""

from cchooks.jsonc.scanner import ScanError, Scanner, TokenKind, tokenize


def test_tokens_cover_every_character() -> None:
    """Comments and whitespace come back as tokens, so nothing is lost."""
    text = '{ // note\n  "a": 1, /* inline */ "b": [true, null]\r\n}'

    tokens = tokenize(text)

    assert "".join(text[t.offset : t.end] for t in tokens) == text
    assert [t.offset for t in tokens] == sorted(t.offset for t in tokens)


def test_token_kinds() -> None:
    kinds = [t.kind for t in tokenize('{ // c\n"a": -1.5e3 }')]

    assert kinds == [
        TokenKind.OPEN_BRACE,
        TokenKind.TRIVIA,
        TokenKind.LINE_COMMENT,
        TokenKind.LINE_BREAK,
        TokenKind.STRING,
        TokenKind.COLON,
        TokenKind.TRIVIA,
        TokenKind.NUMBER,
        TokenKind.TRIVIA,
        TokenKind.CLOSE_BRACE,
    ]


def test_crlf_is_one_line_break() -> None:
    tokens = tokenize("\r\n")

    assert len(tokens) == 1
    assert tokens[0].kind is TokenKind.LINE_BREAK
    assert tokens[0].length == 2


def test_string_escapes_are_decoded() -> None:
    token = Scanner('"a\\n\\"b\\" \\u00e9"').scan()

    assert token.kind is TokenKind.STRING
    assert token.value == 'a\n"b" é'
    assert token.error is ScanError.NONE


def test_surrogate_pair_escape_decodes_to_one_character() -> None:
    token = Scanner('"\\ud83d\\ude00"').scan()

    assert token.value == "😀"


def test_unterminated_string_reports_error() -> None:
    token = Scanner('"abc\n"').scan()

    assert token.kind is TokenKind.STRING
    assert token.error is ScanError.UNEXPECTED_END_OF_STRING
    assert token.length == 4


def test_invalid_escape_reports_error() -> None:
    token = Scanner('"\\q"').scan()

    assert token.error is ScanError.INVALID_ESCAPE


def test_unterminated_block_comment_runs_to_end() -> None:
    text = "/* never closed"
    token = Scanner(text).scan()

    assert token.kind is TokenKind.BLOCK_COMMENT
    assert token.error is ScanError.UNEXPECTED_END_OF_COMMENT
    assert token.end == len(text)


def test_keywords_and_unknown_words() -> None:
    kinds = [t.kind for t in tokenize("true false null nope")]

    assert kinds == [
        TokenKind.TRUE,
        TokenKind.TRIVIA,
        TokenKind.FALSE,
        TokenKind.TRIVIA,
        TokenKind.NULL,
        TokenKind.TRIVIA,
        TokenKind.UNKNOWN,
    ]


def test_number_missing_fraction_digits() -> None:
    token = Scanner("1.").scan()

    assert token.kind is TokenKind.NUMBER
    assert token.error is ScanError.UNEXPECTED_END_OF_NUMBER


def test_scanner_can_start_mid_document() -> None:
    text = '{"a": 1, "b": 2}'
    token = Scanner(text, text.index('"b"')).scan()

    assert token.kind is TokenKind.STRING
    assert token.value == "b"
