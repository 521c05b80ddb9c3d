"""Span-local structural edits for JSON-with-comments documents.

Each operation parses the current text, locates the node at a path and
produces a single ``Edit`` replacing the smallest span that expresses the
change. Text outside that span (comments, odd spacing, trailing commas,
unrelated keys) is returned byte-for-byte.

Edits are never batched: callers that need several changes call these
functions repeatedly so each edit sees the previous edit's result.
"""

import json
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from cchooks.jsonc.parser import (
    JSONPath,
    Node,
    NodeType,
    ParseResult,
    find_node_at_location,
    find_property,
    parse_tree,
)
from cchooks.jsonc.scanner import Scanner, TokenKind

logger = logging.getLogger(__name__)

_REMOVE: Any = object()

_FIRST_INDENT = re.compile(r"^([ \t]+)\S", re.MULTILINE)


@dataclass(frozen=True)
class FormattingOptions:
    """Formatting used for newly inserted content."""

    tab_size: int = 2
    insert_spaces: bool = True
    eol: str = "\n"

    @property
    def indent_unit(self) -> str:
        return " " * self.tab_size if self.insert_spaces else "\t"


DEFAULT_FORMATTING = FormattingOptions()


@dataclass(frozen=True)
class Edit:
    """Replace ``length`` characters at ``offset`` with ``content``."""

    offset: int
    length: int
    content: str

    @property
    def end(self) -> int:
        return self.offset + self.length

    def apply(self, text: str) -> str:
        return text[: self.offset] + self.content + text[self.end :]


def apply_edits(text: str, edits: Sequence[Edit]) -> str:
    """Apply non-overlapping edits computed against the same text."""
    for edit in sorted(edits, key=lambda e: e.offset, reverse=True):
        text = edit.apply(text)
    return text


class PatchError(Exception):
    """The requested edit cannot be expressed against this document."""


@dataclass(frozen=True)
class PatchResult:
    """Outcome of a single structural edit.

    ``content`` equals the input whenever ``applied`` is False.
    ``diagnostics`` lists parse errors and the reason an edit was skipped.
    """

    content: str
    applied: bool
    diagnostics: tuple[str, ...] = ()


def format_path(path: JSONPath) -> str:
    if not path:
        return "<root>"
    parts: list[str] = []
    for segment in path:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        elif parts:
            parts.append(f".{segment}")
        else:
            parts.append(segment)
    return "".join(parts)


def set_at_path(
    text: str,
    path: JSONPath,
    value: Any,
    options: FormattingOptions = DEFAULT_FORMATTING,
) -> PatchResult:
    """Set ``value`` at ``path``, creating missing objects along the way.

    An integer segment of -1 (or one past the end) appends to an array.
    """
    return _patch(text, path, value, options)


def remove_at_path(
    text: str,
    path: JSONPath,
    options: FormattingOptions = DEFAULT_FORMATTING,
) -> PatchResult:
    """Remove the property or array element at ``path`` if it exists."""
    return _patch(text, path, _REMOVE, options)


def _patch(text: str, path: JSONPath, value: Any, options: FormattingOptions) -> PatchResult:
    parsed = parse_tree(text)
    diagnostics = [f"Parse error: {error.describe(text)}" for error in parsed.errors]
    operation = "remove" if value is _REMOVE else "set"

    try:
        edit = _compute_edit(text, parsed, path, value, options)
    except PatchError as e:
        message = f"Skipped {operation} at {format_path(path)}: {e}"
        logger.debug(message)
        diagnostics.append(message)
        return PatchResult(text, False, tuple(diagnostics))

    if edit is None:
        logger.debug("Nothing to %s at %s", operation, format_path(path))
        return PatchResult(text, False, tuple(diagnostics))

    logger.debug(
        "Applying %s at %s: offset=%d length=%d",
        operation,
        format_path(path),
        edit.offset,
        edit.length,
    )
    return PatchResult(apply_edits(text, [edit]), True, tuple(diagnostics))


def _compute_edit(
    text: str,
    parsed: ParseResult,
    path: JSONPath,
    value: Any,
    options: FormattingOptions,
) -> Edit | None:
    root = parsed.root
    _ensure_unambiguous(root, path)
    remaining = list(path)
    parent: Node | None = None
    last: str | int | None = None

    while remaining:
        last = remaining.pop()
        parent = find_node_at_location(root, remaining)
        if parent is None and value is not _REMOVE:
            value = {last: value} if isinstance(last, str) else [value]
            continue
        break

    if parent is None:
        if value is _REMOVE:
            return None
        return _root_edit(text, parsed, value, options)

    if parent.type is NodeType.OBJECT:
        if not isinstance(last, str):
            raise PatchError(f"cannot use index {last} on an object")
        _ensure_well_formed(parsed, parent)
        prop = find_property(parent, last)
        if prop is None:
            if value is _REMOVE:
                return None
            return _insertion_edit(text, parent, f"{json.dumps(last)}: ", value, options)
        existing = prop.property_value()
        if existing is None:
            raise PatchError(f"property {last!r} has no value")
        _ensure_target_well_formed(parsed, existing)
        if value is _REMOVE:
            return _removal_edit(text, parent, prop)
        return _replace_edit(text, existing, value, options)

    if parent.type is NodeType.ARRAY:
        if not isinstance(last, int):
            raise PatchError(f"cannot use property {last!r} on an array")
        _ensure_well_formed(parsed, parent)
        count = len(parent.children)
        if value is _REMOVE:
            if not 0 <= last < count:
                return None
            _ensure_target_well_formed(parsed, parent.children[last])
            return _removal_edit(text, parent, parent.children[last])
        if last == -1 or last >= count:
            return _insertion_edit(text, parent, "", value, options)
        if last < 0:
            raise PatchError(f"invalid array index {last}")
        _ensure_target_well_formed(parsed, parent.children[last])
        return _replace_edit(text, parent.children[last], value, options)

    kind = "property" if isinstance(last, str) else "index"
    raise PatchError(f"cannot add {kind} to a {parent.type.value}")


def _root_edit(text: str, parsed: ParseResult, value: Any, options: FormattingOptions) -> Edit:
    unit = _indent_unit(text, options)
    eol = _eol(text, options)
    if parsed.root is not None:
        _ensure_well_formed(parsed, parsed.root)
        return Edit(parsed.root.offset, parsed.root.length, _serialize(value, unit, "", eol))
    if parsed.errors:
        raise PatchError("document has no value that can be edited")
    if not text.strip():
        return Edit(0, len(text), _serialize(value, unit, "", eol) + eol)
    return Edit(len(text), 0, eol + _serialize(value, unit, "", eol) + eol)


def _ensure_unambiguous(root: Node | None, path: JSONPath) -> None:
    """Refuse paths that pass through a key the document defines more than once."""
    node = root
    for depth, segment in enumerate(path):
        if node is None:
            return
        if isinstance(segment, str) and node.type is NodeType.OBJECT:
            count = sum(
                1 for prop in node.children if prop.children and prop.children[0].value == segment
            )
            if count > 1:
                raise PatchError(f"duplicate key at {format_path(path[: depth + 1])}")
        node = find_node_at_location(node, [segment])


def _ensure_well_formed(parsed: ParseResult, container: Node) -> None:
    """Refuse to edit a container whose own members could not be delimited.

    Errors strictly inside a closed child object or array do not count: the
    child's span is still exact.
    """
    if not container.complete:
        raise PatchError(f"{container.type.value} at offset {container.offset} is not closed")
    nested = [
        member for member in _member_values(container) if member.is_container and member.complete
    ]
    for error in parsed.errors:
        if not container.offset <= error.offset < container.end:
            continue
        if any(member.offset < error.offset < member.end for member in nested):
            continue
        raise PatchError(f"{container.type.value} at offset {container.offset} is malformed")


def _ensure_target_well_formed(parsed: ParseResult, node: Node) -> None:
    if node.is_container:
        _ensure_well_formed(parsed, node)


def _member_values(container: Node) -> list[Node]:
    if container.type is NodeType.ARRAY:
        return list(container.children)
    values = [prop.property_value() for prop in container.children]
    return [value for value in values if value is not None]


def _replace_edit(text: str, node: Node, value: Any, options: FormattingOptions) -> Edit:
    eol = _eol(text, options)
    enclosing = _enclosing(node)
    if enclosing is not None and _is_single_line(text, enclosing):
        return Edit(node.offset, node.length, _serialize_inline(value))
    indent = _line_indent(text, node.offset)
    content = _serialize(value, _indent_unit(text, options), indent, eol)
    return Edit(node.offset, node.length, content)


def _insertion_edit(
    text: str,
    parent: Node,
    prefix: str,
    value: Any,
    options: FormattingOptions,
) -> Edit:
    eol = _eol(text, options)
    unit = _indent_unit(text, options)
    children = parent.children
    parent_indent = _line_indent(text, parent.offset)

    inline_scope = parent if children else _enclosing(parent)
    if inline_scope is not None and _is_single_line(text, inline_scope):
        member = prefix + _serialize_inline(value)
        if children:
            return Edit(children[-1].end, 0, ", " + member)
        interior_start = parent.offset + 1
        interior = text[interior_start : parent.end - 1]
        if interior.strip():
            return Edit(interior_start, 0, member)
        return Edit(interior_start, len(interior), member)

    if not children:
        child_indent = parent_indent + unit
        member = prefix + _serialize(value, unit, child_indent, eol)
        interior_start = parent.offset + 1
        interior = text[interior_start : parent.end - 1]
        if interior.strip():
            return Edit(interior_start, 0, eol + child_indent + member)
        return Edit(interior_start, len(interior), eol + child_indent + member + eol + parent_indent)

    last = children[-1]
    if "\n" in text[parent.offset : last.offset] or "\r" in text[parent.offset : last.offset]:
        child_indent = _line_indent(text, last.offset)
    else:
        child_indent = parent_indent + unit
    member = prefix + _serialize(value, unit, child_indent, eol)

    line_end, has_comma = _scan_same_line_trailer(text, last.end)
    if has_comma:
        return Edit(line_end, 0, eol + child_indent + member + ",")
    trailer = text[last.end : line_end]
    return Edit(last.end, len(trailer), "," + trailer + eol + child_indent + member)


def _removal_edit(text: str, parent: Node, child: Node) -> Edit:
    siblings = parent.children
    index = next(i for i, sibling in enumerate(siblings) if sibling is child)

    if len(siblings) == 1:
        return Edit(parent.offset + 1, parent.length - 2, "")

    if index < len(siblings) - 1:
        trailer_end, has_comma = _scan_same_line_trailer(text, child.end)
        if not has_comma:
            return _leading_separator_removal(text, child, trailer_end)
        end = _next_member_start(text, child.end)
        return Edit(child.offset, end - child.offset, "")

    end, child_has_comma = _scan_same_line_trailer(text, child.end)
    previous = siblings[index - 1]
    if child_has_comma:
        # Trailing-comma style: the previous member keeps its comma.
        previous_end, _ = _scan_same_line_trailer(text, previous.end)
        return Edit(previous_end, end - previous_end, "")

    # The previous member loses its comma but keeps comments on its line.
    return Edit(previous.end, end - previous.end, _same_line_comments(text, previous.end))


def _leading_separator_removal(text: str, child: Node, trailer_end: int) -> Edit:
    """Remove a member whose separating comma starts the following line.

    Comments on the lines between the member and that comma are kept.
    """
    scanner = Scanner(text, trailer_end)
    next_line: int | None = None
    while True:
        token = scanner.scan()
        if token.kind is TokenKind.LINE_BREAK:
            if next_line is None:
                next_line = token.end
        elif token.kind is TokenKind.COMMA:
            break
        elif token.kind not in (
            TokenKind.TRIVIA,
            TokenKind.LINE_COMMENT,
            TokenKind.BLOCK_COMMENT,
        ):
            return Edit(child.offset, token.offset - child.offset, "")

    kept = text[next_line : token.offset].lstrip(" \t") if next_line is not None else ""
    end = token.end
    following = Scanner(text, end).scan()
    if following.kind is TokenKind.TRIVIA:
        end = following.end
    return Edit(child.offset, end - child.offset, kept)


def _scan_same_line_trailer(text: str, position: int) -> tuple[int, bool]:
    """Skip spaces, comments and one comma that share a line with a member.

    Returns the offset where the trailer ends and whether a comma was seen.
    """
    scanner = Scanner(text, position)
    end = position
    has_comma = False
    while True:
        token = scanner.scan()
        if token.kind in (TokenKind.TRIVIA, TokenKind.LINE_COMMENT):
            end = token.end
        elif token.kind is TokenKind.BLOCK_COMMENT and "\n" not in token.value:
            end = token.end
        elif token.kind is TokenKind.COMMA and not has_comma:
            has_comma = True
            end = token.end
        else:
            return end, has_comma


def _same_line_comments(text: str, position: int) -> str:
    """Text of the comments following ``position`` on its line, minus any comma."""
    scanner = Scanner(text, position)
    start: int | None = None
    end = position
    while True:
        token = scanner.scan()
        if token.kind is TokenKind.LINE_COMMENT or (
            token.kind is TokenKind.BLOCK_COMMENT and "\n" not in token.value
        ):
            if start is None:
                start = token.offset
            end = token.end
        elif token.kind not in (TokenKind.TRIVIA, TokenKind.COMMA):
            break
    if start is None:
        return ""
    return text[position:start].replace(",", "", 1) + text[start:end]


def _next_member_start(text: str, position: int) -> int:
    """Offset of the first token that follows a member and its separator.

    Comments on the member's own line are treated as belonging to it;
    comments on later lines belong to whatever follows.
    """
    end, _ = _scan_same_line_trailer(text, position)
    scanner = Scanner(text, end)
    while True:
        token = scanner.scan()
        if token.kind not in (TokenKind.TRIVIA, TokenKind.LINE_BREAK):
            return token.offset


def _enclosing(node: Node) -> Node | None:
    parent = node.parent
    if parent is not None and parent.type is NodeType.PROPERTY:
        parent = parent.parent
    return parent


def _is_single_line(text: str, node: Node) -> bool:
    span = text[node.offset : node.end]
    return "\n" not in span and "\r" not in span


def _line_indent(text: str, offset: int) -> str:
    line_start = max(text.rfind("\n", 0, offset), text.rfind("\r", 0, offset)) + 1
    end = line_start
    while end < offset and text[end] in " \t":
        end += 1
    return text[line_start:end]


def _indent_unit(text: str, options: FormattingOptions) -> str:
    match = _FIRST_INDENT.search(text)
    if match is None:
        return options.indent_unit
    indent = match.group(1)
    if "\t" in indent:
        return "\t"
    return indent


def _eol(text: str, options: FormattingOptions) -> str:
    return "\r\n" if "\r\n" in text else options.eol


def _serialize(value: Any, unit: str, base_indent: str, eol: str) -> str:
    rendered = json.dumps(value, indent=unit, ensure_ascii=False)
    return rendered.replace("\n", eol + base_indent)


def _serialize_inline(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)
