"""Comment-preserving parsing and editing of JSON-with-comments documents."""

from cchooks.jsonc.edit import (
    DEFAULT_FORMATTING,
    Edit,
    FormattingOptions,
    PatchResult,
    apply_edits,
    format_path,
    remove_at_path,
    set_at_path,
)
from cchooks.jsonc.parser import (
    JSONPath,
    Node,
    NodeType,
    ParseError,
    ParseErrorCode,
    ParseResult,
    find_node_at_location,
    node_value,
    parse,
    parse_tree,
)

__all__ = [
    "DEFAULT_FORMATTING",
    "Edit",
    "FormattingOptions",
    "JSONPath",
    "Node",
    "NodeType",
    "ParseError",
    "ParseErrorCode",
    "ParseResult",
    "PatchResult",
    "apply_edits",
    "find_node_at_location",
    "format_path",
    "node_value",
    "parse",
    "parse_tree",
    "remove_at_path",
    "set_at_path",
]
