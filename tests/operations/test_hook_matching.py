"""Tests for exact and binary-name matcher selection."""

from cchooks.models.hook import Hook, HookMatcher
from cchooks.operations.hook_matching import (
    hooks_equal,
    matcher_invokes_binary,
    matchers_equal,
    matchers_to_remove,
    matchers_with_binary,
)

EDIT_MATCHER = HookMatcher(
    matcher="Edit",
    hooks=(Hook(command="fmt"), Hook(command="lint")),
)


def _entry(matcher: str, *commands: str) -> dict:
    return {"matcher": matcher, "hooks": [{"type": "command", "command": c} for c in commands]}


def test_hooks_equal_compares_type_and_command() -> None:
    hook = Hook(command="fmt")

    assert hooks_equal(hook, {"type": "command", "command": "fmt"})
    assert hooks_equal(hook, {"type": "command", "command": "fmt", "timeout": 30})
    assert not hooks_equal(hook, {"type": "command", "command": "fmt2"})
    assert not hooks_equal(hook, {"command": "fmt"})
    assert not hooks_equal(hook, "fmt")


def test_matchers_equal_requires_same_hooks_in_order() -> None:
    assert matchers_equal(EDIT_MATCHER, _entry("Edit", "fmt", "lint"))
    assert not matchers_equal(EDIT_MATCHER, _entry("Edit", "lint", "fmt"))
    assert not matchers_equal(EDIT_MATCHER, _entry("Write", "fmt", "lint"))


def test_partial_overlap_is_not_a_match() -> None:
    assert not matchers_equal(EDIT_MATCHER, _entry("Edit", "fmt"))
    assert not matchers_equal(EDIT_MATCHER, _entry("Edit", "fmt", "lint", "extra"))


def test_malformed_entries_never_match() -> None:
    existing = [
        None,
        42,
        "Edit",
        {"matcher": "Edit"},
        {"matcher": "Edit", "hooks": "fmt"},
        {"matcher": "Edit", "hooks": [None, None]},
        _entry("Edit", "fmt", "lint"),
    ]

    assert matchers_to_remove([EDIT_MATCHER], existing) == {6}


def test_matchers_to_remove_matches_any_wanted_matcher() -> None:
    star = HookMatcher(matcher="*", hooks=(Hook(command="tool run"),))
    existing = [
        _entry("*", "tool run"),
        _entry("Bash", "other"),
        _entry("Edit", "fmt", "lint"),
        _entry("*", "tool run"),
    ]

    assert matchers_to_remove([star, EDIT_MATCHER], existing) == {0, 2, 3}


def test_matchers_to_remove_with_nothing_wanted() -> None:
    assert matchers_to_remove([], [_entry("Edit", "fmt", "lint")]) == set()


def test_binary_match_is_substring_of_any_command() -> None:
    entry = _entry("*", "echo start", "/usr/local/bin/happy-coder-hooks PreToolUse")

    assert matcher_invokes_binary("happy-coder-hooks", entry)
    assert not matcher_invokes_binary("other-tool", entry)


def test_binary_match_ignores_malformed_entries() -> None:
    existing = [
        {"matcher": "*", "hooks": "happy-coder-hooks"},
        {"matcher": "*", "hooks": [{"type": "command", "command": 7}]},
        {"matcher": "*", "hooks": [None, {"type": "command", "command": "happy-coder-hooks"}]},
        ["happy-coder-hooks"],
    ]

    assert matchers_with_binary("happy-coder-hooks", existing) == {2}
