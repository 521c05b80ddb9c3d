"""Decide which matcher entries of a settings file qualify for removal.

Entries read from settings files are untrusted: anything not shaped like a
matcher simply does not match. Nothing here raises on malformed input.
"""

from collections.abc import Sequence
from typing import Any

from cchooks.models.hook import Hook, HookMatcher


def hooks_equal(wanted: Hook, existing: Any) -> bool:
    """Same type and command; other keys of the stored hook are ignored."""
    if not isinstance(existing, dict):
        return False
    return existing.get("type") == wanted.type and existing.get("command") == wanted.command


def matchers_equal(wanted: HookMatcher, existing: Any) -> bool:
    """Same matcher string, same number of hooks, hooks pairwise equal."""
    if not isinstance(existing, dict) or existing.get("matcher") != wanted.matcher:
        return False
    hooks = existing.get("hooks")
    if not isinstance(hooks, list) or len(hooks) != len(wanted.hooks):
        return False
    return all(hooks_equal(hook, entry) for hook, entry in zip(wanted.hooks, hooks, strict=True))


def matchers_to_remove(wanted: Sequence[HookMatcher], existing: Sequence[Any]) -> set[int]:
    """Indices of ``existing`` entries that exactly equal some wanted matcher."""
    return {
        index
        for index, entry in enumerate(existing)
        if any(matchers_equal(matcher, entry) for matcher in wanted)
    }


def matcher_invokes_binary(binary_name: str, entry: Any) -> bool:
    """Whether any hook of a matcher entry runs a command mentioning ``binary_name``."""
    if not isinstance(entry, dict):
        return False
    hooks = entry.get("hooks")
    if not isinstance(hooks, list):
        return False
    for hook in hooks:
        if not isinstance(hook, dict):
            continue
        command = hook.get("command")
        if isinstance(command, str) and binary_name in command:
            return True
    return False


def matchers_with_binary(binary_name: str, existing: Sequence[Any]) -> set[int]:
    """Indices of ``existing`` entries with a hook command containing ``binary_name``."""
    return {
        index for index, entry in enumerate(existing) if matcher_invokes_binary(binary_name, entry)
    }
