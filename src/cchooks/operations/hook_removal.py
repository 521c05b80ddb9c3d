"""Operations for removing hooks from a settings document.

Removal works on the document text, one structural edit at a time, so
everything the user wrote outside the removed entries survives. Containers
left empty by a removal are removed too: an event with no matchers is
deleted, and a ``hooks`` object with no events is deleted.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from cchooks.jsonc import parse, remove_at_path
from cchooks.models.hook import HookDefinition
from cchooks.models.results import HookPatchResult
from cchooks.operations.hook_matching import matchers_to_remove, matchers_with_binary

logger = logging.getLogger(__name__)

HOOKS_KEY = "hooks"

MatcherSelector = Callable[[str, list[Any]], set[int]]


@dataclass(frozen=True)
class RemovalPlan:
    """Which matchers to delete from which events.

    Attributes:
        matcher_removals: Event name to matcher indices, in descending order
        events_to_delete: Events left with no matchers (already empty, or every matcher
            is being removed), with the number of matchers each loses
        removed_count: Total number of matchers being removed
    """

    matcher_removals: dict[str, list[int]]
    events_to_delete: dict[str, int]
    removed_count: int


def plan_removal(
    hooks_section: Any,
    select: MatcherSelector,
    events: Iterable[str] | None = None,
) -> RemovalPlan:
    """Work out a removal against the parsed ``hooks`` section of a document.

    Args:
        hooks_section: Parsed value of the ``hooks`` key, trusted for nothing
        select: Returns indices of matchers to remove for an event
        events: Events to consider; all events in the section when None
    """
    matcher_removals: dict[str, list[int]] = {}
    events_to_delete: dict[str, int] = {}
    removed_count = 0

    if not isinstance(hooks_section, dict):
        return RemovalPlan({}, {}, 0)

    for event in events if events is not None else list(hooks_section):
        existing = hooks_section.get(event)
        if not isinstance(existing, list):
            continue
        indices = select(event, existing)
        if existing and not indices:
            continue
        removed_count += len(indices)
        if len(indices) == len(existing):
            events_to_delete[event] = len(indices)
        else:
            matcher_removals[event] = sorted(indices, reverse=True)

    return RemovalPlan(matcher_removals, events_to_delete, removed_count)


def apply_removal_plan(content: str, plan: RemovalPlan) -> HookPatchResult:
    """Apply a removal plan to the document text, then drop an emptied ``hooks``.

    Removals the editor has to skip (a malformed array, say) are left out of
    the returned count.
    """
    if plan.removed_count == 0:
        return HookPatchResult(content=content, changed_count=0)

    working = content
    diagnostics: list[str] = []
    removed = 0

    for event, indices in plan.matcher_removals.items():
        for index in indices:
            result = remove_at_path(working, [HOOKS_KEY, event, index])
            working = result.content
            diagnostics.extend(d for d in result.diagnostics if d not in diagnostics)
            if result.applied:
                removed += 1

    for event, matcher_count in plan.events_to_delete.items():
        result = remove_at_path(working, [HOOKS_KEY, event])
        working = result.content
        diagnostics.extend(d for d in result.diagnostics if d not in diagnostics)
        if result.applied:
            removed += matcher_count

    data, _ = parse(working)
    if isinstance(data, dict) and data.get(HOOKS_KEY) == {}:
        logger.debug("Removing empty %r object", HOOKS_KEY)
        result = remove_at_path(working, [HOOKS_KEY])
        working = result.content
        diagnostics.extend(d for d in result.diagnostics if d not in diagnostics)

    return HookPatchResult(
        content=working,
        changed_count=removed,
        diagnostics=tuple(diagnostics),
    )


def _hooks_section(content: str) -> Any:
    data, _ = parse(content)
    if not isinstance(data, dict):
        return None
    return data.get(HOOKS_KEY)


def remove_hooks_with_definition(content: str, definition: HookDefinition) -> HookPatchResult:
    """Remove every matcher that exactly equals one in ``definition``.

    Only events named by the definition are touched. A matcher is removed
    whole or not at all.
    """
    plan = plan_removal(
        _hooks_section(content),
        lambda event, existing: matchers_to_remove(definition.matchers(event), existing),
        definition.events(),
    )
    logger.debug(
        "Definition removal plan: removed=%d events_deleted=%s",
        plan.removed_count,
        plan.events_to_delete,
    )
    return apply_removal_plan(content, plan)


def remove_hooks_with_binary(content: str, binary_name: str) -> HookPatchResult:
    """Remove every matcher with a hook whose command contains ``binary_name``.

    Raises:
        ValueError: If binary_name is empty (it would match every command)
    """
    if not binary_name:
        raise ValueError("binary name must not be empty")

    plan = plan_removal(
        _hooks_section(content),
        lambda _event, existing: matchers_with_binary(binary_name, existing),
    )
    logger.debug(
        "Binary removal plan for %r: removed=%d events_deleted=%s",
        binary_name,
        plan.removed_count,
        plan.events_to_delete,
    )
    return apply_removal_plan(content, plan)
