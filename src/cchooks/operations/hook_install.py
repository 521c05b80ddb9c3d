"""Operations for adding hooks to a settings document."""

import logging
from dataclasses import dataclass
from typing import Any

from cchooks.jsonc import parse, set_at_path
from cchooks.models.hook import HookDefinition
from cchooks.operations.hook_matching import matchers_equal
from cchooks.operations.hook_removal import HOOKS_KEY

logger = logging.getLogger(__name__)

EMPTY_DOCUMENT = "{}"


@dataclass(frozen=True)
class AddHooksResult:
    """New settings content plus what happened to each event.

    Attributes:
        content: Settings text after the change
        written_events: Events that received new matchers
        unchanged_events: Events that already held every matcher
        skipped_events: Events that could not be edited because the document is malformed there
        diagnostics: Parse errors and skipped edits, for display as warnings
    """

    content: str
    written_events: tuple[str, ...]
    unchanged_events: tuple[str, ...]
    skipped_events: tuple[str, ...]
    diagnostics: tuple[str, ...]


def _current_hooks(content: str) -> Any:
    data, _ = parse(content)
    if not isinstance(data, dict):
        return None
    return data.get(HOOKS_KEY)


def add_hooks(content: str | None, definition: HookDefinition) -> AddHooksResult:
    """Add the matchers of ``definition`` to a settings document.

    A missing or blank document starts from ``{}``. An event without a
    matcher array receives the definition's matchers whole; an existing
    array keeps its entries and gains only the matchers it does not already
    hold, so adding the same definition twice changes nothing.
    """
    working = content if content is not None and content.strip() else EMPTY_DOCUMENT
    diagnostics: list[str] = []
    written: list[str] = []
    unchanged: list[str] = []
    skipped: list[str] = []

    def record(diags: tuple[str, ...]) -> None:
        diagnostics.extend(d for d in diags if d not in diagnostics)

    data, _ = parse(working)
    if isinstance(data, dict) and HOOKS_KEY not in data:
        result = set_at_path(working, [HOOKS_KEY], {})
        working = result.content
        record(result.diagnostics)

    for event, matchers in definition.items():
        hooks_section = _current_hooks(working)
        existing = hooks_section.get(event) if isinstance(hooks_section, dict) else None

        if not isinstance(existing, list):
            result = set_at_path(
                working, [HOOKS_KEY, event], [matcher.to_settings() for matcher in matchers]
            )
            record(result.diagnostics)
            if result.applied:
                working = result.content
                written.append(event)
            else:
                skipped.append(event)
            continue

        missing = [m for m in matchers if not any(matchers_equal(m, entry) for entry in existing)]
        if not missing:
            logger.debug("Event %s already holds every matcher", event)
            unchanged.append(event)
            continue

        applied_all = True
        for matcher in missing:
            result = set_at_path(working, [HOOKS_KEY, event, -1], matcher.to_settings())
            record(result.diagnostics)
            if not result.applied:
                applied_all = False
                break
            working = result.content
        if applied_all:
            written.append(event)
        else:
            skipped.append(event)

    logger.debug("Added hooks: written=%s unchanged=%s skipped=%s", written, unchanged, skipped)
    return AddHooksResult(
        content=working,
        written_events=tuple(written),
        unchanged_events=tuple(unchanged),
        skipped_events=tuple(skipped),
        diagnostics=tuple(diagnostics),
    )
