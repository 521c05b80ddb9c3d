"""Fake prompt provider for testing.

FakePrompter answers from queues given at construction and records every
prompt it was shown.
"""

from collections.abc import Sequence

from cchooks.integrations.prompt.abc import Choice, Prompter


class FakePrompter(Prompter):
    """In-memory prompt provider with canned answers.

    This class has NO public setup methods. All answers are provided via
    constructor and consumed in order. When a queue runs out the prompt is
    answered with None, the same as a cancelled prompt.
    """

    def __init__(
        self,
        *,
        confirm_answers: Sequence[bool | None] = (),
        select_answers: Sequence[str | None] = (),
    ) -> None:
        """Create FakePrompter.

        Args:
            confirm_answers: Answers for successive confirm() calls
            select_answers: Values returned by successive select() calls
        """
        self._confirm_answers = list(confirm_answers)
        self._select_answers = list(select_answers)
        self._confirm_calls: list[tuple[str, bool]] = []
        self._select_calls: list[tuple[str, list[Choice], int]] = []

    @property
    def confirm_calls(self) -> list[tuple[str, bool]]:
        """(message, default) for each confirm() call. For test assertions only."""
        return self._confirm_calls.copy()

    @property
    def select_calls(self) -> list[tuple[str, list[Choice], int]]:
        """(message, choices, default_index) for each select() call. For test assertions only."""
        return self._select_calls.copy()

    def confirm(self, message: str, *, default: bool) -> bool | None:
        self._confirm_calls.append((message, default))
        if not self._confirm_answers:
            return None
        return self._confirm_answers.pop(0)

    def select(self, message: str, choices: Sequence[Choice], *, default_index: int) -> str | None:
        self._select_calls.append((message, list(choices), default_index))
        if not self._select_answers:
            return None
        return self._select_answers.pop(0)
