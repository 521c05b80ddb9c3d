"""Interactive prompt abstraction.

Prompts are the only place the core waits on the user. Hiding them behind
an ABC lets the decision and confirmation flows run against canned answers
in tests.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Choice:
    """One entry of a select prompt."""

    title: str
    value: str


class Prompter(ABC):
    """Abstract prompt provider.

    Both methods return None when the user made no selection (for example
    by interrupting the prompt). Callers treat None as the safest negative
    answer.
    """

    @abstractmethod
    def confirm(self, message: str, *, default: bool) -> bool | None:
        """Ask a yes/no question.

        Args:
            message: Question shown to the user
            default: Answer used when the user just presses enter

        Returns:
            The answer, or None if the prompt was cancelled
        """
        ...

    @abstractmethod
    def select(self, message: str, choices: Sequence[Choice], *, default_index: int) -> str | None:
        """Ask the user to pick one of ``choices``.

        Args:
            message: Question shown above the choices
            choices: Entries to choose from, in display order
            default_index: Index of the choice used when the user just presses enter

        Returns:
            The chosen value, or None if the prompt was cancelled
        """
        ...
