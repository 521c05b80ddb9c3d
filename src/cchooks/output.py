"""User-facing output.

Messages for the user go to stderr through ``user_output``; diagnostics for
developers go through ``logging``. ``UserFeedback`` adds styling on top of
``user_output`` so operations never format colors themselves.
"""

from abc import ABC, abstractmethod

import click

CHECK = "✓"
CROSS = "✗"
WARNING = "⚠"


def user_output(message: str = "") -> None:
    """Write a message for the user to stderr."""
    click.echo(message, err=True)


class UserFeedback(ABC):
    """Styled user-facing messages.

    Usage:
        ctx.feedback.info("Looking for .claude directory in...")
        ctx.feedback.success(f"{CHECK} Installation complete!")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show an informational message."""

    @abstractmethod
    def detail(self, message: str) -> None:
        """Show a secondary, de-emphasized message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show a success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show a warning."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show an error message."""


class InteractiveFeedback(UserFeedback):
    """Feedback written to the terminal with click styling."""

    def info(self, message: str) -> None:
        user_output(message)

    def detail(self, message: str) -> None:
        user_output(click.style(message, dim=True))

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style(WARNING, fg="yellow") + f" {message}")

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))


class RecordingFeedback(UserFeedback):
    """Feedback captured in memory, for tests and embedding callers.

    Each message is stored as a (level, message) tuple.
    """

    def __init__(self) -> None:
        self._messages: list[tuple[str, str]] = []

    @property
    def messages(self) -> list[tuple[str, str]]:
        return self._messages.copy()

    @property
    def text(self) -> str:
        """All messages joined by newlines, ignoring levels."""
        return "\n".join(message for _, message in self._messages)

    def info(self, message: str) -> None:
        self._messages.append(("info", message))

    def detail(self, message: str) -> None:
        self._messages.append(("detail", message))

    def success(self, message: str) -> None:
        self._messages.append(("success", message))

    def warning(self, message: str) -> None:
        self._messages.append(("warning", message))

    def error(self, message: str) -> None:
        self._messages.append(("error", message))
