"""Diff display abstraction.

The diff tool is an external program that writes straight to the user's
terminal. Only its availability and whether it could be run matter to the
caller; its exit status carries no meaning.
"""

from abc import ABC, abstractmethod
from pathlib import Path

PREFERRED_DIFF_TOOL = "difft"
FALLBACK_DIFF_TOOL = "diff"


class DiffViewer(ABC):
    """Abstract diff display for dependency injection."""

    @abstractmethod
    def find_tool(self) -> str:
        """Pick the diff program to run.

        Returns:
            The richer tool if it is installed, otherwise the fallback
        """
        ...

    @abstractmethod
    def show_diff(self, tool: str, original: Path, proposed: Path) -> bool:
        """Show the differences between two files.

        Args:
            tool: Diff program to run
            original: File currently on disk
            proposed: File holding the content about to be written

        Returns:
            True if the tool ran, False if it could not be started
        """
        ...
