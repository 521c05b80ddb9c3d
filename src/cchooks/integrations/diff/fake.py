"""Fake diff display for testing.

FakeDiffViewer never starts a process. It records each call together with
the proposed file's content, since that file is deleted once the uninstall
flow finishes.
"""

from dataclasses import dataclass
from pathlib import Path

from cchooks.integrations.diff.abc import FALLBACK_DIFF_TOOL, PREFERRED_DIFF_TOOL, DiffViewer


@dataclass(frozen=True)
class DiffCall:
    tool: str
    original: Path
    proposed: Path
    original_content: str
    proposed_content: str


class FakeDiffViewer(DiffViewer):
    """In-memory diff display.

    This class has NO public setup methods. All state is provided via
    constructor or captured during execution.
    """

    def __init__(self, *, preferred_installed: bool = False, tool_runs: bool = True) -> None:
        """Create FakeDiffViewer.

        Args:
            preferred_installed: Whether find_tool() reports the richer tool as available
            tool_runs: Value returned by show_diff(); False simulates a tool that cannot start
        """
        self._preferred_installed = preferred_installed
        self._tool_runs = tool_runs
        self._calls: list[DiffCall] = []

    @property
    def calls(self) -> list[DiffCall]:
        """Every show_diff() call. For test assertions only."""
        return self._calls.copy()

    def find_tool(self) -> str:
        return PREFERRED_DIFF_TOOL if self._preferred_installed else FALLBACK_DIFF_TOOL

    def show_diff(self, tool: str, original: Path, proposed: Path) -> bool:
        self._calls.append(
            DiffCall(
                tool=tool,
                original=original,
                proposed=proposed,
                original_content=original.read_bytes().decode("utf-8"),
                proposed_content=proposed.read_bytes().decode("utf-8"),
            )
        )
        return self._tool_runs
