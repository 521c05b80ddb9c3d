"""Diff display that runs an external diff program."""

import logging
import shutil
import subprocess
from pathlib import Path

from cchooks.integrations.diff.abc import FALLBACK_DIFF_TOOL, PREFERRED_DIFF_TOOL, DiffViewer

logger = logging.getLogger(__name__)


def diff_command(tool: str, original: Path, proposed: Path) -> list[str]:
    """Arguments for running ``tool``; plain diff gets unified output."""
    if Path(tool).name == FALLBACK_DIFF_TOOL:
        return [tool, "-u", str(original), str(proposed)]
    return [tool, str(original), str(proposed)]


class SubprocessDiffViewer(DiffViewer):
    """Production implementation that probes PATH and runs the tool."""

    def find_tool(self) -> str:
        if shutil.which(PREFERRED_DIFF_TOOL) is not None:
            return PREFERRED_DIFF_TOOL
        return FALLBACK_DIFF_TOOL

    def show_diff(self, tool: str, original: Path, proposed: Path) -> bool:
        command = diff_command(tool, original, proposed)
        logger.debug("Running diff: %s", command)
        try:
            # Exit status ignored: diff exits 1 whenever the files differ.
            subprocess.run(command, check=False)
        except OSError as e:
            logger.debug("Diff tool %s could not run: %s", tool, e)
            return False
        return True
