from cchooks.integrations.diff.abc import FALLBACK_DIFF_TOOL, PREFERRED_DIFF_TOOL, DiffViewer
from cchooks.integrations.diff.fake import DiffCall, FakeDiffViewer
from cchooks.integrations.diff.real import SubprocessDiffViewer, diff_command

__all__ = [
    "FALLBACK_DIFF_TOOL",
    "PREFERRED_DIFF_TOOL",
    "DiffCall",
    "DiffViewer",
    "FakeDiffViewer",
    "SubprocessDiffViewer",
    "diff_command",
]
