"""Results returned by the install and uninstall operations."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class HookPatchResult:
    """New settings content produced by adding or removing hooks.

    Attributes:
        content: Settings text after the change (identical to the input when nothing changed)
        changed_count: Matchers removed, or events written for an install
        diagnostics: Parse errors and skipped edits, for display as warnings
    """

    content: str
    changed_count: int
    diagnostics: tuple[str, ...] = ()


@dataclass(frozen=True)
class InstallResult:
    settings_path: Path
    created_new_file: bool
    created_new_directory: bool
    installed_events: tuple[str, ...] = field(default_factory=tuple)
    skipped_events: tuple[str, ...] = field(default_factory=tuple)
    diagnostics: tuple[str, ...] = field(default_factory=tuple)


class UninstallOutcome(Enum):
    REMOVED = "removed"
    NOTHING_TO_REMOVE = "nothing_to_remove"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class UninstallResult:
    outcome: UninstallOutcome
    settings_path: Path | None = None
    removed_count: int = 0
    diagnostics: tuple[str, ...] = field(default_factory=tuple)

    @property
    def cancelled(self) -> bool:
        return self.outcome is UninstallOutcome.CANCELLED
