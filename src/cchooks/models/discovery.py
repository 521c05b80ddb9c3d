"""Results of the discovery and decision phases."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class DiscoveryResult:
    """Where a .claude directory was found and where one could be created.

    Attributes:
        found: Whether a .claude directory exists at or above the start directory
        root_path: Directory containing the nearest .claude directory, if found
        settings_exists: Whether the managed settings file exists in that root
        is_current_directory: Whether the root is the start directory itself
        candidates: Directories that could hold a new .claude, nearest first
        searched: Directories checked, in the order they were checked
    """

    found: bool
    root_path: Path | None = None
    settings_exists: bool = False
    is_current_directory: bool = False
    candidates: tuple[Path, ...] = field(default_factory=tuple)
    searched: tuple[Path, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DecisionResult:
    """Where to install, or that the user cancelled."""

    proceed: bool
    target_directory: Path | None = None
    create_new_directory: bool = False

    @staticmethod
    def cancelled() -> "DecisionResult":
        return DecisionResult(proceed=False)
