"""Human-readable descriptions of discovery results."""

from pathlib import Path

from cchooks.models.discovery import DiscoveryResult
from cchooks.operations.discovery import LOCAL_SETTINGS_FILE
from cchooks.output import CHECK, CROSS, UserFeedback


def _levels_up(directory: Path, cwd: Path) -> int | None:
    if directory == cwd:
        return 0
    if directory not in cwd.parents:
        return None
    return len(cwd.relative_to(directory).parts)


def parent_display_path(root: Path, cwd: Path) -> str:
    """``..`` segments leading from ``cwd`` up to ``root``, e.g. ``../..``."""
    levels = _levels_up(root, cwd)
    if levels is None:
        return str(root)
    if levels == 0:
        return "."
    return "/".join([".."] * levels)


def candidate_display_name(directory: Path, cwd: Path) -> str:
    """Label for a directory offered as a place to create .claude.

    Examples:
        ". (current directory)", "../work (parent)", "../../src (2 levels up)"
    """
    levels = _levels_up(directory, cwd)
    if levels == 0:
        return ". (current directory)"
    if levels is not None:
        description = "parent" if levels == 1 else f"{levels} levels up"
        return f"{'../' * levels}{directory.name} ({description})"
    if directory.is_relative_to(cwd):
        return f"{directory.relative_to(cwd)} ({directory.name})"
    return str(directory)


def render_discovery(
    discovery: DiscoveryResult,
    feedback: UserFeedback,
    cwd: Path,
    settings_file: str = LOCAL_SETTINGS_FILE,
) -> None:
    """Show where discovery looked and what it found."""
    feedback.info("Looking for .claude directory in...")

    for directory in discovery.searched:
        if directory == discovery.root_path:
            feedback.success(f"  {CHECK} {directory}")
            if discovery.is_current_directory:
                if discovery.settings_exists:
                    feedback.detail(f"  I see there's already a {settings_file} file")
                else:
                    feedback.detail(f"  No {settings_file} file yet")
            elif discovery.settings_exists:
                feedback.detail(f"     With existing {settings_file}")
            else:
                feedback.detail(f"     No {settings_file} yet")
        else:
            feedback.detail(f"  {CROSS} {directory}")

    if discovery.found and discovery.root_path is not None:
        if not discovery.is_current_directory:
            display = parent_display_path(discovery.root_path, cwd)
            feedback.info(f"\nI found a .claude directory at: {display}")
        return

    feedback.warning(f"No .claude directory found in {len(discovery.searched)} locations")
