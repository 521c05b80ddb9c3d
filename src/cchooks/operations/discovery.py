"""Find the .claude directory a command should act on.

Discovery is a function of its inputs and the filesystem: the start and
home directories are passed in, never read from the process.
"""

import logging
import stat
from pathlib import Path

from cchooks.models.discovery import DiscoveryResult

logger = logging.getLogger(__name__)

CLAUDE_DIR_NAME = ".claude"
LOCAL_SETTINGS_FILE = "settings.local.json"
SHARED_SETTINGS_FILE = "settings.json"


def _is_directory(path: Path) -> bool:
    try:
        return stat.S_ISDIR(path.stat().st_mode)
    except OSError:
        return False


def _exists(path: Path) -> bool:
    try:
        path.stat()
    except OSError:
        return False
    return True


def _is_at_or_above(directory: Path, home_dir: Path) -> bool:
    return directory == home_dir or directory in home_dir.parents


def discover_claude_directories(
    start_dir: Path,
    home_dir: Path,
    settings_file: str = LOCAL_SETTINGS_FILE,
) -> DiscoveryResult:
    """Walk upward from ``start_dir`` looking for a .claude directory.

    The start directory is checked first; a .claude there ends the search.
    Otherwise every parent is visited until the home directory (excluded) or
    the filesystem root. The nearest .claude found on the way up is the
    result, but the walk continues so every directory that could hold a new
    one is listed. Candidates are ordered nearest first.

    Unreadable or missing paths count as "not found".
    """
    start_dir = Path(start_dir)
    home_dir = Path(home_dir)
    searched: list[Path] = []

    if _is_at_or_above(start_dir, home_dir):
        logger.debug("Start directory %s is at or above home %s; not searching", start_dir, home_dir)
        return DiscoveryResult(found=False)

    searched.append(start_dir)
    claude_dir = start_dir / CLAUDE_DIR_NAME
    if _is_directory(claude_dir):
        settings_exists = _exists(claude_dir / settings_file)
        logger.debug("Found %s in start directory (settings=%s)", claude_dir, settings_exists)
        return DiscoveryResult(
            found=True,
            root_path=start_dir,
            settings_exists=settings_exists,
            is_current_directory=True,
            candidates=(start_dir,),
            searched=(start_dir,),
        )

    found_root: Path | None = None
    found_settings = False
    current = start_dir
    while current.parent != current:
        current = current.parent
        if _is_at_or_above(current, home_dir):
            break
        searched.append(current)
        claude_dir = current / CLAUDE_DIR_NAME
        if found_root is None and _is_directory(claude_dir):
            found_root = current
            found_settings = _exists(claude_dir / settings_file)
            logger.debug("Found %s (settings=%s)", claude_dir, found_settings)

    if found_root is not None:
        return DiscoveryResult(
            found=True,
            root_path=found_root,
            settings_exists=found_settings,
            is_current_directory=False,
            candidates=tuple(searched),
            searched=tuple(searched),
        )

    logger.debug("No %s directory in %d locations", CLAUDE_DIR_NAME, len(searched))
    return DiscoveryResult(
        found=False,
        candidates=tuple(searched),
        searched=tuple(searched),
    )
