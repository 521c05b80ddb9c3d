"""I/O operations for settings files inside a .claude directory.

Settings text is read and written as-is, line endings included; parsing and editing happen in
``cchooks.jsonc``. Writes are atomic.
"""

import logging
from pathlib import Path

from cchooks.operations.discovery import CLAUDE_DIR_NAME, LOCAL_SETTINGS_FILE

logger = logging.getLogger(__name__)


def get_settings_path(root: Path, settings_file: str = LOCAL_SETTINGS_FILE) -> Path:
    """Path of the managed settings file under ``root/.claude``."""
    return root / CLAUDE_DIR_NAME / settings_file


def read_settings_text(settings_path: Path) -> str | None:
    """Read a settings file.

    Returns:
        File content, or None if the file doesn't exist
    """
    try:
        with open(settings_path, encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError:
        return None


def write_settings_text(settings_path: Path, content: str) -> None:
    """Write a settings file atomically.

    Writes to a temporary file next to the target first, then renames it
    over the target. Creates parent directories if they don't exist.

    Args:
        settings_path: Path to the settings file
        content: Full document text
    """
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = settings_path.with_name(settings_path.name + ".tmp")
    with open(temp_path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    temp_path.replace(settings_path)
    logger.debug("Wrote %d characters to %s", len(content), settings_path)
