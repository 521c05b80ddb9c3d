"""Configuration loaded from the environment at the CLI entry point."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from cchooks.operations.discovery import LOCAL_SETTINGS_FILE, SHARED_SETTINGS_FILE

DEBUG_ENV = "CCHOOKS_DEBUG"
DIFF_TOOL_ENV = "CCHOOKS_DIFF_TOOL"
DEFINITION_ENV = "CCHOOKS_DEFINITION"
SETTINGS_FILE_ENV = "CCHOOKS_SETTINGS_FILE"

SETTINGS_FILES = (LOCAL_SETTINGS_FILE, SHARED_SETTINGS_FILE)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class HooksConfig:
    """Immutable configuration, loaded once per invocation.

    Attributes:
        debug: Enable debug logging and full tracebacks
        diff_tool: Diff program to use instead of probing PATH
        definition_path: YAML file with the hook definition to manage
        settings_file: Settings file name inside .claude
    """

    debug: bool = False
    diff_tool: str | None = None
    definition_path: Path | None = None
    settings_file: str = LOCAL_SETTINGS_FILE


def load_config(environ: Mapping[str, str] | None = None) -> HooksConfig:
    """Build configuration from environment variables.

    Raises:
        ValueError: If CCHOOKS_SETTINGS_FILE names an unsupported file
    """
    env = os.environ if environ is None else environ

    settings_file = env.get(SETTINGS_FILE_ENV, "").strip() or LOCAL_SETTINGS_FILE
    if settings_file not in SETTINGS_FILES:
        raise ValueError(
            f"{SETTINGS_FILE_ENV} must be one of {', '.join(SETTINGS_FILES)}, got {settings_file!r}"
        )

    definition = env.get(DEFINITION_ENV, "").strip()
    diff_tool = env.get(DIFF_TOOL_ENV, "").strip()

    return HooksConfig(
        debug=env.get(DEBUG_ENV, "").strip().lower() in _TRUTHY,
        diff_tool=diff_tool or None,
        definition_path=Path(definition).expanduser() if definition else None,
        settings_file=settings_file,
    )


def configure_logging(config: HooksConfig) -> None:
    if config.debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
