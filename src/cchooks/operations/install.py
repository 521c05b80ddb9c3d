"""Install phase: create what is missing, add hooks, report."""

import logging
from pathlib import Path

from cchooks.io.settings_file import get_settings_path, read_settings_text, write_settings_text
from cchooks.models.hook import HookDefinition
from cchooks.models.results import InstallResult
from cchooks.operations.discovery import CLAUDE_DIR_NAME, LOCAL_SETTINGS_FILE
from cchooks.operations.hook_install import add_hooks
from cchooks.output import CHECK, CROSS, UserFeedback

logger = logging.getLogger(__name__)


def perform_installation(
    target_directory: Path,
    create_new_directory: bool,
    definition: HookDefinition,
    feedback: UserFeedback,
    settings_file: str = LOCAL_SETTINGS_FILE,
) -> InstallResult:
    """Add ``definition`` to the settings file under ``target_directory/.claude``.

    Installing only adds entries, so the file is written without asking.

    Args:
        target_directory: Directory holding (or about to hold) .claude
        create_new_directory: Create ``.claude`` first
        definition: Hooks to install
        feedback: Destination for user-facing messages
        settings_file: settings.local.json or settings.json

    Raises:
        OSError: If the directory or file cannot be created or written
    """
    feedback.info(f"Installing hooks into project's {CLAUDE_DIR_NAME}/{settings_file}")

    created_new_directory = False
    if create_new_directory:
        claude_dir = target_directory / CLAUDE_DIR_NAME
        feedback.info("\nI'm creating a new .claude directory...")
        claude_dir.mkdir(parents=True, exist_ok=True)
        feedback.success(f"{CHECK} I created: {claude_dir}")
        created_new_directory = True

    settings_path = get_settings_path(target_directory, settings_file)
    original = read_settings_text(settings_path)
    created_new_file = original is None
    if created_new_file:
        feedback.info(f"\nI'm creating a {settings_file} file...")
    else:
        feedback.detail(f"\nI found an existing {settings_file} file")
        feedback.info("I'll add the hooks to it...")

    result = add_hooks(original, definition)
    for diagnostic in result.diagnostics:
        feedback.warning(diagnostic)

    if created_new_file or result.content != original:
        write_settings_text(settings_path, result.content)
    else:
        logger.debug("%s already holds every hook; not writing", settings_path)

    if created_new_file:
        feedback.success(f"{CHECK} I created: {settings_file}")

    return InstallResult(
        settings_path=settings_path,
        created_new_file=created_new_file,
        created_new_directory=created_new_directory,
        installed_events=result.written_events + result.unchanged_events,
        skipped_events=result.skipped_events,
        diagnostics=result.diagnostics,
    )


def report_install_results(
    result: InstallResult, definition: HookDefinition, feedback: UserFeedback
) -> None:
    if result.skipped_events:
        feedback.warning(
            f"I couldn't add hooks for {', '.join(result.skipped_events)}: "
            f"that part of {result.settings_path.name} is malformed"
        )
        if not result.installed_events:
            feedback.error(f"\n{CROSS} I couldn't complete the installation")
            return

    feedback.success(f"\n{CHECK} Installation complete!")

    settings_name = result.settings_path.name
    if result.created_new_directory and result.created_new_file:
        feedback.detail(f"I created both the .claude directory and {settings_name} file")
    elif result.created_new_file:
        feedback.detail(f"I created the {settings_name} file")
    else:
        feedback.detail(f"I updated your existing {settings_name} file")

    feedback.info("\nI installed these hooks:")
    for event, matchers in definition.items():
        if event not in result.installed_events:
            continue
        feedback.info(f"  {event}:")
        for matcher in matchers:
            for index, hook in enumerate(matcher.hooks, start=1):
                feedback.detail(f"    {index}. {hook.command}")

    feedback.detail(f"\nLocation: {result.settings_path}")
