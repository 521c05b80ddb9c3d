"""Uninstall phase: preview the removal as a diff, confirm, then write.

The settings file is never touched until the user confirms. The proposed
content is written to a private temporary directory so the diff tool can
compare two real files; that directory is removed however the flow ends.
"""

import logging
import tempfile
from pathlib import Path

from cchooks.definitions import definition_label
from cchooks.integrations.diff import DiffViewer
from cchooks.integrations.prompt import Prompter
from cchooks.io.settings_file import get_settings_path, read_settings_text, write_settings_text
from cchooks.models.hook import HookDefinition
from cchooks.models.results import HookPatchResult, UninstallOutcome, UninstallResult
from cchooks.operations.discovery import LOCAL_SETTINGS_FILE
from cchooks.operations.hook_removal import remove_hooks_with_binary, remove_hooks_with_definition
from cchooks.output import CHECK, UserFeedback

logger = logging.getLogger(__name__)

TEMP_DIR_PREFIX = "cchooks-"


def confirm_parent_uninstallation(
    root: Path, prompter: Prompter, feedback: UserFeedback
) -> bool:
    """Ask before touching a .claude directory above the current one. Defaults to no."""
    feedback.warning(" CONFIRMATION REQUIRED")
    feedback.info("You are about to uninstall hooks from a parent directory.")
    feedback.detail(f"This will affect the entire project at: {root}")
    return prompter.confirm("Do you want to proceed?", default=False) is True


def _preview(
    settings_path: Path,
    original: str,
    proposed: str,
    diff_viewer: DiffViewer,
    diff_tool: str | None,
    feedback: UserFeedback,
) -> None:
    with tempfile.TemporaryDirectory(prefix=TEMP_DIR_PREFIX) as temp_dir:
        proposed_path = Path(temp_dir) / settings_path.name
        with open(proposed_path, "w", encoding="utf-8", newline="") as f:
            f.write(proposed)

        tool = diff_tool if diff_tool is not None else diff_viewer.find_tool()
        feedback.info(f"\nShowing diff ({tool}):\n")
        if diff_viewer.show_diff(tool, settings_path, proposed_path):
            return

        feedback.error(f"Error running diff tool: {tool}")
        feedback.detail("\nCurrent settings:")
        feedback.info(original)
        feedback.detail("\nNew settings:")
        feedback.info(proposed)


def perform_uninstallation(
    root: Path,
    definition: HookDefinition,
    *,
    prompter: Prompter,
    diff_viewer: DiffViewer,
    feedback: UserFeedback,
    requires_confirmation: bool = False,
    settings_file: str = LOCAL_SETTINGS_FILE,
    diff_tool: str | None = None,
    binary_name: str | None = None,
) -> UninstallResult:
    """Remove hooks from the settings file under ``root/.claude``.

    Args:
        root: Directory holding .claude
        definition: Hooks to remove; only exact matcher matches are removed
        prompter: Source of user answers
        diff_viewer: Shows the proposed change
        feedback: Destination for user-facing messages
        requires_confirmation: Ask first, because root is a parent of the working directory
        settings_file: settings.local.json or settings.json
        diff_tool: Diff program to use instead of asking diff_viewer
        binary_name: Remove every matcher with a command mentioning this program instead

    Returns:
        UninstallResult; nothing is written unless its outcome is REMOVED

    Raises:
        OSError: If reading or writing a file fails
    """
    settings_path = get_settings_path(root, settings_file)
    original = read_settings_text(settings_path)
    if original is None:
        feedback.info(f"No {settings_file} file found.")
        return UninstallResult(UninstallOutcome.NOTHING_TO_REMOVE, settings_path)

    if requires_confirmation and not confirm_parent_uninstallation(root, prompter, feedback):
        feedback.info("\nUninstall cancelled.")
        return UninstallResult(UninstallOutcome.CANCELLED, settings_path)

    label = binary_name if binary_name else definition_label(definition)
    feedback.info(f"Uninstalling {label}...")

    result: HookPatchResult
    if binary_name:
        result = remove_hooks_with_binary(original, binary_name)
    else:
        result = remove_hooks_with_definition(original, definition)
    for diagnostic in result.diagnostics:
        feedback.warning(diagnostic)

    if result.changed_count == 0:
        feedback.info(f"No matching {label} found to uninstall.")
        return UninstallResult(
            UninstallOutcome.NOTHING_TO_REMOVE, settings_path, diagnostics=result.diagnostics
        )

    _preview(settings_path, original, result.content, diff_viewer, diff_tool, feedback)

    confirmed = prompter.confirm(f"Remove {result.changed_count} {label} entries?", default=True)
    if not confirmed:
        feedback.info("\nUninstall cancelled.")
        return UninstallResult(
            UninstallOutcome.CANCELLED, settings_path, diagnostics=result.diagnostics
        )

    write_settings_text(settings_path, result.content)
    feedback.success(f"\n{CHECK} Uninstalled {result.changed_count} {label} entries.")
    return UninstallResult(
        UninstallOutcome.REMOVED,
        settings_path,
        removed_count=result.changed_count,
        diagnostics=result.diagnostics,
    )


def report_uninstall_results(result: UninstallResult, feedback: UserFeedback) -> None:
    if result.outcome is not UninstallOutcome.REMOVED:
        return
    feedback.detail(f"Location: {result.settings_path}")
