"""Uninstall command."""

import click

from cchooks.context import HooksContext
from cchooks.error_boundary import cli_error_boundary
from cchooks.models.results import UninstallResult
from cchooks.operations.discovery import discover_claude_directories
from cchooks.operations.rendering import render_discovery
from cchooks.operations.uninstall import perform_uninstallation, report_uninstall_results


def uninstall_hooks(ctx: HooksContext, binary_name: str | None = None) -> UninstallResult | None:
    """Discover, then remove the configured hooks from the nearest settings file.

    Args:
        ctx: Application context
        binary_name: Remove every matcher running this program instead of exact matches

    Returns:
        UninstallResult, or None when there is no settings file to act on
    """
    settings_file = ctx.config.settings_file

    discovery = discover_claude_directories(ctx.cwd, ctx.home, settings_file)
    render_discovery(discovery, ctx.feedback, ctx.cwd, settings_file)

    if not discovery.found or discovery.root_path is None:
        ctx.feedback.info("No .claude directory found. Nothing to uninstall.")
        return None

    if not discovery.settings_exists:
        ctx.feedback.info(f"No {settings_file} found. Nothing to uninstall.")
        return None

    result = perform_uninstallation(
        discovery.root_path,
        ctx.definition,
        prompter=ctx.prompter,
        diff_viewer=ctx.diff_viewer,
        feedback=ctx.feedback,
        requires_confirmation=not discovery.is_current_directory,
        settings_file=settings_file,
        diff_tool=ctx.config.diff_tool,
        binary_name=binary_name,
    )
    report_uninstall_results(result, ctx.feedback)
    return result


@click.command("uninstall")
@click.pass_obj
@cli_error_boundary
def uninstall_command(obj: HooksContext) -> None:
    """Uninstall Claude Code hooks."""
    uninstall_hooks(obj)
