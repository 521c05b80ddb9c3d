"""Install command."""

import click

from cchooks.context import HooksContext
from cchooks.error_boundary import cli_error_boundary
from cchooks.models.results import InstallResult
from cchooks.operations.decision import make_install_decision
from cchooks.operations.discovery import discover_claude_directories
from cchooks.operations.install import perform_installation, report_install_results
from cchooks.operations.rendering import render_discovery


def install_hooks(ctx: HooksContext) -> InstallResult | None:
    """Discover, decide, install and report.

    Returns:
        InstallResult, or None when the user cancelled
    """
    settings_file = ctx.config.settings_file
    ctx.feedback.info(click.style("Installing Claude hooks\n", fg="blue"))

    discovery = discover_claude_directories(ctx.cwd, ctx.home, settings_file)
    render_discovery(discovery, ctx.feedback, ctx.cwd, settings_file)

    decision = make_install_decision(discovery, ctx.prompter, ctx.feedback, ctx.cwd)
    if not decision.proceed or decision.target_directory is None:
        return None

    result = perform_installation(
        decision.target_directory,
        decision.create_new_directory,
        ctx.definition,
        ctx.feedback,
        settings_file,
    )
    report_install_results(result, ctx.definition, ctx.feedback)
    return result


@click.command("install")
@click.pass_obj
@cli_error_boundary
def install_command(obj: HooksContext) -> None:
    """Install Claude Code hooks."""
    install_hooks(obj)
