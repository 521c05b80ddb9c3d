import click

from cchooks import __version__
from cchooks.commands.install import install_command
from cchooks.commands.uninstall import uninstall_command
from cchooks.config import configure_logging, load_config
from cchooks.context import create_context
from cchooks.error_boundary import cli_error_boundary

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.pass_context
@cli_error_boundary
def cli(ctx: click.Context) -> None:
    """Manage Claude Code hooks in .claude settings files."""
    # Tests pass a prebuilt HooksContext as obj.
    if ctx.obj is None:
        config = load_config()
        configure_logging(config)
        ctx.obj = create_context(config)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(install_command)
cli.add_command(uninstall_command)


if __name__ == "__main__":
    cli()
