"""Prompt provider backed by click's terminal prompts."""

from collections.abc import Sequence

import click

from cchooks.integrations.prompt.abc import Choice, Prompter


class ClickPrompter(Prompter):
    """Production prompts on the controlling terminal.

    Ctrl-C or end of input during a prompt is reported as "no selection".
    Prompts wait indefinitely for input.
    """

    def confirm(self, message: str, *, default: bool) -> bool | None:
        try:
            return click.confirm(message, default=default, err=True)
        except click.Abort:
            click.echo(err=True)
            return None

    def select(self, message: str, choices: Sequence[Choice], *, default_index: int) -> str | None:
        click.echo(message, err=True)
        for number, choice in enumerate(choices, start=1):
            click.echo(f"  {number}. {choice.title}", err=True)
        try:
            picked = click.prompt(
                "Enter a number",
                type=click.IntRange(1, len(choices)),
                default=default_index + 1,
                err=True,
            )
        except click.Abort:
            click.echo(err=True)
            return None
        return choices[picked - 1].value
