"""Error boundary handling for CLI commands.

Catches well-known exceptions at CLI entry points and displays a clean error
message instead of a stack trace.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

F = TypeVar("F", bound=Callable[..., Any])


def _debug_enabled() -> bool:
    click_ctx = click.get_current_context(silent=True)
    if click_ctx is None:
        return False
    config = getattr(click_ctx.obj, "config", None)
    return bool(getattr(config, "debug", False))


def cli_error_boundary(func: F) -> F:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - OSError: Unexpected I/O failures (permission denied, disk full, ...)
        - ValueError: Invalid input or configuration

    With debug enabled the exception is re-raised so the full traceback shows.
    All other exceptions bubble up normally.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except OSError as e:
            if _debug_enabled():
                raise
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None
        except ValueError as e:
            if _debug_enabled():
                raise
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
