"""Shared helpers for CLI commands."""

import functools
import sys

from collections.abc import Callable
from typing import Any, TypeVar

import click

from election_portal.common.logging import get_logger


logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class BaseCommand:
    """Output helpers shared by command classes."""

    @staticmethod
    def show_progress(message: str) -> None:
        click.echo(message)

    @staticmethod
    def success(message: str) -> None:
        click.echo(click.style(message, fg="green"))

    @staticmethod
    def warning(message: str) -> None:
        click.echo(click.style(message, fg="yellow"), err=True)

    @staticmethod
    def error(message: str, exit_code: int = 1) -> None:
        click.echo(click.style(f"Error: {message}", fg="red"), err=True)
        sys.exit(exit_code)


def with_error_handling(func: F) -> F:
    """Turn uncaught exceptions into a logged error and exit status 1.

    click's own exceptions (usage errors, aborts) pass through untouched.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except Exception as e:
            logger.error("command_failed", command=func.__name__, error=str(e))
            BaseCommand.error(str(e))

    return wrapper  # type: ignore[return-value]
