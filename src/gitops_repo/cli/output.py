"""Output utilities for CLI commands with clear intent."""

from typing import NoReturn

import click


def user_output(message: str) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True)


def machine_output(message: str) -> None:
    """Write a result meant for scripts to stdout."""
    click.echo(message)


def error_exit(message: str) -> NoReturn:
    """Print a red "Error:" message and exit with status 1.

    Raises:
        SystemExit: Always
    """
    user_output(click.style("Error: ", fg="red") + message)
    raise SystemExit(1)
