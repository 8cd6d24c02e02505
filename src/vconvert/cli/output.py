"""CLI output helpers for errors and warnings."""

from __future__ import annotations

import sys
from typing import NoReturn

import click

from .exit_codes import ExitCode


def error_exit(message: str, code: ExitCode | int = ExitCode.GENERAL_ERROR) -> NoReturn:
    """Print ``Error: <message>`` to stderr and exit.

    Note:
        This function never returns; it always calls sys.exit().
    """
    click.echo(f"Error: {message}", err=True)
    sys.exit(int(code))


def warning_output(message: str) -> None:
    """Print a warning message to stderr."""
    click.echo(f"Warning: {message}", err=True)
