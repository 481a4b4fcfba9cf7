"""Shared console output utilities."""

import sys

import typer
from rich.console import Console

# Diagnostics and errors
err_console = Console(stderr=True, highlight=False)


def is_non_interactive() -> bool:
    """Return True when stdin is not a TTY (e.g. piped input or CI)."""
    return not sys.stdin.isatty()


def print_result(text: str) -> None:
    """Print rendered emoji output to stdout exactly as given."""
    typer.echo(text)
