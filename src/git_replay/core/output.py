"""Shared consoles for status output."""

import click
from rich.console import Console

console = Console(soft_wrap=True, highlight=False, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


def print_raw(text: str) -> None:
    """Print git-provided text verbatim to stdout."""
    # Diffs keep their tabs and brackets, so no rich rendering here
    click.echo(text)
