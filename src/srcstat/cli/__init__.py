"""CLI entry point: registers the scan command."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="srcstat",
    help="srcstat - line, word, character and byte counts for source trees",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command to register it
from .scan import scan as _scan  # noqa: F401, E402


def main() -> None:
    """Console script entry point."""
    app()


__all__ = ["app", "main", "console", "__version__"]
