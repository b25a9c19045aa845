"""The scan command: count, shape and render."""

from pathlib import Path
from typing import List, Optional

import click
import typer
from rich.markup import escape

from ..api import tally
from ..config import FORMATS
from ..exceptions import SrcstatError
from ..logging_config import get_logger, setup_logging
from . import app
from ._common import console, metric_columns, resolve_settings

logger = get_logger(__name__)

_METRICS = ("lines", "words", "chars", "bytes")


@app.command()
def scan(
    paths: Optional[List[str]] = typer.Argument(
        None,
        help="Files or directories to scan, [bold]-[/bold] for standard input (default: .)",
        show_default=False,
    ),
    # ── Columns ───────────────────────────────────────────────
    lines: bool = typer.Option(False, "-l", "--lines", help="Show the line count"),
    words: bool = typer.Option(False, "-w", "--words", help="Show the word count"),
    chars: bool = typer.Option(False, "-c", "--chars", help="Show the character count"),
    bytes_: bool = typer.Option(False, "-b", "--bytes", help="Show the byte count"),
    language: Optional[bool] = typer.Option(
        None, "--language/--no-language", help="Show the language column", show_default=False
    ),
    path_column: Optional[bool] = typer.Option(
        None, "--path/--no-path", help="Show the path (or file count) column", show_default=False
    ),
    graph: Optional[bool] = typer.Option(
        None, "--graph/--no-graph", help="Show the proportional bar", show_default=False
    ),
    # ── Shaping ───────────────────────────────────────────────
    group: bool = typer.Option(False, "-g", "--group", help="One row per language"),
    sort_by: Optional[str] = typer.Option(
        None,
        "-s",
        "--sort-by",
        help="Metric to sort by: lines | words | chars | bytes",
        click_type=click.Choice(_METRICS, case_sensitive=False),
    ),
    order: Optional[str] = typer.Option(
        None, "-o", "--order", help="Sort order: asc | desc"
    ),
    # ── Graph ─────────────────────────────────────────────────
    graph_by: Optional[str] = typer.Option(
        None,
        "--graph-by",
        help="Metric the bar follows (default: the sort metric)",
        click_type=click.Choice(_METRICS, case_sensitive=False),
    ),
    graph_size: Optional[int] = typer.Option(
        None, "--graph-size", help="Bar length in glyphs", min=1
    ),
    graph_fill: Optional[str] = typer.Option(None, "--graph-fill", help="Filled bar glyph"),
    graph_blank: Optional[str] = typer.Option(None, "--graph-blank", help="Empty bar glyph"),
    # ── Layout ────────────────────────────────────────────────
    color: Optional[bool] = typer.Option(
        None, "--color/--no-color", help="Color languages and bars", show_default=False
    ),
    header: Optional[bool] = typer.Option(
        None, "--header/--no-header", help="Show the header row", show_default=False
    ),
    footer: Optional[bool] = typer.Option(
        None, "--footer/--no-footer", help="Show the totals row", show_default=False
    ),
    align: Optional[bool] = typer.Option(
        None, "--align/--no-align", help="Align columns", show_default=False
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "-f",
        "--format",
        help="Output format: table | plain | json | csv | tsv",
        click_type=click.Choice(FORMATS, case_sensitive=False),
    ),
    # ── Scanning ──────────────────────────────────────────────
    threads: Optional[bool] = typer.Option(
        None, "--threads/--no-threads", help="Scan on a thread pool", show_default=False
    ),
    workers: Optional[int] = typer.Option(
        None, "-j", "--workers", help="Worker threads (default: auto-detect)", min=1
    ),
    hidden: bool = typer.Option(False, "-H", "--hidden", help="Include hidden files"),
    max_depth: Optional[int] = typer.Option(
        None, "-d", "--max-depth", help="Maximum directory depth", min=0
    ),
    max_size: Optional[int] = typer.Option(
        None, "--max-size", help="Skip files larger than this many bytes", min=0
    ),
    exclude: Optional[List[str]] = typer.Option(
        None, "-e", "--exclude", help="Gitignore-style pattern to exclude (repeatable)"
    ),
    no_ignore: bool = typer.Option(
        False, "--no-ignore", help="Do not honour .gitignore and .ignore files"
    ),
    # ── General ───────────────────────────────────────────────
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log debug details"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only log errors"),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Also append log records to this file", dir_okay=False
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
):
    """
    Count lines, words, characters and bytes of source files.

    [bold cyan]Examples:[/bold cyan]

      srcstat

      srcstat src tests --group

      srcstat -l -s lines --format csv

      cat notes.txt | srcstat -
    """
    from .. import __version__

    if version:
        console.print(f"[bold cyan]srcstat[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    try:
        settings = resolve_settings(
            config=config,
            group=group,
            hidden=hidden,
            no_ignore=no_ignore,
            exclude=exclude,
            verbose=verbose,
            quiet=quiet,
            language=language,
            files=path_column,
            graph=graph,
            sort_by=sort_by,
            sort_order=order,
            graph_by=graph_by,
            graph_size=graph_size,
            graph_fill=graph_fill,
            graph_blank=graph_blank,
            use_colors=color,
            header=header,
            footer=footer,
            alignment=align,
            format=output_format,
            concurrent=threads,
            workers=workers,
            max_depth=max_depth,
            max_file_size=max_size,
            **metric_columns(lines, words, chars, bytes_),
        )
        setup_logging(settings.verbosity, str(log_file) if log_file else None)

        _, text = tally(paths or ["."], settings=settings)
        print(text, end="")

    except SrcstatError as e:
        logger.debug(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)

    except KeyboardInterrupt:
        console.print("\n[yellow]Scan interrupted[/yellow]")
        raise typer.Exit(130)
