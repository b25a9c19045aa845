"""The column catalogue shared by the text formatters.

Columns always appear in catalogue order, whichever switches are enabled.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

from ..scanning.models import FileMetric, ScanResults
from .ansi import colorize
from .bar import build_bar
from .table import Alignment

if TYPE_CHECKING:
    from ..config import OutputOptions


class Column(Enum):
    """Catalogue entries; the value names the ``OutputOptions`` switch."""

    LANGUAGE = "language"
    FILES = "files"
    LINES = "lines"
    WORDS = "words"
    CHARS = "chars"
    BYTES = "bytes"
    GRAPH = "graph"


_METRIC_COLUMNS = (Column.LINES, Column.WORDS, Column.CHARS, Column.BYTES)


def selected_columns(options: OutputOptions, include_graph: bool = True) -> list[Column]:
    return [
        column
        for column in Column
        if getattr(options, column.value) and (include_graph or column is not Column.GRAPH)
    ]


def header_cell(column: Column, options: OutputOptions) -> str:
    if column is Column.FILES:
        return "Files" if options.group_by_language else "Path"
    return column.value.capitalize()


def body_cell(
    column: Column,
    record: FileMetric,
    results: ScanResults,
    options: OutputOptions,
) -> str:
    if column is Column.LANGUAGE:
        label = record.language.display_name
        return colorize(label, record.language.color) if options.use_colors else label
    if column is Column.FILES:
        return str(record.count) if options.group_by_language else record.display_path
    if column is Column.GRAPH:
        return build_bar(record, results, options)
    return str(getattr(record, column.value))


def footer_cell(column: Column, results: ScanResults) -> Optional[str]:
    """Totals row cell; the graph column has none."""
    if column is Column.LANGUAGE:
        return "Total"
    if column is Column.GRAPH:
        return None
    return str(getattr(results.total, column.value))


def alignment(column: Column, options: OutputOptions) -> Alignment:
    if column is Column.LANGUAGE or column in _METRIC_COLUMNS:
        return Alignment.RIGHT
    if column is Column.FILES and options.group_by_language:
        return Alignment.RIGHT
    return Alignment.LEFT


def build_header(columns: list[Column], options: OutputOptions) -> list[str]:
    return [header_cell(column, options) for column in columns]


def build_row(
    columns: list[Column], record: FileMetric, results: ScanResults, options: OutputOptions
) -> list[str]:
    return [body_cell(column, record, results, options) for column in columns]


def build_footer(columns: list[Column], results: ScanResults) -> list[str]:
    cells = (footer_cell(column, results) for column in columns)
    return [cell for cell in cells if cell is not None]
