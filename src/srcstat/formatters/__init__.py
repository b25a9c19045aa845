"""Output formatters for srcstat."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from ..scanning.models import ScanResults
from .base import BaseFormatter
from .delimited_formatter import CsvFormatter, DelimitedFormatter, TsvFormatter
from .json_formatter import JsonFormatter
from .plain_formatter import PlainFormatter
from .table_formatter import TableFormatter

if TYPE_CHECKING:
    from ..config import OutputOptions


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "table", "plain", "json", "csv", "tsv"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "table": TableFormatter,
        "plain": PlainFormatter,
        "json": JsonFormatter,
        "csv": CsvFormatter,
        "tsv": TsvFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


def shape(results: ScanResults, options: OutputOptions) -> ScanResults:
    """Group (when requested) and sort a copy of the results.

    The input is left untouched.
    """
    if options.group_by_language:
        shaped = results.group_by_language()
    else:
        shaped = replace(results, files=list(results.files))
    shaped.sort_by(options.sort_by, options.sort_order)
    return shaped


def display(results: ScanResults, options: OutputOptions) -> str:
    """Shape the results and render them with the configured formatter."""
    return get_formatter(options.format).format(shape(results, options), options)


__all__ = [
    "BaseFormatter",
    "TableFormatter",
    "PlainFormatter",
    "JsonFormatter",
    "DelimitedFormatter",
    "CsvFormatter",
    "TsvFormatter",
    "get_formatter",
    "shape",
    "display",
]
