"""Proportional visualization bars."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..scanning.models import FileMetric, ScanResults
from .ansi import colorize

if TYPE_CHECKING:
    from ..config import OutputOptions


def bar_length(value: int, maximum: int, size: int) -> int:
    """``round(value / maximum * size)`` clamped to ``[0, size]``; 0 when maximum is 0.

    Halves round up. Integer arithmetic keeps the result exact for large
    byte counts.
    """
    if maximum <= 0 or value <= 0:
        return 0
    length = (2 * value * size + maximum) // (2 * maximum)
    return min(max(length, 0), size)


def build_bar(record: FileMetric, results: ScanResults, options: OutputOptions) -> str:
    metric = options.graph_metric
    size = options.graph_size
    length = bar_length(metric.of(record), metric.of(results.max), size)

    bar = options.graph_fill * length + options.graph_blank * (size - length)
    if options.use_colors:
        bar = colorize(bar, record.language.color)
    return bar
