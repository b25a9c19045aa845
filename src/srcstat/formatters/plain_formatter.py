"""Plain formatter: unpadded rows for scripts."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from ..scanning.models import ScanResults
from .base import BaseFormatter
from .columns import build_row, selected_columns

if TYPE_CHECKING:
    from ..config import OutputOptions


class PlainFormatter(BaseFormatter):
    """One space-separated line per record: no header, footer, bar or color."""

    def format(self, results: ScanResults, options: OutputOptions) -> str:
        options = replace(options, header=False, footer=False, graph=False, use_colors=False)
        columns = selected_columns(options)
        return "".join(
            " ".join(build_row(columns, record, results, options)) + "\n"
            for record in results.files
        )
