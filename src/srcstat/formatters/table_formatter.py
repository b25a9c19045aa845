"""Aligned table formatter for terminals."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..scanning.models import FileMetric, ScanResults
from .base import BaseFormatter
from .columns import Column, alignment, build_footer, build_header, build_row, selected_columns
from .table import Table

if TYPE_CHECKING:
    from ..config import OutputOptions


class TableFormatter(BaseFormatter):
    """Render results as a padded grid with header and totals rules."""

    def format(self, results: ScanResults, options: OutputOptions) -> str:
        columns = selected_columns(options)

        body = "".join(self._row_line(columns, record, results, options) for record in results.files)
        table = Table.from_tsv(body)
        table.set_horizontal_separator(options.horizontal_separator)
        table.set_vertical_separator(options.vertical_separator)

        if options.header:
            table.set_header(build_header(columns, options))
        if options.footer:
            table.set_footer(build_footer(columns, results))
        if options.alignment:
            table.set_alignments([alignment(column, options) for column in columns])

        return table.display()

    def _row_line(
        self,
        columns: list[Column],
        record: FileMetric,
        results: ScanResults,
        options: OutputOptions,
    ) -> str:
        return "\t".join(build_row(columns, record, results, options)) + "\n"
