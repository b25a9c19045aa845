"""CSV and TSV formatters for srcstat."""

from __future__ import annotations

import csv
import io
from dataclasses import replace
from typing import TYPE_CHECKING

from ..scanning.models import ScanResults
from .base import BaseFormatter
from .columns import build_footer, build_header, build_row, selected_columns

if TYPE_CHECKING:
    from ..config import OutputOptions


class DelimitedFormatter(BaseFormatter):
    """Render results as delimiter-separated values.

    The graph column is never emitted and cells are never colored.
    """

    delimiter = ","

    def format(self, results: ScanResults, options: OutputOptions) -> str:
        options = replace(options, use_colors=False)
        columns = selected_columns(options, include_graph=False)

        output = io.StringIO()
        writer = csv.writer(output, delimiter=self.delimiter, lineterminator="\n")
        if options.header:
            writer.writerow(build_header(columns, options))
        for record in results.files:
            writer.writerow(build_row(columns, record, results, options))
        if options.footer:
            writer.writerow(build_footer(columns, results))
        return output.getvalue()


class CsvFormatter(DelimitedFormatter):
    delimiter = ","


class TsvFormatter(DelimitedFormatter):
    delimiter = "\t"
