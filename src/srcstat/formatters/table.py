"""Column-aligned text tables that measure cells by visible width.

A ``Table`` holds an optional header, body rows and an optional footer.
Column widths are cached in ``Columns`` and recomputed only after the
header, footer or rows change.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence

from .ansi import visible_width

Row = list[str]


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass
class Separator:
    """Text between columns, and the glyph of the rule around the body."""

    horizontal: str = "    "
    vertical: str = "-"


class Columns:
    """Cached per-column widths with an explicit recompute flag."""

    def __init__(self) -> None:
        self.widths: list[int] = []
        self.needs_recalculation = False

    def mark_for_recalc(self) -> None:
        self.needs_recalculation = True

    def get(self, index: int, fallback: int = 0) -> int:
        if 0 <= index < len(self.widths):
            return self.widths[index]
        return fallback

    def calculate(self, rows: Iterable[Sequence[str]]) -> None:
        """Set each width to the widest visible cell in that column.

        Does nothing unless the widths were marked for recalculation.
        """
        if not self.needs_recalculation:
            return

        widths: list[int] = []
        for row in rows:
            if len(widths) < len(row):
                widths.extend([0] * (len(row) - len(widths)))
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], visible_width(cell))

        self.widths = widths
        self.needs_recalculation = False

    def __iter__(self) -> Iterator[int]:
        return iter(self.widths)

    def __len__(self) -> int:
        return len(self.widths)


def _lines(text: str) -> Iterator[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


class Table:
    """A text table: header, rows, footer."""

    def __init__(self, rows: Optional[Iterable[Row]] = None):
        self.header: Row = []
        self.rows: list[Row] = [list(row) for row in rows or ()]
        self.footer: Row = []
        self.alignments: list[Alignment] = []
        self.separator = Separator()
        self.columns = Columns()
        self.columns.mark_for_recalc()

    @classmethod
    def from_delimited(cls, text: str, delimiter: str) -> Table:
        """Parse one row per line, cells split on ``delimiter``.

        Only ``\\n`` (with an optional ``\\r`` before it) ends a line, so form
        feeds and other Unicode line breaks stay inside their cell. Cells are
        kept exactly as written.
        """
        return cls(line.split(delimiter) for line in _lines(text))

    @classmethod
    def from_tsv(cls, text: str) -> Table:
        return cls.from_delimited(text, "\t")

    # ── Mutation ───────────────────────────────────────────────

    def set_header(self, header: Sequence[str]) -> Table:
        self.header = list(header)
        self.columns.mark_for_recalc()
        return self

    def set_footer(self, footer: Sequence[str]) -> Table:
        self.footer = list(footer)
        self.columns.mark_for_recalc()
        return self

    def add_row(self, row: Sequence[str]) -> Table:
        self.rows.append(list(row))
        self.columns.mark_for_recalc()
        return self

    def set_alignments(self, alignments: Sequence[Alignment]) -> Table:
        self.alignments = list(alignments)
        return self

    def set_horizontal_separator(self, separator: str) -> Table:
        self.separator.horizontal = separator
        return self

    def set_vertical_separator(self, separator: str) -> Table:
        self.separator.vertical = separator
        return self

    # ── Rendering ──────────────────────────────────────────────

    def __iter__(self) -> Iterator[Row]:
        """Header (if any), then rows, then footer (if any)."""
        if self.header:
            yield self.header
        yield from self.rows
        if self.footer:
            yield self.footer

    def _alignment(self, index: int) -> Alignment:
        if index < len(self.alignments):
            return self.alignments[index]
        return Alignment.LEFT

    def format_cell(self, text: str, width: int, alignment: Alignment) -> str:
        padding = max(width - visible_width(text), 0)
        if alignment is Alignment.RIGHT:
            return " " * padding + text
        if alignment is Alignment.CENTER:
            left = padding // 2
            return " " * left + text + " " * (padding - left)
        return text + " " * padding

    def format_row(self, row: Sequence[str]) -> str:
        cells = [
            self.format_cell(cell, self.columns.get(i), self._alignment(i))
            for i, cell in enumerate(row)
        ]
        return self.separator.horizontal.join(cells) + "\n"

    def format_rule(self) -> str:
        vertical = self.separator.vertical
        gap = vertical * visible_width(self.separator.horizontal)
        return gap.join(vertical * width for width in self.columns) + "\n"

    def display(self) -> str:
        self.columns.calculate(self)

        parts: list[str] = []
        if self.header:
            parts.append(self.format_row(self.header))
            parts.append(self.format_rule())
        for row in self.rows:
            parts.append(self.format_row(row))
        if self.footer:
            parts.append(self.format_rule())
            parts.append(self.format_row(self.footer))
        return "".join(parts)
