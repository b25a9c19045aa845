"""Associative reducers folded over scanned file records.

Both accumulators are commutative and associative over the multiset of
records they see, so per-path partial results can be merged in any order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import FileMetric


@dataclass
class Totals:
    """Running field-wise sum over records."""

    files: int = 0
    lines: int = 0
    words: int = 0
    chars: int = 0
    bytes: int = 0

    def add(self, record: FileMetric) -> None:
        self.files += 1
        self.lines += record.lines
        self.words += record.words
        self.chars += record.chars
        self.bytes += record.bytes

    def merge(self, other: Totals) -> None:
        self.files += other.files
        self.lines += other.lines
        self.words += other.words
        self.chars += other.chars
        self.bytes += other.bytes


@dataclass
class Max:
    """Running field-wise maximum over records (zero when empty)."""

    lines: int = 0
    words: int = 0
    chars: int = 0
    bytes: int = 0

    def track(self, record: FileMetric) -> None:
        self.lines = max(self.lines, record.lines)
        self.words = max(self.words, record.words)
        self.chars = max(self.chars, record.chars)
        self.bytes = max(self.bytes, record.bytes)

    def merge(self, other: Max) -> None:
        self.lines = max(self.lines, other.lines)
        self.words = max(self.words, other.words)
        self.chars = max(self.chars, other.chars)
        self.bytes = max(self.bytes, other.bytes)
