"""Result model: per-file records, metric selectors and the aggregate results."""

from __future__ import annotations

import operator
from dataclasses import asdict, dataclass, field
from enum import Enum
from functools import reduce
from pathlib import Path
from typing import Any, Iterable, Union

from ..logging_config import get_logger
from .accumulators import Max, Totals
from .languages import Classification, Unknown

logger = get_logger(__name__)

STDIN_PATH = Path("STDIN")


class Metric(Enum):
    """A numeric column that results can be sorted or graphed by."""

    LINES = "lines"
    WORDS = "words"
    CHARS = "chars"
    BYTES = "bytes"

    @classmethod
    def parse(cls, value: Union[str, Metric, None]) -> Metric:
        """Parse a metric name; anything unrecognised means bytes."""
        if isinstance(value, Metric):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            logger.debug(f"Unknown metric {value!r}, falling back to bytes")
            return cls.BYTES

    def of(self, record: FileMetric) -> int:
        return getattr(record, self.value)

    def __str__(self) -> str:
        return self.value


class SortOrder(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    @classmethod
    def parse(cls, value: Union[str, SortOrder, None]) -> SortOrder:
        """Parse ``a|asc|ascending`` or ``d|desc|descending``; defaults to descending."""
        if isinstance(value, SortOrder):
            return value
        text = str(value).strip().lower()
        if text in ("a", "asc", "ascending"):
            return cls.ASCENDING
        if text not in ("d", "desc", "descending"):
            logger.debug(f"Unknown sort order {value!r}, falling back to descending")
        return cls.DESCENDING

    def __str__(self) -> str:
        return self.value


@dataclass
class FileMetric:
    """Metrics for one scanned file, or for one language after grouping.

    ``count`` is the number of source files the record stands for: 1 for a
    raw scan record, the group size after grouping.
    """

    path: Path
    lines: int
    words: int
    chars: int
    bytes: int
    language: Classification
    count: int = 1

    def __add__(self, other: FileMetric) -> FileMetric:
        # The left operand is the group representative.
        return FileMetric(
            path=self.path,
            lines=self.lines + other.lines,
            words=self.words + other.words,
            chars=self.chars + other.chars,
            bytes=self.bytes + other.bytes,
            language=self.language,
            count=self.count + other.count,
        )

    @property
    def display_path(self) -> str:
        """Path as shown to users, without a leading ``./``."""
        text = str(self.path)
        for prefix in ("./", ".\\"):
            while text.startswith(prefix):
                text = text[len(prefix):]
        return text

    def to_dict(self) -> dict[str, Any]:
        if isinstance(self.language, Unknown):
            language: Any = {"Unknown": self.language.extension}
        else:
            language = self.language.display_name
        return {
            "path": str(self.path),
            "lines": self.lines,
            "words": self.words,
            "chars": self.chars,
            "bytes": self.bytes,
            "language": language,
            "count": self.count,
        }


@dataclass
class ScanResults:
    """All records from a scan plus their running totals and maxima.

    ``total`` and ``max`` are maintained incrementally by ``add`` and
    ``merge``; they always equal a fresh fold over ``files``
    (see ``from_files``).
    """

    files: list[FileMetric] = field(default_factory=list)
    total: Totals = field(default_factory=Totals)
    max: Max = field(default_factory=Max)

    @classmethod
    def from_files(cls, files: Iterable[FileMetric]) -> ScanResults:
        results = cls()
        for record in files:
            results.add(record)
        return results

    def add(self, record: FileMetric) -> None:
        self.files.append(record)
        self.total.add(record)
        self.max.track(record)

    def merge(self, other: ScanResults) -> None:
        self.files.extend(other.files)
        self.total.merge(other.total)
        self.max.merge(other.max)

    def group_by_language(self) -> ScanResults:
        """Condense records into one per language.

        Groups keep first-appearance order. Totals and maxima of the returned
        results are computed over the condensed records.
        """
        groups: dict[Classification, list[FileMetric]] = {}
        for record in self.files:
            groups.setdefault(record.language, []).append(record)
        return ScanResults.from_files(
            reduce(operator.add, members) for members in groups.values()
        )

    def sort_by(
        self,
        metric: Union[str, Metric] = Metric.BYTES,
        order: Union[str, SortOrder] = SortOrder.DESCENDING,
    ) -> None:
        """Stable in-place sort of ``files`` by a metric."""
        metric = Metric.parse(metric)
        order = SortOrder.parse(order)
        self.files.sort(key=metric.of, reverse=order is SortOrder.DESCENDING)

    def to_dict(self) -> dict[str, Any]:
        return {
            "files": [record.to_dict() for record in self.files],
            "total": asdict(self.total),
            "max": asdict(self.max),
        }
