"""File scanning: metric extraction, enumeration and aggregation."""

from .accumulators import Max, Totals
from .extractor import scan_file, scan_stream
from .languages import (
    Classification,
    Language,
    Unknown,
    classify,
    from_extension,
)
from .models import STDIN_PATH, FileMetric, Metric, ScanResults, SortOrder
from .patterns import ExclusionMatcher
from .scanner import STDIN_SENTINEL, Scanner, scan
from .walker import WalkEntry, WalkError, walk

__all__ = [
    # Result model
    "FileMetric",
    "ScanResults",
    "Metric",
    "SortOrder",
    "Totals",
    "Max",
    "STDIN_PATH",
    # Classification
    "Classification",
    "Language",
    "Unknown",
    "classify",
    "from_extension",
    # Extraction and orchestration
    "scan_file",
    "scan_stream",
    "Scanner",
    "scan",
    "STDIN_SENTINEL",
    # Enumeration
    "ExclusionMatcher",
    "walk",
    "WalkEntry",
    "WalkError",
]
