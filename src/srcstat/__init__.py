"""
srcstat - line, word, character and byte counts for source trees

Scans files, directories and standard input, classifies every file by
language and renders the counts as a table, plain rows, CSV, TSV or JSON.
"""

__version__ = "0.1.0"

from .api import tally
from .config import OutputOptions, ScanOptions, Settings, load_settings
from .scanning import FileMetric, Language, Metric, ScanResults, SortOrder, Unknown, scan

__all__ = [
    "tally",  # Main entry point
    "scan",
    "load_settings",
    "Settings",
    "ScanOptions",
    "OutputOptions",
    "ScanResults",
    "FileMetric",
    "Language",
    "Unknown",
    "Metric",
    "SortOrder",
]
