"""Errors met while scanning: files, the input stream, directory entries."""

from pathlib import Path

from .base import SrcstatError


class AnalysisError(SrcstatError):
    """A problem with the scanned content rather than the configuration."""


class FileAccessError(AnalysisError):
    """A file could not be opened, read or decoded as UTF-8.

    The scanner drops such files; they never abort a scan.
    """

    def __init__(self, filepath: Path, reason: str):
        super().__init__(f"Cannot scan {filepath}", {"path": str(filepath), "reason": reason})
        self.filepath = filepath


class StreamReadError(AnalysisError):
    """Standard input could not be read or decoded."""

    def __init__(self, reason: str):
        super().__init__("Cannot read standard input", {"reason": reason})


class EnumerationError(AnalysisError):
    """A directory or one of its entries could not be inspected."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot list {path}", {"path": str(path), "reason": reason})
        self.path = path
