"""Scan orchestration: turns input paths into one ``ScanResults``.

Each input path is either the stream sentinel ``-``, a regular file, or a
directory to enumerate. Anything else is ignored. Per-entry problems never
abort a scan: unreadable directory entries are logged as warnings and files
that fail extraction are dropped.

Two strategies produce the same totals, maxima and record multiset:

- serial: everything is folded straight into the shared results, in input
  and enumeration order.
- concurrent: every input path is scanned on its own thread into path-local
  results (directory files are fanned out to a per-path pool feeding a
  path-local sink), then merged into the shared results under a lock, in
  input-path order. File order within a directory is not guaranteed.
"""

from __future__ import annotations

import os
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Callable, Iterable, Optional, Sequence, Union

from ..exceptions import FileAccessError, StreamReadError
from ..logging_config import get_logger
from .extractor import scan_file, scan_stream
from .models import FileMetric, ScanResults
from .patterns import ExclusionMatcher
from .walker import WalkError, walk

if TYPE_CHECKING:
    from ..config import ScanOptions

logger = get_logger(__name__)

STDIN_SENTINEL = "-"

# Default worker count: use CPU count, capped at 8 to avoid overwhelming I/O
_DEFAULT_WORKERS = min(os.cpu_count() or 4, 8)

PathLike = Union[str, Path]


class Scanner:
    """Runs the metric extractor over files, streams and directory trees.

    Attributes:
        options: Scan filters and strategy switches
        matcher: Compiled exclusion patterns
    """

    def __init__(
        self,
        options: Optional[ScanOptions] = None,
        stdin: Optional[Callable[[], BinaryIO]] = None,
    ):
        """
        Initialize scanner.

        Args:
            options: Scan options; defaults to ``ScanOptions()``
            stdin: Factory for the stream read when ``-`` is scanned;
                defaults to the process's standard input
        """
        if options is None:
            from ..config import ScanOptions

            options = ScanOptions()
        self.options = options
        self.matcher = ExclusionMatcher(options.exclude_patterns)
        self._stdin = stdin
        self._max_workers = options.workers or _DEFAULT_WORKERS

    def scan(self, paths: Sequence[PathLike]) -> ScanResults:
        """
        Scan every path and collect the results.

        Args:
            paths: Files, directories, or ``-`` for standard input

        Returns:
            Results holding one record per scanned file

        Raises:
            StreamReadError: Only when ``-`` is the sole path and standard
                input cannot be read
        """
        paths = list(paths)
        # An explicit single stream target surfaces its read error.
        strict_stream = len(paths) == 1 and str(paths[0]) == STDIN_SENTINEL

        if self.options.concurrent and paths:
            results = self._scan_concurrent(paths, strict_stream)
        else:
            results = self._scan_serial(paths, strict_stream)

        logger.info(
            f"Scan complete: {results.total.files} files, "
            f"{results.total.lines} lines, {results.total.bytes} bytes"
        )
        return results

    # ── Strategies ─────────────────────────────────────────────

    def _scan_serial(self, paths: list[PathLike], strict_stream: bool) -> ScanResults:
        results = ScanResults()
        for path in paths:
            for record in self._records(path, strict_stream):
                results.add(record)
        return results

    def _scan_concurrent(self, paths: list[PathLike], strict_stream: bool) -> ScanResults:
        results = ScanResults()
        lock = threading.Lock()

        workers = min(len(paths), self._max_workers)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(self._scan_path_local, path, strict_stream) for path in paths
            ]
            # Merge in input order so per-path blocks keep their position.
            for future in futures:
                local = future.result()
                with lock:
                    results.merge(local)
        return results

    def _scan_path_local(self, path: PathLike, strict_stream: bool) -> ScanResults:
        """Scan one input path into its own results."""
        if str(path) != STDIN_SENTINEL and Path(path).is_dir():
            return self._scan_directory_concurrent(Path(path))
        return ScanResults.from_files(self._records(path, strict_stream))

    def _scan_directory_concurrent(self, root: Path) -> ScanResults:
        local = ScanResults()
        sink_lock = threading.Lock()

        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            futures = {
                executor.submit(self._extract, file_path): file_path
                for file_path in self._enumerate(root)
            }
            for future in as_completed(futures):
                record = future.result()
                if record is None:
                    continue
                with sink_lock:
                    local.add(record)
        return local

    # ── Per-path work ──────────────────────────────────────────

    def _records(self, path: PathLike, strict_stream: bool) -> Iterable[FileMetric]:
        """Yield the records for one input path, in enumeration order."""
        if str(path) == STDIN_SENTINEL:
            record = self._read_stream(strict_stream)
            if record is not None:
                yield record
            return

        path = Path(path)
        if path.is_file():
            record = self._extract(path)
            if record is not None:
                yield record
        elif path.is_dir():
            for file_path in self._enumerate(path):
                record = self._extract(file_path)
                if record is not None:
                    yield record
        else:
            logger.debug(f"Ignoring {path}: not a file or directory")

    def _enumerate(self, root: Path) -> Iterable[Path]:
        """Yield the files below ``root`` that pass the scan filters."""
        for result in walk(
            root,
            include_hidden=self.options.include_hidden,
            max_depth=self.options.max_depth,
            max_file_size=self.options.max_file_size,
            exclude=self.matcher,
            respect_ignore_files=self.options.respect_ignore_files,
        ):
            if isinstance(result, WalkError):
                logger.warning(str(result.error))
                continue
            if result.is_file:
                yield result.path

    def _extract(self, path: Path) -> Optional[FileMetric]:
        try:
            return scan_file(path)
        except FileAccessError as e:
            logger.debug(f"Skipped {path}: {e.reason}")
            return None

    def _read_stream(self, strict: bool) -> Optional[FileMetric]:
        try:
            stream = self._stdin() if self._stdin is not None else None
            return scan_stream(stream)
        except StreamReadError as e:
            if strict:
                raise
            logger.warning(f"Dropping standard input: {e.reason}")
            return None


def scan(paths: Sequence[PathLike], options: Optional[ScanOptions] = None) -> ScanResults:
    """Scan ``paths`` with a fresh ``Scanner``."""
    return Scanner(options).scan(paths)
