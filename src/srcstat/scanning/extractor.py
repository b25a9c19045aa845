"""Single-pass metric extraction for files and byte streams.

Lines are counted the way a line-oriented reader sees them: content is split
on ``\\n``, a ``\\r`` directly before the ``\\n`` belongs to the terminator,
and a final line without a terminator still counts. Words are
whitespace-delimited tokens; chars are Unicode code points with terminators
excluded.
"""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path
from typing import BinaryIO, Optional, Union

from ..exceptions import FileAccessError, StreamReadError
from ..logging_config import get_logger
from .languages import Language, classify
from .models import STDIN_PATH, FileMetric

logger = get_logger(__name__)

# Runs of characters outside the Unicode White_Space set. The information
# separators \x1c-\x1f are word characters here even though str.isspace()
# accepts them.
_WORD = re.compile(
    "[^\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


def _count(handle: BinaryIO) -> tuple[int, int, int, int]:
    """Return ``(lines, words, chars, line_bytes)`` for one pass over ``handle``.

    ``line_bytes`` excludes terminators.

    Raises:
        UnicodeDecodeError: If a line is not valid UTF-8
    """
    lines = words = chars = line_bytes = 0
    for raw in handle:
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        text = raw.decode("utf-8")
        lines += 1
        words += sum(1 for _ in _WORD.finditer(text))
        chars += len(text)
        line_bytes += len(raw)
    return lines, words, chars, line_bytes


def scan_file(path: Union[str, Path]) -> FileMetric:
    """
    Extract metrics from a file on disk.

    The byte count comes from the file's metadata, not from the content pass.

    Args:
        path: File to scan

    Returns:
        A raw (``count == 1``) record

    Raises:
        FileAccessError: If the file cannot be opened, read or decoded
    """
    path = Path(path)
    try:
        with open(path, "rb") as handle:
            size = os.fstat(handle.fileno()).st_size
            lines, words, chars, _ = _count(handle)
    except UnicodeDecodeError as e:
        raise FileAccessError(path, f"Encoding error: {e}")
    except OSError as e:
        raise FileAccessError(path, f"OS error: {e}")

    return FileMetric(
        path=path,
        lines=lines,
        words=words,
        chars=chars,
        bytes=size,
        language=classify(path),
    )


def scan_stream(stream: Optional[BinaryIO] = None) -> FileMetric:
    """
    Extract metrics from a byte stream (standard input by default).

    Streams carry no metadata, so the byte count is rebuilt from the content:
    the bytes of every line plus one terminator between consecutive lines.
    A trailing terminator is not counted.

    Args:
        stream: Binary stream to read; defaults to ``sys.stdin.buffer``

    Returns:
        A raw record with path ``STDIN`` classified as plain text

    Raises:
        StreamReadError: If the stream cannot be read or decoded
    """
    if stream is None:
        stream = sys.stdin.buffer
    try:
        lines, words, chars, line_bytes = _count(stream)
    except UnicodeDecodeError as e:
        raise StreamReadError(f"Encoding error: {e}")
    except OSError as e:
        raise StreamReadError(f"OS error: {e}")

    logger.debug(f"Read {lines} lines from standard input")
    return FileMetric(
        path=STDIN_PATH,
        lines=lines,
        words=words,
        chars=chars,
        bytes=line_bytes + max(lines - 1, 0),
        language=Language.TEXT,
    )
