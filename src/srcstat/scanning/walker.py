"""Ignore-file aware directory enumeration.

The walker is depth-first with an explicit stack, so deep trees never hit the
recursion limit. Within a directory, entries are visited in name order.
Symbolic links are never followed.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

import pathspec

from ..exceptions import EnumerationError
from ..logging_config import get_logger
from .patterns import ExclusionMatcher

logger = get_logger(__name__)

# Per-directory ignore files, lowest priority first.
IGNORE_FILE_NAMES = (".gitignore", ".ignore")


@dataclass(frozen=True)
class WalkEntry:
    path: Path
    is_file: bool


@dataclass(frozen=True)
class WalkError:
    path: Path
    error: EnumerationError


WalkResult = Union[WalkEntry, WalkError]


@dataclass(frozen=True)
class _IgnoreRules:
    """Patterns from one ignore file, anchored at ``base`` (root-relative)."""

    base: str
    spec: pathspec.GitIgnoreSpec

    def check(self, relative_path: str, is_dir: bool) -> Optional[bool]:
        """True if ignored, False if re-included by a negation, None if no pattern matches."""
        if self.base:
            prefix = self.base + "/"
            if not relative_path.startswith(prefix):
                return None
            relative_path = relative_path[len(prefix):]
        if is_dir:
            relative_path += "/"
        return self.spec.check_file(relative_path).include


def _is_ignored(rules: tuple[_IgnoreRules, ...], relative_path: str, is_dir: bool) -> bool:
    # Later rules come from deeper or higher-priority files; the first
    # definite answer wins.
    for rule in reversed(rules):
        verdict = rule.check(relative_path, is_dir)
        if verdict is not None:
            return verdict
    return False


def _read_rules(ignore_file: Path, base: str) -> Optional[_IgnoreRules]:
    try:
        with open(ignore_file, encoding="utf-8", errors="replace") as f:
            lines = f.read().splitlines()
    except OSError as e:
        logger.warning(f"Cannot read ignore file {ignore_file}: {e}")
        return None
    try:
        spec = pathspec.GitIgnoreSpec.from_lines(lines)
    except (ValueError, TypeError) as e:
        logger.warning(f"Invalid pattern in {ignore_file}: {e}")
        return None
    return _IgnoreRules(base=base, spec=spec)


def _directory_rules(directory: Path, base: str, is_root: bool) -> tuple[_IgnoreRules, ...]:
    candidates = [directory / name for name in IGNORE_FILE_NAMES]
    if is_root:
        candidates.insert(0, directory / ".git" / "info" / "exclude")

    rules = []
    for candidate in candidates:
        if candidate.is_file():
            loaded = _read_rules(candidate, base)
            if loaded is not None:
                rules.append(loaded)
    return tuple(rules)


def walk(
    root: Union[str, Path],
    include_hidden: bool = False,
    max_depth: Optional[int] = None,
    max_file_size: Optional[int] = None,
    exclude: Optional[ExclusionMatcher] = None,
    respect_ignore_files: bool = True,
) -> Iterator[WalkResult]:
    """
    Enumerate the files below ``root``.

    Args:
        root: Directory to walk
        include_hidden: Include entries whose name starts with ``.``
        max_depth: Deepest level to descend to; children of ``root`` are at
            depth 1. ``None`` means unlimited.
        max_file_size: Skip files larger than this many bytes
        exclude: Matcher for root-relative paths to leave out
        respect_ignore_files: Honour ``.gitignore``/``.ignore`` files and
            ``.git/info/exclude``

    Yields:
        ``WalkEntry`` for every directory and file kept, ``WalkError`` for
        entries that could not be read
    """
    root = Path(root)
    if max_depth is not None and max_depth < 1:
        return
    stack: list[tuple[Path, int, tuple[_IgnoreRules, ...]]] = [(root, 0, ())]

    while stack:
        directory, depth, rules = stack.pop()
        relative_dir = "" if directory == root else directory.relative_to(root).as_posix()

        if respect_ignore_files:
            rules = rules + _directory_rules(directory, relative_dir, directory == root)

        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            yield WalkError(directory, EnumerationError(directory, str(e)))
            continue

        subdirectories: list[Path] = []
        for entry in entries:
            if not include_hidden and entry.name.startswith("."):
                continue

            path = Path(entry.path)
            relative_path = f"{relative_dir}/{entry.name}" if relative_dir else entry.name

            try:
                if entry.is_symlink():
                    continue
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = not is_dir and entry.is_file(follow_symlinks=False)
                size = entry.stat(follow_symlinks=False).st_size if is_file else 0
            except OSError as e:
                yield WalkError(path, EnumerationError(path, str(e)))
                continue

            if not (is_dir or is_file):
                continue
            if _is_ignored(rules, relative_path, is_dir):
                continue
            if exclude is not None and exclude.matches(relative_path, is_dir):
                continue

            if is_dir:
                yield WalkEntry(path, is_file=False)
                if max_depth is None or depth + 1 < max_depth:
                    subdirectories.append(path)
                continue

            if max_file_size is not None and size > max_file_size:
                logger.debug(f"Skipped (size): {path} ({size} bytes)")
                continue

            yield WalkEntry(path, is_file=True)

        # Reversed so the stack pops subdirectories in name order.
        for subdirectory in reversed(subdirectories):
            stack.append((subdirectory, depth + 1, rules))
