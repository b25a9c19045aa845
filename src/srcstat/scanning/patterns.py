"""Exclusion patterns compiled with gitignore semantics."""

from __future__ import annotations

from typing import Iterable

import pathspec

from ..logging_config import get_logger

logger = get_logger(__name__)


class ExclusionMatcher:
    """Matches root-relative paths against user exclusion patterns.

    Patterns that fail to compile are dropped with a warning. When nothing
    survives the matcher matches nothing.
    """

    def __init__(self, patterns: Iterable[str] = ()):
        accepted: list[str] = []
        for pattern in patterns:
            if not pattern or not pattern.strip():
                continue
            try:
                pathspec.PathSpec.from_lines("gitwildmatch", [pattern])
            except (ValueError, TypeError) as e:
                logger.warning(f"Ignoring invalid exclude pattern {pattern!r}: {e}")
                continue
            accepted.append(pattern)

        self.patterns = tuple(accepted)
        self._spec = pathspec.PathSpec.from_lines("gitwildmatch", accepted)

    def __bool__(self) -> bool:
        return bool(self.patterns)

    def __repr__(self) -> str:
        return f"ExclusionMatcher({list(self.patterns)!r})"

    def matches(self, relative_path: str, is_dir: bool = False) -> bool:
        """
        Check a path relative to the walk root.

        Args:
            relative_path: POSIX-style path relative to the walk root
            is_dir: Whether the path is a directory (enables ``name/`` patterns)

        Returns:
            True if the path should be excluded
        """
        if not self.patterns:
            return False
        if is_dir and not relative_path.endswith("/"):
            relative_path += "/"
        return self._spec.match_file(relative_path)
