"""Public API for srcstat.

Example:
    >>> from srcstat import tally
    >>>
    >>> results, text = tally(["src"])
    >>> print(text, end="")
    >>>
    >>> # With customization
    >>> results, text = tally(["src"], group_by_language=True, format="json")
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

from .config import Settings, load_settings
from .formatters import get_formatter, shape
from .logging_config import get_logger
from .scanning import Scanner, ScanResults

logger = get_logger(__name__)


def tally(
    paths: Sequence[Union[str, Path]] = (".",),
    settings: Optional[Settings] = None,
    config_file: Optional[Path] = None,
    **overrides,
) -> tuple[ScanResults, str]:
    """Scan paths and render the report.

    Args:
        paths: Files, directories, or ``-`` for standard input
        settings: Fully resolved settings; when omitted they are loaded with
            ``load_settings(config_file, **overrides)``
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g. ``sort_by="lines"``)

    Returns:
        Tuple of (ScanResults, rendered text). The results are grouped and
        sorted exactly as rendered.

    Raises:
        SrcstatError: If configuration is invalid, or the standard input
            stream is the only path and cannot be read
    """
    if settings is None:
        settings = load_settings(config_file=config_file, **overrides)
    elif overrides or config_file is not None:
        raise TypeError("pass either settings or config_file/overrides, not both")

    logger.debug(f"Scanning {len(paths)} path(s)")
    results = Scanner(settings.scan).scan(paths)
    shaped = shape(results, settings.output)
    return shaped, get_formatter(settings.output.format).format(shaped, settings.output)
