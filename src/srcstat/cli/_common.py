"""Shared CLI helpers."""

from pathlib import Path
from typing import Any, Optional

from rich.console import Console

from ..config import Settings, load_settings

# Diagnostics go to stderr; stdout carries only the report.
console = Console(stderr=True)


def metric_columns(
    lines: bool, words: bool, chars: bool, bytes_: bool
) -> dict[str, Optional[bool]]:
    """Column switches for the metric selection flags.

    Without any flag the configured columns stay as they are; with at least
    one, only the chosen metrics are shown.
    """
    chosen = {"lines": lines, "words": words, "chars": chars, "bytes": bytes_}
    if not any(chosen.values()):
        return {name: None for name in chosen}
    return chosen


def resolve_settings(
    config: Optional[Path] = None,
    group: bool = False,
    hidden: bool = False,
    no_ignore: bool = False,
    exclude: Optional[list[str]] = None,
    verbose: bool = False,
    quiet: bool = False,
    **options: Any,
) -> Settings:
    """Build settings from CLI options.

    Plain on/off flags only override lower layers when they are given;
    options left at ``None`` keep the configured value.
    """
    overrides: dict[str, Any] = dict(options)
    if group:
        overrides["group_by_language"] = True
    if hidden:
        overrides["include_hidden"] = True
    if no_ignore:
        overrides["respect_ignore_files"] = False
    if exclude:
        overrides["exclude_patterns"] = tuple(exclude)
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_settings(config_file=config, **overrides)
