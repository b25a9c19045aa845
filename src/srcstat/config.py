"""Configuration loading and management for srcstat.

Settings are split in two frozen dataclasses: ``ScanOptions`` drives what gets
scanned, ``OutputOptions`` drives how the results are shaped and rendered.
Configuration sources are merged in priority order:
    1. Defaults (dataclass field defaults)
    2. Global config (~/.srcstat.toml)
    3. Project config (./srcstat.toml)
    4. Explicit config file
    5. Environment variables (SRCSTAT_* prefix, plus NO_COLOR)
    6. Keyword overrides (typically CLI flags)

Example:
    >>> settings = load_settings(group_by_language=True, max_depth=2)
    >>> settings.output.group_by_language
    True
    >>> settings.scan.max_depth
    2
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Literal, Optional, Union, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .scanning.models import Metric, SortOrder

Verbosity = Literal["quiet", "normal", "verbose"]

FORMATS = ("table", "plain", "json", "csv", "tsv")

ENV_PREFIX = "SRCSTAT_"


@dataclass(frozen=True)
class ScanOptions:
    """What to scan and how.

    Attributes:
        include_hidden: Include files and directories starting with ``.``
        max_depth: Maximum recursion depth below each root (None = unlimited)
        max_file_size: Skip files larger than this many bytes (None = no limit)
        exclude_patterns: Gitignore-style patterns to leave out
        respect_ignore_files: Honour .gitignore/.ignore files while walking
        concurrent: Scan paths and files on a thread pool
        workers: Number of worker threads (None = auto-detect)
    """

    include_hidden: bool = False
    max_depth: Optional[int] = None
    max_file_size: Optional[int] = None
    exclude_patterns: tuple[str, ...] = ()
    respect_ignore_files: bool = True
    concurrent: bool = True
    workers: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate scan configuration."""
        object.__setattr__(self, "exclude_patterns", tuple(self.exclude_patterns))

        if self.max_depth is not None and self.max_depth < 0:
            raise InvalidConfigError("max_depth", self.max_depth, "must be non-negative")
        if self.max_file_size is not None and self.max_file_size < 0:
            raise InvalidConfigError("max_file_size", self.max_file_size, "must be non-negative")
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")


@dataclass(frozen=True)
class OutputOptions:
    """How results are shaped and rendered.

    Attributes:
        Format:
            format: One of table, plain, json, csv, tsv

        Columns (shown in this fixed order):
            language, files, lines, words, chars, bytes, graph

        Shaping:
            group_by_language: Condense records into one per language
            sort_by: Metric to sort by (unknown names mean bytes)
            sort_order: ascending or descending

        Visualization:
            graph_by: Metric the bar is proportional to (None = sort_by)
            graph_size: Bar length in glyphs
            graph_fill: Glyph for the filled part of the bar
            graph_blank: Glyph for the empty part of the bar

        Layout:
            use_colors: Color language labels and bars
            header, footer: Show the header row and the totals row
            alignment: Apply per-column alignment (otherwise all left)
            horizontal_separator: Text between table columns
            vertical_separator: Glyph used for the rule under the header
    """

    format: str = "table"

    language: bool = True
    files: bool = True
    lines: bool = True
    words: bool = True
    chars: bool = True
    bytes: bool = True
    graph: bool = True

    group_by_language: bool = False
    sort_by: Metric = Metric.BYTES
    sort_order: SortOrder = SortOrder.DESCENDING

    graph_by: Optional[Metric] = None
    graph_size: int = 20
    graph_fill: str = "▬"
    graph_blank: str = " "

    use_colors: bool = True
    header: bool = True
    footer: bool = True
    alignment: bool = True
    horizontal_separator: str = "    "
    vertical_separator: str = "-"

    def __post_init__(self) -> None:
        """Normalize enum fields and validate."""
        object.__setattr__(self, "sort_by", Metric.parse(self.sort_by))
        object.__setattr__(self, "sort_order", SortOrder.parse(self.sort_order))
        if self.graph_by is not None:
            object.__setattr__(self, "graph_by", Metric.parse(self.graph_by))
        object.__setattr__(self, "format", str(self.format).lower())

        if self.format not in FORMATS:
            raise InvalidConfigError(
                "format", self.format, f"expected one of {', '.join(FORMATS)}"
            )
        if self.graph_size < 1:
            raise InvalidConfigError("graph_size", self.graph_size, "must be at least 1")
        if not self.graph_fill:
            raise InvalidConfigError("graph_fill", self.graph_fill, "must not be empty")
        if not self.graph_blank:
            raise InvalidConfigError("graph_blank", self.graph_blank, "must not be empty")

    @property
    def graph_metric(self) -> Metric:
        """Metric the visualization bar follows."""
        return self.graph_by if self.graph_by is not None else self.sort_by


@dataclass(frozen=True)
class Settings:
    """Complete, resolved configuration for one invocation."""

    scan: ScanOptions = field(default_factory=ScanOptions)
    output: OutputOptions = field(default_factory=OutputOptions)
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )


_SCAN_FIELDS = frozenset(f.name for f in fields(ScanOptions))
_OUTPUT_FIELDS = frozenset(f.name for f in fields(OutputOptions))


def load_settings(config_file: Optional[Path] = None, **overrides) -> Settings:
    """Load settings with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Flat overrides; each key is routed to the section that
            owns it. ``verbose``/``quiet`` booleans map onto ``verbosity``.
            ``None`` values are ignored so unset CLI flags keep lower layers.

    Returns:
        Validated Settings instance

    Raises:
        ConfigurationError: If a config file is invalid or missing, or a key
            is unknown
        InvalidConfigError: If a value is out of range
    """
    scan: dict[str, Any] = {}
    output: dict[str, Any] = {}
    top: dict[str, Any] = {}

    def merge(data: dict[str, Any], source: str) -> None:
        for key, value in data.items():
            if key == "scan" and isinstance(value, dict):
                merge_section(scan, value, _SCAN_FIELDS, source)
            elif key == "output" and isinstance(value, dict):
                merge_section(output, value, _OUTPUT_FIELDS, source)
            elif key == "verbosity":
                top["verbosity"] = value
            elif key in _SCAN_FIELDS:
                scan[key] = value
            elif key in _OUTPUT_FIELDS:
                output[key] = value
            else:
                raise ConfigurationError(f"Unknown configuration key '{key}' in {source}")

    # 1. Global config
    global_config = Path.home() / ".srcstat.toml"
    if global_config.exists():
        merge(_load_toml_file(global_config), str(global_config))

    # 2. Project config
    project_config = Path.cwd() / "srcstat.toml"
    if project_config.exists():
        merge(_load_toml_file(project_config), str(project_config))

    # 3. Explicit config file
    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merge(_load_toml_file(config_file), str(config_file))

    # 4. Environment variables
    merge(_load_env_vars(), "environment")

    # 5. Overrides
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merge({k: v for k, v in overrides.items() if v is not None}, "overrides")

    try:
        return Settings(
            scan=ScanOptions(**scan),
            output=OutputOptions(**output),
            **top,
        )
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def merge_section(
    target: dict[str, Any], data: dict[str, Any], allowed: frozenset[str], source: str
) -> None:
    for key, value in data.items():
        if key not in allowed:
            raise ConfigurationError(f"Unknown configuration key '{key}' in {source}")
        target[key] = value


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from SRCSTAT_* environment variables.

    Every ScanOptions and OutputOptions field has a variable named after it,
    e.g. ``SRCSTAT_MAX_DEPTH=3`` or ``SRCSTAT_SORT_BY=lines``. List fields
    take comma-separated values. ``NO_COLOR`` set to any non-empty value
    disables colors.

    Returns:
        Dict of field_name -> parsed_value for any variables found.
    """
    result: dict[str, Any] = {}

    if os.environ.get("NO_COLOR"):
        result["use_colors"] = False

    for cls in (ScanOptions, OutputOptions):
        type_hints = get_type_hints(cls)
        for f in fields(cls):
            env_key = f"{ENV_PREFIX}{f.name.upper()}"
            env_value = os.environ.get(env_key)
            if env_value is None:
                continue
            try:
                parsed = _parse_env_value(env_value, type_hints[f.name])
            except ValueError as e:
                raise ConfigurationError(f"Invalid {env_key}: {e}")
            if parsed is not None:
                result[f.name] = parsed

    verbosity = os.environ.get(f"{ENV_PREFIX}VERBOSITY")
    if verbosity:
        result["verbosity"] = verbosity

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if getattr(type_hint, "__origin__", None) is Union and type(None) in args:
        if value.strip().lower() in ("", "none"):
            return None
        type_hint = next(t for t in args if t is not type(None))

    origin = getattr(type_hint, "__origin__", None)
    if origin in (tuple, list):
        return tuple(part.strip() for part in value.split(",") if part.strip())

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    # str, Metric and SortOrder are normalized by the dataclasses
    return value


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        # Python 3.9-3.10
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
