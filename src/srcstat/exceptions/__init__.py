"""Exception hierarchy for srcstat."""

from .analysis import (
    AnalysisError,
    EnumerationError,
    FileAccessError,
    StreamReadError,
)
from .base import SrcstatError
from .config import (
    ConfigurationError,
    InvalidConfigError,
)

__all__ = [
    "SrcstatError",
    "AnalysisError",
    "FileAccessError",
    "StreamReadError",
    "EnumerationError",
    "ConfigurationError",
    "InvalidConfigError",
]
