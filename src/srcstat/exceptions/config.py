"""Configuration errors: bad files, unknown keys, out-of-range values."""

from typing import Any

from .base import SrcstatError


class ConfigurationError(SrcstatError):
    """Settings could not be assembled (unreadable file, unknown key, ...)."""


class InvalidConfigError(ConfigurationError):
    """A setting has a value outside its allowed range."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid value {value!r} for {key}",
            {"key": key, "value": value, "reason": reason},
        )
        self.key = key
        self.value = value
