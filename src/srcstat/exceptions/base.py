"""Base exception for srcstat."""

from typing import Any, Dict, Optional


class SrcstatError(Exception):
    """Root of every error srcstat raises deliberately.

    ``details`` holds machine-readable context. A ``reason`` entry, when
    present, is appended to the message in ``str()``.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})

    @property
    def reason(self) -> Optional[str]:
        return self.details.get("reason")

    def __str__(self) -> str:
        if self.reason:
            return f"{self.message}: {self.reason}"
        return self.message
