"""Base formatter interface for srcstat output rendering."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..scanning.models import ScanResults

if TYPE_CHECKING:
    from ..config import OutputOptions


class BaseFormatter(ABC):
    """Abstract base class for output formatters.

    Formatters hold no state between calls: ``format`` depends only on its
    arguments.
    """

    @abstractmethod
    def format(self, results: ScanResults, options: OutputOptions) -> str:
        """Return formatted string representation of results."""

    def render(self, results: ScanResults, options: OutputOptions) -> None:
        """Write the formatted results to stdout."""
        print(self.format(results, options), end="")
