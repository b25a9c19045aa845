"""JSON formatter for srcstat."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ..scanning.models import ScanResults
from .base import BaseFormatter

if TYPE_CHECKING:
    from ..config import OutputOptions


class JsonFormatter(BaseFormatter):
    """Render the complete results as JSON, ignoring column switches."""

    def format(self, results: ScanResults, options: OutputOptions) -> str:
        return json.dumps(results.to_dict(), indent=2, ensure_ascii=False) + "\n"
