"""Domain-level results for batch runs and report rendering."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Sequence

from bill_report.exceptions import ReportWriteError


class BatchState(str, Enum):
    IDLE = "idle"
    SCANNING = "scanning"
    PARSING_ALL = "parsing_all"
    JOINED = "joined"
    FAILED = "failed"


@dataclass(frozen=True)
class RenderSummary:
    target: Path
    written: int
    errors: Sequence[ReportWriteError] = field(default_factory=tuple)

    @property
    def failed(self) -> int:
        return len(self.errors)

    def has_errors(self) -> bool:
        return bool(self.errors)
