"""Application-level DTOs for report generation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from bill_report.domain.models import Bill
from bill_report.domain.results import RenderSummary


@dataclass(slots=True, frozen=True)
class ReportResponse:
    bills: Sequence[Bill]
    render: RenderSummary
