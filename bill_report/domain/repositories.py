"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from .models import Bill, RecordIdentity


class BillRepository(Protocol):
    """Discovers bill files and parses them into bills."""

    def scan(self) -> Sequence[RecordIdentity]:
        ...

    def parse(self, identity: RecordIdentity) -> Bill:
        ...


class ReportSink(Protocol):
    """Append-only destination for rendered report sections."""

    @property
    def target(self) -> Path:
        ...

    def reset(self) -> None:
        ...

    def append(self, section: str) -> None:
        ...
