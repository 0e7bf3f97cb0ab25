"""Domain models for the bill ingestion pipeline.

These dataclasses capture the canonical schema of a parsed bill file.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class RecordIdentity:
    """Identity of one input file, decoded from its name.

    ``date`` is ``None`` when the date token could not be parsed.
    """

    file_name: str
    name: str
    date: date | None

    @property
    def is_dated(self) -> bool:
        return self.date is not None


@dataclass(frozen=True)
class LineItem:
    """One row of a bill file after numeric coercion."""

    name: str
    amount: int
    price: float
    tax_rate: float | None = None


@dataclass(frozen=True)
class Bill:
    """All line items of one input file plus their aggregate."""

    date: date | None
    name: str
    line_items: tuple[LineItem, ...] = field(default_factory=tuple)
    total: float = 0.0

    @classmethod
    def from_line_items(cls, identity: RecordIdentity, line_items: list[LineItem]) -> "Bill":
        items = tuple(line_items)
        return cls(
            date=identity.date,
            name=identity.name,
            line_items=items,
            total=sum_prices(items),
        )

    @property
    def extended_total(self) -> float:
        # price weighted by amount; not what ``total`` reports
        return sum((item.price * item.amount for item in self.line_items), 0.0)


def sum_prices(line_items: tuple[LineItem, ...] | list[LineItem]) -> float:
    total = 0.0
    for item in line_items:
        total += item.price
    return total
