"""Markdown rendering of parsed bills."""
from __future__ import annotations

import math

from bill_report.domain.models import Bill, LineItem

TABLE_HEADER = "Position | Amount | Price\n---------|--------|-------\n"


def format_number(value: int | float) -> str:
    """Render a number the way the report has always printed it.

    Integral floats lose their fractional part (``3.0`` -> ``3``); everything
    else uses the shortest round-trip representation.
    """
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def line_item_to_row(item: LineItem) -> str:
    return f"{item.name} | {format_number(item.amount)} | {format_number(item.price)}"


def render_bill(bill: Bill) -> str:
    heading = f"## {bill.name} {format_number(bill.total)}\n"
    rows = "\n".join(line_item_to_row(item) for item in bill.line_items)
    return heading + TABLE_HEADER + rows + "\n\n"
