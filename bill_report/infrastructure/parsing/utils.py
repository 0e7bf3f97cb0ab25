"""Shared coercion utilities for delimited bill files."""
from __future__ import annotations

import math
from datetime import date

import pandas as pd

from bill_report.exceptions import CoercionError


def clean_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value).strip()


def parse_int(value: object, field: str = "amount") -> int:
    s = clean_text(value)
    try:
        return int(s)
    except ValueError:
        raise CoercionError(field, value, "integer") from None


def parse_float(value: object, field: str = "price") -> float:
    s = clean_text(value)
    try:
        result = float(s)
    except ValueError:
        raise CoercionError(field, value, "number") from None
    if not math.isfinite(result):
        raise CoercionError(field, value, "finite number")
    return result


def parse_optional_float(value: object, field: str) -> float | None:
    if not clean_text(value):
        return None
    return parse_float(value, field=field)


# pandas resolves these against the clock
RELATIVE_DATE_LITERALS = {"now", "today"}


def parse_date(value: object) -> date | None:
    """Parse a date token, returning ``None`` instead of raising."""
    s = clean_text(value)
    if not s or s.lower() in RELATIVE_DATE_LITERALS:
        return None
    parsed = pd.to_datetime(s, errors="coerce", format="ISO8601")
    if pd.isna(parsed):
        return None
    return parsed.date()

