"""Delimited-text parser producing bills from line-item files."""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from bill_report.config import (
    DEFAULT_DELIMITER,
    DEFAULT_ENCODING,
    REQUIRED_COLUMNS,
    TAX_RATE_COLUMN,
)
from bill_report.domain.models import Bill, LineItem, RecordIdentity
from bill_report.exceptions import CoercionError, RecordParseError
from bill_report.infrastructure.parsing.utils import (
    clean_text,
    parse_float,
    parse_int,
    parse_optional_float,
)


def read_bill_raw(
    path: Path,
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = DEFAULT_ENCODING,
) -> pd.DataFrame:
    """Read a bill file with its first line as header.

    The header is read as an ordinary row so that any later row with more
    fields than the header is rejected by the tokenizer instead of being
    taken for an index column.
    """
    raw = pd.read_csv(
        path,
        sep=delimiter,
        header=None,
        dtype=str,
        keep_default_na=False,
        skipinitialspace=True,
        skip_blank_lines=True,
        encoding=encoding,
    )
    dataframe = raw.iloc[1:].reset_index(drop=True)
    dataframe.columns = [clean_text(col) for col in raw.iloc[0]]
    return dataframe


def check_columns(df: pd.DataFrame) -> None:
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"missing required column(s): {', '.join(missing)}")


def rows_to_line_items(df: pd.DataFrame) -> list[LineItem]:
    check_columns(df)
    has_tax_rate = TAX_RATE_COLUMN in df.columns

    line_items: list[LineItem] = []
    for idx, row in df.iterrows():
        try:
            line_items.append(
                LineItem(
                    name=clean_text(row.get("name")),
                    amount=parse_int(row.get("amount"), field="amount"),
                    price=parse_float(row.get("price"), field="price"),
                    tax_rate=parse_optional_float(row.get(TAX_RATE_COLUMN), field=TAX_RATE_COLUMN)
                    if has_tax_rate
                    else None,
                )
            )
        except CoercionError as exc:
            raise ValueError(f"data row {idx + 1}: {exc}") from exc
    return line_items


def bill_from_file(
    path: Path,
    identity: RecordIdentity,
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = DEFAULT_ENCODING,
) -> Bill:
    """Read one bill file and compute its total.

    Any failure to read, tokenize or coerce the file is reported as a
    ``RecordParseError`` naming ``identity.file_name``.
    """
    try:
        dataframe = read_bill_raw(path, delimiter=delimiter, encoding=encoding)
        line_items = rows_to_line_items(dataframe)
    except (OSError, ValueError, LookupError) as exc:
        raise RecordParseError(identity.file_name, str(exc)) from exc
    return Bill.from_line_items(identity, line_items)
