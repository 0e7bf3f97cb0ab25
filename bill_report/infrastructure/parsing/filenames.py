"""Decode bill identities from input file names."""
from __future__ import annotations

import logging

from bill_report.config import DEFAULT_SEPARATOR
from bill_report.domain.models import RecordIdentity
from bill_report.infrastructure.parsing.utils import parse_date

logger = logging.getLogger(__name__)


def split_by_separator(file_name: str, separator: str = DEFAULT_SEPARATOR) -> list[str]:
    # everything from the first dot on is treated as the extension
    stem = file_name.split(".", 1)[0]
    return stem.split(separator)


def decode_file_name(file_name: str, separator: str = DEFAULT_SEPARATOR) -> RecordIdentity:
    """Decode ``<date><separator><name>.<ext>`` into a record identity.

    Tokens after the name are dropped. An unparsable date token yields
    ``date=None``; a missing name token yields ``""``.
    """
    if not separator:
        raise ValueError("separator must be a non-empty string")
    parts = split_by_separator(file_name, separator)
    date_token = parts[0]
    name = parts[1] if len(parts) > 1 else ""
    identity = RecordIdentity(file_name=file_name, name=name, date=parse_date(date_token))
    if not identity.is_dated:
        logger.warning("File %r has no parseable date token %r", file_name, date_token)
    return identity
