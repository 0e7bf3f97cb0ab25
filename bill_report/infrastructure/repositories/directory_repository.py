"""Filesystem-backed repository discovering and parsing bill files."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Sequence

from bill_report.config import DEFAULT_DELIMITER, DEFAULT_ENCODING, DEFAULT_SEPARATOR, Settings
from bill_report.domain.models import Bill, RecordIdentity
from bill_report.domain.repositories import BillRepository
from bill_report.exceptions import DirectoryReadError
from bill_report.infrastructure.parsing.csv_bills import bill_from_file
from bill_report.infrastructure.parsing.filenames import decode_file_name

logger = logging.getLogger(__name__)


class DirectoryBillRepository(BillRepository):
    def __init__(
        self,
        input_dir: Path | str,
        separator: str = DEFAULT_SEPARATOR,
        delimiter: str = DEFAULT_DELIMITER,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        self._input_dir = Path(input_dir)
        self._separator = separator
        self._delimiter = delimiter
        self._encoding = encoding

    @classmethod
    def from_settings(cls, settings: Settings) -> "DirectoryBillRepository":
        return cls(
            settings.input_dir,
            separator=settings.separator,
            delimiter=settings.delimiter,
            encoding=settings.encoding,
        )

    def scan(self) -> Sequence[RecordIdentity]:
        """List the input directory once and decode every entry, in listing order."""
        try:
            entries = os.listdir(self._input_dir)
        except OSError as exc:
            raise DirectoryReadError(self._input_dir, exc.strerror or str(exc)) from exc
        identities = [decode_file_name(entry, self._separator) for entry in entries]
        logger.info("Found %d file(s) in %s", len(identities), self._input_dir)
        return identities

    def parse(self, identity: RecordIdentity) -> Bill:
        bill = bill_from_file(
            self._input_dir / identity.file_name,
            identity,
            delimiter=self._delimiter,
            encoding=self._encoding,
        )
        logger.debug("Parsed %s: %d item(s)", identity.file_name, len(bill.line_items))
        return bill
