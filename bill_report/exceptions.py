"""Exception hierarchy for the bill report pipeline.

Scan and parse failures are fatal to a batch run; write failures are
reported per bill and never propagated.
"""
from __future__ import annotations

from pathlib import Path


class BillReportError(Exception):
    """Base exception for all bill report errors."""


class DirectoryReadError(BillReportError):
    """Raised when the input directory cannot be listed.

    Attributes:
        path: Directory that could not be read
    """

    def __init__(self, path: Path | str, reason: str | None = None) -> None:
        self.path = Path(path)
        message = f"Cannot read input directory '{self.path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class RecordParseError(BillReportError):
    """Raised when one input file cannot be read or its rows are malformed.

    Attributes:
        file_name: Name of the offending file inside the input directory
    """

    def __init__(self, file_name: str, reason: str | None = None) -> None:
        self.file_name = file_name
        message = f"Cannot parse bill file '{file_name}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class CoercionError(BillReportError):
    """Raised when a text field cannot be converted to its numeric type."""

    def __init__(self, field: str, value: object, expected: str) -> None:
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"Field '{field}' value {value!r} is not a valid {expected}")


class ReportWriteError(BillReportError):
    """Raised when appending one bill section to the report fails.

    Attributes:
        target: Report file being written
        bill_name: Name of the bill whose section was lost
    """

    def __init__(self, target: Path | str, bill_name: str, reason: str | None = None) -> None:
        self.target = Path(target)
        self.bill_name = bill_name
        message = f"Cannot write section '{bill_name}' to '{self.target}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
