"""Append-only Markdown report file."""
from __future__ import annotations

from pathlib import Path

from bill_report.config import DEFAULT_ENCODING, DEFAULT_OUTPUT_PATH
from bill_report.domain.repositories import ReportSink


class MarkdownReportFile(ReportSink):
    """Opens, appends to and closes the report file on every write.

    Undecodable bytes from file names are written back unchanged.
    """

    def __init__(self, path: Path | str = DEFAULT_OUTPUT_PATH, encoding: str = DEFAULT_ENCODING) -> None:
        self._path = Path(path)
        self._encoding = encoding

    @property
    def target(self) -> Path:
        return self._path

    def reset(self) -> None:
        self._path.write_text("", encoding=self._encoding, errors="surrogateescape")

    def append(self, section: str) -> None:
        with self._path.open("a", encoding=self._encoding, errors="surrogateescape") as handle:
            handle.write(section)
