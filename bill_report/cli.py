"""Command-line entrypoint for bill report generation."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from bill_report.application.use_cases import GenerateReportUseCase, ReportContext
from bill_report.config import (
    DEFAULT_DELIMITER,
    DEFAULT_ENCODING,
    DEFAULT_INPUT_DIR,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_SEPARATOR,
    Settings,
)
from bill_report.exceptions import BillReportError
from bill_report.infrastructure.repositories.directory_repository import DirectoryBillRepository
from bill_report.infrastructure.storage.report_writer import MarkdownReportFile
from bill_report.logging_setup import setup_logging

logger = logging.getLogger(__name__)


class ExitCode:
    SUCCESS = 0
    FATAL = 1
    PARTIAL_REPORT = 2
    USAGE = 3


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize a directory of bill files into a Markdown report")
    parser.add_argument("input_dir", nargs="?", default=str(DEFAULT_INPUT_DIR), help="Directory of bill files")
    parser.add_argument("--output", default=str(DEFAULT_OUTPUT_PATH), help="Report file to append to")
    parser.add_argument("--separator", default=DEFAULT_SEPARATOR, help="Separator between date and name in file names")
    parser.add_argument("--delimiter", default=DEFAULT_DELIMITER, help="Field delimiter inside bill files")
    parser.add_argument("--encoding", default=DEFAULT_ENCODING, help="Text encoding of input and report files")
    parser.add_argument("--truncate", action="store_true", help="Empty the report before writing instead of appending")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", type=Path, default=None, help="Also write log output to this file")
    return parser.parse_args(argv)


def build_use_case(settings: Settings) -> GenerateReportUseCase:
    context = ReportContext(
        repository=DirectoryBillRepository.from_settings(settings),
        sink=MarkdownReportFile(settings.output_path, encoding=settings.encoding),
        write_mode=settings.write_mode,
    )
    return GenerateReportUseCase(context)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(level=args.log_level, log_file=args.log_file)

    try:
        settings = Settings.from_args(args)
    except ValueError as exc:
        logger.error("Invalid settings: %s", exc)
        return ExitCode.USAGE

    try:
        response = build_use_case(settings).execute()
    except BillReportError as exc:
        logger.error("Batch failed, no report written: %s", exc)
        return ExitCode.FATAL

    if response.render.has_errors():
        logger.warning(
            "Report partially written: %d of %d section(s) failed",
            response.render.failed,
            len(response.bills),
        )
        return ExitCode.PARTIAL_REPORT
    return ExitCode.SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
