"""Batch ingestion of bill files into a Markdown report."""
from bill_report.application.use_cases import (
    BatchCoordinator,
    GenerateReportUseCase,
    RenderReportUseCase,
    ReportContext,
)
from bill_report.domain.models import Bill, LineItem, RecordIdentity
from bill_report.exceptions import (
    BillReportError,
    CoercionError,
    DirectoryReadError,
    RecordParseError,
    ReportWriteError,
)
from bill_report.infrastructure.parsing.filenames import decode_file_name
from bill_report.infrastructure.repositories.directory_repository import DirectoryBillRepository
from bill_report.infrastructure.storage.report_writer import MarkdownReportFile

__all__ = [
    "BatchCoordinator",
    "GenerateReportUseCase",
    "RenderReportUseCase",
    "ReportContext",
    "Bill",
    "LineItem",
    "RecordIdentity",
    "BillReportError",
    "CoercionError",
    "DirectoryReadError",
    "RecordParseError",
    "ReportWriteError",
    "decode_file_name",
    "DirectoryBillRepository",
    "MarkdownReportFile",
]
