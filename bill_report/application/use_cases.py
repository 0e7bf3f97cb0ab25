"""Application services orchestrating the bill report workflow."""
from __future__ import annotations

import logging
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Callable, Sequence

from bill_report.application.dto import ReportResponse
from bill_report.config import WRITE_MODE_APPEND, WRITE_MODE_TRUNCATE, WRITE_MODES
from bill_report.domain.models import Bill
from bill_report.domain.repositories import BillRepository, ReportSink
from bill_report.domain.results import BatchState, RenderSummary
from bill_report.exceptions import ReportWriteError
from bill_report.presentation.markdown_report import render_bill

logger = logging.getLogger(__name__)


class BatchCoordinator:
    """Scans once, parses every discovered file concurrently and joins the bills.

    The join is all-or-nothing: a single failed parse fails the batch. Bills
    come back in scan order, whatever order the parses finish in.
    """

    def __init__(self, repository: BillRepository) -> None:
        self._repository = repository
        self._state = BatchState.IDLE

    @property
    def state(self) -> BatchState:
        return self._state

    def _transition(self, state: BatchState) -> None:
        logger.debug("Batch %s -> %s", self._state.value, state.value)
        self._state = state

    def run(self) -> list[Bill]:
        if self._state is not BatchState.IDLE:
            raise RuntimeError(f"Batch already ran (state={self._state.value})")

        self._transition(BatchState.SCANNING)
        try:
            identities = list(self._repository.scan())
        except Exception:
            self._transition(BatchState.FAILED)
            raise

        self._transition(BatchState.PARSING_ALL)
        if not identities:
            self._transition(BatchState.JOINED)
            return []

        pool = ThreadPoolExecutor(max_workers=len(identities), thread_name_prefix="bill-parse")
        futures: list[Future[Bill]] = [pool.submit(self._repository.parse, identity) for identity in identities]
        done, pending = wait(futures, return_when=FIRST_EXCEPTION)

        failed = next((f for f in futures if f in done and f.exception() is not None), None)
        if failed is not None:
            self._transition(BatchState.FAILED)
            # in-flight parses are abandoned, queued ones never start
            pool.shutdown(wait=False, cancel_futures=True)
            logger.debug("Abandoning %d unfinished parse(s)", len(pending))
            raise failed.exception()

        pool.shutdown(wait=True)
        bills = [future.result() for future in futures]
        self._transition(BatchState.JOINED)
        logger.info("Joined %d bill(s)", len(bills))
        return bills


@dataclass(slots=True)
class RenderReportUseCase:
    sink: ReportSink
    write_mode: str = WRITE_MODE_APPEND
    renderer: Callable[[Bill], str] = render_bill

    def __post_init__(self) -> None:
        if self.write_mode not in WRITE_MODES:
            raise ValueError(f"write_mode must be one of {WRITE_MODES}, got {self.write_mode!r}")

    def execute(self, bills: Sequence[Bill]) -> RenderSummary:
        target = self.sink.target
        errors: list[ReportWriteError] = []

        if self.write_mode == WRITE_MODE_TRUNCATE:
            try:
                self.sink.reset()
            except (OSError, ValueError) as exc:
                error = ReportWriteError(target, "*", f"truncate failed: {exc}")
                logger.error("%s", error)
                errors.append(error)

        written = 0
        for bill in bills:
            try:
                self.sink.append(self.renderer(bill))
            except (OSError, ValueError) as exc:
                error = ReportWriteError(target, bill.name, str(exc))
                error.__cause__ = exc
                logger.error("%s", error)
                errors.append(error)
                continue
            written += 1

        logger.info("Wrote %d of %d section(s) to %s", written, len(bills), target)
        return RenderSummary(target=target, written=written, errors=tuple(errors))


@dataclass(slots=True)
class ReportContext:
    repository: BillRepository
    sink: ReportSink
    write_mode: str = WRITE_MODE_APPEND


class GenerateReportUseCase:
    """Runs the batch and, only when every bill parsed, renders the report."""

    def __init__(self, context: ReportContext) -> None:
        self._context = context

    def execute(self) -> ReportResponse:
        bills = BatchCoordinator(self._context.repository).run()
        summary = RenderReportUseCase(sink=self._context.sink, write_mode=self._context.write_mode).execute(bills)
        return ReportResponse(bills=bills, render=summary)
