import threading
from datetime import date
from pathlib import Path
from typing import Callable, Sequence

import pytest

from bill_report.application.use_cases import BatchCoordinator
from bill_report.domain.models import Bill, LineItem, RecordIdentity
from bill_report.domain.results import BatchState
from bill_report.exceptions import DirectoryReadError, RecordParseError


def make_identity(name: str) -> RecordIdentity:
    return RecordIdentity(file_name=f"2021-01-01_{name}.csv", name=name, date=date(2021, 1, 1))


class FakeRepository:
    def __init__(
        self,
        names: Sequence[str],
        on_parse: Callable[[RecordIdentity], None] | None = None,
        scan_error: Exception | None = None,
    ) -> None:
        self._identities = [make_identity(name) for name in names]
        self._on_parse = on_parse
        self._scan_error = scan_error
        self.scan_calls = 0

    def scan(self) -> Sequence[RecordIdentity]:
        self.scan_calls += 1
        if self._scan_error is not None:
            raise self._scan_error
        return self._identities

    def parse(self, identity: RecordIdentity) -> Bill:
        if self._on_parse is not None:
            self._on_parse(identity)
        return Bill.from_line_items(identity, [LineItem(identity.name.lower(), 1, 1.0)])


def test_run_returns_bills_in_scan_order():
    coordinator = BatchCoordinator(FakeRepository(["Alice", "Bob", "Carol"]))

    bills = coordinator.run()

    assert [bill.name for bill in bills] == ["Alice", "Bob", "Carol"]
    assert coordinator.state is BatchState.JOINED


def test_order_follows_scan_not_completion():
    bob_done = threading.Event()
    finished: list[str] = []

    def on_parse(identity: RecordIdentity) -> None:
        if identity.name == "Alice":
            assert bob_done.wait(timeout=5)
        finished.append(identity.name)
        if identity.name == "Bob":
            bob_done.set()

    bills = BatchCoordinator(FakeRepository(["Alice", "Bob"], on_parse=on_parse)).run()

    assert finished == ["Bob", "Alice"]
    assert [bill.name for bill in bills] == ["Alice", "Bob"]


def test_parses_run_concurrently():
    barrier = threading.Barrier(3, timeout=5)

    def on_parse(identity: RecordIdentity) -> None:
        # only passes if all three parses are in flight together
        barrier.wait()

    bills = BatchCoordinator(FakeRepository(["Alice", "Bob", "Carol"], on_parse=on_parse)).run()

    assert len(bills) == 3


def test_empty_scan_joins_to_empty_list():
    coordinator = BatchCoordinator(FakeRepository([]))

    assert coordinator.run() == []
    assert coordinator.state is BatchState.JOINED


def test_scan_failure_fails_batch(tmp_path: Path):
    error = DirectoryReadError(tmp_path / "missing", "No such file or directory")
    coordinator = BatchCoordinator(FakeRepository([], scan_error=error))

    with pytest.raises(DirectoryReadError):
        coordinator.run()

    assert coordinator.state is BatchState.FAILED


def test_single_parse_failure_fails_batch():
    def on_parse(identity: RecordIdentity) -> None:
        if identity.name == "Bob":
            raise RecordParseError(identity.file_name, "bad row")

    coordinator = BatchCoordinator(FakeRepository(["Alice", "Bob", "Carol"], on_parse=on_parse))

    with pytest.raises(RecordParseError) as excinfo:
        coordinator.run()

    assert excinfo.value.file_name == "2021-01-01_Bob.csv"
    assert coordinator.state is BatchState.FAILED


def test_failure_does_not_wait_for_slow_siblings():
    release = threading.Event()

    def on_parse(identity: RecordIdentity) -> None:
        if identity.name == "Slow":
            release.wait(timeout=5)
        else:
            raise RecordParseError(identity.file_name, "bad row")

    coordinator = BatchCoordinator(FakeRepository(["Slow", "Broken"], on_parse=on_parse))
    try:
        with pytest.raises(RecordParseError):
            coordinator.run()
        assert not release.is_set()
    finally:
        release.set()


def test_coordinator_runs_once():
    repo = FakeRepository(["Alice"])
    coordinator = BatchCoordinator(repo)
    coordinator.run()

    with pytest.raises(RuntimeError):
        coordinator.run()
    assert repo.scan_calls == 1
