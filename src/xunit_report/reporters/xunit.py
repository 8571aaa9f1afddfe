from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
from ..errors import NoActiveSuiteError, RunClosedError
from ..logging import get_logger
from ..runners.runner import Failure, Runner, Suite, Test
from .base import Clock, OutputSink, RunStatistics, StreamSink, utc_now
from .markup import render_report

log = get_logger()

@dataclass(frozen=True)
class TestRecord:
    __test__ = False
    classname: str
    title: str
    duration: Optional[float]
    outcome: str  # passed | failed | pending
    message: str = ""
    stack: str = ""

@dataclass
class SuiteRecord:
    name: str
    tests: List[TestRecord] = field(default_factory=list)
    passes: int = 0
    fails: int = 0

class ResultAggregator:
    """Collects per-suite outcomes as a flat list of suite records.

    The most recently started suite is always the current one; every
    test event lands in the last record, whatever suite the test is
    declared in.
    """
    def __init__(self, separator: Optional[str] = None):
        self.suites: List[SuiteRecord] = []
        self.separator = separator
        self.closed = False

    def _current(self, event: str, test: Test) -> SuiteRecord:
        if self.closed:
            raise RunClosedError(event)
        if not self.suites:
            raise NoActiveSuiteError(event, test.title)
        return self.suites[-1]

    def _record(self, test: Test, outcome: str, err: Optional[Failure] = None) -> TestRecord:
        parent = test.parent.full_title(self.separator) if test.parent else ""
        return TestRecord(
            classname=parent,
            title=test.title,
            duration=test.duration,
            outcome=outcome,
            message=err.message if err else "",
            stack=err.stack if err else "",
        )

    def suite_started(self, suite: Suite) -> SuiteRecord:
        if self.closed:
            raise RunClosedError("suite")
        record = SuiteRecord(name=suite.full_title(self.separator))
        self.suites.append(record)
        log.debug("Suite started: %r", record.name)
        return record

    def test_passed(self, test: Test) -> TestRecord:
        current = self._current("pass", test)
        record = self._record(test, "pending" if test.pending else "passed")
        current.tests.append(record)
        current.passes += 1
        return record

    def test_failed(self, test: Test, err: Optional[Failure] = None) -> TestRecord:
        current = self._current("fail", test)
        err = err if err is not None else (test.err or Failure())
        record = self._record(test, "failed", err)
        current.tests.append(record)
        current.fails += 1
        log.debug("Recorded failure in %r: %s", current.name, test.title)
        return record

    def test_pending(self, test: Test) -> TestRecord:
        current = self._current("pending", test)
        record = self._record(test, "pending")
        current.tests.append(record)
        return record

    def close(self) -> List[SuiteRecord]:
        if self.closed:
            raise RunClosedError("end")
        self.closed = True
        return self.suites

class XUnitReporter:
    """Writes a JUnit/xUnit XML document for one run once the runner ends."""
    def __init__(self, runner: Runner, stats: RunStatistics, sink: Optional[OutputSink] = None,
                 title: str = "Tests", separator: Optional[str] = None, clock: Clock = utc_now):
        self.stats = stats
        self.sink = sink if sink is not None else StreamSink()
        self.title = title
        self.clock = clock
        self.aggregator = ResultAggregator(separator)
        runner.on("suite", self.aggregator.suite_started)
        runner.on("pass", self.aggregator.test_passed)
        runner.on("fail", self.aggregator.test_failed)
        runner.on("pending", self.aggregator.test_pending)
        runner.on("end", self.on_end)

    @property
    def suites(self) -> List[SuiteRecord]: return self.aggregator.suites

    def on_end(self) -> None:
        suites = self.aggregator.close()
        lines = render_report(suites, self.stats, self.title, self.clock())
        for line in lines:
            self.sink.log(line)
        rendered = sum(1 for s in suites if s.tests)
        if rendered < len(suites):
            log.debug("Dropped %d empty suite(s)", len(suites) - rendered)
        log.info("Wrote xunit report: %d suite(s), %d test(s)", rendered, self.stats.tests)
