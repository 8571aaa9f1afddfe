from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Optional, Protocol, TextIO
import sys
from ..runners.runner import Runner, Suite

Clock = Callable[[], datetime]

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

@dataclass
class RunStatistics:
    suites: int = 0
    tests: int = 0
    passes: int = 0
    pending: int = 0
    failures: int = 0
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    duration: Optional[float] = None  # milliseconds

class StatsCollector:
    """Keeps the run-wide totals the reporters read at the end of a run.

    Attach it to the runner before any reporter so its `end` handler has
    filled in the duration by the time a reporter renders.
    """
    def __init__(self, runner: Runner, clock: Clock = utc_now):
        self.stats = RunStatistics()
        self._clock = clock
        runner.on("start", self._on_start)
        runner.on("suite", self._on_suite)
        runner.on("test end", self._on_test_end)
        runner.on("pass", self._on_pass)
        runner.on("fail", self._on_fail)
        runner.on("pending", self._on_pending)
        runner.on("end", self._on_end)

    def _on_start(self) -> None: self.stats.start = self._clock()
    def _on_suite(self, suite: Suite) -> None:
        if not suite.root: self.stats.suites += 1
    def _on_test_end(self, test) -> None: self.stats.tests += 1
    def _on_pass(self, test) -> None: self.stats.passes += 1
    def _on_fail(self, test, err=None) -> None: self.stats.failures += 1
    def _on_pending(self, test) -> None: self.stats.pending += 1

    def _on_end(self) -> None:
        self.stats.end = self._clock()
        if self.stats.start is None:
            self.stats.start = self.stats.end
        self.stats.duration = (self.stats.end - self.stats.start).total_seconds() * 1000

class OutputSink(Protocol):
    def log(self, line: str) -> None: ...

class StreamSink:
    """Writes each logged chunk as one line to a text stream (stdout by default)."""
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout
    def log(self, line: str) -> None:
        self.stream.write(line + "\n")

class ListSink:
    def __init__(self): self.lines: List[str] = []
    def log(self, line: str) -> None: self.lines.append(line)
