from datetime import datetime, timezone
import pytest
from xunit_report.runners.runner import Runner, Suite, Test, Failure
from xunit_report.reporters.base import ListSink, RunStatistics
from xunit_report.reporters.xunit import XUnitReporter

FIXED = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)
STAMP = "Mon, 19 Oct 2026 12:00:00 GMT"

def finished(suite: Suite, title: str, duration=None, err: Failure = None) -> Test:
    t = suite.it(title, lambda: None)
    t.duration = duration
    t.state = "failed" if err else "passed"
    t.err = err
    return t

@pytest.fixture
def clock():
    return lambda: FIXED

@pytest.fixture
def runner():
    return Runner()

@pytest.fixture
def sink():
    return ListSink()

@pytest.fixture
def stats():
    return RunStatistics()

@pytest.fixture
def reporter(runner, stats, sink, clock):
    return XUnitReporter(runner, stats, sink, clock=clock)
