"""XML fragments for JUnit/xUnit style reports.

Everything here is a pure function of its arguments. Attributes are
written in the order the mapping was built, every attribute value and
CDATA payload goes through `escape`, and durations are rendered as
milliseconds / 1000 with no rounding.
"""
from __future__ import annotations
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional
from ..utils.escape import escape, to_text

if TYPE_CHECKING:
    from .base import RunStatistics
    from .xunit import SuiteRecord, TestRecord

ENVELOPE_CLOSE = "</testsuites>"

def format_number(value: Any) -> str:
    # 0.0 -> "0", 2.0 -> "2"; anything else keeps its shortest repr
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return to_text(value)

def seconds(duration_ms: Optional[float]) -> float:
    return (duration_ms or 0) / 1000

def format_timestamp(moment: datetime) -> str:
    """RFC 1123 date in GMT, e.g. 'Mon, 19 Oct 2026 12:00:00 GMT'."""
    return format_datetime(moment.astimezone(timezone.utc), usegmt=True)

def tag(name: str, attrs: Dict[str, Any], close: bool, content: Optional[str] = None) -> str:
    end = "/>" if close else ">"
    pairs = [f'{key}="{escape(format_number(value))}"' for key, value in attrs.items()]
    out = "<" + name + (" " + " ".join(pairs) if pairs else "") + end
    if content:
        out += content + "</" + name + end
    return out

def cdata(text: Any) -> str:
    return "<![CDATA[" + escape(text) + "]]>"

def render_test(test: "TestRecord") -> str:
    attrs: Dict[str, Any] = {
        "classname": test.classname,
        "name": test.title,
        "time": seconds(test.duration),
    }
    if test.outcome == "failed":
        failure_attrs = dict(attrs, message=test.message)
        return tag("testcase", attrs, False, tag("failure", failure_attrs, False, cdata(test.stack)))
    if test.outcome == "pending":
        return tag("testcase", attrs, False, tag("skipped", {}, True))
    return tag("testcase", attrs, True)

def render_suite(suite: "SuiteRecord", timestamp: str) -> List[str]:
    """Open tag, one line per test, close tag. Suites without tests render nothing."""
    if not suite.tests:
        return []
    duration = sum(t.duration or 0 for t in suite.tests)
    lines = [tag("testsuite", {
        "name": suite.name,
        "tests": len(suite.tests),
        "failures": suite.fails,
        "errors": suite.fails,
        "skip": 0,
        "timestamp": timestamp,
        "time": seconds(duration),
    }, False)]
    lines.extend(render_test(t) for t in suite.tests)
    lines.append("</testsuite>")
    return lines

def render_envelope_open(stats: "RunStatistics", title: str, timestamp: str) -> str:
    # skip is derived and deliberately not clamped
    return tag("testsuites", {
        "name": title,
        "tests": stats.tests,
        "failures": stats.failures,
        "errors": stats.failures,
        "skip": stats.tests - stats.failures - stats.passes,
        "timestamp": timestamp,
        "time": seconds(stats.duration),
    }, False)

def render_report(suites: Iterable["SuiteRecord"], stats: "RunStatistics", title: str, moment: datetime) -> List[str]:
    timestamp = format_timestamp(moment)
    lines = [render_envelope_open(stats, title, timestamp)]
    for suite in suites:
        lines.extend(render_suite(suite, timestamp))
    lines.append(ENVELOPE_CLOSE)
    return lines
