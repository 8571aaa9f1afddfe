from typing import List, Optional, TextIO
import sys
from ..runners.runner import Failure, Runner, Test
from .base import RunStatistics
from .markup import seconds, format_number

class ConsoleReporter:
    """Prints failures and a totals line when the run ends."""
    def __init__(self, runner: Runner, stats: RunStatistics, stream: Optional[TextIO] = None):
        self.stats = stats
        self.stream = stream if stream is not None else sys.stderr
        self.failures: List[Test] = []
        runner.on("fail", self.on_fail)
        runner.on("end", self.on_end)

    def on_fail(self, test: Test, err: Optional[Failure] = None) -> None:
        self.failures.append(test)

    def on_end(self) -> None:
        for i, t in enumerate(self.failures, 1):
            message = t.err.message if t.err else ""
            print(f" {i}) {t.full_title()}: {message}", file=self.stream)
        s = self.stats
        print(f"{s.passes} passing, {s.failures} failing, {s.pending} pending ({format_number(seconds(s.duration))}s)",
              file=self.stream)
