# Lightweight package init: avoid eager imports that can fail at console start.
__all__ = ["XUnitReporter", "Runner", "StatsCollector", "escape"]

def __getattr__(name):
    if name == "XUnitReporter":
        from .reporters.xunit import XUnitReporter as _XUnitReporter
        return _XUnitReporter
    if name == "Runner":
        from .runners.runner import Runner as _Runner
        return _Runner
    if name == "StatsCollector":
        from .reporters.base import StatsCollector as _StatsCollector
        return _StatsCollector
    if name == "escape":
        from .utils.escape import escape as _escape
        return _escape
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
