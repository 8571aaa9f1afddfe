from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Callable, Dict, Optional, Any
import importlib, importlib.util, pathlib, time, traceback
from ..logging import get_logger

log = get_logger()

Listener = Callable[..., Any]

@dataclass
class Failure:
    message: str = ""
    stack: str = ""

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Failure":
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return cls(message=str(exc), stack=stack.rstrip("\n"))

@dataclass(eq=False)
class Suite:
    title: str = ""
    parent: Optional["Suite"] = None
    suites: List["Suite"] = field(default_factory=list)
    tests: List["Test"] = field(default_factory=list)
    separator: str = " "

    @property
    def root(self) -> bool: return self.parent is None and not self.title

    def titles(self) -> List[str]:
        chain = self.parent.titles() if self.parent else []
        return chain + [self.title] if self.title else chain

    def full_title(self, separator: Optional[str] = None) -> str:
        return (self.separator if separator is None else separator).join(self.titles())

    def add_suite(self, suite: "Suite") -> "Suite":
        suite.parent = self
        suite.separator = self.separator
        self.suites.append(suite)
        return suite

    def add_test(self, test: "Test") -> "Test":
        test.parent = self
        self.tests.append(test)
        return test

    def describe(self, title: str) -> "Suite":
        return self.add_suite(Suite(title))

    def it(self, title: str, fn: Optional[Callable[[], Any]] = None) -> "Test":
        return self.add_test(Test(title, fn))

@dataclass(eq=False)
class Test:
    __test__ = False
    title: str
    fn: Optional[Callable[[], Any]] = None
    parent: Optional[Suite] = None
    duration: Optional[int] = None
    state: Optional[str] = None
    err: Optional[Failure] = None

    @property
    def pending(self) -> bool: return self.fn is None

    def full_title(self, separator: Optional[str] = None) -> str:
        titles = self.parent.titles() if self.parent else []
        sep = separator if separator is not None else (self.parent.separator if self.parent else " ")
        return sep.join(titles + [self.title])

class Runner:
    """Walks a suite tree and tells its listeners what happened.

    Events: start, suite, suite end, test, pass, fail, pending, test end, end.
    Listeners run synchronously in the order they were registered.
    """
    EVENTS = ("start", "suite", "suite end", "test", "pass", "fail", "pending", "test end", "end")

    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = {e: [] for e in self.EVENTS}

    def on(self, event: str, listener: Listener) -> "Runner":
        if event not in self._listeners:
            raise ValueError(f"Unknown runner event: {event!r}")
        self._listeners[event].append(listener)
        return self

    def emit(self, event: str, *args: Any) -> None:
        for listener in list(self._listeners[event]):
            listener(*args)

    def run(self, root: Suite) -> None:
        self.emit("start")
        self._run_suite(root)
        self.emit("end")

    def _run_suite(self, suite: Suite) -> None:
        self.emit("suite", suite)
        for test in suite.tests:
            self._run_test(test)
        for child in suite.suites:
            self._run_suite(child)
        self.emit("suite end", suite)

    def _run_test(self, test: Test) -> None:
        if test.pending:
            self.emit("pending", test)
            self.emit("test end", test)
            return
        self.emit("test", test)
        t0 = time.perf_counter()
        try:
            test.fn()
            test.state = "passed"
        except Exception as e:
            test.state = "failed"
            test.err = Failure.from_exception(e)
        test.duration = int(round((time.perf_counter() - t0) * 1000))
        if test.state == "passed":
            self.emit("pass", test)
        else:
            log.debug("Test failed: %s: %s", test.full_title(), test.err.message)
            self.emit("fail", test, test.err)
        self.emit("test end", test)

def _load_suite_module(target: str):
    path = pathlib.Path(target)
    if path.suffix == ".py":
        spec = importlib.util.spec_from_file_location(path.stem, path)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load suite file: {target}")
        mod = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(mod)
        return mod
    return importlib.import_module(target)

def load_suite(target: str, separator: str = " ") -> Suite:
    """Import `target` (dotted module name or .py path) and build its suite tree via discover()."""
    mod = _load_suite_module(target)
    discover = getattr(mod, "discover", None)
    if discover is None:
        raise AttributeError(f"Suite module {target!r} has no discover() function")
    root = Suite(separator=separator)
    built = discover(root)
    return built if isinstance(built, Suite) else root
