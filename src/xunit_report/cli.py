from typing import Optional
import typer
from .config import load_config, ReportConfig
from .errors import ReporterError
from .logging import setup_logging
from .runners.runner import Runner, Suite, load_suite
from .reporters.base import StatsCollector, StreamSink
from .reporters.console import ConsoleReporter
from .reporters.xunit import XUnitReporter

app = typer.Typer(add_completion=False, help="xunit-report - run test suites and write JUnit/xUnit XML")

def _walk(suite: Suite):
    for t in suite.tests:
        yield t
    for child in suite.suites:
        yield from _walk(child)

@app.command()
def run(
    module: str = typer.Argument(..., help="Suite module (dotted name or .py path) exposing discover(root)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    out: Optional[str] = typer.Option(None, "--out", "-o", help="Write the XML report to this path instead of stdout"),
    title: Optional[str] = typer.Option(None, "--title", help="Report name attribute"),
    console: Optional[bool] = typer.Option(None, "--console/--no-console", help="Print a summary to stderr"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ..."),
):
    overrides = {"output": out, "title": title, "console": console, "log_level": log_level}
    try:
        cfg: ReportConfig = load_config(config, overrides)
    except ReporterError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2)
    log = setup_logging(cfg.log_level)

    root = load_suite(module, cfg.separator)
    runner = Runner()
    stats = StatsCollector(runner).stats
    if cfg.console:
        ConsoleReporter(runner, stats)
    if cfg.output:
        with open(cfg.output, "w", encoding="utf-8") as fh:
            XUnitReporter(runner, stats, StreamSink(fh), title=cfg.title, separator=cfg.separator)
            runner.run(root)
        log.info("Report written to %s", cfg.output)
    else:
        XUnitReporter(runner, stats, title=cfg.title, separator=cfg.separator)
        runner.run(root)
    raise typer.Exit(code=0 if stats.failures == 0 else 1)

@app.command("list")
def list_tests(
    module: str = typer.Argument(..., help="Suite module (dotted name or .py path)"),
    separator: str = typer.Option(" ", "--separator", help="Suite title separator"),
):
    root = load_suite(module, separator)
    for t in _walk(root):
        typer.echo(t.full_title())

def main():
    app()

if __name__ == "__main__":
    main()
