import logging
from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "xunit_report"

def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)

def setup_logging(level: str = "WARNING"):
    # stderr keeps the XML document on stdout clean
    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True)
    logging.basicConfig(level=level.upper(), format="%(message)s", datefmt="[%X]", handlers=[handler], force=True)
    return get_logger()
