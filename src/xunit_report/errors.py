class ReporterError(Exception):
    """Base class for everything the reporter raises on purpose."""

class NoActiveSuiteError(ReporterError):
    def __init__(self, event: str, title: str = ""):
        self.event = event
        self.title = title
        super().__init__(f"'{event}' event for {title!r} received before any suite started")

class RunClosedError(ReporterError):
    def __init__(self, event: str):
        self.event = event
        super().__init__(f"'{event}' event received after the run ended")

class ConfigError(ReporterError):
    pass
