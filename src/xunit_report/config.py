from pydantic import BaseModel, Field, ValidationError, field_validator
from typing import Any, Dict, Literal, Optional
import yaml, pathlib
from .errors import ConfigError

DEFAULT_TITLE = "Tests"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

class ReportConfig(BaseModel):
    title: str = Field(DEFAULT_TITLE, description="Value of the <testsuites name=...> attribute")
    separator: str = Field(" ", description="Joins nested suite titles into a full title")
    output: Optional[str] = Field(None, description="Report path; stdout when unset")
    console: bool = Field(False, description="Print a run summary to stderr")
    log_level: LogLevel = Field("WARNING")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

def load_config(path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> ReportConfig:
    """Read `path` (defaults when None), apply non-None `overrides`, validate once."""
    try:
        data = yaml.safe_load(pathlib.Path(path).read_text(encoding="utf-8")) if path else None
        data = dict(data or {})
        data.update({k: v for k, v in (overrides or {}).items() if v is not None})
        return ReportConfig.model_validate(data)
    except (OSError, yaml.YAMLError, ValidationError, TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config {path or '<defaults>'}: {e}") from e
