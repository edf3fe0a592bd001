import enum
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class LogLevel(enum.StrEnum):
    """Log levels understood by loguru."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def default_config_dir() -> Path:
    """System configuration directory: `etc` under the filesystem root."""
    return Path(os.path.abspath(os.sep)) / "etc"


class Settings(BaseModel):
    """Settings container used to bootstrap the app.

    Detection inputs that come from the machine rather than the process
    (where marker files live) are kept here so tests can point them at a
    temporary directory.
    """

    model_config = ConfigDict(frozen=True)

    config_dir: Path = Field(
        default_factory=default_config_dir,
        description="Directory searched for environment marker files",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Minimum level emitted by the runenv logger",
    )


def build_settings(**overrides) -> Settings:
    """Build Settings, ignoring overrides that are None."""
    values = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**values)
