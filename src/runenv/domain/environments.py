"""Running environment and execution mode domain models."""

import enum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

# Mirror-table keys shared with shell scripts and child processes
CURRENT_KEY: Final = "RUN_ENV_current"
DEBUG_KEY: Final = "RUN_ENV_debug"
TESTING_KEY: Final = "RUN_ENV_testing"

# Value written for an enabled flag
TRUTHY_MARKER: Final = "1"

DEVELOPMENT_MARKER_FILE: Final = "development-machine"
STAGING_MARKER_FILE: Final = "staging-machine"

DEBUG_FLAG: Final = "--debug"
TESTING_DIR_NAME: Final = "t"

EMBEDDED_SERVER_MARKER: Final = "MOD_PERL"
REQUEST_METHOD_MARKER: Final = "REQUEST_METHOD"


class RunningEnvironment(enum.StrEnum):
    """Logical environment the process runs in."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class ExecutionMode(enum.StrEnum):
    """How the current process was invoked."""

    SHELL = "shell"
    CGI = "cgi"
    EMBEDDED_SERVER = "embedded_server"


RUNNING_ENVIRONMENTS: Final = frozenset(str(env) for env in RunningEnvironment)
EXECUTION_MODES: Final = frozenset(str(mode) for mode in ExecutionMode)


def is_truthy(value: str | None) -> bool:
    """Whether a mirror-table value switches a flag on.

    Missing, empty and "0" values are off; anything else is on.
    """
    return bool(value) and value != "0"


def coerce_running_environment(value: str) -> str:
    """Return the enum member for a known name, the raw string otherwise."""
    if value in RUNNING_ENVIRONMENTS:
        return RunningEnvironment(value)
    return value


class ContextSnapshot(BaseModel):
    """Point-in-time view of all four context values."""

    model_config = ConfigDict(frozen=True)

    running_environment: str = Field(
        description="Running environment name (unvalidated when overridden)",
    )
    debug: bool = Field(default=False, description="Debug flag")
    testing: bool = Field(default=False, description="Testing flag")
    execution_mode: ExecutionMode = Field(
        default=ExecutionMode.SHELL,
        description="Execution mode of this process",
    )

    def summary(self) -> str:
        """One human-readable line describing the context."""
        flags = [
            name
            for name, enabled in (("debug", self.debug), ("testing", self.testing))
            if enabled
        ]
        flag_text = ", ".join(flags) if flags else "no flags"
        return (
            f"running environment: {self.running_environment}; "
            f"execution mode: {self.execution_mode}; {flag_text}"
        )
