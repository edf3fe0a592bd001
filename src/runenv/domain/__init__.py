"""Domain layer - context values, overrides and exceptions."""

from .environments import (
    CURRENT_KEY,
    DEBUG_KEY,
    EXECUTION_MODES,
    RUNNING_ENVIRONMENTS,
    TESTING_KEY,
    ContextSnapshot,
    ExecutionMode,
    RunningEnvironment,
    is_truthy,
)
from .exceptions import (
    ContextNotInitializedError,
    InvalidEnvironmentError,
    InvalidExecutionModeError,
    RunEnvError,
    UnknownTokenError,
)
from .overrides import Override, OverrideKind

__all__ = [
    # Context Models
    "RunningEnvironment",
    "ExecutionMode",
    "ContextSnapshot",
    "RUNNING_ENVIRONMENTS",
    "EXECUTION_MODES",
    # Mirror Keys
    "CURRENT_KEY",
    "DEBUG_KEY",
    "TESTING_KEY",
    "is_truthy",
    # Override Models
    "Override",
    "OverrideKind",
    # Exceptions
    "RunEnvError",
    "ContextNotInitializedError",
    "InvalidEnvironmentError",
    "InvalidExecutionModeError",
    "UnknownTokenError",
]
