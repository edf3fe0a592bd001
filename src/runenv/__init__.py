"""runenv - running environment and execution mode detection."""

from .app import App, configure, create_app, get_context, reset_context
from .config.settings import LogLevel, Settings, build_settings
from .context import EnvironmentDetector, EnvironmentMirror, RunEnvContext
from .domain import (
    ContextNotInitializedError,
    ContextSnapshot,
    ExecutionMode,
    InvalidEnvironmentError,
    InvalidExecutionModeError,
    Override,
    OverrideKind,
    RunEnvError,
    RunningEnvironment,
    UnknownTokenError,
)

__all__ = [
    # App
    "App",
    "create_app",
    "get_context",
    "reset_context",
    "configure",
    # Config
    "Settings",
    "LogLevel",
    "build_settings",
    # Context
    "RunEnvContext",
    "EnvironmentDetector",
    "EnvironmentMirror",
    # Models
    "RunningEnvironment",
    "ExecutionMode",
    "ContextSnapshot",
    "Override",
    "OverrideKind",
    # Exceptions
    "RunEnvError",
    "ContextNotInitializedError",
    "InvalidEnvironmentError",
    "InvalidExecutionModeError",
    "UnknownTokenError",
]
