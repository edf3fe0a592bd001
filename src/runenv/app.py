import threading
import typing as t
from dataclasses import dataclass
from pathlib import Path

from .config.settings import Settings
from .context import RunEnvContext
from .infrastructure.logging import setup_logging


@dataclass(frozen=True)
class App:
    """Application wiring container.

    Holds the settings and the initialized context built from them.
    """

    settings: Settings
    context: RunEnvContext


def create_app(
    settings: Settings | None = None,
    *,
    environ: t.MutableMapping[str, str] | None = None,
    argv: t.Sequence[str] | None = None,
    program_dir: Path | None = None,
) -> App:
    """Create an `App` with an initialized context.

    Logging is configured after detection so the detected running
    environment picks the log format.
    """
    settings = settings or Settings()
    context = RunEnvContext(
        environ=environ,
        settings=settings,
        argv=argv,
        program_dir=program_dir,
    )
    context.initialize()
    setup_logging(settings, environment=context.current())
    return App(settings=settings, context=context)


_context: RunEnvContext | None = None
_context_lock = threading.Lock()


def get_context() -> RunEnvContext:
    """Process-wide context, created and initialized on first call.

    Leaves logging alone; runenv messages stay disabled unless the host
    calls `setup_logging` or uses `create_app`.
    """
    global _context

    with _context_lock:
        if _context is None:
            context = RunEnvContext()
            context.initialize()
            _context = context
        return _context


def reset_context() -> None:
    """Drop the process-wide context; the next get_context() re-detects."""
    global _context

    with _context_lock:
        _context = None


def configure(*tokens: str | None) -> RunEnvContext:
    """Apply override tokens to the process-wide context.

    Raises:
        UnknownTokenError: If a token matches no override.
    """
    context = get_context()
    context.apply(tokens)
    return context
