"""Loguru-based logging setup for runenv.

runenv is used as a library inside other applications, so it leaves the
host's loguru configuration alone: its messages are disabled on import and
`get_logger` only binds a name. `setup_logging` (called by `create_app`)
enables them and installs one stderr sink filtered to runenv records.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import LogLevel, Settings
from ..domain.environments import RunningEnvironment

if t.TYPE_CHECKING:
    import loguru

PACKAGE = "runenv"

DEVELOPMENT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name} - {message}"

# loguru's stock stderr handler, installed on import of loguru
_LOGURU_DEFAULT_HANDLER_ID = 0

_handler_id: int | None = None

logger.disable(PACKAGE)


def _remove_handler(handler_id: int) -> None:
    try:
        logger.remove(handler_id)
    except ValueError:
        # Already removed, by us or by the host
        pass


def configure_logger(
    level: LogLevel = LogLevel.INFO,
    environment: str = RunningEnvironment.PRODUCTION,
) -> None:
    """Enable runenv messages on a stderr sink for the given level.

    Replaces the sink installed by a previous call and loguru's stock
    stderr handler; sinks added by the host application are kept.
    Development gets a colourised format with the call site, every other
    environment a compact plain one.
    """
    global _handler_id

    if _handler_id is not None:
        _remove_handler(_handler_id)
    _remove_handler(_LOGURU_DEFAULT_HANDLER_ID)

    if environment == RunningEnvironment.DEVELOPMENT:
        _handler_id = logger.add(
            sys.stderr,
            level=str(level),
            format=DEVELOPMENT_FORMAT,
            filter=PACKAGE,
            colorize=True,
            backtrace=True,
        )
    else:
        _handler_id = logger.add(
            sys.stderr,
            level=str(level),
            format=DEFAULT_FORMAT,
            filter=PACKAGE,
            colorize=False,
        )
    logger.enable(PACKAGE)


def setup_logging(
    settings: Settings,
    environment: str = RunningEnvironment.PRODUCTION,
) -> None:
    """Configure logging from settings."""
    configure_logger(level=settings.log_level, environment=environment)


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to `name`. Never touches sinks."""
    return logger.bind(name=name)


def is_configured() -> bool:
    return _handler_id is not None


def reset_logging() -> None:
    """Remove the runenv sink and disable runenv messages again."""
    global _handler_id

    if _handler_id is not None:
        _remove_handler(_handler_id)
        _handler_id = None
    logger.disable(PACKAGE)
