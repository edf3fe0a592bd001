"""Detection of context values from process and machine signals.

Every probe here treats a missing or unreadable signal as negative: detection
never raises.
"""

import os
import sys
import typing as t
from pathlib import Path

from ..config.settings import Settings
from ..domain.environments import (
    DEBUG_FLAG,
    DEVELOPMENT_MARKER_FILE,
    EMBEDDED_SERVER_MARKER,
    REQUEST_METHOD_MARKER,
    STAGING_MARKER_FILE,
    TESTING_DIR_NAME,
    ExecutionMode,
    RunningEnvironment,
    coerce_running_environment,
)
from ..infrastructure.logging import get_logger
from .mirror import EnvironmentMirror

if t.TYPE_CHECKING:
    import loguru


def program_directory(argv: t.Sequence[str] | None = None) -> Path:
    """Directory holding the running program.

    Based on argv[0]. Inline code (`python -c`) and interactive sessions
    have no program file, so the working directory stands in for them.
    """
    argv = sys.argv if argv is None else argv
    script = argv[0] if argv else ""
    if not script or script == "-c":
        return Path.cwd()
    return Path(os.path.abspath(script)).parent


class EnvironmentDetector:
    """Detects the four context values.

    Usage:
        detector = EnvironmentDetector(EnvironmentMirror(), settings=Settings())
        env = detector.detect_running_environment()
        debug = detector.detect_debug()
    """

    def __init__(
        self,
        mirror: EnvironmentMirror,
        *,
        settings: Settings | None = None,
        argv: t.Sequence[str] | None = None,
        program_dir: Path | None = None,
        logger: t.Optional["loguru.Logger"] = None,
    ) -> None:
        """Initialize the detector.

        Args:
            mirror: Environment table wrapper used for overrides and markers.
            settings: Supplies the marker file directory. Defaults to Settings().
            argv: Process arguments scanned for the debug flag.
                  Defaults to sys.argv at detection time.
            program_dir: Directory of the running program. Derived from argv
                  when not given.
            logger: Logger instance. Defaults to a module-specific logger.
        """
        self._mirror = mirror
        self._settings = settings or Settings()
        self._argv = argv
        self._program_dir = program_dir
        self._logger = logger or get_logger(__name__)

    @property
    def argv(self) -> t.Sequence[str]:
        return sys.argv if self._argv is None else self._argv

    @property
    def program_dir(self) -> Path:
        if self._program_dir is not None:
            return self._program_dir
        return program_directory(self.argv)

    def detect_running_environment(self) -> str:
        """Detect the running environment.

        An explicit RUN_ENV_current override wins and is trusted as is, then
        the development and staging marker files, then production.
        """
        override = self._mirror.current()
        if override is not None:
            value = coerce_running_environment(override)
            if not isinstance(value, RunningEnvironment):
                self._logger.warning(
                    f"Trusting unrecognised running environment override: {override!r}"
                )
            self._logger.debug(f"Running environment from override: {value}")
            return value

        config_dir = self._settings.config_dir
        if self._marker_exists(config_dir / DEVELOPMENT_MARKER_FILE):
            self._logger.debug(f"Development marker found in {config_dir}")
            return RunningEnvironment.DEVELOPMENT
        if self._marker_exists(config_dir / STAGING_MARKER_FILE):
            self._logger.debug(f"Staging marker found in {config_dir}")
            return RunningEnvironment.STAGING

        return RunningEnvironment.PRODUCTION

    def detect_debug(self) -> bool:
        """Debug is on when mirrored as truthy or `--debug` was passed."""
        if self._mirror.debug():
            return True
        return DEBUG_FLAG in self.argv

    def detect_testing(self) -> bool:
        """Testing is on when mirrored as truthy or the program lives in `t/`."""
        if self._mirror.testing():
            return True
        return self.program_dir.name == TESTING_DIR_NAME

    def detect_execution_mode(self) -> ExecutionMode:
        """Execution mode from marker keys; values are ignored."""
        if self._mirror.has(EMBEDDED_SERVER_MARKER):
            return ExecutionMode.EMBEDDED_SERVER
        if self._mirror.has(REQUEST_METHOD_MARKER):
            return ExecutionMode.CGI
        return ExecutionMode.SHELL

    def _marker_exists(self, path: Path) -> bool:
        try:
            return path.exists()
        except OSError as exc:
            self._logger.debug(f"Treating unreadable marker {path} as absent: {exc}")
            return False
