"""Environment context: the four runtime classification values.

A RunEnvContext detects the running environment, debug flag, testing flag
and execution mode once in `initialize()` and then serves them from memory.
Explicit sets of the running environment and the two flags are mirrored into
the environment table so subprocesses inherit them.
"""

import threading
import typing as t
from pathlib import Path

from ..config.settings import Settings
from ..domain.environments import (
    EXECUTION_MODES,
    RUNNING_ENVIRONMENTS,
    ContextSnapshot,
    ExecutionMode,
    RunningEnvironment,
)
from ..domain.exceptions import (
    ContextNotInitializedError,
    InvalidEnvironmentError,
    InvalidExecutionModeError,
)
from ..domain.overrides import Override, OverrideKind
from ..infrastructure.logging import get_logger
from .detector import EnvironmentDetector
from .mirror import EnvironmentMirror
from .overrides import parse_override

if t.TYPE_CHECKING:
    import loguru


class RunEnvContext:
    """Holds and overrides the runtime classification of a process.

    Each value is guarded by its own lock. Nothing is detected lazily: call
    `initialize()` before using any accessor or setter.

    Usage:
        context = RunEnvContext()
        context.initialize()

        if context.is_production():
            ...
        context.set_staging()
        context.apply(["debug", "-testing"])
    """

    def __init__(
        self,
        *,
        environ: t.MutableMapping[str, str] | None = None,
        settings: Settings | None = None,
        argv: t.Sequence[str] | None = None,
        program_dir: Path | None = None,
        detector: EnvironmentDetector | None = None,
        logger: t.Optional["loguru.Logger"] = None,
    ) -> None:
        """Create an uninitialized context.

        Args:
            environ: Environment table to mirror into. Defaults to os.environ.
            settings: Settings for marker file lookup. Defaults to Settings().
            argv: Process arguments used for detection. Defaults to sys.argv.
            program_dir: Directory of the running program, for testing
                detection. Derived from argv when not given.
            detector: Detector override. Built from the other arguments when
                not given.
            logger: Logger instance. Defaults to a module-specific logger.
        """
        self._logger = logger or get_logger(__name__)
        self._mirror = EnvironmentMirror(environ)
        self._detector = detector or EnvironmentDetector(
            self._mirror,
            settings=settings,
            argv=argv,
            program_dir=program_dir,
            logger=self._logger,
        )

        self._env_lock = threading.Lock()
        self._debug_lock = threading.Lock()
        self._testing_lock = threading.Lock()
        self._mode_lock = threading.Lock()

        self._running_env: str | None = None
        self._debug: bool | None = None
        self._testing: bool | None = None
        self._execution_mode: ExecutionMode | None = None

    @property
    def mirror(self) -> EnvironmentMirror:
        """Environment table wrapper this context writes to."""
        return self._mirror

    @property
    def initialized(self) -> bool:
        return self._execution_mode is not None

    def initialize(self) -> None:
        """Detect all four values from the current signals.

        Calling it again re-detects, discarding values set in memory only
        (execution mode); mirrored values survive through the environment.
        """
        with self._env_lock:
            self._running_env = self._detector.detect_running_environment()
        with self._debug_lock:
            self._debug = self._detector.detect_debug()
        with self._testing_lock:
            self._testing = self._detector.detect_testing()
        with self._mode_lock:
            self._execution_mode = self._detector.detect_execution_mode()

        self._logger.debug(f"Context initialized: {self.snapshot().summary()}")

    def reset(self) -> None:
        """Rebuild the context from the current signals."""
        self.initialize()

    def snapshot(self) -> ContextSnapshot:
        """Capture all four values."""
        return ContextSnapshot(
            running_environment=self.current(),
            debug=self.is_debug(),
            testing=self.is_testing(),
            execution_mode=self.execution_mode(),
        )

    # Running environment

    def current(self) -> str:
        """Current running environment.

        A RunningEnvironment member, or the raw string of an unrecognised
        RUN_ENV_current override.
        """
        with self._env_lock:
            return self._require(self._running_env)

    def is_development(self) -> bool:
        return self.current() == RunningEnvironment.DEVELOPMENT

    def is_staging(self) -> bool:
        return self.current() == RunningEnvironment.STAGING

    def is_production(self) -> bool:
        return self.current() == RunningEnvironment.PRODUCTION

    def set_running_environment(self, value: str) -> None:
        """Set and mirror the running environment.

        Raises:
            InvalidEnvironmentError: If value is not an exact environment name.
        """
        if value not in RUNNING_ENVIRONMENTS:
            raise InvalidEnvironmentError(value)
        env = RunningEnvironment(value)
        with self._env_lock:
            self._require(self._running_env)
            self._running_env = env
            self._mirror.write_current(str(env))
        self._logger.info(f"Running environment set to {env}")

    def set_development(self) -> None:
        self.set_running_environment(RunningEnvironment.DEVELOPMENT)

    def set_staging(self) -> None:
        self.set_running_environment(RunningEnvironment.STAGING)

    def set_production(self) -> None:
        self.set_running_environment(RunningEnvironment.PRODUCTION)

    # Debug flag

    def is_debug(self) -> bool:
        with self._debug_lock:
            return self._require(self._debug)

    def set_debug(self, value: bool = True) -> None:
        """Turn debugging on, or off when value is false."""
        if not value:
            self.clear_debug()
            return
        with self._debug_lock:
            self._require(self._debug)
            self._debug = True
            self._mirror.write_debug()
        self._logger.info("Debug enabled")

    def clear_debug(self) -> None:
        """Turn debugging off and drop it from the environment table."""
        with self._debug_lock:
            self._require(self._debug)
            self._debug = False
            self._mirror.remove_debug()
        self._logger.info("Debug cleared")

    # Testing flag

    def is_testing(self) -> bool:
        with self._testing_lock:
            return self._require(self._testing)

    def set_testing(self, value: bool = True) -> None:
        """Turn testing on, or off when value is false."""
        if not value:
            self.clear_testing()
            return
        with self._testing_lock:
            self._require(self._testing)
            self._testing = True
            self._mirror.write_testing()
        self._logger.info("Testing enabled")

    def clear_testing(self) -> None:
        """Turn testing off and drop it from the environment table."""
        with self._testing_lock:
            self._require(self._testing)
            self._testing = False
            self._mirror.remove_testing()
        self._logger.info("Testing cleared")

    # Execution mode

    def execution_mode(self) -> ExecutionMode:
        with self._mode_lock:
            return self._require(self._execution_mode)

    def is_shell(self) -> bool:
        return self.execution_mode() == ExecutionMode.SHELL

    def is_cgi(self) -> bool:
        return self.execution_mode() == ExecutionMode.CGI

    def is_embedded_server(self) -> bool:
        return self.execution_mode() == ExecutionMode.EMBEDDED_SERVER

    def set_execution_mode(self, value: str) -> None:
        """Set the execution mode. It is never mirrored.

        Raises:
            InvalidExecutionModeError: If value is not an exact mode name.
        """
        if value not in EXECUTION_MODES:
            raise InvalidExecutionModeError(value)
        mode = ExecutionMode(value)
        with self._mode_lock:
            self._require(self._execution_mode)
            self._execution_mode = mode
        self._logger.info(f"Execution mode set to {mode}")

    def set_shell(self) -> None:
        self.set_execution_mode(ExecutionMode.SHELL)

    def set_cgi(self) -> None:
        self.set_execution_mode(ExecutionMode.CGI)

    def set_embedded_server(self) -> None:
        self.set_execution_mode(ExecutionMode.EMBEDDED_SERVER)

    # Bulk overrides

    def apply(self, tokens: t.Iterable[str | None]) -> None:
        """Apply override tokens left to right.

        Stops at the first unknown token; earlier tokens stay applied.

        Raises:
            TypeError: If tokens is a single string rather than a collection.
            UnknownTokenError: If a token matches no override.
        """
        if isinstance(tokens, str):
            raise TypeError(
                f"apply() takes an iterable of tokens, not a string: {tokens!r}"
            )
        for token in tokens:
            override = parse_override(token)
            if override is not None:
                self.apply_override(override)

    def apply_overrides(self, overrides: t.Iterable[Override]) -> None:
        """Apply pre-built overrides in order."""
        for override in overrides:
            self.apply_override(override)

    def apply_override(self, override: Override) -> None:
        match override.kind:
            case OverrideKind.SET_TESTING:
                self.set_testing()
            case OverrideKind.CLEAR_TESTING:
                self.clear_testing()
            case OverrideKind.SET_DEBUG:
                self.set_debug()
            case OverrideKind.CLEAR_DEBUG:
                self.clear_debug()
            case OverrideKind.RUNNING_ENVIRONMENT:
                self.set_running_environment(override.value)
            case OverrideKind.EXECUTION_MODE:
                self.set_execution_mode(override.value)

    def _require(self, value):
        if value is None:
            raise ContextNotInitializedError(
                "RunEnvContext must be initialized before use; call initialize()"
            )
        return value
