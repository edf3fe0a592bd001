"""Custom exceptions for runenv."""


class RunEnvError(Exception):
    """Base exception for runenv errors."""

    pass


class ContextNotInitializedError(RunEnvError):
    """Raised when a RunEnvContext is read or written before initialize().

    Detection only happens in initialize(), so an uninitialized context has
    no values to hand out.
    """

    pass


class InvalidEnvironmentError(RunEnvError, ValueError):
    """Raised when setting an unrecognised running environment name."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"No such running environment: {value!r}")


class InvalidExecutionModeError(RunEnvError, ValueError):
    """Raised when setting an unrecognised execution mode name."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"No such execution mode: {value!r}")


class UnknownTokenError(RunEnvError, ValueError):
    """Raised when a bulk override token matches no known override.

    Tokens applied before the offending one are left in effect.
    """

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown override token: {token!r}")
