"""Environment-variable mirror for context values.

Values written here end up in the environment of any subprocess spawned
afterwards, which is how child processes inherit the parent's running
environment, debug and testing flags.
"""

import os
import typing as t

from ..domain.environments import (
    CURRENT_KEY,
    DEBUG_KEY,
    TESTING_KEY,
    TRUTHY_MARKER,
    is_truthy,
)


class EnvironmentMirror:
    """Reads and writes the RUN_ENV_* keys of an environment table.

    Defaults to `os.environ`. Any mutable mapping can be injected, which
    keeps tests away from the real process environment.
    """

    def __init__(self, environ: t.MutableMapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    @property
    def environ(self) -> t.MutableMapping[str, str]:
        """The underlying environment table."""
        return self._environ

    def has(self, key: str) -> bool:
        """Whether `key` is present, whatever its value."""
        return key in self._environ

    def current(self) -> str | None:
        """Running environment override, or None when unset or empty."""
        return self._environ.get(CURRENT_KEY) or None

    def write_current(self, value: str) -> None:
        self._environ[CURRENT_KEY] = value

    def debug(self) -> bool:
        return is_truthy(self._environ.get(DEBUG_KEY))

    def write_debug(self) -> None:
        self._environ[DEBUG_KEY] = TRUTHY_MARKER

    def remove_debug(self) -> None:
        self._environ.pop(DEBUG_KEY, None)

    def testing(self) -> bool:
        return is_truthy(self._environ.get(TESTING_KEY))

    def write_testing(self) -> None:
        self._environ[TESTING_KEY] = TRUTHY_MARKER

    def remove_testing(self) -> None:
        self._environ.pop(TESTING_KEY, None)
