"""Pytest configuration and fixtures for runenv tests."""

import os
import typing as t
from pathlib import Path

import loguru
import pytest

from runenv.app import reset_context
from runenv.config.settings import LogLevel, Settings
from runenv.context import RunEnvContext
from runenv.domain.environments import (
    CURRENT_KEY,
    DEBUG_KEY,
    EMBEDDED_SERVER_MARKER,
    REQUEST_METHOD_MARKER,
    TESTING_KEY,
)
from runenv.infrastructure.logging import reset_logging

CONTEXT_KEYS = (
    CURRENT_KEY,
    DEBUG_KEY,
    TESTING_KEY,
    EMBEDDED_SERVER_MARKER,
    REQUEST_METHOD_MARKER,
)


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def clean_process_context():
    """Drop the process-wide context before and after each test."""
    reset_context()
    yield
    reset_context()


@pytest.fixture
def clean_process_env() -> t.Iterator[os._Environ]:
    """Strip context signals from os.environ, restoring it afterwards."""
    saved = dict(os.environ)
    for key in CONTEXT_KEYS:
        os.environ.pop(key, None)
    yield os.environ
    os.environ.clear()
    os.environ.update(saved)


@pytest.fixture
def environ() -> dict[str, str]:
    """Provide an isolated environment table with no context signals."""
    return {"PATH": "/usr/bin:/bin"}


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Provide an empty system configuration directory."""
    path = tmp_path / "etc"
    path.mkdir()
    return path


@pytest.fixture
def program_dir(tmp_path: Path) -> Path:
    """Provide a program directory that does not signal testing."""
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def test_settings(config_dir: Path) -> Settings:
    """Provide settings pointing at the temporary config directory."""
    return Settings(config_dir=config_dir, log_level=LogLevel.CRITICAL)


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture
def make_context(environ, test_settings, program_dir, mock_logger):
    """Factory for contexts on the isolated environment table.

    Returns an uninitialized context unless `initialize=True`.
    """

    def _make(
        *,
        argv: t.Sequence[str] = ("prog",),
        initialize: bool = True,
        **kwargs,
    ) -> RunEnvContext:
        options = {
            "environ": environ,
            "settings": test_settings,
            "argv": list(argv),
            "program_dir": program_dir,
            "logger": mock_logger,
        }
        options.update(kwargs)
        context = RunEnvContext(**options)
        if initialize:
            context.initialize()
        return context

    return _make


@pytest.fixture
def context(make_context) -> RunEnvContext:
    """Provide an initialized context with no detection signals."""
    return make_context()


@pytest.fixture
def host_sink() -> t.Iterator[list[str]]:
    """A sink added by the host application, removed after the test."""
    messages: list[str] = []
    handler_id = loguru.logger.add(
        lambda message: messages.append(str(message)), level="DEBUG"
    )
    yield messages
    loguru.logger.remove(handler_id)
