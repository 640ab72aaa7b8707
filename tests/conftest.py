"""Pytest configuration and shared fixtures for lib-result tests."""

import logging

import pytest

from lib_result import _config
from lib_result._logging import clear_log_hooks


@pytest.fixture(autouse=True)
def reset_config(monkeypatch: pytest.MonkeyPatch):
    """Start every test silent, with no hooks and no env overrides."""
    monkeypatch.delenv('LIB_RESULT_LOG_LEVEL', raising=False)
    monkeypatch.delenv('LIB_RESULT_LOG_FORMAT', raising=False)
    monkeypatch.setattr(_config, '_config', None)
    clear_log_hooks()
    root_logger = logging.getLogger()
    library_logger = logging.getLogger('lib_result')
    handlers, level = list(root_logger.handlers), root_logger.level
    library_state = list(library_logger.handlers), library_logger.level, library_logger.propagate
    yield
    clear_log_hooks()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    library_logger.handlers[:] = library_state[0]
    library_logger.setLevel(library_state[1])
    library_logger.propagate = library_state[2]


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from lib_result import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from lib_result import Err

    return Err(ValueError('test error'))


@pytest.fixture
def captured_events():
    """Enable DEBUG logging and collect every emitted event dict."""
    from lib_result import add_log_hook, init

    events: list[dict] = []
    init(log_level='DEBUG')
    add_log_hook(events.append)
    return events
