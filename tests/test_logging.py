"""Tests for logging configuration, hooks and the failure events the library emits."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from lib_result import (
    Ok,
    add_log_hook,
    configure_logging,
    get_logger,
    init,
    remove_log_hook,
    to_error,
    wrap,
    wrap_throwable,
)
from lib_result._logging import LOGGER_NAME, configure_library_logger


def _boom() -> None:
    raise ValueError('boom')


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self) -> None:
        """Registered hooks receive log entry dicts."""
        received: list[dict[str, Any]] = []

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        get_logger('test').info('Test message', extra_field='extra_value')

        test_entries = [e for e in received if e.get('event') == 'Test message']
        assert len(test_entries) == 1
        assert test_entries[0]['extra_field'] == 'extra_value'
        assert test_entries[0]['level'] == 'info'

    def test_multiple_hooks_all_called(self) -> None:
        calls: list[str] = []

        configure_logging(level='DEBUG', json_output=False)
        add_log_hook(lambda _: calls.append('hook1'))
        add_log_hook(lambda _: calls.append('hook2'))

        get_logger('test').info('Test')

        assert calls == ['hook1', 'hook2']

    def test_remove_hook(self) -> None:
        """remove_log_hook() stops hook from being called."""
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG')
        add_log_hook(hook)
        logger = get_logger('test')
        logger.info('First')
        remove_log_hook(hook)
        logger.info('Second')

        assert calls == ['called']

    def test_remove_unknown_hook_is_noop(self) -> None:
        remove_log_hook(lambda _: None)

    def test_failing_hook_does_not_break_logging(self) -> None:
        received: list[dict[str, Any]] = []

        def broken(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('hook failure')

        configure_logging(level='DEBUG')
        add_log_hook(broken)
        add_log_hook(received.append)

        get_logger('test').info('Still logged')

        assert [e['event'] for e in received] == ['Still logged']

    def test_hook_gets_a_copy(self) -> None:
        received: list[dict[str, Any]] = []

        def mutate(event_dict: dict[str, Any]) -> None:
            event_dict['event'] = 'mutated'

        configure_logging(level='DEBUG')
        add_log_hook(mutate)
        add_log_hook(received.append)

        get_logger('test').info('original')

        assert received[0]['event'] == 'original'


class TestFailureEvents:
    """Events emitted when the library captures a failure."""

    def test_wrap_emits_wrapped_call_failed(self, captured_events) -> None:
        wrap(_boom)

        events = [e for e in captured_events if e['event'] == 'wrapped_call_failed']
        assert len(events) == 1
        assert events[0]['callable'] == '_boom'
        assert events[0]['error_type'] == 'ValueError'
        assert events[0]['level'] == 'debug'

    def test_wrap_throwable_emits_event(self, captured_events) -> None:
        wrap_throwable(_boom)()

        assert [e['callable'] for e in captured_events if e['event'] == 'wrapped_call_failed'] == ['_boom']

    def test_map_emits_callback_failed(self, captured_events) -> None:
        Ok(1).map(lambda _: _boom())

        events = [e for e in captured_events if e['event'] == 'callback_failed']
        assert events[0]['combinator'] == 'map'

    def test_promotion_emits_event(self, captured_events) -> None:
        to_error({'code': 1})
        to_error(42)

        names = [e['event'] for e in captured_events]
        assert 'error_promoted' in names
        assert 'error_unrecognized' in names

    def test_success_emits_nothing(self, captured_events) -> None:
        wrap(lambda: 1)
        Ok(1).map(str)

        assert captured_events == []

    def test_info_level_reports_failures(self) -> None:
        """Failures are logged at the configured level, not only at DEBUG."""
        received: list[dict[str, Any]] = []
        init(log_level='INFO')
        add_log_hook(received.append)

        wrap(_boom)

        events = [e for e in received if e['event'] == 'wrapped_call_failed']
        assert len(events) == 1
        assert events[0]['level'] == 'info'

    def test_silent_without_log_level(self) -> None:
        """With no level configured the library emits no events."""
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(received.append)

        wrap(_boom)
        to_error(42)

        assert received == []


class TestHostLoggingIsolation:
    """The library never takes over logging the application set up."""

    def test_env_level_leaves_root_logger_alone(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('LIB_RESULT_LOG_LEVEL', 'DEBUG')
        root_logger = logging.getLogger()
        app_handler = logging.NullHandler()
        root_logger.addHandler(app_handler)
        root_level = root_logger.level
        received: list[dict[str, Any]] = []
        add_log_hook(received.append)

        result = Ok(1).map(lambda x: 1 / 0)

        assert result.is_error()
        assert app_handler in root_logger.handlers
        assert root_logger.level == root_level
        assert [e['event'] for e in received] == ['callback_failed']

    def test_env_level_configures_library_logger_only(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('LIB_RESULT_LOG_LEVEL', 'INFO')

        wrap(_boom)

        library_logger = logging.getLogger(LOGGER_NAME)
        assert library_logger.level == logging.INFO
        assert library_logger.propagate is False
        assert len(library_logger.handlers) == 1

    def test_repeated_setup_keeps_one_handler(self) -> None:
        configure_library_logger('DEBUG')
        configure_library_logger('DEBUG', json_output=False)

        assert len(logging.getLogger(LOGGER_NAME).handlers) == 1

    def test_configure_logging_keeps_foreign_handlers(self) -> None:
        root_logger = logging.getLogger()
        app_handler = logging.NullHandler()
        root_logger.addHandler(app_handler)
        before = len(root_logger.handlers)

        configure_logging(level='DEBUG')
        configure_logging(level='INFO')

        assert app_handler in root_logger.handlers
        assert len(root_logger.handlers) == before + 1
        assert root_logger.level == logging.INFO

    def test_explicit_init_hands_library_events_to_root(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('LIB_RESULT_LOG_LEVEL', 'DEBUG')
        wrap(_boom)

        init(log_level='DEBUG')

        library_logger = logging.getLogger(LOGGER_NAME)
        assert library_logger.handlers == []
        assert library_logger.propagate is True
