"""Structured logging configuration for lib-result.

Uses structlog's ProcessorFormatter to unify structlog and stdlib logging output,
so events emitted by the library and by third-party packages share one format.

The library logs captured failures at the configured level, and only once a level
has been set (see ``lib_result.init``). With no level configured it is silent.

Only handlers installed here are ever replaced. Logging enabled lazily from
LIB_RESULT_LOG_LEVEL is confined to the ``lib_result`` logger; the root logger and
the global structlog configuration are touched only by an explicit
``configure_logging`` / ``init`` call.
"""

from __future__ import annotations

import contextlib
import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_library_logger',
    'configure_logging',
    'get_logger',
    'log_failure',
    'remove_log_hook',
]

LOGGER_NAME = 'lib_result'


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _create_hook_processor(),
    ]


def _get_structlog_processors() -> list[Any]:
    """Get the full processor chain for structlog loggers."""
    import structlog

    return [
        structlog.stdlib.filter_by_level,
        *_get_shared_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool = True) -> Any:
    """Get the appropriate renderer based on output format."""
    import structlog

    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


class _LibResultHandler(logging.StreamHandler):
    """stderr handler installed by lib-result, so it can be told apart from the host's."""


def _install_handler(logger: logging.Logger, json_output: bool) -> None:
    """Replace the lib-result handler on logger, leaving every other handler alone."""
    import structlog

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = _LibResultHandler(sys.stderr)
    handler.setFormatter(formatter)

    _remove_handlers(logger)
    logger.addHandler(handler)


def _remove_handlers(logger: logging.Logger) -> None:
    for handler in [h for h in logger.handlers if isinstance(h, _LibResultHandler)]:
        logger.removeHandler(handler)


def _level_number(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Configure structlog with ProcessorFormatter for unified output.

    This is application-level setup: it configures structlog globally, sets
    the root logger level and adds a stderr handler to the root logger.
    Handlers the application installed itself are kept.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use colored console output.
    """
    import structlog

    structlog.configure(
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    _install_handler(root_logger, json_output)
    root_logger.setLevel(_level_number(level))

    # Library events now flow through the root handler.
    library_logger = logging.getLogger(LOGGER_NAME)
    _remove_handlers(library_logger)
    library_logger.setLevel(logging.NOTSET)
    library_logger.propagate = True


def configure_library_logger(
    level: str,
    *,
    json_output: bool = True,
) -> None:
    """Send lib-result's own events to stderr without touching anything else.

    Only the ``lib_result`` logger is configured: it gets its own handler and
    level and stops propagating, so the root logger, its handlers and the
    global structlog configuration stay as the application left them.

    Args:
        level: Logging level for the ``lib_result`` logger.
        json_output: If True, emit JSON logs. If False, use colored console output.
    """
    library_logger = logging.getLogger(LOGGER_NAME)
    _install_handler(library_logger, json_output)
    library_logger.setLevel(_level_number(level))
    library_logger.propagate = False


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger.

    Args:
        name: Logger name. If None, uses the caller's module name.

    Returns:
        A structlog BoundLogger.
    """
    import structlog

    return structlog.get_logger(name)


def _library_logger() -> Any:
    """Bind the ``lib_result`` stdlib logger independently of structlog's global config."""
    import structlog

    return structlog.wrap_logger(
        logging.getLogger(LOGGER_NAME),
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def log_failure(event: str, **fields: Any) -> None:
    """Emit an event about a captured failure, if logging is enabled.

    The event is logged at the configured level, so any enabled level
    reports captured failures.

    Args:
        event: Event name, e.g. "wrapped_call_failed".
        **fields: Extra key/value pairs attached to the event.
    """
    from lib_result._config import get_config

    level = get_config().log_level
    if level is None:
        return
    getattr(_library_logger(), level.lower())(event, **fields)


# --- Logging Hooks ---

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook to be called for each log entry.

    Hooks receive a copy of the event dict and can be used to count or
    forward captured failures.

    Args:
        hook: Callable that receives log entry dict.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered log hook.

    Args:
        hook: The hook to remove.
    """
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()


def _create_hook_processor() -> Callable[[Any, str, dict[str, Any]], dict[str, Any]]:
    """Create a processor that invokes log hooks."""

    def hook_processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for hook in _log_hooks:
            # A broken hook must not break logging.
            with contextlib.suppress(Exception):
                hook(event_dict.copy())
        return event_dict

    return hook_processor
