"""Library configuration: LibResultConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from lib_result._logging import configure_library_logger, configure_logging

__all__ = [
    'LibResultConfig',
    'get_config',
    'init',
]

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
_FORMATS = {'json': True, 'console': False}


@dataclass(frozen=True)
class LibResultConfig:
    """Configuration for lib-result.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Emit JSON logs when True, colored console logs otherwise.
    """

    log_level: str | None = None
    json_output: bool = True


# Current configuration (set by init() or detected from the environment)
_config: LibResultConfig | None = None


def _detect_log_level() -> str | None:
    """Read LIB_RESULT_LOG_LEVEL, ignoring unknown values."""
    env_level = os.environ.get('LIB_RESULT_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    if env_level not in _LEVELS:
        logging.warning("Unknown LIB_RESULT_LOG_LEVEL value '%s', logging stays disabled", env_level)
        return None
    return env_level


def _detect_json_output() -> bool:
    """Read LIB_RESULT_LOG_FORMAT ("json" or "console"), defaulting to JSON."""
    env_format = os.environ.get('LIB_RESULT_LOG_FORMAT', '').lower()
    if not env_format:
        return True
    if env_format not in _FORMATS:
        logging.warning("Unknown LIB_RESULT_LOG_FORMAT value '%s', defaulting to json", env_format)
        return True
    return _FORMATS[env_format]


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
) -> LibResultConfig:
    """Initialize lib-result with the given configuration.

    Setting a level configures logging for the whole application through
    ``configure_logging``. Captured failures are logged at that same level,
    so every level reports them.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_output: JSON (True) or console (False) logs. Read from
            LIB_RESULT_LOG_FORMAT if None.

    Returns:
        The LibResultConfig that was set.

    Raises:
        ValueError: If log_level is not a known level name.

    Example:
        ```python
        from lib_result import init

        # Log every captured failure as JSON on stderr
        init(log_level='DEBUG')

        # Back to silent
        init()
        ```
    """
    global _config  # noqa: PLW0603

    if log_level is not None and log_level.upper() not in _LEVELS:
        msg = f'Unknown log level {log_level!r}, expected one of {", ".join(_LEVELS)}'
        raise ValueError(msg)

    resolved_json = _detect_json_output() if json_output is None else json_output

    _config = LibResultConfig(
        log_level=log_level.upper() if log_level is not None else None,
        json_output=resolved_json,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)

    return _config


def get_config() -> LibResultConfig:
    """Get the current configuration.

    When init() has not been called, the configuration is built once from
    LIB_RESULT_LOG_LEVEL and LIB_RESULT_LOG_FORMAT. A level found there only
    configures the ``lib_result`` logger; the application's root logger and
    structlog setup are left alone.

    Returns:
        The current LibResultConfig.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = LibResultConfig(log_level=_detect_log_level(), json_output=_detect_json_output())
        if _config.log_level is not None:
            configure_library_logger(_config.log_level, json_output=_config.json_output)
    return _config
