"""lib-result: a Rust-inspired Result type for Python 3.13+.

Flat imports (preferred):
    from lib_result import Result, Ok, Err, err_from_text, err_from_object
    from lib_result import wrap, wrap_async, wrap_throwable, wrap_async_throwable

Submodule imports (for organization):
    from lib_result.result import Ok, Err, Result
    from lib_result.errors import ResultError, CustomError
    from lib_result.normalize import to_error, create_custom_error
    from lib_result.wrap import wrap, wrap_throwable
"""

# Configuration and logging
from lib_result._config import LibResultConfig, get_config, init
from lib_result._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

# Errors
from lib_result.errors import (
    DEFAULT_ERROR_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    CustomError,
    ResultError,
    cause_of,
    message_of,
)

# Normalization
from lib_result.normalize import create_custom_error, is_key_value, to_error

# Result types
from lib_result.result import (
    Err,
    Ok,
    Result,
    err_from_object,
    err_from_text,
    is_error,
    is_ok,
    unwrap,
)

# Wrapping
from lib_result.wrap import wrap, wrap_async, wrap_async_throwable, wrap_throwable

__all__ = [
    # Errors
    'DEFAULT_ERROR_MESSAGE',
    'UNKNOWN_ERROR_MESSAGE',
    'CustomError',
    # Result types
    'Err',
    # Configuration
    'LibResultConfig',
    'Ok',
    'Result',
    'ResultError',
    # Logging
    'add_log_hook',
    'cause_of',
    'clear_log_hooks',
    'configure_logging',
    # Normalization
    'create_custom_error',
    'err_from_object',
    'err_from_text',
    'get_config',
    'get_logger',
    'init',
    'is_error',
    'is_key_value',
    'is_ok',
    'message_of',
    'remove_log_hook',
    'to_error',
    'unwrap',
    # Wrapping
    'wrap',
    'wrap_async',
    'wrap_async_throwable',
    'wrap_throwable',
]
