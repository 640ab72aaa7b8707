"""Error types carried by Err: ResultError and CustomError."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

__all__ = [
    'DEFAULT_ERROR_MESSAGE',
    'UNKNOWN_ERROR_MESSAGE',
    'CustomError',
    'ResultError',
    'cause_of',
    'message_of',
]

# Message used when a custom error is built without one.
DEFAULT_ERROR_MESSAGE = 'Unknown Error'

# Message used when a caught value has no usable shape.
UNKNOWN_ERROR_MESSAGE = 'Unknown error'


class ResultError(Exception):
    """Plain error with an explicit message and an optional cause.

    The cause may be any value. When it is an exception it is also linked
    as ``__cause__`` so tracebacks show the chain.

    Example:
        ```python
        err = ResultError('lookup failed', cause=KeyError('id'))
        err.message  # 'lookup failed'
        err.__cause__  # KeyError('id')
        ```
    """

    def __init__(self, message: str, *, cause: object | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    def __repr__(self) -> str:
        if self.cause is None:
            return f'{type(self).__name__}({self.message!r})'
        return f'{type(self).__name__}({self.message!r}, cause={self.cause!r})'


class CustomError(ResultError):
    """ResultError carrying extra named properties.

    Properties are stored in a read-only mapping and are also readable as
    attributes, as long as the name does not shadow a real attribute of
    the exception (``args``, ``message``, ``cause``, ...).

    Example:
        ```python
        err = CustomError('Not found', properties={'code': 404})
        err.code  # 404
        err.properties['code']  # 404
        ```
    """

    def __init__(
        self,
        message: str = DEFAULT_ERROR_MESSAGE,
        *,
        cause: object | None = None,
        properties: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.properties: Mapping[str, Any] = MappingProxyType(dict(properties or {}))

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        properties = self.__dict__.get('properties')
        if properties is not None and name in properties:
            return properties[name]
        raise AttributeError(f'{type(self).__name__!r} object has no attribute {name!r}')

    def __reduce__(self) -> tuple[Any, ...]:
        return _rebuild_custom_error, (type(self), self.message, self.cause, dict(self.properties))

    def __repr__(self) -> str:
        parts = [repr(self.message)]
        if self.cause is not None:
            parts.append(f'cause={self.cause!r}')
        parts.extend(f'{key}={value!r}' for key, value in self.properties.items())
        return f'{type(self).__name__}({", ".join(parts)})'


def _rebuild_custom_error(
    cls: type[CustomError], message: str, cause: object | None, properties: dict[str, Any]
) -> CustomError:
    return cls(message, cause=cause, properties=properties)


def message_of(error: BaseException) -> str:
    """Return the message of an exception.

    Uses the ``message`` attribute when it is a string, otherwise ``str(error)``.
    """
    message = getattr(error, 'message', None)
    if isinstance(message, str):
        return message
    return str(error)


def cause_of(error: BaseException) -> object | None:
    """Return the cause of an exception, preferring an explicit ``cause`` attribute."""
    cause = getattr(error, 'cause', None)
    if cause is not None:
        return cause
    return error.__cause__
