"""Error normalization: turn any caught value into an exception.

Every combinator and wrapper that catches a failure passes it through
``to_error`` before storing it in an Err, so an Err always holds an
exception no matter what was raised, rejected or handed in.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeIs

import msgspec
import msgspec.structs

from lib_result._logging import log_failure
from lib_result.errors import (
    DEFAULT_ERROR_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    CustomError,
    ResultError,
)

__all__ = ['create_custom_error', 'is_key_value', 'to_error']


def is_key_value(value: object) -> TypeIs[Mapping[Any, Any] | msgspec.Struct]:
    """Return True if value is a key-value structure.

    Mappings and msgspec Structs qualify. Strings, bytes, sequences and
    None do not.

    Examples:
        >>> is_key_value({'key': 'value'})
        True
        >>> is_key_value([])
        False
        >>> is_key_value(None)
        False
    """
    return isinstance(value, Mapping | msgspec.Struct)


def _as_dict(props: Mapping[Any, Any] | msgspec.Struct) -> dict[str, Any]:
    # Keys are stringified in iteration order; on a collision such as 1 and '1' the later key wins.
    if isinstance(props, msgspec.Struct):
        return msgspec.structs.asdict(props)
    return {str(key): value for key, value in props.items()}


def create_custom_error(
    props: Mapping[Any, Any] | msgspec.Struct | None = None,
    /,
    **extra: Any,
) -> CustomError:
    """Build a CustomError from a property bag.

    ``message`` and ``cause`` are taken out of the bag and used for the
    error itself; every other key becomes an entry in ``properties``.
    Keyword arguments are merged on top of ``props``. Keys are converted to
    strings; when two keys convert to the same string (``1`` and ``'1'``),
    the one that comes later in ``props`` wins.

    Args:
        props: Mapping or msgspec Struct of properties. May be None.
        **extra: Additional properties.

    Returns:
        A new CustomError.

    Example:
        ```python
        err = create_custom_error({'message': 'Not found', 'code': 404})
        err.message  # 'Not found'
        err.code  # 404

        create_custom_error().message  # 'Unknown Error'
        ```
    """
    fields = _as_dict(props) if props is not None else {}
    fields.update(extra)

    message = fields.pop('message', None)
    cause = fields.pop('cause', None)
    if not message:
        message = DEFAULT_ERROR_MESSAGE

    return CustomError(str(message), cause=cause, properties=fields)


def to_error(e: object) -> BaseException:
    """Convert an arbitrary caught value into an exception.

    - exceptions are returned unchanged
    - strings become ``ResultError(e)``
    - mappings and msgspec Structs are promoted with ``create_custom_error``
    - anything else becomes ``ResultError('Unknown error', cause=e)``

    Args:
        e: The value to convert.

    Returns:
        An exception instance.

    Examples:
        >>> err = ValueError('boom')
        >>> to_error(err) is err
        True
        >>> to_error('boom')
        ResultError('boom')
        >>> to_error({'code': 404}).code
        404
        >>> to_error(42)
        ResultError('Unknown error', cause=42)
    """
    if isinstance(e, BaseException):
        return e

    if isinstance(e, str):
        return ResultError(e)

    if is_key_value(e):
        log_failure('error_promoted', source_type=type(e).__name__)
        return create_custom_error(e)

    log_failure('error_unrecognized', source_type=type(e).__name__)
    return ResultError(UNKNOWN_ERROR_MESSAGE, cause=e)
