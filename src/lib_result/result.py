"""Result type: Ok[T] | Err[E] for explicit error handling.

Example:
    ```python
    from lib_result import Err, Ok, Result, err_from_object

    class DivisionError(Exception):
        pass

    def divide(a: float, b: float) -> Result[float, DivisionError]:
        if b == 0:
            return Err(DivisionError('Cannot Divide By Zero'))
        return Ok(a / b)

    divide(4, 2)  # Ok(2.0)
    divide(4, 2).map(lambda x: x + 1).pipe(lambda x: divide(x, 0))
    # Err(DivisionError('Cannot Divide By Zero'))

    err_from_object({'message': 'Not found', 'code': 404}).error.code  # 404
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, NoReturn, TypeIs

import msgspec

from lib_result._logging import log_failure
from lib_result.errors import ResultError
from lib_result.normalize import create_custom_error, to_error

__all__ = [
    'Err',
    'Ok',
    'Result',
    'err_from_object',
    'err_from_text',
    'is_error',
    'is_ok',
    'unwrap',
]


def _captured(combinator: str, exc: Exception) -> Err[BaseException]:
    """Normalize an exception raised by a callback into an Err."""
    log_failure('callback_failed', combinator=combinator, error_type=type(exc).__name__)
    return Err(to_error(exc))


class Ok[T](msgspec.Struct, frozen=True):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(84)
    """

    ok: T

    @property
    def error(self) -> None:
        """Always None for Ok."""
        return None

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_error(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.ok

    def expect(self, msg: str) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the message."""
        return self.ok

    def unwrap_or(self, fallback: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the fallback."""
        return self.ok

    def map[U](self, f: Callable[[T], U]) -> Ok[U] | Err[BaseException]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing f(value), or Err holding the normalized exception
            if f raised.
        """
        try:
            return Ok(f(self.ok))
        except Exception as e:
            return _captured('map', e)

    def pipe[U, F: BaseException](
        self, f: Callable[[T], Ok[U] | Err[F]]
    ) -> Ok[U] | Err[F] | Err[BaseException]:
        """Chain a function that itself returns a Result.

        Args:
            f: Function that takes T and returns Result[U, F].

        Returns:
            The Result returned by f, or Err holding the normalized
            exception if f raised.

        Raises:
            TypeError: If f returns something other than a Result.
        """
        try:
            result = f(self.ok)
        except Exception as e:
            return _captured('pipe', e)
        if not isinstance(result, Ok | Err):
            msg = f'pipe expects the callback to return a Result, got {type(result).__name__}'
            raise TypeError(msg)
        return result

    def match[U](
        self,
        ok_fn: Callable[[T], U],
        err_fn: Callable[[BaseException], U],
    ) -> U:
        """Return ok_fn(value).

        If ok_fn raises, the exception is normalized and handed to err_fn,
        whose return value becomes the result.
        """
        try:
            return ok_fn(self.ok)
        except Exception as e:
            log_failure('callback_failed', combinator='match', error_type=type(e).__name__)
            return err_fn(to_error(e))

    def or_else[U](self, f: Callable[[Any], U]) -> T:  # noqa: ARG002
        """Return the contained value without calling the function."""
        return self.ok

    def __repr__(self) -> str:
        return f'Ok({self.ok!r})'


class Err[E: BaseException](msgspec.Struct, frozen=True):
    """Error variant of Result containing an exception of type E.

    Only exceptions are accepted. Use ``err_from_text`` or
    ``err_from_object`` to build an Err from a message or a property bag.

    Examples:
        >>> err = Err(ValueError('something went wrong'))
        >>> err.is_error()
        True
        >>> err.unwrap_or(0)
        0
        >>> Err('something went wrong')
        Traceback (most recent call last):
        ...
        TypeError: Err expects an exception instance, use err_from_object instead.
    """

    error: E

    def __post_init__(self) -> None:
        if not isinstance(self.error, BaseException):
            msg = 'Err expects an exception instance, use err_from_object instead.'
            raise TypeError(msg)

    @property
    def ok(self) -> None:
        """Always None for Err."""
        return None

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_error(self) -> TypeIs[Err[E]]:
        """Return True since this is Err.

        This method provides type narrowing - after checking is_error(),
        the type checker knows the result is Err[E].
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise the contained exception unchanged.

        Raises:
            E: Always.
        """
        raise self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise a new ResultError with the given message.

        The contained exception becomes both ``cause`` and ``__cause__``
        of the raised error.

        Args:
            msg: Message of the raised error.

        Raises:
            ResultError: Always.
        """
        raise ResultError(msg, cause=self.error) from self.error

    def unwrap_or[T](self, fallback: T) -> T:
        """Return the fallback since this is Err."""
        return fallback

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged without calling the function."""
        return self

    def pipe(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged without calling the function."""
        return self

    def match[U](
        self,
        ok_fn: Callable[[Any], U],  # noqa: ARG002
        err_fn: Callable[[E], U],
    ) -> U:
        """Return err_fn(error). Exceptions raised by err_fn propagate."""
        return err_fn(self.error)

    def or_else[U](self, f: Callable[[E], U]) -> U:
        """Return f(error).

        This is the final fallback, so exceptions raised by f propagate.
        """
        return f(self.error)

    def __repr__(self) -> str:
        return f'Err({self.error!r})'


type Result[T, E: BaseException = Exception] = Ok[T] | Err[E]


def err_from_text(message: str) -> Err[ResultError]:
    """Create an Err holding a ResultError with the given message.

    Examples:
        >>> err_from_text('Something went wrong').error.message
        'Something went wrong'
    """
    return Err(ResultError(message))


def err_from_object(
    props: Mapping[Any, Any] | msgspec.Struct | None = None,
    /,
    **extra: Any,
) -> Err[Any]:
    """Create an Err holding a CustomError built from a property bag.

    Args:
        props: Properties of the error. ``message`` and ``cause`` are used
            for the error itself, every other key is attached as a property.
        **extra: Additional properties, merged on top of props.

    Returns:
        Err holding the CustomError.

    Example:
        ```python
        result = err_from_object({'message': 'Resource not found', 'code': 404})
        result.error.message  # 'Resource not found'
        result.error.code  # 404

        try:
            load()
        except OSError as cause:
            result = err_from_object(message='Operation failed', cause=cause, retryable=True)
        ```
    """
    return Err(create_custom_error(props, **extra))


# Free-function parity with the methods


def is_ok[T, E: BaseException](result: Result[T, E]) -> TypeIs[Ok[T]]:
    """Return True if the result is Ok."""
    return result.is_ok()


def is_error[T, E: BaseException](result: Result[T, E]) -> TypeIs[Err[E]]:
    """Return True if the result is Err."""
    return result.is_error()


def unwrap[T, E: BaseException](result: Result[T, E]) -> T:
    """Return the Ok value or raise the contained exception."""
    return result.unwrap()
