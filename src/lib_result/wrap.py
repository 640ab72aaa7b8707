"""Wrapping layer: run raising callables and get a Result back.

``wrap`` and ``wrap_async`` call a zero-argument callable once.
``wrap_throwable`` and ``wrap_async_throwable`` are decorators producing a
function with the same signature that returns a Result instead of raising.

Only ``Exception`` subclasses are captured. ``KeyboardInterrupt``,
``SystemExit`` and cancellation of the calling task always propagate.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from typing import Any

import wrapt

from lib_result._logging import log_failure
from lib_result.normalize import to_error
from lib_result.result import Err, Ok

__all__ = ['wrap', 'wrap_async', 'wrap_async_throwable', 'wrap_throwable']


def _callable_name(fn: object) -> str:
    return getattr(fn, '__qualname__', None) or type(fn).__name__


def _failed(fn: object, exc: BaseException) -> Err[BaseException]:
    log_failure('wrapped_call_failed', callable=_callable_name(fn), error_type=type(exc).__name__)
    return Err(to_error(exc))


def _host_task_cancelling() -> bool:
    """Return True if the task running us has a pending cancellation request."""
    try:
        task = asyncio.current_task()
    except RuntimeError:
        return False
    return task is not None and task.cancelling() > 0


def wrap[T](fn: Callable[[], T]) -> Ok[T] | Err[BaseException]:
    """Call fn once and capture its outcome.

    Args:
        fn: A zero-argument callable that may raise.

    Returns:
        Ok(return value), or Err holding the normalized exception.

    Example:
        ```python
        def divide(a: int, b: int) -> float:
            return a / b

        wrap(lambda: divide(10, 2))  # Ok(5.0)
        wrap(lambda: divide(10, 0))  # Err(ZeroDivisionError('division by zero'))
        ```
    """
    try:
        return Ok(fn())
    except Exception as e:
        return _failed(fn, e)


async def wrap_async[T](
    fn: Callable[[], Awaitable[T]] | Awaitable[T],
) -> Ok[T] | Err[BaseException]:
    """Await fn() once and capture its outcome.

    Exceptions raised by fn before its first await are captured too. An
    ``asyncio.CancelledError`` coming from the awaited operation becomes an
    Err, unless the task running wrap_async is itself being cancelled.

    Args:
        fn: A zero-argument callable returning an awaitable, or an awaitable.

    Returns:
        Ok(resolved value), or Err holding the normalized exception.

    Example:
        ```python
        async def fetch(url: str) -> bytes: ...

        result = await wrap_async(lambda: fetch('https://example.com'))
        if result.is_ok():
            print(len(result.ok))
        ```
    """
    try:
        awaitable = fn if inspect.isawaitable(fn) else fn()
        return Ok(await awaitable)
    except asyncio.CancelledError as e:
        if _host_task_cancelling():
            raise
        return _failed(fn, e)
    except Exception as e:
        return _failed(fn, e)


def wrap_throwable[**P, T](fn: Callable[P, T]) -> Callable[P, Ok[T] | Err[BaseException]]:
    """Decorator turning a raising function into a Result-returning one.

    The returned function takes exactly the same arguments, keeps the
    wrapped function's name, docstring and signature, and never raises an
    ``Exception``.

    Args:
        fn: The function to wrap.

    Returns:
        A wrapped function that returns Result[T, BaseException] instead of T.

    Example:
        ```python
        @wrap_throwable
        def parse_port(text: str) -> int:
            return int(text)

        parse_port('8080')  # Ok(8080)
        parse_port('http')  # Err(ValueError("invalid literal for int() with base 10: 'http'"))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T] | Err[BaseException]:
        try:
            return Ok(wrapped(*args, **kwargs))
        except Exception as e:
            return _failed(wrapped, e)

    return wrapper(fn)


def wrap_async_throwable[**P, T](
    fn: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Ok[T] | Err[BaseException]]]:
    """Async decorator turning a raising coroutine function into a Result-returning one.

    The awaitable returned by the wrapped function never raises an
    ``Exception``; cancellation follows the same rule as ``wrap_async``.

    Args:
        fn: The async function to wrap.

    Returns:
        A wrapped async function whose awaitable resolves to a Result.

    Example:
        ```python
        @wrap_async_throwable
        async def fetch_json(url: str) -> dict:
            response = await client.get(url)
            response.raise_for_status()
            return response.json()

        result = await fetch_json('https://example.com/data.json')
        ```
    """

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T] | Err[BaseException]:
        try:
            return Ok(await wrapped(*args, **kwargs))
        except asyncio.CancelledError as e:
            if _host_task_cancelling():
                raise
            return _failed(wrapped, e)
        except Exception as e:
            return _failed(wrapped, e)

    return wrapper(fn)
