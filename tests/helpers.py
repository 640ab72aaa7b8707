"""Shared helpers: a small divide() domain used across the test suite."""

from lib_result import Err, Ok, Result


class DivisionError(Exception):
    """Raised or returned when dividing by zero."""


def divide(a: float, b: float) -> Result[float, DivisionError]:
    """Divide a by b, returning Err(DivisionError) when b is zero."""
    if b == 0:
        return Err(DivisionError('Cannot Divide By Zero'))
    return Ok(a / b)


def double(x: float) -> float:
    return x * 2
