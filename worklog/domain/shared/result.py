"""Result type for operations that can fail in expected ways.

Validation of user input (empty names, duplicate ticket ids, bad
durations) and file I/O return ``Ok(value)`` or ``Err(message)``
instead of raising, so callers decide how to surface the failure.

Example usage:
    >>> def positive(hours: float) -> Result[float, str]:
    ...     if hours <= 0:
    ...         return Err("Duration must be positive")
    ...     return Ok(hours)
    ...
    >>> result = positive(1.5)
    >>> if is_ok(result):
    ...     print(result.value)
    1.5
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result.

    Attributes:
        error: The error value, usually a user-facing message.
    """

    error: E


# Union rather than | because TypeVar aliases don't support it at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    """Return True if the result is Ok."""
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    """Return True if the result is Err."""
    return isinstance(result, Err)


def map_result(result: Ok[T] | Err[E], fn: Callable[[T], U]) -> Ok[U] | Err[E]:
    """Apply fn to the value of an Ok result; pass an Err through unchanged."""
    if isinstance(result, Ok):
        return Ok(fn(result.value))
    return result


def flat_map(result: Ok[T] | Err[E], fn: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
    """Chain an operation that itself returns a Result.

    Used to sequence validation steps: the first Err short-circuits
    the rest of the chain.

    Args:
        result: The result to chain from.
        fn: Function taking the Ok value and returning a new Result.

    Returns:
        The Result of fn, or the original Err.
    """
    if isinstance(result, Ok):
        return fn(result.value)
    return result


def unwrap_or(result: Ok[T] | Err[E], default: T) -> T:
    """Return the Ok value, or default if the result is an Err."""
    if isinstance(result, Ok):
        return result.value
    return default
