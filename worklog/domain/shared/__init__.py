"""Shared domain building blocks.

- Result monad for explicit error handling
- Base domain event

Example usage:
    >>> from worklog.domain.shared import Ok, Err, Result, is_ok
    >>>
    >>> def parse_hours(text: str) -> Result[float, str]:
    ...     try:
    ...         return Ok(float(text))
    ...     except ValueError:
    ...         return Err(f"Not a number: {text}")
"""

from worklog.domain.shared.events import DomainEvent
from worklog.domain.shared.result import (
    Err,
    Ok,
    Result,
    flat_map,
    is_err,
    is_ok,
    map_result,
    unwrap_or,
)

__all__ = [
    # Result monad
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    "map_result",
    "flat_map",
    "unwrap_or",
    # Domain events
    "DomainEvent",
]
