"""Shared domain utilities for todolists.

This package provides common building blocks used across domain modules:

- Result monad for explicit error handling
- Error taxonomy (``ErrorKind``, ``TodoError``, ``TodoException``)
- Local clock helpers for day-level date arithmetic

Example usage:
    >>> from todolists.domain.shared import Ok, Err, TodoError
    >>>
    >>> def find_list(name: str) -> Result[str, TodoError]:
    ...     if name != "Home":
    ...         return Err(TodoError.not_found(f"list not found: {name}"))
    ...     return Ok(name)
"""

from todolists.domain.shared.clock import (
    day_of,
    days_from,
    local_now,
    start_of_day,
    to_local,
)
from todolists.domain.shared.errors import ErrorKind, TodoError, TodoException, unwrap
from todolists.domain.shared.result import (
    Err,
    Ok,
    Result,
    flat_map,
)

__all__ = [
    # Result monad
    "Ok",
    "Err",
    "Result",
    "flat_map",
    # Errors
    "ErrorKind",
    "TodoError",
    "TodoException",
    "unwrap",
    # Clock
    "local_now",
    "to_local",
    "day_of",
    "start_of_day",
    "days_from",
]
