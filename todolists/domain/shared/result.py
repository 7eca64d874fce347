"""Result monad for explicit error handling in repository and filter operations.

Operations that can fail for expected reasons (unknown list, invalid filter,
storage failure) return ``Ok(value)`` or ``Err(error)`` instead of raising.
Callers branch on the variant with ``isinstance``, or chain fallible steps
with ``flat_map``.

Example usage:
    >>> def parse_days(raw: str) -> Result[int, str]:
    ...     if not raw.lstrip("-").isdigit():
    ...         return Err(f"not a number: {raw}")
    ...     return Ok(int(raw))
    ...
    >>> flat_map(parse_days("3"), lambda days: Ok(days * 24))
    Ok(value=72)
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome carrying an error."""

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def flat_map(result: Ok[T] | Err[E], fn: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
    """Run ``fn`` on the value of an ``Ok``; pass an ``Err`` through untouched."""
    if isinstance(result, Err):
        return result
    return fn(result.value)
