"""Error taxonomy shared by the repository, the filter engine and the interfaces."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, TypeVar

from todolists.domain.shared.result import Err, Ok

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Category of a failed operation."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID_INPUT = "invalid_input"
    DECODE_ERROR = "decode_error"
    INTERNAL = "internal"
    STORAGE = "storage"


@dataclass(frozen=True)
class TodoError:
    """Error value returned inside ``Err`` by repository and filter operations."""

    kind: ErrorKind
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.kind.value, "message": self.message, "details": self.details}

    @classmethod
    def not_found(cls, message: str, **details: Any) -> TodoError:
        return cls(ErrorKind.NOT_FOUND, message, details)

    @classmethod
    def already_exists(cls, message: str, **details: Any) -> TodoError:
        return cls(ErrorKind.ALREADY_EXISTS, message, details)

    @classmethod
    def invalid_input(cls, message: str, **details: Any) -> TodoError:
        return cls(ErrorKind.INVALID_INPUT, message, details)

    @classmethod
    def decode_error(cls, message: str, **details: Any) -> TodoError:
        return cls(ErrorKind.DECODE_ERROR, message, details)

    @classmethod
    def internal(cls, message: str, **details: Any) -> TodoError:
        return cls(ErrorKind.INTERNAL, message, details)

    @classmethod
    def storage(cls, message: str, **details: Any) -> TodoError:
        return cls(ErrorKind.STORAGE, message, details)


class TodoException(RuntimeError):
    """Exception carrying a ``TodoError`` where an operation cannot return one."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.error = TodoError(kind=kind, message=message, details=dict(details or {}))

    @classmethod
    def from_error(cls, error: TodoError) -> TodoException:
        return cls(error.kind, error.message, error.details)


def unwrap(result: Ok[T] | Err[TodoError]) -> T:
    """Return the success value, raising ``TodoException`` for an ``Err``."""
    if isinstance(result, Err):
        raise TodoException.from_error(result.error)
    return result.value
