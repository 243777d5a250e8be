"""
Result values returned by the books use cases.

A Result holds either a value or a BookError. The interface layer maps
the error kind to an HTTP status.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from app.domain.books.entities import FieldViolation

T = TypeVar("T")


class ErrorKind(Enum):
    """Expected failure categories."""

    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"


@dataclass(frozen=True)
class BookError:
    """An expected failure.

    Attributes:
        kind: Failure category.
        message: Client-facing message. Empty when no body is sent.
        violations: Field violations, only for VALIDATION errors.
    """

    kind: ErrorKind
    message: str = ""
    violations: tuple[FieldViolation, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a use case: a value on success, an error otherwise."""

    value: T | None = None
    error: BookError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: str = "",
        violations: list[FieldViolation] | None = None,
    ) -> "Result[T]":
        return cls(error=BookError(kind, message, tuple(violations or ())))
