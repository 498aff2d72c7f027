"""Result[T] monad: Ok and Err variants carrying an :class:`Error` value."""

from __future__ import annotations

import dataclasses
import enum
from typing import Callable, Generic, NoReturn, TypeVar

from mp_orders.kernel.errors.domain import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

T = TypeVar("T")
U = TypeVar("U")


class ErrorKind(str, enum.Enum):
    """Broad failure category, used to pick an HTTP status or a log level."""

    FAILURE = "failure"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclasses.dataclass(frozen=True, slots=True)
class Error:
    """Expected, non-exceptional failure returned by a use case."""

    code: str
    message: str
    kind: ErrorKind = ErrorKind.FAILURE

    @classmethod
    def failure(cls, code: str, message: str) -> "Error":
        return cls(code, message, ErrorKind.FAILURE)

    @classmethod
    def validation(cls, code: str, message: str) -> "Error":
        return cls(code, message, ErrorKind.VALIDATION)

    @classmethod
    def not_found(cls, code: str, message: str) -> "Error":
        return cls(code, message, ErrorKind.NOT_FOUND)

    @classmethod
    def conflict(cls, code: str, message: str) -> "Error":
        return cls(code, message, ErrorKind.CONFLICT)

    def to_exception(self) -> DomainError:
        """Raise-able equivalent, used by :meth:`Err.unwrap`."""
        if self.kind is ErrorKind.VALIDATION:
            return ValidationError(self.message, code=self.code)
        if self.kind is ErrorKind.CONFLICT:
            return ConflictError(self.message, code=self.code)
        if self.kind is ErrorKind.NOT_FOUND:
            return NotFoundError(self.code, message=self.message, code=self.code)
        return DomainError(self.message, code=self.code)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class Ok(Generic[T]):
    """Successful result variant."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def map(self, func: Callable[[T], U]) -> "Ok[U]":
        return Ok(func(self._value))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Ok) and other._value == self._value

    def __hash__(self) -> int:
        return hash(("ok", self._value))

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


class Err:
    """Failure result variant."""

    __slots__ = ("_error",)

    def __init__(self, error: Error) -> None:
        self._error = error

    @property
    def error(self) -> Error:
        return self._error

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self._error.to_exception()

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, func: Callable[[T], U]) -> "Err":  # noqa: ARG002
        return self

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Err) and other._error == self._error

    def __hash__(self) -> int:
        return hash(("err", self._error))

    def __repr__(self) -> str:
        return f"Err({self._error!r})"


type Result[T] = Ok[T] | Err

__all__ = ["Err", "Error", "ErrorKind", "Ok", "Result"]
