"""Invariant helpers for asserting domain rules."""

from __future__ import annotations

from typing import TypeVar

from mp_orders.kernel.errors.domain import InvariantViolationError, ValidationError

T = TypeVar("T")


class Invariant:
    """Namespace for invariant assertions."""

    @staticmethod
    def require(condition: bool, message: str) -> None:
        """Raise ``InvariantViolationError`` when *condition* is False."""
        if not condition:
            raise InvariantViolationError(message)

    @staticmethod
    def argument(condition: bool, message: str, field: str | None = None) -> None:
        """Raise ``ValidationError`` when an input argument is unacceptable."""
        if not condition:
            errors = [{"field": field, "message": message}] if field else None
            raise ValidationError(message, errors=errors)

    @staticmethod
    def not_blank(value: str | None, message: str, field: str | None = None) -> str:
        """Assert *value* has non-whitespace content, returning it stripped."""
        Invariant.argument(bool(value and value.strip()), message, field)
        return value.strip()  # type: ignore[union-attr]


__all__ = ["Invariant"]
