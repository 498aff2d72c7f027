"""Money value object with ISO-4217 currency validation."""

from __future__ import annotations

import dataclasses
import re
from decimal import Decimal
from typing import Final

from mp_orders.kernel.errors.domain import ValidationError

_ISO4217: Final = re.compile(r"^[A-Z]{3}$")

DEFAULT_CURRENCY: Final = "USD"


@dataclasses.dataclass(frozen=True, slots=True)
class Money:
    """Immutable non-negative amount with explicit currency.

    Persisted as two columns (amount, currency) through an ORM composite,
    hence :meth:`__composite_values__`.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not _ISO4217.match(self.currency):
            raise ValidationError(f"Invalid ISO 4217 currency code: {self.currency!r}")
        if self.amount < 0:
            raise ValidationError("Amount cannot be negative.")

    @classmethod
    def of(cls, amount: "str | int | float | Decimal", currency: str = DEFAULT_CURRENCY) -> "Money":
        return cls(Decimal(str(amount)), currency.strip().upper())

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> "Money":
        return cls(Decimal("0"), currency)

    def __add__(self, other: "Money") -> "Money":
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def multiply(self, factor: "int | Decimal") -> "Money":
        """Return a new ``Money`` scaled by *factor*."""
        return Money(self.amount * Decimal(factor), self.currency)

    def _assert_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot operate on different currencies: {self.currency} and {other.currency}"
            )

    def __composite_values__(self) -> tuple[Decimal, str]:
        return self.amount, self.currency

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"


__all__ = ["DEFAULT_CURRENCY", "Money"]
