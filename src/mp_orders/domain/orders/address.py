"""Shipping address value object."""

from __future__ import annotations

import dataclasses

from mp_orders.kernel.ddd.invariant import Invariant
from mp_orders.kernel.ddd.value_object import ValueObject


@dataclasses.dataclass(frozen=True)
class Address(ValueObject):
    street: str
    city: str
    state: str = ""
    postal_code: str = ""
    country: str = ""

    def _validate(self) -> None:
        Invariant.not_blank(self.street, "Street is required.", "street")
        Invariant.not_blank(self.city, "City is required.", "city")
        Invariant.not_blank(self.country, "Country is required.", "country")

    @classmethod
    def create(
        cls,
        street: str,
        city: str,
        state: str | None,
        postal_code: str | None,
        country: str,
    ) -> "Address":
        return cls(street, city, state or "", postal_code or "", country)

    def __str__(self) -> str:
        return f"{self.street}, {self.city}, {self.state} {self.postal_code}, {self.country}"


__all__ = ["Address"]
