"""Product catalogue entity."""

from __future__ import annotations

from decimal import Decimal
from typing import Final
from uuid import UUID

from mp_orders.kernel.ddd.auditing import Auditable, SoftDeletable
from mp_orders.kernel.ddd.entity import Entity
from mp_orders.kernel.ddd.invariant import Invariant
from mp_orders.kernel.types.ids import new_id
from mp_orders.kernel.types.money import DEFAULT_CURRENCY, Money

MAX_NAME_LENGTH: Final = 200


class Product(Entity, Auditable, SoftDeletable):
    """Sellable item with a price and a stock level. Raises no events."""

    name: str
    description: str
    price: Decimal
    currency: str
    stock_quantity: int
    is_active: bool
    sku: str | None
    category: str | None

    def __init__(
        self,
        id: UUID,  # noqa: A002
        name: str,
        description: str,
        price: Decimal,
        currency: str,
        stock_quantity: int,
        sku: str | None = None,
        category: str | None = None,
    ) -> None:
        super().__init__(id)
        self.name = name
        self.description = description
        self.price = price
        self.currency = currency
        self.stock_quantity = stock_quantity
        self.sku = sku
        self.category = category
        self.is_active = True

    @classmethod
    def create(
        cls,
        name: str,
        description: str | None,
        price: Decimal,
        currency: str = DEFAULT_CURRENCY,
        stock_quantity: int = 0,
        sku: str | None = None,
        category: str | None = None,
    ) -> "Product":
        _validate_name(name)
        _validate_price(price)
        _validate_stock(stock_quantity)
        return cls(new_id(), name, description or "", price, currency, stock_quantity, sku, category)

    @property
    def unit_price(self) -> Money:
        return Money.of(self.price, self.currency)

    def update(
        self,
        name: str,
        description: str | None,
        price: Decimal,
        currency: str,
        sku: str | None,
        category: str | None,
    ) -> None:
        _validate_name(name)
        _validate_price(price)
        self.name = name
        self.description = description or ""
        self.price = price
        self.currency = currency
        self.sku = sku
        self.category = category

    def update_stock(self, quantity: int) -> None:
        _validate_stock(quantity)
        self.stock_quantity = quantity

    def add_stock(self, quantity: int) -> None:
        Invariant.argument(quantity > 0, "Quantity must be positive.", "quantity")
        self.stock_quantity += quantity

    def remove_stock(self, quantity: int) -> None:
        Invariant.argument(quantity > 0, "Quantity must be positive.", "quantity")
        Invariant.require(self.stock_quantity >= quantity, "Not enough stock available.")
        self.stock_quantity -= quantity

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    def has_stock(self, quantity: int) -> bool:
        return self.stock_quantity >= quantity


def _validate_name(name: str) -> None:
    Invariant.not_blank(name, "Product name is required.", "name")
    Invariant.argument(
        len(name) <= MAX_NAME_LENGTH,
        f"Product name cannot exceed {MAX_NAME_LENGTH} characters.",
        "name",
    )


def _validate_price(price: Decimal) -> None:
    Invariant.argument(price >= 0, "Price cannot be negative.", "price")


def _validate_stock(quantity: int) -> None:
    Invariant.argument(quantity >= 0, "Stock quantity cannot be negative.", "stock_quantity")


__all__ = ["MAX_NAME_LENGTH", "Product"]
