"""Product commands."""
from __future__ import annotations

import dataclasses
from decimal import Decimal
from uuid import UUID

from mp_orders.application.cqrs import Command, Rules
from mp_orders.domain.products import MAX_NAME_LENGTH
from mp_orders.kernel.types.money import DEFAULT_CURRENCY


def _product_rules(name: str, description: str | None, price: Decimal, currency: str,
                   sku: str | None, category: str | None) -> Rules:
    return (
        Rules()
        .require(bool(name and name.strip()), "name", "Product name is required.")
        .require(len(name or "") <= MAX_NAME_LENGTH, "name", "Product name cannot exceed 200 characters.")
        .require(len(description or "") <= 1000, "description", "Description cannot exceed 1000 characters.")
        .require(price >= 0, "price", "Price cannot be negative.")
        .require(bool(currency and currency.strip()), "currency", "Currency is required.")
        .require(len(currency or "") == 3, "currency", "Currency must be a 3-letter code.")
        .require(len(sku or "") <= 50, "sku", "SKU cannot exceed 50 characters.")
        .require(len(category or "") <= 100, "category", "Category cannot exceed 100 characters.")
    )


@dataclasses.dataclass(frozen=True)
class CreateProductCommand(Command):
    name: str
    price: Decimal
    description: str | None = None
    currency: str = DEFAULT_CURRENCY
    stock_quantity: int = 0
    sku: str | None = None
    category: str | None = None

    def validate(self) -> None:
        _product_rules(self.name, self.description, self.price, self.currency, self.sku, self.category).require(
            self.stock_quantity >= 0, "stock_quantity", "Stock quantity cannot be negative."
        ).check()


@dataclasses.dataclass(frozen=True)
class UpdateProductCommand(Command):
    product_id: UUID
    name: str
    price: Decimal
    description: str | None = None
    currency: str = DEFAULT_CURRENCY
    sku: str | None = None
    category: str | None = None

    def validate(self) -> None:
        _product_rules(self.name, self.description, self.price, self.currency, self.sku, self.category).check()


@dataclasses.dataclass(frozen=True)
class DeleteProductCommand(Command):
    product_id: UUID


__all__ = ["CreateProductCommand", "DeleteProductCommand", "UpdateProductCommand"]
