"""Order commands."""
from __future__ import annotations

import dataclasses
from decimal import Decimal
from uuid import UUID

from mp_orders.application.cqrs import Command, Rules
from mp_orders.kernel.types.money import DEFAULT_CURRENCY


@dataclasses.dataclass(frozen=True)
class AddressInput:
    street: str
    city: str
    country: str
    state: str = ""
    postal_code: str = ""


@dataclasses.dataclass(frozen=True)
class OrderItemInput:
    product_id: UUID
    product_name: str
    quantity: int
    unit_price: Decimal
    currency: str = DEFAULT_CURRENCY


@dataclasses.dataclass(frozen=True)
class CreateOrderCommand(Command):
    customer_id: str
    shipping_address: AddressInput | None
    items: tuple[OrderItemInput, ...] = ()

    def validate(self) -> None:
        rules = Rules().require(bool(self.customer_id and self.customer_id.strip()), "customer_id", "Customer ID is required.")
        address = self.shipping_address
        rules.require(address is not None, "shipping_address", "Shipping address is required.")
        if address is not None:
            rules.require(bool(address.street.strip()), "shipping_address.street", "Street is required.")
            rules.require(len(address.street) <= 200, "shipping_address.street", "Street cannot exceed 200 characters.")
            rules.require(bool(address.city.strip()), "shipping_address.city", "City is required.")
            rules.require(len(address.city) <= 100, "shipping_address.city", "City cannot exceed 100 characters.")
            rules.require(bool(address.country.strip()), "shipping_address.country", "Country is required.")
            rules.require(len(address.country) <= 100, "shipping_address.country", "Country cannot exceed 100 characters.")
        rules.require(bool(self.items), "items", "At least one item is required.")
        for i, item in enumerate(self.items):
            field = f"items[{i}]"
            rules.require(item.product_id.int != 0, f"{field}.product_id", "Product ID is required.")
            rules.require(bool(item.product_name.strip()), f"{field}.product_name", "Product name is required.")
            rules.require(len(item.product_name) <= 200, f"{field}.product_name", "Product name cannot exceed 200 characters.")
            rules.require(item.quantity > 0, f"{field}.quantity", "Quantity must be greater than 0.")
            rules.require(item.unit_price >= 0, f"{field}.unit_price", "Unit price cannot be negative.")
        rules.check()


@dataclasses.dataclass(frozen=True)
class ConfirmOrderCommand(Command):
    order_id: UUID


@dataclasses.dataclass(frozen=True)
class ShipOrderCommand(Command):
    order_id: UUID


@dataclasses.dataclass(frozen=True)
class DeliverOrderCommand(Command):
    order_id: UUID


@dataclasses.dataclass(frozen=True)
class CancelOrderCommand(Command):
    order_id: UUID
    reason: str

    def validate(self) -> None:
        Rules().require(bool(self.reason and self.reason.strip()), "reason", "Cancellation reason is required.").require(
            len(self.reason or "") <= 500, "reason", "Cancellation reason cannot exceed 500 characters."
        ).check()


__all__ = [
    "AddressInput",
    "CancelOrderCommand",
    "ConfirmOrderCommand",
    "CreateOrderCommand",
    "DeliverOrderCommand",
    "OrderItemInput",
    "ShipOrderCommand",
]
