"""Order line entity; only created and changed through :class:`Order`."""

from __future__ import annotations

from uuid import UUID

from mp_orders.kernel.ddd.entity import Entity
from mp_orders.kernel.ddd.invariant import Invariant
from mp_orders.kernel.types.ids import new_id
from mp_orders.kernel.types.money import Money


class OrderItem(Entity):
    product_id: UUID
    product_name: str
    quantity: int
    unit_price: Money

    def __init__(
        self,
        id: UUID,  # noqa: A002
        product_id: UUID,
        product_name: str,
        quantity: int,
        unit_price: Money,
    ) -> None:
        super().__init__(id)
        self.product_id = product_id
        self.product_name = product_name
        self.quantity = quantity
        self.unit_price = unit_price

    @classmethod
    def create(cls, product_id: UUID, product_name: str, quantity: int, unit_price: Money) -> "OrderItem":
        Invariant.argument(product_id is not None and product_id.int != 0, "Product ID is required.", "product_id")
        name = Invariant.not_blank(product_name, "Product name is required.", "product_name")
        Invariant.argument(quantity > 0, "Quantity must be greater than zero.", "quantity")
        return cls(new_id(), product_id, name, quantity, unit_price)

    @property
    def total_price(self) -> Money:
        return self.unit_price.multiply(self.quantity)

    def update_quantity(self, quantity: int) -> None:
        Invariant.argument(quantity > 0, "Quantity must be greater than zero.", "quantity")
        self.quantity = quantity


__all__ = ["OrderItem"]
