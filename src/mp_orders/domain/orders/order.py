"""Order aggregate root."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence
from uuid import UUID

from mp_orders.domain.orders.address import Address
from mp_orders.domain.orders.events import (
    OrderCancelledIntegrationEvent,
    OrderConfirmedIntegrationEvent,
    OrderCreatedDomainEvent,
    OrderDeliveredIntegrationEvent,
    OrderItemAddedDomainEvent,
    OrderShippedDomainEvent,
)
from mp_orders.domain.orders.order_item import OrderItem
from mp_orders.domain.orders.status import OrderStatus
from mp_orders.kernel.ddd.aggregate import AggregateRoot
from mp_orders.kernel.ddd.auditing import Auditable, SoftDeletable
from mp_orders.kernel.ddd.invariant import Invariant
from mp_orders.kernel.time.clock import utc_now
from mp_orders.kernel.types.ids import new_id
from mp_orders.kernel.types.money import Money


class Order(AggregateRoot, Auditable, SoftDeletable):
    """A customer order and its lines.

    Lines can only change while the order is pending. Status changes follow
    :meth:`OrderStatus.can_transition_to` and each records a domain event;
    the unit of work decides how that event is delivered.
    """

    customer_id: str
    shipping_address: Address
    status: OrderStatus
    confirmed_at: datetime | None
    shipped_at: datetime | None
    delivered_at: datetime | None
    cancelled_at: datetime | None
    cancellation_reason: str | None

    def __init__(self, id: UUID, customer_id: str, shipping_address: Address) -> None:  # noqa: A002
        super().__init__(id)
        self.customer_id = customer_id
        self.shipping_address = shipping_address
        self.status = OrderStatus.PENDING
        self.confirmed_at = None
        self.shipped_at = None
        self.delivered_at = None
        self.cancelled_at = None
        self.cancellation_reason = None
        self._items: list[OrderItem] = []

    @classmethod
    def create(cls, customer_id: str, shipping_address: Address) -> "Order":
        customer = Invariant.not_blank(customer_id, "Customer ID is required.", "customer_id")
        Invariant.argument(shipping_address is not None, "Shipping address is required.", "shipping_address")
        order = cls(new_id(), customer, shipping_address)
        order._raise_event(OrderCreatedDomainEvent(order.id))
        return order

    @property
    def items(self) -> Sequence[OrderItem]:
        return tuple(self._items)

    @property
    def total_price(self) -> Money:
        if not self._items:
            return Money.zero()
        total = self._items[0].total_price
        for item in self._items[1:]:
            total = total + item.total_price
        return total

    # -- lines ---------------------------------------------------------------

    def add_item(self, product_id: UUID, product_name: str, quantity: int, unit_price: Money) -> None:
        self._ensure_modifiable()
        existing = next((i for i in self._items if i.product_id == product_id), None)
        if existing is not None:
            existing.update_quantity(existing.quantity + quantity)
        else:
            self._items.append(OrderItem.create(product_id, product_name, quantity, unit_price))
        self._raise_event(OrderItemAddedDomainEvent(self.id, product_id, quantity))

    def remove_item(self, item_id: UUID) -> None:
        self._ensure_modifiable()
        item = next((i for i in self._items if i.id == item_id), None)
        Invariant.require(item is not None, f"Order item {item_id} not found.")
        self._items.remove(item)  # type: ignore[arg-type]

    def update_shipping_address(self, address: Address) -> None:
        self._ensure_modifiable()
        Invariant.argument(address is not None, "Shipping address is required.", "shipping_address")
        self.shipping_address = address

    # -- lifecycle -------------------------------------------------------------

    def confirm(self, at: datetime | None = None) -> None:
        self._ensure_transition(OrderStatus.CONFIRMED, "confirm")
        Invariant.require(bool(self._items), "Cannot confirm an order without items.")
        self.status = OrderStatus.CONFIRMED
        self.confirmed_at = at or utc_now()
        self._raise_event(
            OrderConfirmedIntegrationEvent(self.id, self.customer_id, self.total_price.amount)
        )

    def ship(self, at: datetime | None = None) -> None:
        self._ensure_transition(OrderStatus.SHIPPED, "ship")
        self.status = OrderStatus.SHIPPED
        self.shipped_at = at or utc_now()
        self._raise_event(OrderShippedDomainEvent(self.id))

    def deliver(self, at: datetime | None = None) -> None:
        self._ensure_transition(OrderStatus.DELIVERED, "deliver")
        self.status = OrderStatus.DELIVERED
        self.delivered_at = at or utc_now()
        self._raise_event(OrderDeliveredIntegrationEvent(self.id, self.customer_id))

    def cancel(self, reason: str, at: datetime | None = None) -> None:
        self._ensure_transition(OrderStatus.CANCELLED, "cancel")
        why = Invariant.not_blank(reason, "Cancellation reason is required.", "reason")
        self.status = OrderStatus.CANCELLED
        self.cancelled_at = at or utc_now()
        self.cancellation_reason = why
        self._raise_event(OrderCancelledIntegrationEvent(self.id, self.customer_id, why))

    def _ensure_transition(self, target: OrderStatus, verb: str) -> None:
        Invariant.require(
            self.status.can_transition_to(target),
            f"Cannot {verb} order in {self.status.value} status.",
        )

    def _ensure_modifiable(self) -> None:
        Invariant.require(
            self.status is OrderStatus.PENDING,
            f"Cannot modify order in {self.status.value} status.",
        )


__all__ = ["Order"]
