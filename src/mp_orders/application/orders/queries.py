"""Order queries and their read models."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from mp_orders.application.cqrs import Query
from mp_orders.domain.orders import Order, OrderItem


@dataclasses.dataclass(frozen=True)
class GetOrderQuery(Query):
    order_id: UUID


@dataclasses.dataclass(frozen=True)
class GetOrdersByCustomerQuery(Query):
    customer_id: str


@dataclasses.dataclass(frozen=True)
class OrderItemResponse:
    id: UUID
    product_id: UUID
    product_name: str
    quantity: int
    unit_price: Decimal
    currency: str
    total_price: Decimal

    @classmethod
    def from_item(cls, item: OrderItem) -> "OrderItemResponse":
        return cls(
            id=item.id,
            product_id=item.product_id,
            product_name=item.product_name,
            quantity=item.quantity,
            unit_price=item.unit_price.amount,
            currency=item.unit_price.currency,
            total_price=item.total_price.amount,
        )


@dataclasses.dataclass(frozen=True)
class OrderResponse:
    id: UUID
    customer_id: str
    status: str
    shipping_address: str
    total_amount: Decimal
    currency: str
    items: list[OrderItemResponse]
    created_on_utc: datetime | None
    confirmed_at: datetime | None = None
    shipped_at: datetime | None = None
    delivered_at: datetime | None = None
    cancelled_at: datetime | None = None
    cancellation_reason: str | None = None

    @classmethod
    def from_order(cls, order: Order) -> "OrderResponse":
        total = order.total_price
        return cls(
            id=order.id,
            customer_id=order.customer_id,
            status=order.status.value,
            shipping_address=str(order.shipping_address),
            total_amount=total.amount,
            currency=total.currency,
            items=[OrderItemResponse.from_item(i) for i in order.items],
            created_on_utc=order.created_on_utc,
            confirmed_at=order.confirmed_at,
            shipped_at=order.shipped_at,
            delivered_at=order.delivered_at,
            cancelled_at=order.cancelled_at,
            cancellation_reason=order.cancellation_reason,
        )


@dataclasses.dataclass(frozen=True)
class OrderSummary:
    id: UUID
    status: str
    total_amount: Decimal
    currency: str
    item_count: int
    created_on_utc: datetime | None

    @classmethod
    def from_order(cls, order: Order) -> "OrderSummary":
        total = order.total_price
        return cls(order.id, order.status.value, total.amount, total.currency, len(order.items), order.created_on_utc)


__all__ = [
    "GetOrderQuery",
    "GetOrdersByCustomerQuery",
    "OrderItemResponse",
    "OrderResponse",
    "OrderSummary",
]
