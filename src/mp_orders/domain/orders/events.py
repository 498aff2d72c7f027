"""Events raised by the Order aggregate and their delivery classification."""

from __future__ import annotations

import dataclasses
from decimal import Decimal
from uuid import UUID

from mp_orders.kernel.ddd.domain_event import DomainEvent, EventKind
from mp_orders.kernel.messaging.registry import EventRegistry


# Immediate: handled inside the saving transaction.


@dataclasses.dataclass(frozen=True)
class OrderCreatedDomainEvent(DomainEvent):
    order_id: UUID


@dataclasses.dataclass(frozen=True)
class OrderItemAddedDomainEvent(DomainEvent):
    order_id: UUID
    product_id: UUID
    quantity: int


@dataclasses.dataclass(frozen=True)
class OrderShippedDomainEvent(DomainEvent):
    order_id: UUID


# Integration: delivered through the outbox.


@dataclasses.dataclass(frozen=True)
class OrderConfirmedIntegrationEvent(DomainEvent):
    order_id: UUID
    customer_id: str
    total_amount: Decimal


@dataclasses.dataclass(frozen=True)
class OrderDeliveredIntegrationEvent(DomainEvent):
    order_id: UUID
    customer_id: str


@dataclasses.dataclass(frozen=True)
class OrderCancelledIntegrationEvent(DomainEvent):
    order_id: UUID
    customer_id: str
    reason: str


ORDER_EVENTS: dict[type[DomainEvent], EventKind] = {
    OrderCreatedDomainEvent: EventKind.IMMEDIATE,
    OrderItemAddedDomainEvent: EventKind.IMMEDIATE,
    OrderShippedDomainEvent: EventKind.IMMEDIATE,
    OrderConfirmedIntegrationEvent: EventKind.INTEGRATION,
    OrderDeliveredIntegrationEvent: EventKind.INTEGRATION,
    OrderCancelledIntegrationEvent: EventKind.INTEGRATION,
}


def register_order_events(registry: EventRegistry) -> EventRegistry:
    """Register every Order event type on *registry* and return it."""
    for event_type, kind in ORDER_EVENTS.items():
        registry.register(event_type, kind)
    return registry


__all__ = [
    "ORDER_EVENTS",
    "OrderCancelledIntegrationEvent",
    "OrderConfirmedIntegrationEvent",
    "OrderCreatedDomainEvent",
    "OrderDeliveredIntegrationEvent",
    "OrderItemAddedDomainEvent",
    "OrderShippedDomainEvent",
    "register_order_events",
]
