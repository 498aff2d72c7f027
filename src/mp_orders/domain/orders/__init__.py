"""Order aggregate: Order, OrderItem, OrderStatus, Address and events."""
from mp_orders.domain.orders.address import Address
from mp_orders.domain.orders.events import (
    ORDER_EVENTS,
    OrderCancelledIntegrationEvent,
    OrderConfirmedIntegrationEvent,
    OrderCreatedDomainEvent,
    OrderDeliveredIntegrationEvent,
    OrderItemAddedDomainEvent,
    OrderShippedDomainEvent,
    register_order_events,
)
from mp_orders.domain.orders.order import Order
from mp_orders.domain.orders.order_item import OrderItem
from mp_orders.domain.orders.status import OrderStatus

__all__ = [
    "Address",
    "ORDER_EVENTS",
    "Order",
    "OrderCancelledIntegrationEvent",
    "OrderConfirmedIntegrationEvent",
    "OrderCreatedDomainEvent",
    "OrderDeliveredIntegrationEvent",
    "OrderItem",
    "OrderItemAddedDomainEvent",
    "OrderShippedDomainEvent",
    "OrderStatus",
    "register_order_events",
]
