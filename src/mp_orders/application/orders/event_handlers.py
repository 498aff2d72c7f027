"""Default subscribers for order events."""
from __future__ import annotations

from mp_orders.application.cqrs import EventHandler, InProcessEventBus
from mp_orders.domain.orders import (
    OrderCancelledIntegrationEvent,
    OrderConfirmedIntegrationEvent,
    OrderCreatedDomainEvent,
    OrderDeliveredIntegrationEvent,
    OrderItemAddedDomainEvent,
    OrderShippedDomainEvent,
)
from mp_orders.kernel.ddd import DomainEvent
from mp_orders.observability.logging import get_logger

logger = get_logger(__name__)


class OrderActivityLogger(EventHandler[DomainEvent]):
    """Writes one structured log line per order event."""

    async def handle(self, event: DomainEvent) -> None:
        fields = {k: str(v) for k, v in vars(event).items()}
        logger.info("order.event", event_type=event.event_type, **fields)


IMMEDIATE_ORDER_EVENTS = (OrderCreatedDomainEvent, OrderItemAddedDomainEvent, OrderShippedDomainEvent)
INTEGRATION_ORDER_EVENTS = (
    OrderConfirmedIntegrationEvent,
    OrderDeliveredIntegrationEvent,
    OrderCancelledIntegrationEvent,
)


def subscribe_order_handlers(immediate: InProcessEventBus, integration: InProcessEventBus | None = None) -> None:
    """Attach :class:`OrderActivityLogger` to both buses."""
    handler = OrderActivityLogger()
    for event_type in IMMEDIATE_ORDER_EVENTS:
        immediate.register(event_type, handler)
    if integration is not None:
        for event_type in INTEGRATION_ORDER_EVENTS:
            integration.register(event_type, handler)


__all__ = ["OrderActivityLogger", "subscribe_order_handlers"]
