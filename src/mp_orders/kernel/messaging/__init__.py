"""Kernel messaging: event bus port, event registry, transactional outbox."""
from mp_orders.kernel.messaging.event_bus import EventBus
from mp_orders.kernel.messaging.outbox import MAX_ERROR_LENGTH, OutboxMessage, OutboxStore
from mp_orders.kernel.messaging.registry import EventRegistration, EventRegistry

__all__ = [
    "EventBus",
    "EventRegistration",
    "EventRegistry",
    "MAX_ERROR_LENGTH",
    "OutboxMessage",
    "OutboxStore",
]
