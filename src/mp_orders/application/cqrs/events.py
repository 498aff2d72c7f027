"""Application CQRS: EventHandler, InProcessEventBus."""

from __future__ import annotations

import abc
from typing import Any, Awaitable, Callable, Generic, TypeVar

from mp_orders.kernel.ddd.domain_event import DomainEvent
from mp_orders.kernel.messaging.event_bus import EventBus
from mp_orders.observability.logging import get_logger

E = TypeVar("E", bound=DomainEvent)

logger = get_logger(__name__)


class EventHandler(abc.ABC, Generic[E]):
    """Handle a single domain event type."""

    @abc.abstractmethod
    async def handle(self, event: E) -> None: ...

    async def __call__(self, event: E) -> None:
        await self.handle(event)


HandlerFn = Callable[[Any], Awaitable[None]]


class InProcessEventBus(EventBus):
    """In-process event bus.

    Handlers registered for the event's exact type run one after another in
    registration order; the first exception stops delivery and propagates.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[DomainEvent], list[HandlerFn]] = {}

    def register(self, event_type: type[DomainEvent], handler: EventHandler[Any] | HandlerFn) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    def handlers_for(self, event_type: type[DomainEvent]) -> list[HandlerFn]:
        return list(self._handlers.get(event_type, ()))

    async def publish(self, event: DomainEvent) -> None:
        handlers = self._handlers.get(type(event), ())
        if not handlers:
            logger.debug("event_bus.no_handlers", event_type=event.event_type)
            return
        for handler in handlers:
            await handler(event)


__all__ = ["EventHandler", "InProcessEventBus"]
