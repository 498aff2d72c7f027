"""Kernel messaging: event bus port."""
from __future__ import annotations

import abc

from mp_orders.kernel.ddd.domain_event import DomainEvent


class EventBus(abc.ABC):
    """Port: deliver one event to its subscribers.

    ``publish`` raises when delivery fails; callers decide whether that is
    fatal (immediate dispatch) or retryable (outbox processing).
    """

    @abc.abstractmethod
    async def publish(self, event: DomainEvent) -> None: ...


__all__ = ["EventBus"]
