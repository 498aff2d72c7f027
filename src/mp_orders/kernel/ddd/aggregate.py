"""AggregateRoot: records domain events for the unit of work to drain."""

from __future__ import annotations

from mp_orders.kernel.ddd.domain_event import DomainEvent
from mp_orders.kernel.ddd.entity import Entity


class AggregateRoot(Entity):
    """Aggregate root; owns its pending domain events.

    Events stay visible through :attr:`domain_events` until the save
    orchestration calls :meth:`clear_domain_events`. They are never part of
    the aggregate's persisted state.
    """

    def _pending(self) -> list[DomainEvent]:
        # instances materialised by the ORM never run __init__
        return self.__dict__.setdefault("_domain_events", [])

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        return tuple(self._pending())

    def _raise_event(self, event: DomainEvent) -> None:
        """Record *event*; call after the state change has been applied."""
        self._pending().append(event)

    def clear_domain_events(self) -> None:
        self._pending().clear()


__all__ = ["AggregateRoot"]
