"""Kernel messaging: explicit event type registry.

Every event type an aggregate may raise is registered once at startup with
its delivery :class:`~mp_orders.kernel.ddd.domain_event.EventKind` and a
stable discriminator (the class name by default). The discriminator is what
an outbox row stores in its ``type`` column.
"""
from __future__ import annotations

import dataclasses
from typing import Any

import pydantic
from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError

from mp_orders.kernel.ddd.domain_event import DomainEvent, EventKind
from mp_orders.kernel.errors.infrastructure import SerializationError, UnknownEventTypeError


@dataclasses.dataclass(frozen=True)
class EventRegistration:
    """One registered event type and its JSON codec."""

    discriminator: str
    event_type: type[DomainEvent]
    kind: EventKind
    adapter: TypeAdapter[Any] = dataclasses.field(repr=False, compare=False)

    def serialize(self, event: DomainEvent) -> str:
        try:
            return self.adapter.dump_json(event).decode()
        except PydanticSerializationError as exc:
            raise SerializationError(
                f"Could not serialize {self.discriminator}: {exc}",
                payload_type=self.discriminator,
                cause=exc,
            ) from exc

    def deserialize(self, content: str) -> DomainEvent:
        try:
            return self.adapter.validate_json(content)
        except pydantic.ValidationError as exc:
            raise SerializationError(
                f"Could not deserialize message content for {self.discriminator}: "
                f"{exc.error_count()} validation error(s)",
                payload_type=self.discriminator,
                detail={"errors": exc.errors(include_url=False, include_input=False)},
                cause=exc,
            ) from exc


class EventRegistry:
    """Maps event types and discriminators to their registrations."""

    def __init__(self) -> None:
        self._by_discriminator: dict[str, EventRegistration] = {}
        self._by_type: dict[type[DomainEvent], EventRegistration] = {}

    def register(
        self,
        event_type: type[DomainEvent],
        kind: EventKind,
        *,
        discriminator: str | None = None,
    ) -> EventRegistration:
        name = discriminator or event_type.__name__
        existing = self._by_discriminator.get(name)
        if existing is not None and existing.event_type is not event_type:
            raise ValueError(f"Discriminator {name!r} already registered for {existing.event_type!r}")
        if event_type in self._by_type and self._by_type[event_type].discriminator != name:
            raise ValueError(f"{event_type.__name__} already registered")
        registration = EventRegistration(name, event_type, kind, TypeAdapter(event_type))
        self._by_discriminator[name] = registration
        self._by_type[event_type] = registration
        return registration

    def registration_for(self, event: DomainEvent) -> EventRegistration:
        """Registration for *event*'s exact type; unregistered types are an error."""
        try:
            return self._by_type[type(event)]
        except KeyError:
            raise UnknownEventTypeError(type(event).__name__) from None

    def resolve(self, discriminator: str) -> EventRegistration:
        try:
            return self._by_discriminator[discriminator]
        except KeyError:
            raise UnknownEventTypeError(discriminator) from None

    def kind_of(self, event: DomainEvent) -> EventKind:
        return self.registration_for(event).kind

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._by_discriminator
        return item in self._by_type

    def __len__(self) -> int:
        return len(self._by_type)


__all__ = ["EventRegistration", "EventRegistry"]
