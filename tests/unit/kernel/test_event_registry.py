"""Unit tests for EventRegistry and OutboxMessage."""
from __future__ import annotations

import dataclasses
import json
from datetime import UTC, datetime
from decimal import Decimal
from uuid import uuid4

import pytest

from mp_orders.domain.orders import (
    OrderConfirmedIntegrationEvent,
    OrderCreatedDomainEvent,
)
from mp_orders.kernel.ddd import DomainEvent, EventKind
from mp_orders.kernel.errors import SerializationError, UnknownEventTypeError
from mp_orders.kernel.messaging import EventRegistry, OutboxMessage
from mp_orders.kernel.messaging.outbox import MAX_ERROR_LENGTH


@dataclasses.dataclass(frozen=True)
class StrayEvent(DomainEvent):
    note: str


# ---------------------------------------------------------------------------
# EventRegistry
# ---------------------------------------------------------------------------


class TestEventRegistry:
    def test_order_events_registered(self, registry: EventRegistry) -> None:
        assert len(registry) == 6
        assert "OrderConfirmedIntegrationEvent" in registry
        assert OrderCreatedDomainEvent in registry

    def test_kind_of(self, registry: EventRegistry) -> None:
        order_id = uuid4()
        assert registry.kind_of(OrderCreatedDomainEvent(order_id)) is EventKind.IMMEDIATE
        confirmed = OrderConfirmedIntegrationEvent(order_id, "cust-1", Decimal("10"))
        assert registry.kind_of(confirmed) is EventKind.INTEGRATION

    def test_unregistered_event(self, registry: EventRegistry) -> None:
        with pytest.raises(UnknownEventTypeError, match="Could not resolve type: StrayEvent"):
            registry.registration_for(StrayEvent("x"))

    def test_unknown_discriminator(self, registry: EventRegistry) -> None:
        with pytest.raises(UnknownEventTypeError):
            registry.resolve("Missing")

    def test_discriminator_clash(self, registry: EventRegistry) -> None:
        with pytest.raises(ValueError, match="already registered"):
            registry.register(StrayEvent, EventKind.IMMEDIATE, discriminator="OrderCreatedDomainEvent")

    def test_reregistration_is_idempotent(self, registry: EventRegistry) -> None:
        registry.register(OrderCreatedDomainEvent, EventKind.IMMEDIATE)
        assert len(registry) == 6

    def test_serialize_round_trip_keeps_metadata(self, registry: EventRegistry) -> None:
        event = OrderConfirmedIntegrationEvent(uuid4(), "cust-1", Decimal("150.00"))
        registration = registry.registration_for(event)
        content = registration.serialize(event)
        assert json.loads(content)["customer_id"] == "cust-1"
        restored = registration.deserialize(content)
        assert restored == event
        assert restored.event_id == event.event_id

    def test_deserialize_bad_content(self, registry: EventRegistry) -> None:
        registration = registry.resolve("OrderConfirmedIntegrationEvent")
        with pytest.raises(SerializationError) as info:
            registration.deserialize('{"order_id": "not-a-uuid"}')
        assert info.value.payload_type == "OrderConfirmedIntegrationEvent"


# ---------------------------------------------------------------------------
# OutboxMessage
# ---------------------------------------------------------------------------


class TestOutboxMessage:
    def _message(self, registry: EventRegistry) -> OutboxMessage:
        event = OrderConfirmedIntegrationEvent(uuid4(), "cust-1", Decimal("1"))
        return OutboxMessage.from_event(event, registry.registration_for(event))

    def test_from_event(self, registry: EventRegistry) -> None:
        event = OrderConfirmedIntegrationEvent(uuid4(), "cust-1", Decimal("1"))
        message = OutboxMessage.from_event(event, registry.registration_for(event))
        assert message.id == event.event_id
        assert message.type == "OrderConfirmedIntegrationEvent"
        assert message.occurred_on_utc == event.occurred_on_utc
        assert not message.is_processed
        assert message.retry_count == 0

    def test_mark_failed_truncates_and_counts(self, registry: EventRegistry) -> None:
        message = self._message(registry)
        message.mark_failed("x" * (MAX_ERROR_LENGTH + 50))
        assert len(message.error or "") == MAX_ERROR_LENGTH
        assert message.retry_count == 1
        assert message.is_exhausted(1)
        assert not message.is_exhausted(2)

    def test_mark_processed(self, registry: EventRegistry) -> None:
        message = self._message(registry)
        at = datetime(2026, 1, 1, tzinfo=UTC)
        message.mark_processed(at)
        assert message.is_processed
        assert message.processed_on_utc == at
        assert not message.is_exhausted(0)
