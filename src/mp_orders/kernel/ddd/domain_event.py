"""Domain events and their delivery classification."""

from __future__ import annotations

import dataclasses
import enum
from datetime import UTC, datetime
from uuid import UUID, uuid4


class EventKind(str, enum.Enum):
    """How the unit of work delivers an event type.

    ``IMMEDIATE`` events go to in-process handlers inside the saving
    transaction. ``INTEGRATION`` events are written to the outbox and
    published later by the outbox processor.
    """

    IMMEDIATE = "immediate"
    INTEGRATION = "integration"


@dataclasses.dataclass(frozen=True)
class DomainEvent:
    """Base class for domain events.

    The metadata fields are keyword-only so subclasses can declare required
    payload fields positionally.

    Example::

        @dataclasses.dataclass(frozen=True)
        class OrderShipped(DomainEvent):
            order_id: UUID
    """

    event_id: UUID = dataclasses.field(default_factory=uuid4, kw_only=True)
    occurred_on_utc: datetime = dataclasses.field(
        default_factory=lambda: datetime.now(UTC), kw_only=True
    )

    @property
    def event_type(self) -> str:
        return type(self).__name__


__all__ = ["DomainEvent", "EventKind"]
