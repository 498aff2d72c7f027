"""Kernel messaging: transactional outbox message and store port."""
from __future__ import annotations

import abc
import dataclasses
from datetime import datetime
from typing import TYPE_CHECKING, Final
from uuid import UUID

from mp_orders.kernel.ddd.domain_event import DomainEvent

if TYPE_CHECKING:
    from mp_orders.kernel.messaging.registry import EventRegistration

MAX_ERROR_LENGTH: Final = 2000


@dataclasses.dataclass(eq=False)
class OutboxMessage:
    """Integration event persisted next to the business data that raised it.

    Pending while ``processed_on_utc`` is ``None``. Every failed delivery
    records ``error`` and bumps ``retry_count``; the store stops returning
    the row once ``retry_count`` reaches the configured ceiling.
    """

    id: UUID
    type: str  # noqa: A003
    content: str
    occurred_on_utc: datetime
    processed_on_utc: datetime | None = None
    error: str | None = None
    retry_count: int = 0

    @classmethod
    def from_event(cls, event: DomainEvent, registration: "EventRegistration") -> "OutboxMessage":
        """Stage *event*; the row id is the event id."""
        return cls(
            id=event.event_id,
            type=registration.discriminator,
            content=registration.serialize(event),
            occurred_on_utc=event.occurred_on_utc,
        )

    @property
    def is_processed(self) -> bool:
        return self.processed_on_utc is not None

    def mark_processed(self, at: datetime) -> None:
        self.processed_on_utc = at

    def mark_failed(self, error: str) -> None:
        self.error = error[:MAX_ERROR_LENGTH]
        self.retry_count += 1

    def is_exhausted(self, max_retries: int) -> bool:
        return not self.is_processed and self.retry_count >= max_retries


class OutboxStore(abc.ABC):
    """Port: persistence for outbox messages within one session scope."""

    @abc.abstractmethod
    async def add(self, message: OutboxMessage) -> None: ...

    @abc.abstractmethod
    async def fetch_pending(self, *, batch_size: int, max_retries: int) -> list[OutboxMessage]:
        """Unprocessed rows under the retry ceiling, oldest first."""

    @abc.abstractmethod
    async def fetch_exhausted(self, *, max_retries: int, limit: int = 100) -> list[OutboxMessage]:
        """Unprocessed rows that reached the retry ceiling, oldest first."""

    @abc.abstractmethod
    async def save(self) -> None:
        """Persist every change made to fetched rows in one write."""


__all__ = ["MAX_ERROR_LENGTH", "OutboxMessage", "OutboxStore"]
