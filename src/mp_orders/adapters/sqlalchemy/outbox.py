"""SQLAlchemy adapter: SqlAlchemyOutboxStore."""
from __future__ import annotations

import contextlib
from typing import AsyncIterator, Callable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mp_orders.adapters.sqlalchemy.orm import outbox_messages_table as outbox
from mp_orders.kernel.messaging.outbox import OutboxMessage, OutboxStore


class SqlAlchemyOutboxStore(OutboxStore):
    """Outbox rows read and written through one ``AsyncSession``."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, message: OutboxMessage) -> None:
        self._session.add(message)

    async def get(self, message_id: UUID) -> OutboxMessage | None:
        return await self._session.get(OutboxMessage, message_id)

    async def fetch_pending(self, *, batch_size: int, max_retries: int) -> list[OutboxMessage]:
        stmt = (
            select(OutboxMessage)
            .where(outbox.c.processed_on_utc.is_(None), outbox.c.retry_count < max_retries)
            .order_by(outbox.c.occurred_on_utc, outbox.c.id)
            .limit(batch_size)
        )
        return list((await self._session.scalars(stmt)).all())

    async def fetch_exhausted(self, *, max_retries: int, limit: int = 100) -> list[OutboxMessage]:
        stmt = (
            select(OutboxMessage)
            .where(outbox.c.processed_on_utc.is_(None), outbox.c.retry_count >= max_retries)
            .order_by(outbox.c.occurred_on_utc, outbox.c.id)
            .limit(limit)
        )
        return list((await self._session.scalars(stmt)).all())

    async def save(self) -> None:
        await self._session.commit()


@contextlib.asynccontextmanager
async def open_outbox_store(
    session_factory: Callable[[], AsyncSession],
) -> AsyncIterator[SqlAlchemyOutboxStore]:
    """Yield a store bound to a fresh session, closed on exit."""
    async with session_factory() as session:
        yield SqlAlchemyOutboxStore(session)


__all__ = ["SqlAlchemyOutboxStore", "open_outbox_store"]
