"""SQLAlchemy adapter: SqlAlchemyUnitOfWork and the save orchestration."""
from __future__ import annotations

from datetime import datetime
from typing import Iterator

from sqlalchemy.ext.asyncio import AsyncSession, AsyncSessionTransaction

from mp_orders.adapters.sqlalchemy.audit import build_audit_entries
from mp_orders.adapters.sqlalchemy.outbox import SqlAlchemyOutboxStore
from mp_orders.kernel.ddd import AggregateRoot, Auditable, DomainEvent, EventKind, SoftDeletable, UnitOfWork
from mp_orders.kernel.messaging import EventBus, EventRegistration, EventRegistry, OutboxMessage
from mp_orders.kernel.security import current_actor
from mp_orders.kernel.time import Clock, SystemClock
from mp_orders.observability.logging import get_logger

logger = get_logger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of work bound to one ``AsyncSession``.

    :meth:`save_changes` runs, in order: audit stamping, soft-delete
    conversion, audit snapshots, domain event collection, immediate event
    dispatch, outbox staging, flush, audit flush and event clearing. All of
    it happens inside the session's transaction; without an explicit
    transaction the save commits on its own.
    """

    def __init__(
        self,
        session: AsyncSession,
        *,
        registry: EventRegistry,
        dispatcher: EventBus,
        clock: Clock | None = None,
        audit: bool = True,
    ) -> None:
        self.session = session
        self._registry = registry
        self._dispatcher = dispatcher
        self._clock = clock or SystemClock()
        self._audit = audit
        self._outbox = SqlAlchemyOutboxStore(session)
        self._transaction: AsyncSessionTransaction | None = None

    @property
    def has_active_transaction(self) -> bool:
        return self._transaction is not None

    async def save_changes(self) -> int:
        now = self._clock.now()
        actor = current_actor()

        self._stamp_auditable(now, actor)
        self._apply_soft_deletes(now, actor)
        audit_entries = (
            build_audit_entries(self.session.sync_session, actor=actor, at=now, exclude=(OutboxMessage,))
            if self._audit
            else []
        )

        aggregates = list(self._tracked_aggregates())
        staged: list[tuple[DomainEvent, EventRegistration]] = [
            (event, self._registry.registration_for(event))
            for aggregate in aggregates
            for event in aggregate.domain_events
        ]

        for event, registration in staged:
            if registration.kind is EventKind.IMMEDIATE:
                logger.debug("uow.immediate_event", event_type=registration.discriminator, event_id=str(event.event_id))
                await self._dispatcher.publish(event)

        for event, registration in staged:
            if registration.kind is EventKind.INTEGRATION:
                await self._outbox.add(OutboxMessage.from_event(event, registration))

        affected = self._pending_change_count()
        await self.session.flush()
        if audit_entries:
            self.session.add_all(audit_entries)
            await self.session.flush()

        for aggregate in aggregates:
            aggregate.clear_domain_events()

        if self._transaction is None:
            await self.session.commit()

        logger.debug("uow.saved", affected=affected, events=len(staged), audit_entries=len(audit_entries))
        return affected

    async def begin_transaction(self) -> None:
        if self._transaction is not None:
            return
        current = self.session.get_transaction()
        self._transaction = current if current is not None else await self.session.begin()

    async def commit_transaction(self) -> None:
        try:
            await self.save_changes()
            if self._transaction is not None:
                await self._transaction.commit()
        except BaseException:
            await self.rollback_transaction()
            raise
        finally:
            self._transaction = None

    async def rollback_transaction(self) -> None:
        if self._transaction is None:
            return
        try:
            await self._transaction.rollback()
        finally:
            self._transaction = None

    # ------------------------------------------------------------------
    # Save orchestration steps
    # ------------------------------------------------------------------

    def _stamp_auditable(self, now: datetime, actor: str) -> None:
        for obj in self.session.new:
            if isinstance(obj, Auditable):
                obj.stamp_created(now, actor)
        for obj in self.session.dirty:
            if isinstance(obj, Auditable) and self.session.is_modified(obj):
                obj.stamp_modified(now, actor)

    def _apply_soft_deletes(self, now: datetime, actor: str) -> None:
        for obj in list(self.session.deleted):
            if isinstance(obj, SoftDeletable):
                self.session.expunge(obj)
                self.session.add(obj)
                obj.mark_deleted(now, actor)

    def _tracked_aggregates(self) -> Iterator[AggregateRoot]:
        seen: set[int] = set()
        for obj in (*self.session.new, *self.session.identity_map.values()):
            if isinstance(obj, AggregateRoot) and id(obj) not in seen:
                seen.add(id(obj))
                yield obj

    def _pending_change_count(self) -> int:
        modified = sum(1 for obj in self.session.dirty if self.session.is_modified(obj))
        return len(self.session.new) + modified + len(self.session.deleted)


__all__ = ["SqlAlchemyUnitOfWork"]
