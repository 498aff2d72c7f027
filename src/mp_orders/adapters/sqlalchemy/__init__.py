"""SQLAlchemy adapter: classical mappings, session factory, unit of work, repositories, outbox store."""
from mp_orders.adapters.sqlalchemy.audit import AuditAction, AuditTrailEntry, build_audit_entries
from mp_orders.adapters.sqlalchemy.orm import metadata, start_mappers
from mp_orders.adapters.sqlalchemy.outbox import SqlAlchemyOutboxStore, open_outbox_store
from mp_orders.adapters.sqlalchemy.repositories import (
    SqlAlchemyOrderRepository,
    SqlAlchemyProductRepository,
    SqlAlchemyRepositoryBase,
)
from mp_orders.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from mp_orders.adapters.sqlalchemy.types import UtcDateTime
from mp_orders.adapters.sqlalchemy.uow import SqlAlchemyUnitOfWork

__all__ = [
    "AuditAction",
    "AuditTrailEntry",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyOutboxStore",
    "SqlAlchemyProductRepository",
    "SqlAlchemyRepositoryBase",
    "SqlAlchemySessionFactory",
    "SqlAlchemyUnitOfWork",
    "UtcDateTime",
    "build_audit_entries",
    "metadata",
    "open_outbox_store",
    "start_mappers",
]
