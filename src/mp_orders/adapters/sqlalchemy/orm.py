"""SQLAlchemy adapter: table definitions and classical mappings.

Domain classes stay persistence-ignorant; :func:`start_mappers` instruments
them against the tables below. Call it once at startup before any domain
object is created.
"""
from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    Uuid,
)
from sqlalchemy.orm import composite, registry, relationship

from mp_orders.adapters.sqlalchemy.audit import AuditTrailEntry
from mp_orders.adapters.sqlalchemy.types import UtcDateTime
from mp_orders.domain.orders import Address, Order, OrderItem, OrderStatus
from mp_orders.domain.products import Product
from mp_orders.kernel.messaging.outbox import MAX_ERROR_LENGTH, OutboxMessage
from mp_orders.kernel.types.money import Money

metadata = MetaData()
mapper_registry = registry(metadata=metadata)


def _audit_columns() -> list[Column]:
    return [
        Column("created_on_utc", UtcDateTime, nullable=True),
        Column("created_by", String(256), nullable=True),
        Column("modified_on_utc", UtcDateTime, nullable=True),
        Column("modified_by", String(256), nullable=True),
    ]


def _soft_delete_columns() -> list[Column]:
    return [
        Column("is_deleted", Boolean, nullable=False, default=False, index=True),
        Column("deleted_on_utc", UtcDateTime, nullable=True),
        Column("deleted_by", String(256), nullable=True),
    ]


orders_table = Table(
    "orders",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("customer_id", String(100), nullable=False, index=True),
    Column("status", Enum(OrderStatus, native_enum=False, length=20), nullable=False),
    Column("shipping_street", String(200), nullable=False),
    Column("shipping_city", String(100), nullable=False),
    Column("shipping_state", String(100), nullable=False, default=""),
    Column("shipping_postal_code", String(20), nullable=False, default=""),
    Column("shipping_country", String(100), nullable=False),
    Column("confirmed_at", UtcDateTime, nullable=True),
    Column("shipped_at", UtcDateTime, nullable=True),
    Column("delivered_at", UtcDateTime, nullable=True),
    Column("cancelled_at", UtcDateTime, nullable=True),
    Column("cancellation_reason", String(500), nullable=True),
    *_audit_columns(),
    *_soft_delete_columns(),
)

order_items_table = Table(
    "order_items",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("order_id", Uuid, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True),
    Column("product_id", Uuid, nullable=False),
    Column("product_name", String(200), nullable=False),
    Column("quantity", Integer, nullable=False),
    Column("unit_price_amount", Numeric(18, 2), nullable=False),
    Column("unit_price_currency", String(3), nullable=False),
)

products_table = Table(
    "products",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("name", String(200), nullable=False),
    Column("description", Text, nullable=False, default=""),
    Column("price", Numeric(18, 2), nullable=False),
    Column("currency", String(3), nullable=False),
    Column("stock_quantity", Integer, nullable=False, default=0),
    Column("is_active", Boolean, nullable=False, default=True),
    Column("sku", String(50), nullable=True, index=True),
    Column("category", String(100), nullable=True, index=True),
    *_audit_columns(),
    *_soft_delete_columns(),
)

outbox_messages_table = Table(
    "outbox_messages",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("type", String(500), nullable=False),
    Column("content", Text, nullable=False),
    Column("occurred_on_utc", UtcDateTime, nullable=False),
    Column("processed_on_utc", UtcDateTime, nullable=True),
    Column("error", String(MAX_ERROR_LENGTH), nullable=True),
    Column("retry_count", Integer, nullable=False, default=0),
    Index("ix_outbox_messages_pending", "processed_on_utc", "occurred_on_utc"),
)

audit_trails_table = Table(
    "audit_trails",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("table_name", String(100), nullable=False),
    Column("key", String(100), nullable=False),
    Column("action", String(20), nullable=False),
    Column("old_values", Text, nullable=True),
    Column("new_values", Text, nullable=True),
    Column("performed_by", String(256), nullable=True),
    Column("performed_on_utc", UtcDateTime, nullable=False, index=True),
)

_started = False


def start_mappers() -> None:
    """Map the domain classes imperatively; safe to call more than once."""
    global _started
    if _started:
        return
    mapper_registry.map_imperatively(
        OrderItem,
        order_items_table,
        properties={
            "unit_price": composite(
                Money,
                order_items_table.c.unit_price_amount,
                order_items_table.c.unit_price_currency,
            ),
        },
    )
    mapper_registry.map_imperatively(
        Order,
        orders_table,
        properties={
            "shipping_address": composite(
                Address,
                orders_table.c.shipping_street,
                orders_table.c.shipping_city,
                orders_table.c.shipping_state,
                orders_table.c.shipping_postal_code,
                orders_table.c.shipping_country,
            ),
            "_items": relationship(
                OrderItem,
                cascade="all, delete-orphan",
                lazy="selectin",
            ),
        },
    )
    mapper_registry.map_imperatively(Product, products_table)
    mapper_registry.map_imperatively(OutboxMessage, outbox_messages_table)
    mapper_registry.map_imperatively(AuditTrailEntry, audit_trails_table)
    _started = True


__all__ = [
    "audit_trails_table",
    "mapper_registry",
    "metadata",
    "order_items_table",
    "orders_table",
    "outbox_messages_table",
    "products_table",
    "start_mappers",
]
