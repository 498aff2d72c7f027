"""SQLAlchemy adapter: repositories for orders and products.

Soft-deleted rows are filtered out of every read.
"""
from __future__ import annotations

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import Select, exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import raiseload

from mp_orders.adapters.sqlalchemy.orm import orders_table, products_table
from mp_orders.application.persistence import OrderRepository, ProductRepository
from mp_orders.domain.orders import Order
from mp_orders.domain.products import Product
from mp_orders.kernel.ddd.entity import Entity

TEntity = TypeVar("TEntity", bound=Entity)


class SqlAlchemyRepositoryBase(Generic[TEntity]):
    """Shared add/update/remove and live-row selection."""

    _model: type[TEntity]
    _table: Any

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _live(self) -> Select[tuple[TEntity]]:
        return select(self._model).where(self._table.c.is_deleted.is_(False))

    async def _first(self, stmt: Select[tuple[TEntity]]) -> TEntity | None:
        return (await self._session.scalars(stmt.limit(1))).first()

    async def _all(self, stmt: Select[tuple[TEntity]]) -> list[TEntity]:
        return list((await self._session.scalars(stmt)).all())

    async def add(self, entity: TEntity) -> None:
        self._session.add(entity)

    async def update(self, entity: TEntity) -> None:
        self._session.add(entity)

    async def remove(self, entity: TEntity) -> None:
        await self._session.delete(entity)


class SqlAlchemyOrderRepository(SqlAlchemyRepositoryBase[Order], OrderRepository):
    _model = Order
    _table = orders_table

    async def get_by_id(self, id: UUID, *, with_items: bool = True) -> Order | None:  # noqa: A002
        stmt = self._live().where(orders_table.c.id == id)
        if not with_items:
            stmt = stmt.options(raiseload(Order._items))  # type: ignore[attr-defined]
        return await self._first(stmt)

    async def get_by_customer_id(self, customer_id: str) -> list[Order]:
        stmt = self._live().where(orders_table.c.customer_id == customer_id).order_by(
            orders_table.c.created_on_utc.desc()
        )
        return await self._all(stmt)


class SqlAlchemyProductRepository(SqlAlchemyRepositoryBase[Product], ProductRepository):
    _model = Product
    _table = products_table

    async def get_by_id(self, id: UUID) -> Product | None:  # noqa: A002
        return await self._first(self._live().where(products_table.c.id == id))

    async def get_by_sku(self, sku: str) -> Product | None:
        return await self._first(self._live().where(products_table.c.sku == sku))

    async def exists_by_sku(self, sku: str) -> bool:
        stmt = select(
            exists().where(products_table.c.sku == sku, products_table.c.is_deleted.is_(False))
        )
        return bool(await self._session.scalar(stmt))

    async def list_active(self, category: str | None = None) -> list[Product]:
        stmt = self._live().where(products_table.c.is_active.is_(True))
        if category is not None:
            stmt = stmt.where(products_table.c.category == category)
        return await self._all(stmt.order_by(products_table.c.name))


__all__ = [
    "SqlAlchemyOrderRepository",
    "SqlAlchemyProductRepository",
    "SqlAlchemyRepositoryBase",
]
