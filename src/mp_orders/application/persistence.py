"""Persistence ports used by the order and product use cases."""

from __future__ import annotations

import abc
from uuid import UUID

from mp_orders.domain.orders import Order
from mp_orders.domain.products import Product
from mp_orders.kernel.ddd.repository import Repository


class OrderRepository(Repository[Order]):
    @abc.abstractmethod
    async def get_by_id(self, id: UUID, *, with_items: bool = True) -> Order | None:  # noqa: A002
        """Load an order; ``with_items=False`` leaves the lines unloaded and any access to them raises."""

    @abc.abstractmethod
    async def get_by_customer_id(self, customer_id: str) -> list[Order]:
        """Orders of *customer_id*, newest first."""


class ProductRepository(Repository[Product]):
    @abc.abstractmethod
    async def get_by_sku(self, sku: str) -> Product | None: ...

    @abc.abstractmethod
    async def exists_by_sku(self, sku: str) -> bool: ...

    @abc.abstractmethod
    async def list_active(self, category: str | None = None) -> list[Product]:
        """Active products ordered by name, optionally in one category."""


__all__ = ["OrderRepository", "ProductRepository"]
