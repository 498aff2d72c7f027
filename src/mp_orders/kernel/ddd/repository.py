"""Repository port: generic async repository for persisted entities."""

from __future__ import annotations

import abc
from typing import Generic, TypeVar
from uuid import UUID

from mp_orders.kernel.ddd.entity import Entity

TEntity = TypeVar("TEntity", bound=Entity)


class Repository(abc.ABC, Generic[TEntity]):
    """Port: generic repository.

    Mutations only register intent with the persistence scope; nothing is
    written until the unit of work saves.
    """

    @abc.abstractmethod
    async def get_by_id(self, id: UUID) -> TEntity | None: ...  # noqa: A002

    @abc.abstractmethod
    async def add(self, entity: TEntity) -> None: ...

    @abc.abstractmethod
    async def update(self, entity: TEntity) -> None: ...

    @abc.abstractmethod
    async def remove(self, entity: TEntity) -> None: ...


__all__ = ["Repository"]
