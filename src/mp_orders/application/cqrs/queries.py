"""Application CQRS: Query, QueryHandler."""
from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

from mp_orders.kernel.types.result import Result

Q = TypeVar("Q", bound="Query")


class Query:
    """Marker base for queries (read-only, never opens a transaction)."""

    def validate(self) -> None:
        """Raise :class:`~mp_orders.kernel.errors.ValidationError` when invalid."""


class QueryHandler(abc.ABC, Generic[Q]):
    """Handle a single query type."""

    @abc.abstractmethod
    async def handle(self, query: Q) -> Result[Any]: ...


__all__ = ["Query", "QueryHandler"]
