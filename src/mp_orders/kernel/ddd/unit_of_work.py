"""Unit of Work port: transactional boundary around a persistence scope."""

from __future__ import annotations

import abc
from typing import Any


class UnitOfWork(abc.ABC):
    """Port: transactional unit of work.

    ``commit_transaction`` always persists pending changes (through
    :meth:`save_changes`) before committing; any failure rolls back and
    re-raises.
    """

    @property
    @abc.abstractmethod
    def has_active_transaction(self) -> bool: ...

    @abc.abstractmethod
    async def save_changes(self) -> int:
        """Persist pending changes and return the number of affected entities."""

    @abc.abstractmethod
    async def begin_transaction(self) -> None:
        """Open a transaction; no-op when one is already active."""

    @abc.abstractmethod
    async def commit_transaction(self) -> None: ...

    @abc.abstractmethod
    async def rollback_transaction(self) -> None:
        """Roll back the active transaction; no-op when none is open."""

    async def __aenter__(self) -> "UnitOfWork":
        await self.begin_transaction()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        if exc_type is None:
            await self.commit_transaction()
        else:
            await self.rollback_transaction()


__all__ = ["UnitOfWork"]
