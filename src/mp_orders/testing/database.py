"""Testing database: throwaway in-memory SQLite with the schema created."""
from __future__ import annotations

import contextlib
from typing import AsyncIterator

from mp_orders.adapters.sqlalchemy import SqlAlchemySessionFactory

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@contextlib.asynccontextmanager
async def in_memory_database() -> AsyncIterator[SqlAlchemySessionFactory]:
    """Yield a session factory over a fresh database, disposed on exit.

    Open it inside the event loop that uses it::

        async def _run() -> None:
            async with in_memory_database() as sessions:
                ...

        asyncio.run(_run())
    """
    factory = SqlAlchemySessionFactory(MEMORY_URL)
    await factory.create_schema()
    try:
        yield factory
    finally:
        await factory.dispose()


__all__ = ["MEMORY_URL", "in_memory_database"]
