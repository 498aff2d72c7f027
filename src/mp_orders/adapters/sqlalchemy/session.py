"""SQLAlchemy adapter: SqlAlchemySessionFactory."""
from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from mp_orders.adapters.sqlalchemy.orm import metadata, start_mappers


class SqlAlchemySessionFactory:
    """Creates async SQLAlchemy sessions from an engine URL.

    Sessions never autoflush and keep attributes loaded after commit; all
    writes go through the unit of work's save orchestration. In-memory
    SQLite URLs share one connection so every session sees the same data.
    """

    def __init__(self, database_url: str, **engine_kwargs: Any) -> None:
        if database_url.startswith("sqlite") and ":memory:" in database_url:
            engine_kwargs.setdefault("poolclass", StaticPool)
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
        start_mappers()
        self._engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    def __call__(self) -> AsyncSession:
        return self._session_factory()

    async def create_schema(self) -> None:
        """Create every mapped table (development and tests)."""
        async with self._engine.begin() as conn:
            await conn.run_sync(metadata.create_all)

    async def drop_schema(self) -> None:
        async with self._engine.begin() as conn:
            await conn.run_sync(metadata.drop_all)

    async def dispose(self) -> None:
        await self._engine.dispose()


__all__ = ["SqlAlchemySessionFactory"]
