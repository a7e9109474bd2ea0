"""SQLAlchemy adapter – SqlAlchemySessionFactory."""
from __future__ import annotations

from typing import Any

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from mp_flags.config.settings import FlagStoreSettings


class SqlAlchemySessionFactory:
    """Creates async SQLAlchemy sessions from an engine URL.

    Calling the factory returns a new, unopened :class:`AsyncSession`.
    """

    def __init__(self, database_url: str, **engine_kwargs: Any) -> None:
        self._engine: AsyncEngine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(self._engine, class_=AsyncSession, expire_on_commit=False)

    @classmethod
    def from_settings(cls, settings: FlagStoreSettings, **engine_kwargs: Any) -> "SqlAlchemySessionFactory":
        engine_kwargs.setdefault("echo", settings.echo)
        if settings.null_pool:
            engine_kwargs.setdefault("poolclass", NullPool)
        return cls(settings.database_url, **engine_kwargs)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    def __call__(self) -> AsyncSession:
        return self._session_factory()

    async def create_all(self, metadata: MetaData) -> None:
        """Create the tables of *metadata* that do not exist yet."""
        async with self._engine.begin() as conn:
            await conn.run_sync(metadata.create_all)

    async def dispose(self) -> None:
        await self._engine.dispose()


__all__ = ["SqlAlchemySessionFactory"]
