"""SQLAlchemy adapter – SqlAlchemyUnitOfWork."""
from __future__ import annotations

from typing import Any, Callable, Self

from sqlalchemy.ext.asyncio import AsyncSession

from mp_flags.kernel.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy async unit of work.

    The session is opened on ``__aenter__`` and always closed on exit.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._factory = session_factory
        self.session: Any = None

    async def __aenter__(self) -> Self:
        self.session = self._factory()
        return self

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()

    async def close(self) -> None:
        if self.session is not None:
            await self.session.close()
            self.session = None


__all__ = ["SqlAlchemyUnitOfWork"]
