"""SQLAlchemy adapter – SqlAlchemyFlagUnitOfWork."""
from __future__ import annotations

import functools
from typing import Any, Callable, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mp_flags.adapters.sqlalchemy.models import DefaultFlagModel, model_for_table
from mp_flags.adapters.sqlalchemy.uow import SqlAlchemyUnitOfWork
from mp_flags.application.flags import Flag, FlagUnitOfWork
from mp_flags.config.settings import FlagStoreSettings

V = TypeVar("V")


class SqlAlchemyFlagUnitOfWork(SqlAlchemyUnitOfWork, FlagUnitOfWork[V], Generic[V]):
    """Flag unit of work over one async SQLAlchemy session.

    *model* is any mapped class with ``name`` and ``value`` attributes, e.g.
    one built on :class:`~mp_flags.adapters.sqlalchemy.mixins.FlagModelMixin`.
    ``find_by_name`` fetches at most one row and lets
    :class:`~sqlalchemy.exc.MultipleResultsFound` through if the table ever
    breaks name uniqueness. Rows it loads are reused by :meth:`upsert`, so a
    lookup followed by an upsert issues a single SELECT.
    """

    def __init__(
        self,
        session_factory: Callable[[], AsyncSession],
        model: type[Any] = DefaultFlagModel,
    ) -> None:
        super().__init__(session_factory)
        self._model = model
        self._loaded: dict[str, Any] = {}

    @classmethod
    def factory(
        cls,
        session_factory: Callable[[], AsyncSession],
        model: type[Any] = DefaultFlagModel,
    ) -> Callable[[], "SqlAlchemyFlagUnitOfWork[V]"]:
        """Return a zero-argument callable suitable for ``FlagStore(...)``."""
        return functools.partial(cls, session_factory, model)

    @classmethod
    def from_settings(
        cls,
        session_factory: Callable[[], AsyncSession],
        settings: FlagStoreSettings,
    ) -> Callable[[], "SqlAlchemyFlagUnitOfWork[str]"]:
        """Like :meth:`factory`, on the table named by ``settings.table_name``."""
        return cls.factory(session_factory, model_for_table(settings.table_name))

    @property
    def model(self) -> type[Any]:
        return self._model

    async def _find_row(self, name: str) -> Any:
        if name in self._loaded:
            return self._loaded[name]
        result = await self.session.execute(select(self._model).where(self._model.name == name))
        row = result.scalar_one_or_none()
        self._loaded[name] = row
        return row

    async def find_by_name(self, name: str) -> Flag[V] | None:
        row = await self._find_row(name)
        if row is None:
            return None
        return Flag(name=row.name, value=row.value)

    async def upsert(self, flag: Flag[V]) -> None:
        row = await self._find_row(flag.name)
        if row is not None:
            row.value = flag.value
        else:
            row = self._model(name=flag.name, value=flag.value)
            self.session.add(row)
            self._loaded[flag.name] = row

    async def close(self) -> None:
        self._loaded.clear()
        await super().close()


__all__ = ["SqlAlchemyFlagUnitOfWork"]
