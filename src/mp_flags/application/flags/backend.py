"""Application flags – FlagUnitOfWork port."""
from __future__ import annotations

import abc
from typing import Callable, Generic, TypeVar

from mp_flags.application.flags.flag import Flag
from mp_flags.kernel.unit_of_work import UnitOfWork

V = TypeVar("V")


class FlagUnitOfWork(UnitOfWork, Generic[V]):
    """Port: the capabilities a backend must offer to a :class:`FlagStore`.

    Name uniqueness is the backend's job. Implementations live in
    ``adapters/sqlalchemy`` and :mod:`mp_flags.application.flags.in_memory`.
    """

    @abc.abstractmethod
    async def find_by_name(self, name: str) -> Flag[V] | None: ...

    @abc.abstractmethod
    async def upsert(self, flag: Flag[V]) -> None:
        """Stage *flag*: replace the value of an existing record or add a new one."""


FlagUnitOfWorkFactory = Callable[[], FlagUnitOfWork[V]]


__all__ = ["FlagUnitOfWork", "FlagUnitOfWorkFactory"]
