"""Application flags – InMemoryFlagBackend."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

from mp_flags.application.flags.backend import FlagUnitOfWork
from mp_flags.application.flags.flag import Flag

V = TypeVar("V")


class InMemoryFlagUnitOfWork(FlagUnitOfWork[V], Generic[V]):
    """Unit of work over an :class:`InMemoryFlagBackend`.

    Upserts are staged locally and applied to the backend on :meth:`commit`.
    """

    def __init__(self, backend: "InMemoryFlagBackend[V]") -> None:
        self._backend = backend
        self._staged: dict[str, V] = {}

    async def find_by_name(self, name: str) -> Flag[V] | None:
        if name in self._staged:
            return Flag(name, self._staged[name])
        return self._backend.get(name)

    async def upsert(self, flag: Flag[V]) -> None:
        self._staged[flag.name] = flag.value

    async def commit(self) -> None:
        self._backend.apply(self._staged)
        self._staged = {}

    async def rollback(self) -> None:
        self._staged = {}

    async def close(self) -> None:
        self._staged = {}


class InMemoryFlagBackend(Generic[V]):
    """Dict-backed flag backend for tests and local use.

    Calling the backend opens a unit of work, so an instance can be handed
    directly to :class:`~mp_flags.application.flags.store.FlagStore`::

        backend = InMemoryFlagBackend[str]()
        store = StringFlagStore(backend)
    """

    def __init__(self, flags: dict[str, V] | None = None) -> None:
        self._flags: dict[str, V] = dict(flags or {})
        self._lock = threading.Lock()
        self.commits = 0

    def __call__(self) -> InMemoryFlagUnitOfWork[V]:
        return InMemoryFlagUnitOfWork(self)

    def get(self, name: str) -> Flag[V] | None:
        with self._lock:
            if name not in self._flags:
                return None
            return Flag(name, self._flags[name])

    def apply(self, changes: dict[str, V]) -> None:
        with self._lock:
            self._flags.update(changes)
            self.commits += 1

    def snapshot(self) -> dict[str, V]:
        """Copy of every committed flag (useful in assertions)."""
        with self._lock:
            return dict(self._flags)


__all__ = ["InMemoryFlagBackend", "InMemoryFlagUnitOfWork"]
