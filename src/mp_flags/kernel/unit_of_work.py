"""Unit of Work port – one transactional scope per flag operation."""

from __future__ import annotations

import abc
from typing import Any, Self


class UnitOfWork(abc.ABC):
    """Port: transactional unit of work.

    Commits are explicit. Leaving the ``async with`` block on an exception
    rolls back; every exit releases the underlying resources, so a unit of
    work left without a commit discards its staged changes.
    """

    @abc.abstractmethod
    async def commit(self) -> None: ...

    @abc.abstractmethod
    async def rollback(self) -> None: ...

    async def close(self) -> None:
        """Release backend resources. No-op by default."""

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        try:
            if exc_type is not None:
                await self.rollback()
        finally:
            await self.close()


__all__ = ["UnitOfWork"]
