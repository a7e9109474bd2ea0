"""Application flags – FlagStore and StringFlagStore."""
from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Generic, TypeVar

from mp_flags.application.flags.backend import FlagUnitOfWorkFactory
from mp_flags.application.flags.flag import Flag
from mp_flags.kernel.errors import FlagFormatError, InvalidArgumentError
from mp_flags.kernel.sync import run_sync
from mp_flags.observability.logging import get_logger

V = TypeVar("V")
T = TypeVar("T")

Converter = Callable[[V], T] | Callable[[V], Awaitable[T]]

_log = get_logger(__name__)


def _require_name(name: str | None) -> str:
    if name is None:
        raise InvalidArgumentError("name", "cannot be None")
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError("name", "cannot be empty or whitespace")
    return name


class FlagStore(Generic[V]):
    """Get and set named flags whose values are of type ``V``.

    Every call opens a fresh unit of work from *uow_factory* and releases it
    before returning; the store itself keeps no state between calls. The
    ``*_async`` coroutines are the canonical API, the plain methods block on
    them through :func:`~mp_flags.kernel.sync.run_sync`.

    Usage::

        store = StringFlagStore(SqlAlchemyFlagUnitOfWork.factory(sessions))
        await store.set_async("max_users", "100")
        await store.get_converted_async("max_users", int)   # -> 100
    """

    def __init__(self, uow_factory: FlagUnitOfWorkFactory[V]) -> None:
        self._uow_factory = uow_factory

    # ------------------------------------------------------------------
    # Get
    # ------------------------------------------------------------------

    async def get_async(self, name: str) -> V | None:
        """Return the value stored under *name*, or ``None`` when absent.

        Raises:
            InvalidArgumentError: *name* is ``None``, empty or whitespace.
        """
        _require_name(name)
        async with self._uow_factory() as uow:
            flag = await uow.find_by_name(name)
        _log.debug("flag.get", name=name, found=flag is not None)
        return None if flag is None else flag.value

    async def get_converted_async(
        self,
        name: str,
        convert: Converter[V, T],
        default: T | None = None,
    ) -> T | None:
        """Return ``convert(value)`` for the flag *name*, or *default* when absent.

        *convert* may be a plain function or a coroutine function.

        Raises:
            InvalidArgumentError: *convert* is ``None`` or *name* is invalid.
            FlagFormatError: *convert* raised :class:`ValueError`.
        """
        if convert is None:
            raise InvalidArgumentError("convert", "cannot be None")

        value = await self.get_async(name)
        if value is None:
            return default

        try:
            result = convert(value)
            if inspect.isawaitable(result):
                result = await result
        except ValueError as exc:
            _log.warning("flag.format_error", name=name, error=type(exc).__name__)
            raise FlagFormatError(name, cause=exc) from exc
        return result

    async def get_as_async(self, name: str, type_: type[T]) -> T | None:
        """Return the stored value if it is a ``type_`` instance, else ``None``."""
        value = await self.get_async(name)
        return value if isinstance(value, type_) else None

    def get(self, name: str) -> V | None:
        return run_sync(self.get_async(name))

    def get_converted(
        self,
        name: str,
        convert: Converter[V, T],
        default: T | None = None,
    ) -> T | None:
        return run_sync(self.get_converted_async(name, convert, default))

    def get_as(self, name: str, type_: type[T]) -> T | None:
        return run_sync(self.get_as_async(name, type_))

    # ------------------------------------------------------------------
    # Set
    # ------------------------------------------------------------------

    async def set_async(self, name: str, value: V) -> None:
        """Insert or replace the flag *name* and commit before returning.

        Raises:
            InvalidArgumentError: *value* is ``None`` or *name* is invalid.
        """
        if value is None:
            raise InvalidArgumentError("value", "cannot be None")
        _require_name(name)

        async with self._uow_factory() as uow:
            existing = await uow.find_by_name(name)
            await uow.upsert(Flag(name=name, value=value))
            await uow.commit()
        _log.info("flag.set", name=name, created=existing is None)

    def set(self, name: str, value: V) -> None:
        run_sync(self.set_async(name, value))


class StringFlagStore(FlagStore[str]):
    """:class:`FlagStore` for string values, the usual case.

    Adds :meth:`set_object_async` which stores ``str(value)``.
    """

    async def set_object_async(self, name: str, value: Any) -> None:
        if value is None:
            raise InvalidArgumentError("value", "cannot be None")
        await self.set_async(name, str(value))

    def set_object(self, name: str, value: Any) -> None:
        run_sync(self.set_object_async(name, value))


__all__ = ["Converter", "FlagStore", "StringFlagStore"]
