"""Blocking bridge over the canonical coroutine API."""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Coroutine, TypeVar

T = TypeVar("T")


def run_sync(coro: Coroutine[Any, Any, T]) -> T:
    """Run *coro* to completion and return its result.

    Without a running loop in the calling thread the coroutine gets its own
    loop through :func:`asyncio.run`. Inside a running loop it is driven on a
    short-lived worker thread and the caller blocks on the result, which
    stalls that loop for the duration of the call: use the ``*_async``
    methods from coroutines.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="mp-flags-sync") as pool:
        return pool.submit(asyncio.run, coro).result()


__all__ = ["run_sync"]
