"""Sync/async bridging primitives.

run_blocking() lets a synchronous caller use an asynchronous mapper: it
blocks the calling thread until the coroutine completes. run_in_thread()
lets an asynchronous caller use a synchronous mapper without blocking its
event loop.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TypeVar

T = TypeVar("T")


async def _await(awaitable: Awaitable[T]) -> T:
    return await awaitable


def run_blocking(awaitable: Awaitable[T]) -> T:
    """Block the calling thread until awaitable completes and return its result.

    Without a running event loop in this thread the awaitable runs on a
    fresh loop via asyncio.run(). When called from code that is itself
    running inside an event loop, the awaitable runs on a fresh loop in a
    worker thread, because the current loop cannot be re-entered; the
    current loop is stalled until the result arrives.

    Exceptions raised by the awaitable propagate unchanged.
    """
    coro = awaitable if inspect.iscoroutine(awaitable) else _await(awaitable)
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="custom-mapper-bridge") as pool:
        return pool.submit(asyncio.run, coro).result()


async def run_in_thread(func: Callable[..., T], *args: Any) -> T:
    """Run a blocking callable in a worker thread and await its result."""
    return await asyncio.to_thread(func, *args)


async def resolve_awaitable(value: Any) -> Any:
    """Await value if it is awaitable, otherwise return it as is."""
    if inspect.isawaitable(value):
        return await value
    return value
