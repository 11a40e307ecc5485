"""Unit tests for sync/async bridging helpers."""

from __future__ import annotations

import asyncio
import threading

import pytest

from custom_mapper.mapping.bridge import resolve_awaitable, run_blocking, run_in_thread


async def _delayed(value: int) -> int:
    await asyncio.sleep(0.01)
    return value


async def _fail() -> None:
    await asyncio.sleep(0)
    raise ValueError("routine failed")


class TestRunBlocking:
    def test_without_running_loop(self) -> None:
        assert run_blocking(_delayed(7)) == 7

    async def test_inside_running_loop(self) -> None:
        # A sync caller nested in async code still gets the value, not a coroutine.
        assert run_blocking(_delayed(8)) == 8

    def test_propagates_exception(self) -> None:
        with pytest.raises(ValueError, match="routine failed"):
            run_blocking(_fail())

    async def test_propagates_exception_inside_loop(self) -> None:
        with pytest.raises(ValueError, match="routine failed"):
            run_blocking(_fail())

    def test_accepts_non_coroutine_awaitable(self) -> None:
        class Awaitable:
            def __await__(self):
                return _delayed(3).__await__()

        assert run_blocking(Awaitable()) == 3


class TestRunInThread:
    async def test_runs_off_the_event_loop_thread(self) -> None:
        caller = threading.get_ident()
        worker = await run_in_thread(threading.get_ident)
        assert worker != caller

    async def test_passes_arguments(self) -> None:
        assert await run_in_thread(lambda a, b: a + b, 2, 3) == 5


class TestResolveAwaitable:
    async def test_awaits_coroutines(self) -> None:
        assert await resolve_awaitable(_delayed(4)) == 4

    async def test_passes_plain_values(self) -> None:
        assert await resolve_awaitable(5) == 5
