from __future__ import annotations

import asyncio
import time
from threading import current_thread

import pytest

from regrunner import thread_executor, to_thread, wrap_future
from regrunner.executors.async_bridge import gather
from regrunner.operations import simulate_blocking_io


def test_to_thread_uses_shared_executor() -> None:
    async def capture_name() -> str:
        return await to_thread(lambda: current_thread().name)

    name = asyncio.run(capture_name())
    assert name.startswith("regrunner-worker")


def test_wrap_future_converts_future() -> None:
    async def runner() -> None:
        future = thread_executor().submit(simulate_blocking_io, 0.0)
        assert await wrap_future(future) == 0.0

    asyncio.run(runner())


def test_gather_preserves_argument_order() -> None:
    async def runner() -> list[float]:
        return await gather(
            to_thread(simulate_blocking_io, 0.03),
            to_thread(simulate_blocking_io, 0.01),
        )

    assert asyncio.run(runner()) == [0.03, 0.01]


def test_gather_without_awaitables() -> None:
    assert asyncio.run(gather()) == []


def test_gather_waits_for_siblings_before_raising() -> None:
    finished: list[str] = []

    def slow() -> None:
        time.sleep(0.05)
        finished.append("slow")

    def boom() -> None:
        raise RuntimeError("boom")

    async def runner() -> None:
        await gather(to_thread(slow), to_thread(boom))

    with pytest.raises(RuntimeError, match="boom"):
        asyncio.run(runner())
    assert finished == ["slow"]
