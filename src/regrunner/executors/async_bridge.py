from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from concurrent.futures import Executor, Future
from functools import partial
from typing import Any, ParamSpec, TypeVar

T = TypeVar("T")
P = ParamSpec("P")


async def to_executor(
    executor: Executor, func: Callable[P, T], /, *args: P.args, **kwargs: P.kwargs
) -> T:
    """Run ``func`` on ``executor`` and suspend until it resolves."""

    loop = asyncio.get_running_loop()
    caller = partial(func, *args, **kwargs)
    return await loop.run_in_executor(executor, caller)


def wrap_future(
    future: Future[T], *, loop: asyncio.AbstractEventLoop | None = None
) -> asyncio.Future[T]:
    """Expose :func:`asyncio.wrap_future` behind a consistent import path."""

    return asyncio.wrap_future(future, loop=loop)


def submit(
    executor: Executor,
    func: Callable[P, T],
    /,
    *args: P.args,
    **kwargs: P.kwargs,
) -> Future[T]:
    """Thin wrapper over :meth:`Executor.submit`.

    Work starts as soon as a worker is free; the caller is never blocked.
    """

    return executor.submit(func, *args, **kwargs)


async def gather(*aws: Awaitable[Any]) -> list[Any]:
    """Wait for every awaitable, then re-raise the first failure if any.

    Unlike :func:`asyncio.gather` with default arguments, a failing awaitable
    does not release the caller while its siblings are still running.
    """

    if not aws:
        return []
    outcomes = await asyncio.gather(*aws, return_exceptions=True)
    for outcome in outcomes:
        if isinstance(outcome, BaseException):
            raise outcome
    return list(outcomes)
