from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Executor, Future
from threading import Lock
from typing import Any, ParamSpec, TypeVar

from .config import RunnerConfig
from .executors import async_bridge
from .executors.threading import get_thread_pool, reset_thread_pool

T = TypeVar("T")
P = ParamSpec("P")

_CONFIG: RunnerConfig | None = None
_LOCK = Lock()


def get_config() -> RunnerConfig:
    """Return the active configuration, loading it from the environment once.

    >>> from regrunner import RunnerConfig
    >>> configure(RunnerConfig(time_scale=0.5))
    >>> get_config().time_scale
    0.5
    >>> reset()
    """

    global _CONFIG
    with _LOCK:
        if _CONFIG is None:
            _CONFIG = RunnerConfig.from_env()
        return _CONFIG


def configure(config: RunnerConfig) -> None:
    """Replace the process-wide configuration.

    >>> from regrunner import RunnerConfig
    >>> configure(RunnerConfig(max_workers=2))
    >>> thread_executor()._max_workers
    2
    >>> reset()
    """

    global _CONFIG
    with _LOCK:
        _CONFIG = config


def reset(*, cancel_futures: bool = False) -> None:
    """Tear down the shared worker pool and forget the active configuration.

    The next :func:`get_config` call reloads settings from the environment.

    >>> reset()
    """

    global _CONFIG
    reset_thread_pool(cancel_futures=cancel_futures)
    with _LOCK:
        _CONFIG = None


def thread_executor(*, max_workers: int | None = None) -> Executor:
    """Expose the shared worker pool as a standard :class:`Executor`.

    Without an explicit size the configured ``max_workers`` applies.

    >>> executor = thread_executor(max_workers=1)
    >>> executor.submit(lambda: "hello").result()
    'hello'
    >>> executor is thread_executor()
    True
    >>> reset()
    """

    if max_workers is None:
        max_workers = get_config().max_workers
    return get_thread_pool(max_workers=max_workers)


def submit(
    executor: Executor, func: Callable[P, T], /, *args: P.args, **kwargs: P.kwargs
) -> Future[T]:
    """Submit *func* to *executor* mirroring :meth:`Executor.submit`.

    >>> submit(thread_executor(), pow, 2, 5).result()
    32
    >>> reset()
    """

    return async_bridge.submit(executor, func, *args, **kwargs)


async def to_thread(func: Callable[P, T], /, *args: P.args, **kwargs: P.kwargs) -> T:
    """Run ``func`` in the shared worker pool while awaiting the result.

    >>> import asyncio
    >>> async def main() -> str:
    ...     return await to_thread(str.upper, "done")
    >>> asyncio.run(main())
    'DONE'
    >>> reset()
    """

    return await async_bridge.to_executor(thread_executor(), func, *args, **kwargs)


def wrap_future(future: Future[T]) -> Any:
    """Expose :func:`asyncio.wrap_future` under the `regrunner` namespace.

    >>> import asyncio
    >>> async def main() -> str:
    ...     future = submit(thread_executor(), lambda: "value")
    ...     return await wrap_future(future)
    >>> asyncio.run(main())
    'value'
    >>> reset()
    """

    return async_bridge.wrap_future(future)


__all__ = [
    "configure",
    "get_config",
    "reset",
    "submit",
    "thread_executor",
    "to_thread",
    "wrap_future",
]
