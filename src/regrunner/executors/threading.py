from __future__ import annotations

import atexit
from concurrent.futures import ThreadPoolExecutor
from threading import Lock

WORKER_PREFIX = "regrunner-worker"

_WORKERS: ThreadPoolExecutor | None = None
_WORKERS_SIZE: int | None = None
_LOCK = Lock()
_ATEXIT_REGISTERED = False


def get_thread_pool(*, max_workers: int | None = None) -> ThreadPoolExecutor:
    """Return the worker pool shared by the async runners.

    Built on first use; asking for a different ``max_workers`` replaces it.
    ``None`` keeps whatever pool exists. ``ThreadPoolExecutor`` raises
    :class:`ValueError` for a non-positive size.
    """

    global _WORKERS, _WORKERS_SIZE
    with _LOCK:
        stale = (
            _WORKERS is not None
            and max_workers is not None
            and max_workers != _WORKERS_SIZE
        )
    if stale:
        reset_thread_pool()

    with _LOCK:
        if _WORKERS is None:
            pool = ThreadPoolExecutor(
                max_workers=max_workers, thread_name_prefix=WORKER_PREFIX
            )
            _WORKERS = pool
            _WORKERS_SIZE = pool._max_workers  # type: ignore[attr-defined]
            _register_atexit()
        return _WORKERS


def reset_thread_pool(*, cancel_futures: bool = False) -> None:
    """Shut the shared pool down, letting running operations finish."""

    global _WORKERS, _WORKERS_SIZE
    with _LOCK:
        if _WORKERS is not None:
            _WORKERS.shutdown(wait=True, cancel_futures=cancel_futures)
        _WORKERS = None
        _WORKERS_SIZE = None


def _register_atexit() -> None:
    global _ATEXIT_REGISTERED
    if not _ATEXIT_REGISTERED:
        atexit.register(reset_thread_pool)
        _ATEXIT_REGISTERED = True
