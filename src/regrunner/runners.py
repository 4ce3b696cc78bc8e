"""The three execution strategies applied to the registration operations.

``sequential``
    Plain blocking calls on the calling thread.
``serial-async``
    Each call is moved onto the worker pool and awaited before the next one
    is dispatched. Blocking work leaves the caller's thread, but nothing
    overlaps.
``parallel-async``
    All calls are dispatched up front and joined with a single barrier, so
    the total cost tracks the slowest operation rather than the sum.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from functools import partial
from typing import Literal

from .api import submit, thread_executor, to_thread, wrap_future
from .console import get_console
from .events import strategy_scope
from .executors.async_bridge import gather
from .models import Registrant
from .operations import (
    ADD_TO_CUSTOMER_CARE_GROUP,
    ADD_TO_MARKETING_GROUP,
    SEND_EMAIL,
    add_to_customer_care_group,
    add_to_marketing_group,
    send_email,
)

Strategy = Literal["sequential", "serial-async", "parallel-async"]

STRATEGIES: tuple[Strategy, ...] = ("sequential", "serial-async", "parallel-async")
ALL_COMPLETED_MESSAGE = "All Task has been completed!"

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RunnerResult:
    """Outcome of one runner pass over the three operations.

    Attributes:
        strategy: Name of the strategy that produced the result.
        elapsed: Wall-clock seconds spent in the runner.
        completed: Operation names in the order they finished.
    """

    strategy: Strategy
    elapsed: float = 0.0
    completed: list[str] = field(default_factory=list)


def _plan(registrant: Registrant) -> list[tuple[str, Callable[[], None]]]:
    return [
        (SEND_EMAIL.name, partial(send_email, registrant.email)),
        (ADD_TO_MARKETING_GROUP.name, partial(add_to_marketing_group, registrant.email)),
        (
            ADD_TO_CUSTOMER_CARE_GROUP.name,
            partial(add_to_customer_care_group, registrant.name, registrant.email),
        ),
    ]


def _invoke(
    strategy: Strategy, name: str, call: Callable[[], None], completed: list[str]
) -> None:
    # Runs on whichever thread executes the operation.
    with strategy_scope(strategy):
        call()
    completed.append(name)


def run_sequential(registrant: Registrant) -> RunnerResult:
    """Run each operation to completion on the calling thread, in order."""

    result = RunnerResult(strategy="sequential")
    started = time.perf_counter()
    for name, call in _plan(registrant):
        logger.debug("sequential: calling %s", name)
        _invoke("sequential", name, call, result.completed)
    result.elapsed = time.perf_counter() - started
    return result


async def run_serial_async(registrant: Registrant) -> RunnerResult:
    """Dispatch each operation to the worker pool and await it before the next."""

    result = RunnerResult(strategy="serial-async")
    started = time.perf_counter()
    for name, call in _plan(registrant):
        logger.debug("serial-async: dispatching %s", name)
        await to_thread(_invoke, "serial-async", name, call, result.completed)
    result.elapsed = time.perf_counter() - started
    return result


async def run_parallel_async(registrant: Registrant) -> RunnerResult:
    """Dispatch every operation at once, then wait for all of them."""

    result = RunnerResult(strategy="parallel-async")
    executor = thread_executor()
    started = time.perf_counter()
    futures = []
    for name, call in _plan(registrant):
        logger.debug("parallel-async: dispatching %s", name)
        futures.append(
            submit(executor, _invoke, "parallel-async", name, call, result.completed)
        )
    await gather(*(wrap_future(future) for future in futures))
    result.elapsed = time.perf_counter() - started
    get_console().write_line(ALL_COMPLETED_MESSAGE)
    logger.debug("parallel-async: joined %d operations", len(futures))
    return result


Runner = Callable[[Registrant], RunnerResult | Awaitable[RunnerResult]]

_RUNNERS: dict[str, Runner] = {
    "sequential": run_sequential,
    "serial-async": run_serial_async,
    "parallel-async": run_parallel_async,
}


def get_runner(strategy: str) -> Runner:
    """Resolve a strategy name to its runner.

    Raises:
        ValueError: If ``strategy`` is not one of :data:`STRATEGIES`.
    """

    try:
        return _RUNNERS[strategy]
    except KeyError:
        valid = ", ".join(STRATEGIES)
        message = f"invalid strategy '{strategy}'. Expected one of: {valid}"
        raise ValueError(message) from None


async def register_user(registrant: Registrant) -> list[RunnerResult]:
    """Run all three strategies back to back on the same registrant.

    Every strategy triggers the full set of side effects, so one call emits
    nine start/completion pairs. Each strategy finishes before the next one
    starts.
    """

    results = [run_sequential(registrant)]
    results.append(await run_serial_async(registrant))
    results.append(await run_parallel_async(registrant))
    return results


__all__ = [
    "ALL_COMPLETED_MESSAGE",
    "RunnerResult",
    "STRATEGIES",
    "Strategy",
    "get_runner",
    "register_user",
    "run_parallel_async",
    "run_sequential",
    "run_serial_async",
]
