from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from threading import Lock
from typing import Any, Literal

Phase = Literal["start", "complete"]


@dataclass(frozen=True, slots=True)
class OperationEvent:
    operation: str
    phase: Phase
    message: str
    strategy: str | None
    timestamp: float
    thread_name: str

    def as_dict(self) -> dict[str, Any]:
        """Represent the event as plain data for logging or testing."""

        return {
            "operation": self.operation,
            "phase": self.phase,
            "message": self.message,
            "strategy": self.strategy,
            "timestamp": self.timestamp,
            "thread_name": self.thread_name,
        }


_LISTENERS: list[Callable[[OperationEvent], None]] = []
_LOCK = Lock()
_ACTIVE_STRATEGY: ContextVar[str | None] = ContextVar(
    "regrunner_active_strategy", default=None
)


def add_operation_listener(listener: Callable[[OperationEvent], None]) -> None:
    """Register a callback invoked whenever an operation writes a line.

    Listeners run on whichever thread performed the operation, so they must be
    safe to call from worker threads.
    """

    with _LOCK:
        _LISTENERS.append(listener)


def remove_operation_listener(listener: Callable[[OperationEvent], None]) -> None:
    """Remove a previously registered operation listener."""

    with _LOCK:
        try:
            _LISTENERS.remove(listener)
        except ValueError:  # pragma: no cover - listener not registered
            pass


def publish(event: OperationEvent) -> None:
    with _LOCK:
        listeners = list(_LISTENERS)
    for listener in listeners:
        listener(event)


def current_strategy() -> str | None:
    return _ACTIVE_STRATEGY.get()


@contextmanager
def strategy_scope(strategy: str) -> Iterator[None]:
    """Tag operation events emitted within the block with ``strategy``."""

    token = _ACTIVE_STRATEGY.set(strategy)
    try:
        yield
    finally:
        _ACTIVE_STRATEGY.reset(token)


@contextmanager
def observe_operations(
    *,
    logger: logging.Logger | None = None,
    level: int = logging.INFO,
) -> Iterator[None]:
    """Context manager that logs operation events during its scope."""

    active_logger = logger or logging.getLogger("regrunner.operations")

    def _listener(event: OperationEvent) -> None:
        active_logger.log(
            level,
            "operation=%s phase=%s strategy=%s thread=%s",
            event.operation,
            event.phase,
            event.strategy,
            event.thread_name,
        )

    add_operation_listener(_listener)
    try:
        yield
    finally:
        remove_operation_listener(_listener)


__all__ = [
    "OperationEvent",
    "Phase",
    "add_operation_listener",
    "remove_operation_listener",
    "publish",
    "current_strategy",
    "strategy_scope",
    "observe_operations",
]
