from __future__ import annotations

from collections.abc import Iterator

import pytest

from regrunner import (
    OperationEvent,
    RunnerConfig,
    add_operation_listener,
    configure,
    remove_operation_listener,
    reset,
)


@pytest.fixture(autouse=True)
def restore_runtime() -> Iterator[None]:
    reset()
    configure(RunnerConfig(time_scale=0.0, pause_on_exit=False))
    yield
    reset()


@pytest.fixture
def recorded_events() -> Iterator[list[OperationEvent]]:
    events: list[OperationEvent] = []
    add_operation_listener(events.append)
    yield events
    remove_operation_listener(events.append)
