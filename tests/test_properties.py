"""Property-based coverage of the runner ordering guarantees.

- Sequential and serial-async runners never start an operation before the
  previous one has completed.
- The parallel runner announces completion only after every operation did.
- Every line carries the registrant values the operation was given.
"""

from __future__ import annotations

import asyncio
import io

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from regrunner import (
    Console,
    OperationEvent,
    Registrant,
    add_operation_listener,
    remove_operation_listener,
    run_parallel_async,
    run_sequential,
    run_serial_async,
    use_console,
)
from regrunner.runners import ALL_COMPLETED_MESSAGE

LINE_TEXT = st.text(
    alphabet=st.characters(exclude_categories=("Cc", "Cs")),
    max_size=20,
)
registrants = st.builds(Registrant, name=LINE_TEXT, email=LINE_TEXT)

PROPERTY_SETTINGS = settings(
    max_examples=25,
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)


def _record(runner, registrant: Registrant) -> tuple[list[OperationEvent], list[str]]:
    events: list[OperationEvent] = []
    buffer = io.StringIO()
    add_operation_listener(events.append)
    try:
        with use_console(Console(stdout=buffer)):
            outcome = runner(registrant)
            if asyncio.iscoroutine(outcome):
                asyncio.run(outcome)
    finally:
        remove_operation_listener(events.append)
    return events, buffer.getvalue().split("\n")[:-1]


def _assert_strictly_serial(events: list[OperationEvent]) -> None:
    assert [event.phase for event in events] == ["start", "complete"] * 3
    for previous, following in zip(events[1::2], events[2::2]):
        assert previous.operation != following.operation
        assert previous.timestamp <= following.timestamp


@given(registrant=registrants)
@PROPERTY_SETTINGS
def test_sequential_completes_before_next_start(registrant: Registrant) -> None:
    events, _ = _record(run_sequential, registrant)
    _assert_strictly_serial(events)


@given(registrant=registrants)
@PROPERTY_SETTINGS
def test_serial_async_completes_before_next_start(registrant: Registrant) -> None:
    events, _ = _record(run_serial_async, registrant)
    _assert_strictly_serial(events)


@given(registrant=registrants)
@PROPERTY_SETTINGS
def test_parallel_announces_after_all_completions(registrant: Registrant) -> None:
    events, lines = _record(run_parallel_async, registrant)

    assert lines[-1] == ALL_COMPLETED_MESSAGE
    assert sum(event.phase == "complete" for event in events) == 3
    completion_lines = [event.message for event in events if event.phase == "complete"]
    assert set(completion_lines) <= set(lines[:-1])


@given(registrant=registrants)
@PROPERTY_SETTINGS
def test_lines_carry_registrant_values(registrant: Registrant) -> None:
    events, lines = _record(run_sequential, registrant)

    assert lines == [event.message for event in events]
    for event in events:
        assert registrant.email in event.message
        if event.operation == "add_to_customer_care_group":
            assert registrant.name in event.message
