"""Simulated registration side effects.

Each operation writes a start line, blocks for a fixed delay to stand in for
slow I/O, then writes a completion line. Nothing is sent anywhere.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass

from .api import get_config
from .console import get_console
from .events import OperationEvent, Phase, current_strategy, publish


def simulate_blocking_io(duration: float) -> float:
    """Sleep for ``duration`` seconds to emulate blocking IO."""

    time.sleep(duration)
    return duration


@dataclass(frozen=True, slots=True)
class Operation:
    """Static description of one simulated side effect.

    Attributes:
        name: Identifier used in events and runner results.
        base_duration: Delay in seconds before ``time_scale`` is applied.
        start_template: ``str.format`` template for the start line.
        complete_template: ``str.format`` template for the completion line.
    """

    name: str
    base_duration: float
    start_template: str
    complete_template: str

    def duration(self) -> float:
        return self.base_duration * get_config().time_scale

    def perform(self, **fields: str) -> None:
        _announce(self, "start", self.start_template.format(**fields))
        simulate_blocking_io(self.duration())
        _announce(self, "complete", self.complete_template.format(**fields))


SEND_EMAIL = Operation(
    name="send_email",
    base_duration=3.0,
    start_template="Sending email to {email}...",
    complete_template="Email sent to {email}!",
)
ADD_TO_MARKETING_GROUP = Operation(
    name="add_to_marketing_group",
    base_duration=2.0,
    start_template="Adding {email} to the marketing group...",
    complete_template="{email} added to the marketing group!",
)
ADD_TO_CUSTOMER_CARE_GROUP = Operation(
    name="add_to_customer_care_group",
    base_duration=1.0,
    start_template="Adding {name} ({email}) to the customer care group...",
    complete_template="{name} ({email}) added to the customer care group!",
)

OPERATIONS: tuple[Operation, ...] = (
    SEND_EMAIL,
    ADD_TO_MARKETING_GROUP,
    ADD_TO_CUSTOMER_CARE_GROUP,
)


def send_email(email: str) -> None:
    SEND_EMAIL.perform(email=email)


def add_to_marketing_group(email: str) -> None:
    ADD_TO_MARKETING_GROUP.perform(email=email)


def add_to_customer_care_group(name: str, email: str) -> None:
    ADD_TO_CUSTOMER_CARE_GROUP.perform(name=name, email=email)


def _announce(operation: Operation, phase: Phase, message: str) -> None:
    get_console().write_line(message)
    publish(
        OperationEvent(
            operation=operation.name,
            phase=phase,
            message=message,
            strategy=current_strategy(),
            timestamp=time.perf_counter(),
            thread_name=threading.current_thread().name,
        )
    )


__all__ = [
    "Operation",
    "OPERATIONS",
    "SEND_EMAIL",
    "ADD_TO_MARKETING_GROUP",
    "ADD_TO_CUSTOMER_CARE_GROUP",
    "simulate_blocking_io",
    "send_email",
    "add_to_marketing_group",
    "add_to_customer_care_group",
]
