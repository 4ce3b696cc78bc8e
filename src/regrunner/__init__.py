"""Console registration demo contrasting three execution strategies.

`regrunner` collects a name and email, then runs three simulated side effects
(an email, a marketing group, a customer-care group) sequentially, serially on
a worker pool, and in parallel with a single join. The building blocks mirror
the `concurrent.futures` and `asyncio` vocabulary; see individual modules for
details.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .api import (
    configure,
    get_config,
    reset,
    submit,
    thread_executor,
    to_thread,
    wrap_future,
)
from .config import RunnerConfig
from .console import Console, get_console, set_console, use_console
from .events import (
    OperationEvent,
    add_operation_listener,
    observe_operations,
    remove_operation_listener,
)
from .models import Registrant
from .operations import (
    OPERATIONS,
    Operation,
    add_to_customer_care_group,
    add_to_marketing_group,
    send_email,
)
from .runners import (
    STRATEGIES,
    RunnerResult,
    Strategy,
    get_runner,
    register_user,
    run_parallel_async,
    run_sequential,
    run_serial_async,
)

__all__ = [
    "Console",
    "OPERATIONS",
    "Operation",
    "OperationEvent",
    "Registrant",
    "RunnerConfig",
    "RunnerResult",
    "STRATEGIES",
    "Strategy",
    "add_operation_listener",
    "add_to_customer_care_group",
    "add_to_marketing_group",
    "configure",
    "get_config",
    "get_console",
    "get_runner",
    "observe_operations",
    "register_user",
    "remove_operation_listener",
    "reset",
    "run_parallel_async",
    "run_sequential",
    "run_serial_async",
    "send_email",
    "set_console",
    "submit",
    "thread_executor",
    "to_thread",
    "use_console",
    "wrap_future",
]

try:
    __version__ = version("regrunner")
except PackageNotFoundError:  # pragma: no cover - during local dev
    __version__ = "0.0.0"
