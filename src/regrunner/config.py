from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass


@dataclass(slots=True)
class RunnerConfig:
    """Settings that tune how the registration demo runs.

    The defaults reproduce the plain console demo: full-length delays, a pool
    sized by :class:`~concurrent.futures.ThreadPoolExecutor` itself, a final
    key-press wait and no event logging.
    """

    time_scale: float = 1.0
    max_workers: int | None = None
    pause_on_exit: bool = True
    log_level: int | None = None

    @classmethod
    def from_env(cls) -> RunnerConfig:
        """Load overrides from environment variables.

        Supported variables (all optional):

        ``REGRUNNER_TIME_SCALE``
            Non-negative float multiplying every simulated operation delay.
        ``REGRUNNER_MAX_WORKERS``
            Positive integer sizing the shared worker pool.
        ``REGRUNNER_PAUSE``
            Boolean flag (``1``/``true``/``yes``) controlling the final
            key-press wait.
        ``REGRUNNER_LOG_LEVEL``
            Logging level name such as ``INFO`` or ``DEBUG``; enables
            operation event logging on stderr.
        """

        def _parse_bool(value: str | None) -> bool | None:
            if value is None:
                return None
            lowered = value.strip().lower()
            if lowered in {"1", "true", "yes", "on"}:
                return True
            if lowered in {"0", "false", "no", "off"}:
                return False
            return None

        def _parse_int(value: str | None) -> int | None:
            if value is None:
                return None
            try:
                parsed = int(value)
            except ValueError:
                return None
            return parsed if parsed > 0 else None

        def _parse_float(value: str | None) -> float | None:
            if value is None:
                return None
            try:
                parsed = float(value)
            except ValueError:
                return None
            return parsed if math.isfinite(parsed) and parsed >= 0 else None

        def _parse_level(value: str | None) -> int | None:
            if value is None:
                return None
            return logging.getLevelNamesMapping().get(value.strip().upper())

        env = os.environ

        time_scale = _parse_float(env.get("REGRUNNER_TIME_SCALE"))
        pause = _parse_bool(env.get("REGRUNNER_PAUSE"))

        return cls(
            time_scale=time_scale if time_scale is not None else 1.0,
            max_workers=_parse_int(env.get("REGRUNNER_MAX_WORKERS")),
            pause_on_exit=pause if pause is not None else True,
            log_level=_parse_level(env.get("REGRUNNER_LOG_LEVEL")),
        )
