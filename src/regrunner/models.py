"""Plain data records shared by the operations and runners."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Registrant:
    """Name and email captured from the console for one run.

    Values are kept exactly as typed; empty strings are valid.
    """

    name: str
    email: str
