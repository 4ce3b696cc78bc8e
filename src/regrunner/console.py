from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from threading import Lock
from typing import TextIO


class Console:
    """Line-oriented console shared by every operation.

    Writes are serialized through a lock so lines produced by concurrent
    workers never interleave mid-line. Streams default to ``sys.stdin`` and
    ``sys.stdout`` resolved on each call, which keeps the console compatible
    with stream redirection in tests.
    """

    def __init__(
        self, *, stdin: TextIO | None = None, stdout: TextIO | None = None
    ) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._lock = Lock()

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def write_line(self, text: str) -> None:
        with self._lock:
            stream = self.stdout
            stream.write(f"{text}\n")
            stream.flush()

    def prompt(self, text: str) -> str:
        """Write ``text`` without a newline and read one line of input.

        End of input reads as an empty string.
        """

        with self._lock:
            stream = self.stdout
            stream.write(text)
            stream.flush()
        return self.read_line()

    def read_line(self) -> str:
        line = self.stdin.readline()
        return line.rstrip("\r\n")

    def wait_for_key(self) -> None:
        """Block until the user presses Enter (or input is exhausted)."""

        self.stdin.readline()


_CONSOLE = Console()
_LOCK = Lock()


def get_console() -> Console:
    """Return the process-wide console used by operations and runners."""

    with _LOCK:
        return _CONSOLE


def set_console(console: Console) -> Console:
    """Install ``console`` as the shared console and return the previous one."""

    global _CONSOLE
    with _LOCK:
        previous = _CONSOLE
        _CONSOLE = console
    return previous


@contextmanager
def use_console(console: Console) -> Iterator[Console]:
    """Temporarily route operation output through ``console``."""

    previous = set_console(console)
    try:
        yield console
    finally:
        set_console(previous)


__all__ = ["Console", "get_console", "set_console", "use_console"]
