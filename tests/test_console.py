from __future__ import annotations

import io
from concurrent.futures import ThreadPoolExecutor

from regrunner import Console, get_console, set_console, use_console


def test_write_line_appends_newline() -> None:
    buffer = io.StringIO()
    Console(stdout=buffer).write_line("hello")
    assert buffer.getvalue() == "hello\n"


def test_prompt_reads_one_line_without_terminator() -> None:
    out = io.StringIO()
    console = Console(stdin=io.StringIO("Alice\r\nnext\n"), stdout=out)
    assert console.prompt("Name: ") == "Alice"
    assert out.getvalue() == "Name: "
    assert console.read_line() == "next"


def test_prompt_at_end_of_input_reads_empty_string() -> None:
    console = Console(stdin=io.StringIO(""), stdout=io.StringIO())
    assert console.prompt("Name: ") == ""
    console.wait_for_key()


def test_use_console_restores_previous() -> None:
    original = get_console()
    replacement = Console(stdout=io.StringIO())
    with use_console(replacement) as active:
        assert active is replacement
        assert get_console() is replacement
    assert get_console() is original


def test_set_console_returns_previous() -> None:
    original = get_console()
    replacement = Console(stdout=io.StringIO())
    assert set_console(replacement) is original
    assert set_console(original) is replacement


def test_default_console_follows_sys_stdout(capsys) -> None:
    Console().write_line("captured")
    assert capsys.readouterr().out == "captured\n"


def test_concurrent_writes_keep_lines_whole() -> None:
    buffer = io.StringIO()
    console = Console(stdout=buffer)
    payloads = [f"worker-{index}-" + "x" * 200 for index in range(8)]

    def _write(payload: str) -> None:
        for _ in range(50):
            console.write_line(payload)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(_write, payloads))

    lines = buffer.getvalue().splitlines()
    assert len(lines) == 8 * 50
    assert set(lines) == set(payloads)
