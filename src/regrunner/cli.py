from __future__ import annotations

import argparse
import asyncio
import logging
from contextlib import ExitStack
from typing import TextIO

from .api import get_config
from .console import Console, use_console
from .events import observe_operations
from .models import Registrant
from .runners import register_user

WELCOME_BANNER = "Welcome to the Registration Console App!"
NAME_PROMPT = "Please enter your name: "
EMAIL_PROMPT = "Please enter your email address: "
THANKS_BANNER = "Thanks for registering!"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser; the demo takes no options besides ``--help``."""

    return argparse.ArgumentParser(
        prog="regrunner",
        description=(
            "Collect a name and email, then run the simulated registration "
            "side effects sequentially, serially on workers, and in parallel."
        ),
    )


def main(
    argv: list[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """CLI entry point used by ``regrunner`` and ``python -m regrunner``."""

    build_parser().parse_args(argv)
    config = get_config()
    console = Console(stdin=stdin, stdout=stdout)

    with ExitStack() as stack:
        stack.enter_context(use_console(console))
        if config.log_level is not None:
            logging.basicConfig(level=config.log_level)
            stack.enter_context(observe_operations(level=config.log_level))

        console.write_line(WELCOME_BANNER)
        name = console.prompt(NAME_PROMPT)
        email = console.prompt(EMAIL_PROMPT)
        registrant = Registrant(name=name, email=email)

        asyncio.run(register_user(registrant))

        console.write_line(THANKS_BANNER)
        if config.pause_on_exit:
            console.wait_for_key()
    return 0
