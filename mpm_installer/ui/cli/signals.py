"""
Interrupt handling for the interactive session.

Ctrl+C or SIGTERM at any point prints a short notice and exits
cleanly instead of dumping a traceback.
"""

from __future__ import annotations

import signal
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import click

EXIT_MESSAGE = "Exiting from user input..."


def say_goodbye() -> None:
    """Print the exit notice on a red background."""
    click.echo()
    click.secho(EXIT_MESSAGE, bg="red", err=True)


def _exit_on_signal(signum: int, frame: object) -> None:
    say_goodbye()
    sys.exit(0)


@contextmanager
def handle_interrupts() -> Iterator[None]:
    """Exit with status 0 on SIGINT/SIGTERM while the block runs.

    Previous handlers are restored on the way out.
    """
    previous = {
        sig: signal.signal(sig, _exit_on_signal)
        for sig in (signal.SIGINT, signal.SIGTERM)
    }
    try:
        yield
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler if handler is not None else signal.SIG_DFL)
