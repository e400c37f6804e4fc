"""Line input and the validate-or-reprompt loop.

Commands never touch stdin directly. They take a LineReader, a callable that
returns one line without its newline, or None once the stream is closed.
"""

from __future__ import annotations

import sys
from typing import Callable, Optional, TypeVar

from rich.console import Console
from rich.markup import escape

from studentstore.validators import ValidationError

T = TypeVar("T")

LineReader = Callable[[], Optional[str]]


class InputClosed(Exception):
    """The input stream was closed while waiting for a line."""


def stdin_reader() -> Optional[str]:
    """Read one line from standard input."""
    line = sys.stdin.readline()
    if line == "":
        return None
    return line.rstrip("\r\n")


def lines_reader(lines) -> LineReader:
    """LineReader over a fixed sequence of lines; closes when exhausted."""
    it = iter(lines)

    def read() -> Optional[str]:
        return next(it, None)

    return read


def ask(
    reader: LineReader,
    console: Console,
    message: str,
    validator: Callable[[str], T],
) -> T:
    """Prompt until ``validator`` accepts a line.

    Raises:
        InputClosed: the reader hit end of input; nothing should be written.
    """
    while True:
        console.print(escape(message), end="")
        line = reader()
        if line is None:
            console.print("\n[yellow]Input aborted.[/yellow]")
            raise InputClosed()
        try:
            return validator(line)
        except ValidationError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
