import os
import sys
from typing import NamedTuple

DEFAULT_SIZE = (80, 25)


class TerminalSize(NamedTuple):
    width: int
    height: int


def get_terminal_size() -> TerminalSize:
    """Return the terminal size in characters, or 80x25 if stdout is not a tty."""
    if not sys.stdout.isatty():
        return TerminalSize(*DEFAULT_SIZE)
    try:
        size = os.get_terminal_size()
    except OSError:
        return TerminalSize(*DEFAULT_SIZE)
    return TerminalSize(size.columns or DEFAULT_SIZE[0], size.lines or DEFAULT_SIZE[1])
