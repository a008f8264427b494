"""Terminal abstraction for raw-mode stdin/stdout interaction.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal`` that puts
stdin into raw mode, feeds input chunks to a handler through the asyncio
event loop, and writes ANSI output to stdout.
"""

from __future__ import annotations

import asyncio
import os
import sys
import termios
import tty
from typing import Callable, Protocol

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

BEEP = "\x07"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
ERASE_LINE = "\x1b[2K"
_CURSOR_UP_FMT = "\x1b[{}A"
_CURSOR_DOWN_FMT = "\x1b[{}B"
_CURSOR_TO_FMT = "\x1b[{}G"


def cursor_up(lines: int = 1) -> str:
    return _CURSOR_UP_FMT.format(lines) if lines > 0 else ""


def cursor_down(lines: int = 1) -> str:
    return _CURSOR_DOWN_FMT.format(lines) if lines > 0 else ""


def cursor_to(column: int) -> str:
    """Move to a zero-based *column* on the current row."""
    return _CURSOR_TO_FMT.format(column + 1)


def erase_lines(count: int) -> str:
    """Erase *count* rows ending at the cursor row, leaving the cursor at the top."""
    if count <= 0:
        return ""
    codes = ""
    for i in range(count):
        codes += ERASE_LINE
        if i < count - 1:
            codes += cursor_up(1)
    return codes + "\r"


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for terminal I/O operations."""

    def start(self, on_input: Callable[[str], None]) -> None: ...

    def stop(self) -> None: ...

    def write(self, data: str) -> None: ...

    @property
    def columns(self) -> int: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Terminal backed by ``sys.stdin``/``sys.stdout``.

    Raw mode is entered via :mod:`tty` and the previous attributes are
    restored on :meth:`stop`.
    """

    def __init__(self) -> None:
        self._input_handler: Callable[[str], None] | None = None
        self._original_termios: list | None = None
        self._reader_active = False

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(sys.stdout.fileno()).columns
        except (ValueError, OSError):
            return 80

    def start(self, on_input: Callable[[str], None]) -> None:
        """Enable raw mode and begin reading stdin."""
        self._input_handler = on_input
        fd = sys.stdin.fileno()
        self._original_termios = termios.tcgetattr(fd)
        tty.setraw(fd)

        loop = asyncio.get_running_loop()
        loop.add_reader(fd, self._on_stdin_readable)
        self._reader_active = True

    def stop(self) -> None:
        """Restore terminal state and stop reading."""
        fd = sys.stdin.fileno()
        if self._reader_active:
            try:
                asyncio.get_running_loop().remove_reader(fd)
            except RuntimeError:
                pass
            self._reader_active = False

        if self._original_termios is not None:
            termios.tcsetattr(fd, termios.TCSADRAIN, self._original_termios)
            self._original_termios = None

        self._input_handler = None

    def write(self, data: str) -> None:
        sys.stdout.write(data)
        sys.stdout.flush()

    def hide_cursor(self) -> None:
        self.write(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(SHOW_CURSOR)

    def _on_stdin_readable(self) -> None:
        try:
            raw = os.read(sys.stdin.fileno(), 4096)
        except OSError:
            return
        if raw and self._input_handler is not None:
            self._input_handler(raw.decode("utf-8", errors="replace"))
