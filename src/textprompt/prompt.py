"""Prompt base: message sections, terminal output, lifecycle and key routing.

A ``Prompt`` does not own any text. Input components such as
:class:`~textprompt.string_prompt.StringPrompt` compose one and use it to
draw themselves, to ring the bell, and to map keypresses to their actions.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

from textprompt.config import PromptOptions
from textprompt.errors import Alert, PromptCancelled
from textprompt.keybindings import PromptKeybindingsManager, get_prompt_keybindings
from textprompt.keys import KeyPress, decode_keypress, split_keys
from textprompt.state import PromptState
from textprompt.styles import Styles
from textprompt.terminal import BEEP, ProcessTerminal, Terminal, cursor_down, cursor_to, cursor_up, erase_lines
from textprompt.utils import count_rows, visible_width

logger = logging.getLogger(__name__)

DEFAULT_ERROR = "Invalid input"


class KeypressHandler(Protocol):
    """What :meth:`Prompt.run` drives: something that can redraw and take keys."""

    def render(self) -> None: ...

    def keypress(self, char: str | None, key: KeyPress) -> None: ...

    def dispatch(self, char: str | None, key: KeyPress) -> None: ...


class Prompt:
    """Generic prompt collaborator.

    Provides the sections of the prompt line, erases and rewrites the
    rendered block, and turns keypresses into action calls on a target.
    """

    def __init__(
        self,
        options: PromptOptions | None = None,
        *,
        terminal: Terminal | None = None,
        styles: Styles | None = None,
    ) -> None:
        self.options = options or PromptOptions()
        self.terminal: Terminal = terminal or ProcessTerminal()
        self.styles = styles or Styles()
        self.state = PromptState()
        if self.options.keybindings:
            self.keybindings = PromptKeybindingsManager(self.options.keybindings)
        else:
            self.keybindings = get_prompt_keybindings()
        self._cursor_hidden = False

    # ── Sections ─────────────────────────────────────────────────────

    def prefix(self) -> str:
        if self.state.cancelled:
            return self.styles.danger("✖")
        if self.state.submitted:
            return self.styles.success("✔")
        return self.styles.primary("?")

    def message(self) -> str:
        return self.styles.strong(self.options.message)

    def separator(self) -> str:
        if self.state.submitted or self.state.cancelled:
            return self.styles.muted("·")
        return self.styles.muted("›")

    def header(self) -> str:
        return self.options.header

    def footer(self) -> str:
        return self.options.footer

    def error(self) -> str:
        if self.state.error and not self.state.submitted:
            return self.styles.danger(self.state.error)
        return ""

    def hint(self) -> str:
        if not self.options.hint or self.state.submitted or self.state.cancelled:
            return ""
        return self.styles.muted(self.options.hint)

    # ── Output ───────────────────────────────────────────────────────

    def clear(self, size: int = 0) -> None:
        """Erase the previously written block.

        *size* is the number of rows the cursor sits above the bottom of
        that block, as left behind by :meth:`restore`.
        """
        buffer = self.state.buffer
        self.state.buffer = ""
        if not buffer and not size:
            return
        rows = count_rows(buffer, self.terminal.columns)
        self.terminal.write(cursor_down(size) + erase_lines(rows))

    def write(self, text: str) -> None:
        if not text:
            return
        self.state.buffer = text
        self.terminal.write(text)

    def restore(self) -> None:
        """Move the cursor from the end of the block back to the prompt line."""
        if self.state.closed:
            return
        footer = self.footer()
        buffer = self.state.buffer
        if not footer or not buffer.endswith("\n" + footer):
            self.state.size = 0
            return

        columns = max(self.terminal.columns, 1)
        head = buffer[: -(len(footer) + 1)]
        self.state.size = count_rows(footer, columns)
        column = visible_width(head.split("\n")[-1]) % columns
        self.terminal.write(cursor_up(self.state.size) + cursor_to(column))

    def cursor_hide(self) -> None:
        if not self._cursor_hidden:
            self.terminal.hide_cursor()
            self._cursor_hidden = True

    def cursor_show(self) -> None:
        if self._cursor_hidden:
            self.terminal.show_cursor()
            self._cursor_hidden = False

    def alert(self) -> None:
        """Ring the terminal bell."""
        self.terminal.write(BEEP)

    # ── Lifecycle ────────────────────────────────────────────────────

    def validate(self, value: Any) -> bool:
        """Run the configured validator, recording its error message."""
        if self.options.validate is None:
            self.state.error = None
            return True
        result = self.options.validate(value)
        if isinstance(result, str):
            self.state.error = result or DEFAULT_ERROR
            return False
        if not result:
            self.state.error = DEFAULT_ERROR
            return False
        self.state.error = None
        return True

    def submit(self, value: Any) -> bool:
        """Accept *value* unless validation rejects it. Returns whether it was accepted."""
        if self.state.closed:
            return False
        if not self.validate(value):
            logger.debug("Prompt %r rejected value: %s", self.options.name, self.state.error)
            return False
        self.state.submitted = True
        self.state.value = value
        logger.debug("Prompt %r submitted", self.options.name)
        return True

    def cancel(self) -> None:
        if self.state.closed:
            return
        self.state.cancelled = True
        logger.debug("Prompt %r cancelled", self.options.name)

    def close(self) -> None:
        if self.state.closed:
            return
        # Leave the cursor below the block so later output starts on a fresh line
        self.terminal.write(cursor_down(self.state.size) + "\n")
        self.state.size = 0
        self.state.closed = True
        self.cursor_show()

    # ── Keypresses ───────────────────────────────────────────────────

    def keypress(self, char: str | None, key: KeyPress, target: KeypressHandler) -> None:
        """Call the action bound to *key* on *target*, or let it dispatch the char.

        An :class:`Alert` from the action rings the bell instead of propagating.
        """
        action = self.keybindings.action_for(key)
        handler = getattr(target, action, None) if action else None
        try:
            if callable(handler):
                handler()
            else:
                target.dispatch(char, key)
        except Alert as exc:
            logger.debug("Alert on %s: %s", key.id or repr(key.sequence), exc)
            self.alert()

    def feed(self, handler: KeypressHandler, data: str) -> None:
        """Decode raw terminal *data* and hand each keypress to *handler*."""
        for piece in split_keys(data):
            if self.state.closed:
                return
            char, key = decode_keypress(piece)
            handler.keypress(char, key)

    async def run(self, handler: KeypressHandler) -> Any:
        """Read keys from the terminal until the prompt closes.

        Returns the submitted value, or raises :class:`PromptCancelled`.
        """
        queue: asyncio.Queue[str] = asyncio.Queue()
        self.terminal.start(queue.put_nowait)
        try:
            handler.render()
            while not self.state.closed:
                data = await queue.get()
                self.feed(handler, data)
        finally:
            self.terminal.stop()

        if self.state.cancelled:
            raise PromptCancelled(self.options.name)
        return self.state.value
