"""StringPrompt: text buffer, cursor and clipboard editing for a prompt line."""

from __future__ import annotations

from typing import Any

from textprompt.clipboard import Clipboard
from textprompt.config import PromptOptions
from textprompt.errors import Alert
from textprompt.keys import KeyPress
from textprompt.placeholder import placeholder
from textprompt.prompt import KeypressHandler, Prompt
from textprompt.state import InputState
from textprompt.styles import Styles
from textprompt.terminal import Terminal


def _is_primitive(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


class StringPrompt:
    """Editable text input rendered on a prompt line.

    Every editing operation either updates ``state`` and redraws, or raises
    :class:`Alert` without touching anything. ``initial`` doubles as the
    ghost-text suggestion accepted with :meth:`next`.
    """

    def __init__(
        self,
        options: PromptOptions | None = None,
        *,
        terminal: Terminal | None = None,
        styles: Styles | None = None,
        base: Prompt | None = None,
    ) -> None:
        self.base = base or Prompt(options, terminal=terminal, styles=styles)
        self.options = self.base.options
        self.styles = self.base.styles
        self.initial = str(self.options.initial) if _is_primitive(self.options.initial) else ""
        self.state = InputState()
        self.clipboard = Clipboard()
        self._prev_keypress: KeyPress | None = None
        if self.initial:
            self.base.cursor_hide()

    @property
    def input(self) -> str:
        return self.state.input

    @property
    def cursor(self) -> int:
        return self.state.cursor

    # ── Keypresses ───────────────────────────────────────────────────

    def keypress(
        self,
        char: str | None,
        key: KeyPress,
        target: KeypressHandler | None = None,
    ) -> None:
        """Handle one keypress.

        In multiline mode a single ``return`` inserts a newline; a second
        one in a row falls through and submits. Actions are looked up on
        *target* (default: this prompt) so wrappers can override them.
        """
        prev = self._prev_keypress
        self._prev_keypress = key
        if self.options.multiline and key.name == "return":
            if prev is None or prev.name != "return":
                self.append("\n")
                return
        self.base.keypress(char, key, target or self)

    def dispatch(self, char: str | None, key: KeyPress) -> None:
        if not char or key.ctrl or key.code:
            raise Alert(f"not insertable: {key.sequence!r}")
        self.append(char)

    # ── Buffer and cursor ────────────────────────────────────────────

    def move_cursor(self, n: int = 0) -> None:
        self.state.cursor += n

    def append(self, text: str) -> None:
        state = self.state
        state.input = state.input[: state.cursor] + text + state.input[state.cursor :]
        self.move_cursor(len(text))
        self.render()

    def insert(self, text: str) -> None:
        self.append(text)

    def delete(self) -> None:
        """Delete the character before the cursor."""
        state = self.state
        if state.cursor <= 0:
            raise Alert("start of input")
        state.input = state.input[: state.cursor - 1] + state.input[state.cursor :]
        self.move_cursor(-1)
        self.render()

    def delete_forward(self) -> None:
        state = self.state
        if state.cursor >= len(state.input):
            raise Alert("end of input")
        state.input = state.input[: state.cursor] + state.input[state.cursor + 1 :]
        self.render()

    def reset(self) -> None:
        self.state.input = ""
        self.state.cursor = 0
        self.render()

    def left(self) -> None:
        if self.state.cursor <= 0:
            raise Alert("start of input")
        self.move_cursor(-1)
        self.render()

    def right(self) -> None:
        if self.state.cursor >= len(self.state.input):
            raise Alert("end of input")
        self.move_cursor(1)
        self.render()

    def backward(self) -> None:
        self.left()

    def forward(self) -> None:
        self.right()

    def first(self) -> None:
        self.state.cursor = 0
        self.render()

    def last(self) -> None:
        # Lands on the last character, not after it
        self.state.cursor = max(len(self.state.input) - 1, 0)
        self.render()

    def toggle_cursor(self) -> None:
        state = self.state
        if state.previous_cursor:
            state.cursor = min(state.previous_cursor, len(state.input))
            state.previous_cursor = 0
        else:
            state.previous_cursor = state.cursor
            state.cursor = 0
        self.render()

    # ── Clipboard ────────────────────────────────────────────────────

    def cut_forward(self) -> None:
        """Cut from the cursor to the end of the input."""
        state = self.state
        if len(state.input) <= state.cursor:
            raise Alert("nothing after cursor")
        self.clipboard.push(state.input[state.cursor :])
        state.input = state.input[: state.cursor]
        self.render()

    def cut_left(self) -> None:
        """Cut the space-delimited word before the cursor."""
        state = self.state
        if state.cursor == 0:
            raise Alert("start of input")
        before = state.input[: state.cursor]
        after = state.input[state.cursor :]
        words = before.split(" ")
        self.clipboard.push(words.pop())
        state.input = " ".join(words)
        state.cursor = len(state.input)
        state.input += after
        self.render()

    def paste(self) -> None:
        text = self.clipboard.pop()
        if text is None:
            raise Alert("clipboard is empty")
        self.insert(text)

    # ── Suggestions ──────────────────────────────────────────────────

    def next(self) -> None:
        """Accept the initial value when the input is a prefix of it."""
        initial = self.initial
        if not initial or not initial.startswith(self.state.input):
            raise Alert("no suggestion")
        self.state.input = initial
        self.state.cursor = len(initial)
        self.render()

    def prev(self) -> None:
        if not self.state.input:
            raise Alert("input is empty")
        self.reset()

    # ── Lifecycle ────────────────────────────────────────────────────

    def is_value(self, value: Any) -> bool:
        return bool(value)

    def submit(self) -> Any:
        """Submit the input, or the initial value when nothing was typed.

        Returns the value, or None when validation rejected it.
        """
        value = self.state.input if self.is_value(self.state.input) else self.initial
        if not self.base.submit(value):
            self.render()
            return None
        self.render()
        self.base.close()
        return value

    def cancel(self) -> None:
        self.base.cancel()
        self.render()
        self.base.close()

    async def run(self) -> Any:
        return await self.base.run(self)

    # ── Rendering ────────────────────────────────────────────────────

    def format(self, input: str | None = None) -> str:
        if input is None:
            input = self.state.input
        if not self.base.state.submitted:
            # The block cursor replaces the terminal's own
            self.base.cursor_hide()
            return placeholder(input, self.initial, self.state.cursor, self.styles)
        return self.styles.submitted(input or self.initial)

    def render(self) -> None:
        base = self.base
        size = base.state.size

        prompt = " ".join(s for s in (base.prefix(), base.message(), base.separator()) if s)
        base.state.prompt = prompt

        header = base.header()
        output = self.format()
        help_text = base.error() or base.hint()
        footer = base.footer()

        if help_text and help_text not in output:
            output += " " + help_text
        prompt += " " + output

        base.clear(size)
        base.write("\n".join(s for s in (header, prompt, footer) if s))
        base.restore()
