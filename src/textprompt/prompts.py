"""Entry points for building and running text prompts."""

from __future__ import annotations

from typing import Any

from textprompt.config import PromptOptions
from textprompt.history import Completer, HistoryPrompt, cycle_completer
from textprompt.string_prompt import StringPrompt
from textprompt.styles import Styles
from textprompt.terminal import Terminal


def create_prompt(
    options: PromptOptions,
    *,
    terminal: Terminal | None = None,
    styles: Styles | None = None,
    completer: Completer = cycle_completer,
) -> StringPrompt | HistoryPrompt:
    """Build a text prompt, wrapped with history support when configured."""
    prompt = StringPrompt(options, terminal=terminal, styles=styles)
    if options.history is not None and options.history.store is not None:
        return HistoryPrompt(prompt, completer=completer)
    return prompt


async def ask(
    message: str,
    *,
    terminal: Terminal | None = None,
    **kwargs: Any,
) -> Any:
    """Ask a single question and return the answer.

    Extra keyword arguments are :class:`PromptOptions` fields.
    """
    prompt = create_prompt(PromptOptions(message=message, **kwargs), terminal=terminal)
    return await prompt.run()
