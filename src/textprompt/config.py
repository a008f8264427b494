"""Configuration for text prompts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from textprompt.keybindings import PromptKeybindingsConfig

if TYPE_CHECKING:
    from textprompt.store import Store

# Returns True when valid, or an error message (False uses a generic one)
Validator = Callable[[str], "bool | str"]


@dataclass
class HistoryOptions:
    """Where and how submitted values are remembered."""

    store: Store | None = None
    values: str | None = None  # present value when the store is empty
    autosave: bool = False


@dataclass
class PromptOptions:
    """Caller-supplied settings of one prompt. Read-only once the prompt exists."""

    name: str = ""
    message: str = ""
    initial: Any = None
    multiline: bool = False
    hint: str = ""
    header: str = ""
    footer: str = ""
    validate: Validator | None = None
    history: HistoryOptions | None = None
    keybindings: PromptKeybindingsConfig = field(default_factory=dict)
