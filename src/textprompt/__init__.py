"""textprompt: interactive text prompts with clipboard, ghost text and history."""

# Errors
from textprompt.errors import Alert, PromptCancelled

# Configuration
from textprompt.config import HistoryOptions, PromptOptions

# State
from textprompt.clipboard import Clipboard
from textprompt.state import InputState, PromptState

# Keyboard input
from textprompt.keybindings import (
    DEFAULT_PROMPT_KEYBINDINGS,
    PromptAction,
    PromptKeybindingsManager,
    get_prompt_keybindings,
    set_prompt_keybindings,
)
from textprompt.keys import KeyPress, decode_keypress, split_keys

# Rendering
from textprompt.placeholder import placeholder
from textprompt.styles import Styles, plain_styles

# Prompts
from textprompt.history import Completer, HistoryPrompt, HistoryRecord, cycle_completer
from textprompt.prompt import Prompt
from textprompt.prompts import ask, create_prompt
from textprompt.string_prompt import StringPrompt

# Persistence
from textprompt.store import JsonStore, Store

# Terminal
from textprompt.terminal import ProcessTerminal, Terminal

__all__ = [
    # Errors
    "Alert",
    "PromptCancelled",
    # Configuration
    "HistoryOptions",
    "PromptOptions",
    # State
    "Clipboard",
    "InputState",
    "PromptState",
    # Keyboard input
    "DEFAULT_PROMPT_KEYBINDINGS",
    "PromptAction",
    "PromptKeybindingsManager",
    "get_prompt_keybindings",
    "set_prompt_keybindings",
    "KeyPress",
    "decode_keypress",
    "split_keys",
    # Rendering
    "placeholder",
    "Styles",
    "plain_styles",
    # Prompts
    "Completer",
    "HistoryPrompt",
    "HistoryRecord",
    "cycle_completer",
    "Prompt",
    "ask",
    "create_prompt",
    "StringPrompt",
    # Persistence
    "JsonStore",
    "Store",
    # Terminal
    "ProcessTerminal",
    "Terminal",
]
