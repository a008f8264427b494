"""Prompt keybindings manager."""

from __future__ import annotations

from typing import Literal

from textprompt.keys import KeyPress

PromptAction = Literal[
    # Lifecycle
    "submit",
    "cancel",
    # Cursor movement
    "backward",
    "forward",
    "first",
    "last",
    "toggle_cursor",
    # Deletion
    "delete",
    "delete_forward",
    "reset",
    # Clipboard
    "cut_forward",
    "cut_left",
    "paste",
    # Suggestions and history
    "next",
    "prev",
    "alt_up",
    "alt_down",
    "save",
]

KeyId = str

PromptKeybindingsConfig = dict[PromptAction, KeyId | list[KeyId]]

DEFAULT_PROMPT_KEYBINDINGS: dict[PromptAction, KeyId | list[KeyId]] = {
    # Lifecycle
    "submit": ["return", "enter"],
    "cancel": ["escape", "ctrl+c"],
    # Cursor movement
    "backward": ["left", "ctrl+b", "alt+b"],
    "forward": ["right", "ctrl+f", "alt+f"],
    "first": ["home", "ctrl+a"],
    "last": ["end", "ctrl+e"],
    "toggle_cursor": "ctrl+x",
    # Deletion
    "delete": "backspace",
    "delete_forward": ["delete", "ctrl+d"],
    "reset": ["ctrl+g", "ctrl+l"],
    # Clipboard
    "cut_forward": "ctrl+k",
    "cut_left": ["ctrl+w", "alt+left"],
    "paste": "ctrl+v",
    # Suggestions and history
    "next": "tab",
    "prev": "shift+tab",
    "alt_up": "alt+up",
    "alt_down": "alt+down",
    "save": "ctrl+s",
}


class PromptKeybindingsManager:
    """Maps key identifiers to prompt actions."""

    def __init__(self, config: PromptKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[PromptAction, list[KeyId]] = {}
        self._key_to_action: dict[KeyId, PromptAction] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: PromptKeybindingsConfig) -> None:
        self._action_to_keys.clear()
        self._key_to_action.clear()

        for action, keys in DEFAULT_PROMPT_KEYBINDINGS.items():
            self._action_to_keys[action] = list(keys if isinstance(keys, list) else [keys])

        # Overrides replace the default keys of an action
        for action, keys in config.items():
            self._action_to_keys[action] = list(keys if isinstance(keys, list) else [keys])

        for action, keys in self._action_to_keys.items():
            for key in keys:
                self._key_to_action[key] = action

    def action_for(self, key: KeyPress) -> PromptAction | None:
        """Return the action bound to *key*, if any."""
        key_id = key.id
        if key_id is None:
            return None
        return self._key_to_action.get(key_id)

    def matches(self, key: KeyPress, action: PromptAction) -> bool:
        return key.id is not None and key.id in self._action_to_keys.get(action, [])

    def get_keys(self, action: PromptAction) -> list[KeyId]:
        """Get keys bound to an action."""
        return self._action_to_keys.get(action, [])

    def set_config(self, config: PromptKeybindingsConfig) -> None:
        self._build_maps(config)


_global_prompt_keybindings: PromptKeybindingsManager | None = None


def get_prompt_keybindings() -> PromptKeybindingsManager:
    global _global_prompt_keybindings
    if _global_prompt_keybindings is None:
        _global_prompt_keybindings = PromptKeybindingsManager()
    return _global_prompt_keybindings


def set_prompt_keybindings(manager: PromptKeybindingsManager | None) -> None:
    global _global_prompt_keybindings
    _global_prompt_keybindings = manager
