"""Prompt state containers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class InputState:
    """Text buffer and cursor offset of a text prompt."""

    input: str = ""
    cursor: int = 0
    previous_cursor: int = 0  # slot used by toggle_cursor


@dataclass
class PromptState:
    """Lifecycle and render bookkeeping owned by the prompt base."""

    submitted: bool = False
    cancelled: bool = False
    closed: bool = False
    error: str | None = None
    value: Any = None
    prompt: str = ""
    buffer: str = ""  # last written output, erased by clear()
    size: int = 0  # lines rendered below the prompt line
