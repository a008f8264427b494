"""Last-in-first-out clipboard for cut/paste operations."""

from __future__ import annotations


class Clipboard:
    """Stack of cut text segments.

    Cuts push onto the tail; paste pops the most recent one. Empty segments
    are kept so that every cut has a matching paste.
    """

    def __init__(self) -> None:
        self._stack: list[str] = []

    def push(self, text: str) -> None:
        self._stack.append(text)

    def pop(self) -> str | None:
        """Remove and return the most recent segment, or None if empty."""
        return self._stack.pop() if self._stack else None

    def peek(self) -> str | None:
        return self._stack[-1] if self._stack else None

    def clear(self) -> None:
        self._stack.clear()

    @property
    def length(self) -> int:
        return len(self._stack)
