"""Tests for textprompt.clipboard.Clipboard -- LIFO cut/paste stack."""

from __future__ import annotations

from textprompt.clipboard import Clipboard


class TestClipboardPushAndPop:
    """Basic push and pop operations."""

    def test_pop_returns_most_recent(self) -> None:
        clip = Clipboard()
        clip.push("first")
        clip.push("second")
        assert clip.pop() == "second"
        assert clip.pop() == "first"

    def test_pop_consumes_entry(self) -> None:
        clip = Clipboard()
        clip.push("only")
        clip.pop()
        assert clip.length == 0

    def test_empty_string_is_kept(self) -> None:
        clip = Clipboard()
        clip.push("")
        assert clip.length == 1
        assert clip.pop() == ""

    def test_peek_does_not_consume(self) -> None:
        clip = Clipboard()
        clip.push("a")
        assert clip.peek() == "a"
        assert clip.length == 1


class TestClipboardEmpty:
    """Behaviour when the clipboard is empty."""

    def test_pop_on_empty_returns_none(self) -> None:
        assert Clipboard().pop() is None

    def test_peek_on_empty_returns_none(self) -> None:
        assert Clipboard().peek() is None

    def test_clear_empties(self) -> None:
        clip = Clipboard()
        clip.push("a")
        clip.push("b")
        clip.clear()
        assert clip.length == 0
        assert clip.pop() is None
