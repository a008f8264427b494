"""Signals raised by prompt operations."""

from __future__ import annotations


class Alert(Exception):
    """An edit or navigation that does not apply to the current state.

    Non-fatal: the prompt rings the terminal bell and keeps its state.
    """


class PromptCancelled(Exception):
    """The user cancelled the prompt before submitting."""
