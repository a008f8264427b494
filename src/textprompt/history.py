"""Persisted input history for text prompts.

A :class:`HistoryPrompt` wraps a :class:`StringPrompt` and keeps a
``{past, present}`` record in a store. Navigation and saving go through a
pluggable *completer*: a pure function ``(action, record, input) -> record``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from textprompt.errors import Alert
from textprompt.keys import KeyPress
from textprompt.store import Store
from textprompt.string_prompt import StringPrompt

logger = logging.getLogger(__name__)

HISTORY_KEY = "values"


@dataclass
class HistoryRecord:
    """Previously submitted values plus the one currently recalled.

    Keys other than ``past`` and ``present`` found in stored data are kept
    in ``extra`` and written back unchanged.
    """

    past: list[str] = field(default_factory=list)
    present: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HistoryRecord:
        data = dict(data)
        past = data.pop("past", None) or []
        present = data.pop("present", None)
        return cls(past=list(past), present=present, extra=data)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = dict(self.extra)
        d["past"] = list(self.past)
        d["present"] = self.present
        return d


Completer = Callable[[str, HistoryRecord, str], HistoryRecord]


def _compact(values: list[str]) -> list[str]:
    """Drop empty values and keep only the last occurrence of each."""
    seen: set[str] = set()
    result: list[str] = []
    for value in reversed(values):
        if value and value not in seen:
            seen.add(value)
            result.append(value)
    result.reverse()
    return result


def cycle_completer(action: str, record: HistoryRecord, value: str = "") -> HistoryRecord:
    """Default history policy.

    ``prev`` recalls the newest past entry and files the current input at the
    front; ``next`` recalls the oldest and files the input at the back, so
    repeated navigation cycles through every entry. ``save`` appends the
    input to ``past`` and clears ``present``.
    """
    past = list(record.past)
    extra = dict(record.extra)

    if action in ("prev", "undo"):
        present = past[-1] if past else ""
        return HistoryRecord(past=_compact([value, *past[:-1]]), present=present, extra=extra)

    if action in ("next", "redo"):
        present = past[0] if past else ""
        return HistoryRecord(past=_compact([*past[1:], value]), present=present, extra=extra)

    if action in ("save", "snapshot"):
        return HistoryRecord(past=_compact([*past, value]), present="", extra=extra)

    raise ValueError(f'Invalid action: "{action}"')


class HistoryPrompt:
    """History-aware wrapper around a :class:`StringPrompt`.

    Overrides navigation (``alt_up``/``alt_down``), ``prev``, ``submit`` and
    adds ``save``; every other attribute is read from and written to the
    wrapped prompt.
    """

    _OWN_ATTRS = frozenset({"_inner", "completer", "store", "autosave", "record"})

    def __init__(self, inner: StringPrompt, *, completer: Completer = cycle_completer) -> None:
        self._inner = inner
        self.completer = completer
        self.store: Store | None = None
        self.autosave = False
        self.record = HistoryRecord()

        history = inner.options.history
        if history is not None and history.store is not None:
            initial = history.values or inner.initial
            self.store = history.store
            self.autosave = history.autosave
            data = self.store.get(HISTORY_KEY)
            if data:
                self.record = HistoryRecord.from_dict(data)
            else:
                self.record = HistoryRecord(past=[], present=initial)
            past = self.record.past
            inner.initial = self.record.present or (past[-1] if past else "")
            logger.debug(
                "Loaded history for %r: %d past entries", inner.options.name, len(past)
            )

    def __getattr__(self, name: str) -> Any:
        if name == "_inner":
            raise AttributeError(name)
        return getattr(self._inner, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._OWN_ATTRS:
            object.__setattr__(self, name, value)
        else:
            setattr(self._inner, name, value)

    @property
    def inner(self) -> StringPrompt:
        return self._inner

    def keypress(self, char: str | None, key: KeyPress) -> None:
        self._inner.keypress(char, key, target=self)

    # ── Navigation ───────────────────────────────────────────────────

    def completion(self, action: str) -> None:
        """Replace the input with the value the completer recalls for *action*."""
        if self.store is None:
            raise Alert("history is not configured")
        state = self._inner.state
        self.record = self.completer(action, self.record, state.input)
        if not self.record.present:
            raise Alert("no history entry")
        state.input = self.record.present
        state.cursor = len(state.input)
        self._inner.render()

    def alt_up(self) -> None:
        self.completion("prev")

    def alt_down(self) -> None:
        self.completion("next")

    def prev(self) -> None:
        self.save()
        self._inner.prev()

    # ── Persistence ──────────────────────────────────────────────────

    def save(self) -> None:
        if self.store is None:
            return
        self.record = self.completer("save", self.record, self._inner.state.input)
        self.store.set(HISTORY_KEY, self.record.to_dict())
        logger.debug("Saved history for %r", self._inner.options.name)

    def submit(self) -> Any:
        value = self._inner.submit()
        if self.store is not None and self.autosave and self._inner.base.state.submitted:
            self.save()
        return value

    async def run(self) -> Any:
        return await self._inner.base.run(self)
