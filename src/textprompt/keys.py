"""Decoding of raw terminal input into keypress events.

Handles single-byte control keys, ESC-prefixed meta keys, and the legacy
CSI / SS3 sequences (with xterm-style modifier parameters) that terminals
send for arrows, navigation and function keys.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

ESC = "\x1b"

# ---------------------------------------------------------------------------
# Sequence tables
# ---------------------------------------------------------------------------

# CSI / SS3 final byte -> key name
_FINAL_KEYS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "E": "clear",
    "F": "end",
    "H": "home",
    "P": "f1",
    "Q": "f2",
    "R": "f3",
    "S": "f4",
}

# CSI <n> ~ -> key name
_TILDE_KEYS: dict[str, str] = {
    "1": "home",
    "2": "insert",
    "3": "delete",
    "4": "end",
    "5": "pageUp",
    "6": "pageDown",
    "7": "home",
    "8": "end",
    "15": "f5",
    "17": "f6",
    "18": "f7",
    "19": "f8",
    "20": "f9",
    "21": "f10",
    "23": "f11",
    "24": "f12",
}

# Modifier bits of the xterm "1;<mod>" parameter (value is bits + 1)
MODIFIERS: dict[str, int] = {
    "shift": 1,
    "alt": 2,
    "ctrl": 4,
}

_CSI_FINAL_RE = re.compile(r"^\x1b\[(?:1;(\d+))?([A-HPQRS])$")
_CSI_TILDE_RE = re.compile(r"^\x1b\[(\d+)(?:;(\d+))?~$")
_SS3_RE = re.compile(r"^\x1bO(\d?)([A-HPQRS])$")


# ---------------------------------------------------------------------------
# KeyPress
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeyPress:
    """A decoded keypress.

    ``code`` carries the raw escape sequence for keys that arrived as one,
    so that they are never inserted as text.
    """

    name: str | None = None
    sequence: str = ""
    ctrl: bool = False
    meta: bool = False
    shift: bool = False
    code: str | None = None

    @property
    def id(self) -> str | None:
        """Key identifier such as ``"ctrl+a"`` or ``"alt+up"``."""
        if not self.name:
            return None
        prefix = ""
        if self.ctrl:
            prefix += "ctrl+"
        if self.shift:
            prefix += "shift+"
        if self.meta:
            prefix += "alt+"
        return prefix + self.name


def _with_modifier(name: str, data: str, param: str | None) -> KeyPress:
    mod = int(param) - 1 if param else 0
    return KeyPress(
        name=name,
        sequence=data,
        shift=bool(mod & MODIFIERS["shift"]),
        meta=bool(mod & MODIFIERS["alt"]),
        ctrl=bool(mod & MODIFIERS["ctrl"]),
        code=data,
    )


def _decode_escape(data: str) -> KeyPress | None:
    match = _CSI_FINAL_RE.match(data)
    if match:
        return _with_modifier(_FINAL_KEYS[match.group(2)], data, match.group(1))

    match = _CSI_TILDE_RE.match(data)
    if match and match.group(1) in _TILDE_KEYS:
        return _with_modifier(_TILDE_KEYS[match.group(1)], data, match.group(2))

    match = _SS3_RE.match(data)
    if match:
        return _with_modifier(_FINAL_KEYS[match.group(2)], data, match.group(1) or None)

    if data == f"{ESC}[Z":
        return KeyPress(name="tab", sequence=data, shift=True, code=data)

    return None


def decode_keypress(data: str) -> tuple[str | None, KeyPress]:  # noqa: C901
    """Decode one chunk of terminal input.

    Returns ``(char, key)`` where ``char`` is the printable text carried by
    the input (``None`` for control and escape sequences).
    """
    if not data:
        return None, KeyPress()

    # --- Simple single-byte keys ---
    if data == "\r":
        return None, KeyPress(name="return", sequence=data)
    if data == "\n":
        return None, KeyPress(name="enter", sequence=data)
    if data == "\t":
        return None, KeyPress(name="tab", sequence=data)
    if data in ("\x7f", "\x08"):
        return None, KeyPress(name="backspace", sequence=data)
    if data == ESC:
        return None, KeyPress(name="escape", sequence=data)
    if data == "\x00":
        return None, KeyPress(name="space", sequence=data, ctrl=True)
    if data == " ":
        return data, KeyPress(name="space", sequence=data)

    # --- Escape sequences ---
    if data.startswith(ESC):
        key = _decode_escape(data)
        if key is not None:
            return None, key

        # ESC-prefixed escape sequence: meta + key (e.g. alt+up on macOS)
        if data.startswith(ESC * 2) and len(data) > 2:
            inner = _decode_escape(data[1:])
            if inner is not None:
                return None, KeyPress(
                    name=inner.name,
                    sequence=data,
                    ctrl=inner.ctrl,
                    shift=inner.shift,
                    meta=True,
                    code=data,
                )

        if len(data) == 2:
            ch = data[1]
            if ch in ("\r", "\n"):
                return None, KeyPress(name="return", sequence=data, meta=True, code=data)
            if ch in ("\x7f", "\x08"):
                return None, KeyPress(name="backspace", sequence=data, meta=True, code=data)
            if ch == ESC:
                return None, KeyPress(name="escape", sequence=data, meta=True, code=data)
            if 1 <= ord(ch) <= 26:
                name = chr(ord(ch) + ord("a") - 1)
                return None, KeyPress(name=name, sequence=data, ctrl=True, meta=True, code=data)
            if ch.isprintable():
                return None, KeyPress(
                    name=ch.lower(), sequence=data, meta=True, shift=ch.isupper(), code=data
                )

        return None, KeyPress(sequence=data, code=data)

    # --- Ctrl + letter (0x01 - 0x1a) ---
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return None, KeyPress(name=chr(ord(data) + ord("a") - 1), sequence=data, ctrl=True)

    # --- Printable text ---
    if data.isprintable() or "\n" in data:
        if len(data) == 1:
            return data, KeyPress(name=data.lower(), sequence=data, shift=data.isupper())
        # Pasted or buffered text arrives as one chunk
        return data, KeyPress(sequence=data)

    return None, KeyPress(sequence=data)


# ---------------------------------------------------------------------------
# Splitting
# ---------------------------------------------------------------------------

_SEQUENCE_RE = re.compile(
    r"\x1b\x1b?(?:\[[0-9;?]*[ -/]*[@-~]|O\d?[A-Za-z]|.)?"  # escape sequences
    r"|[\x00-\x1a\x1c-\x1f\x7f]"  # single control bytes
    r"|[^\x00-\x1f\x7f]+",  # runs of printable text
    re.DOTALL,
)


def split_keys(data: str) -> list[str]:
    """Split a chunk read from stdin into individually decodable pieces."""
    return _SEQUENCE_RE.findall(data)
