"""ANSI style callables used when rendering a prompt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from textprompt.utils import strip_ansi

Style = Callable[[str], str]


def _sgr(open_code: int, close_code: int) -> Style:
    def apply(text: str) -> str:
        if not text:
            return text
        return f"\x1b[{open_code}m{text}\x1b[{close_code}m"

    return apply


dim = _sgr(2, 22)
bold = _sgr(1, 22)
inverse = _sgr(7, 27)
cyan = _sgr(36, 39)
green = _sgr(32, 39)
red = _sgr(31, 39)


@dataclass
class Styles:
    """Style set for one prompt.

    ``placeholder`` dims ghost text, ``cursor`` draws the fake block cursor,
    ``submitted`` styles the final answer.
    """

    placeholder: Style = dim
    cursor: Style = inverse
    submitted: Style = cyan
    primary: Style = cyan
    success: Style = green
    danger: Style = red
    muted: Style = dim
    strong: Style = bold

    @staticmethod
    def unstyle(text: str) -> str:
        return strip_ansi(text)


def plain_styles() -> Styles:
    """Styles that leave text untouched. Useful for tests and dumb terminals."""

    def ident(text: str) -> str:
        return text

    return Styles(
        placeholder=ident,
        cursor=ident,
        submitted=ident,
        primary=ident,
        success=ident,
        danger=ident,
        muted=ident,
        strong=ident,
    )
