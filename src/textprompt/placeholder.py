"""Ghost-text rendering of the untyped remainder of a default value."""

from __future__ import annotations

from textprompt.styles import Styles


def placeholder(
    input: str,
    initial: str,
    pos: int,
    styles: Styles,
    *,
    show_cursor: bool = True,
) -> str:
    """Render *input* with a block cursor at *pos* and dimmed ghost text.

    While *input* is a proper prefix of *initial*, the rest of *initial* is
    shown dimmed after the typed text, with the cursor cell drawn over the
    next character the user would type. Otherwise only the typed text and
    the cursor are shown.
    """
    blink = styles.cursor
    blank = blink(" ")

    if show_cursor and pos == 0 and initial == "" and input == "":
        return blank

    if show_cursor and pos == 0 and (input == initial or input == ""):
        return blink(initial[0]) + styles.placeholder(initial[1:])

    ghost = bool(initial) and initial.startswith(input) and initial != input
    cursor = blink(initial[len(input)]) if ghost else blank
    output = input

    if show_cursor and pos != len(input):
        output = input[:pos] + blink(input[pos]) + input[pos + 1 :]
        cursor = ""

    if not show_cursor:
        cursor = ""

    if ghost:
        typed = styles.unstyle(output + cursor)
        return output + cursor + styles.placeholder(initial[len(typed) :])

    return output + cursor
