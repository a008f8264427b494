"""Tests for textprompt.prompt.Prompt -- sections, output, lifecycle and key routing."""

from __future__ import annotations

import asyncio

import pytest

from textprompt.config import PromptOptions
from textprompt.errors import Alert, PromptCancelled
from textprompt.keys import KeyPress
from textprompt.prompt import DEFAULT_ERROR, Prompt
from textprompt.string_prompt import StringPrompt
from textprompt.styles import plain_styles

from .virtual_terminal import VirtualTerminal


def make_base(**kwargs) -> tuple[Prompt, VirtualTerminal]:
    term = VirtualTerminal()
    return Prompt(PromptOptions(**kwargs), terminal=term, styles=plain_styles()), term


class RecordingTarget:
    """Keypress target that records which actions were called."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def render(self) -> None:
        self.calls.append("render")

    def keypress(self, char, key) -> None:
        self.calls.append(f"keypress:{key.id}")

    def dispatch(self, char, key) -> None:
        self.calls.append(f"dispatch:{char}")

    def paste(self) -> None:
        raise Alert("empty")

    def first(self) -> None:
        self.calls.append("first")


class TestSections:
    def test_pending_sections(self) -> None:
        base, _ = make_base(message="Name?")
        assert base.prefix() == "?"
        assert base.message() == "Name?"
        assert base.separator() == "›"

    def test_submitted_sections(self) -> None:
        base, _ = make_base()
        base.state.submitted = True
        assert base.prefix() == "✔"
        assert base.separator() == "·"

    def test_cancelled_sections(self) -> None:
        base, _ = make_base()
        base.state.cancelled = True
        assert base.prefix() == "✖"
        assert base.separator() == "·"

    def test_hint_hidden_after_submit(self) -> None:
        base, _ = make_base(hint="(type)")
        assert base.hint() == "(type)"
        base.state.submitted = True
        assert base.hint() == ""

    def test_hint_hidden_after_cancel(self) -> None:
        base, _ = make_base(hint="(type)")
        base.state.cancelled = True
        assert base.hint() == ""

    def test_error_hidden_after_submit(self) -> None:
        base, _ = make_base()
        base.state.error = "bad"
        assert base.error() == "bad"
        base.state.submitted = True
        assert base.error() == ""

    def test_header_footer(self) -> None:
        base, _ = make_base(header="H", footer="F")
        assert base.header() == "H"
        assert base.footer() == "F"


class TestOutput:
    def test_clear_without_buffer_writes_nothing(self) -> None:
        base, term = make_base()
        base.clear()
        assert term.output == ""

    def test_clear_erases_written_rows(self) -> None:
        base, term = make_base()
        base.write("one\ntwo")
        term.clear_buffer()
        base.clear()
        assert term.output == "\x1b[2K\x1b[1A\x1b[2K\r"
        assert base.state.buffer == ""

    def test_clear_counts_wrapped_rows(self) -> None:
        term = VirtualTerminal(columns=10)
        base = Prompt(PromptOptions(), terminal=term, styles=plain_styles())
        base.write("x" * 25)
        term.clear_buffer()
        base.clear()
        assert term.output.count("\x1b[2K") == 3

    def test_clear_moves_down_over_footer_first(self) -> None:
        base, term = make_base()
        base.write("line")
        term.clear_buffer()
        base.clear(2)
        assert term.output.startswith("\x1b[2B")

    def test_write_skips_empty(self) -> None:
        base, term = make_base()
        base.write("")
        assert term.output == ""

    def test_restore_without_footer(self) -> None:
        base, term = make_base()
        base.write("? Q ›  ")
        term.clear_buffer()
        base.restore()
        assert base.state.size == 0
        assert term.output == ""

    def test_restore_moves_back_to_prompt_line(self) -> None:
        base, term = make_base(footer="FOOT")
        base.write("? Q ›  \nFOOT")
        term.clear_buffer()
        base.restore()
        assert base.state.size == 1
        assert term.output == "\x1b[1A\x1b[8G"

    def test_alert_rings_bell(self) -> None:
        base, term = make_base()
        base.alert()
        assert term.bell_count == 1

    def test_cursor_hide_and_show_once(self) -> None:
        base, term = make_base()
        base.cursor_hide()
        base.cursor_hide()
        assert term.output.count("\x1b[?25l") == 1
        base.cursor_show()
        base.cursor_show()
        assert term.output.count("\x1b[?25h") == 1
        assert term.cursor_visible


class TestValidate:
    def test_no_validator(self) -> None:
        base, _ = make_base()
        assert base.validate("x")
        assert base.state.error is None

    def test_message_from_validator(self) -> None:
        base, _ = make_base(validate=lambda v: "required")
        assert not base.validate("")
        assert base.state.error == "required"

    def test_false_uses_default_message(self) -> None:
        base, _ = make_base(validate=lambda v: False)
        assert not base.validate("x")
        assert base.state.error == DEFAULT_ERROR

    def test_empty_message_uses_default(self) -> None:
        base, _ = make_base(validate=lambda v: "")
        assert not base.validate("x")
        assert base.state.error == DEFAULT_ERROR

    def test_success_clears_error(self) -> None:
        base, _ = make_base(validate=lambda v: v == "ok" or "nope")
        base.validate("bad")
        assert base.validate("ok")
        assert base.state.error is None


class TestLifecycle:
    def test_submit_records_value(self) -> None:
        base, _ = make_base()
        assert base.submit("v")
        assert base.state.submitted
        assert base.state.value == "v"

    def test_submit_after_close_is_ignored(self) -> None:
        base, _ = make_base()
        base.close()
        assert not base.submit("v")
        assert base.state.value is None

    def test_cancel(self) -> None:
        base, _ = make_base()
        base.cancel()
        assert base.state.cancelled

    def test_close_ends_line_and_shows_cursor(self) -> None:
        base, term = make_base()
        base.cursor_hide()
        term.clear_buffer()
        base.close()
        assert base.state.closed
        assert term.output == "\n\x1b[?25h"

    def test_close_twice_writes_once(self) -> None:
        base, term = make_base()
        base.close()
        base.close()
        assert term.output == "\n"


class TestKeypressRouting:
    def test_bound_action_called_on_target(self) -> None:
        base, _ = make_base()
        target = RecordingTarget()
        base.keypress(None, KeyPress(name="home", code="\x1b[H"), target)
        assert target.calls == ["first"]

    def test_unbound_key_dispatched(self) -> None:
        base, _ = make_base()
        target = RecordingTarget()
        base.keypress("x", KeyPress(name="x", sequence="x"), target)
        assert target.calls == ["dispatch:x"]

    def test_action_missing_on_target_dispatches(self) -> None:
        base, _ = make_base()
        target = RecordingTarget()
        base.keypress(None, KeyPress(name="k", ctrl=True), target)
        assert target.calls == ["dispatch:None"]

    def test_alert_becomes_bell(self) -> None:
        base, term = make_base()
        target = RecordingTarget()
        base.keypress(None, KeyPress(name="v", ctrl=True), target)
        assert term.bell_count == 1

    def test_feed_splits_input(self) -> None:
        base, _ = make_base()
        target = RecordingTarget()
        base.feed(target, "ab\x1b[A\x01")
        assert target.calls == ["keypress:None", "keypress:up", "keypress:ctrl+a"]

    def test_feed_stops_once_closed(self) -> None:
        base, _ = make_base()
        target = RecordingTarget()
        base.close()
        base.feed(target, "\x01")
        assert target.calls == []


class TestRun:
    @pytest.mark.asyncio
    async def test_run_returns_submitted_value(self) -> None:
        term = VirtualTerminal()
        prompt = StringPrompt(PromptOptions(message="Name?"), terminal=term, styles=plain_styles())
        task = asyncio.create_task(prompt.run())
        await asyncio.sleep(0)
        assert term.started
        term.simulate_input("bob\r")
        assert await task == "bob"
        assert not term.started
        assert "✔ Name? · bob" in term.plain_output

    @pytest.mark.asyncio
    async def test_run_with_several_chunks(self) -> None:
        term = VirtualTerminal()
        prompt = StringPrompt(PromptOptions(initial="jonschlinkert"), terminal=term, styles=plain_styles())
        task = asyncio.create_task(prompt.run())
        await asyncio.sleep(0)
        term.simulate_input("jon")
        term.simulate_input("\t")
        term.simulate_input("\r")
        assert await task == "jonschlinkert"

    @pytest.mark.asyncio
    async def test_run_raises_on_cancel(self) -> None:
        term = VirtualTerminal()
        prompt = StringPrompt(PromptOptions(name="who"), terminal=term, styles=plain_styles())
        task = asyncio.create_task(prompt.run())
        await asyncio.sleep(0)
        term.simulate_input("bo\x03")
        with pytest.raises(PromptCancelled):
            await task
        assert not term.started
