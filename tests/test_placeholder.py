"""Tests for textprompt.placeholder -- ghost-text rendering."""

from __future__ import annotations

from textprompt.placeholder import placeholder
from textprompt.styles import Styles, dim, inverse, plain_styles


class TestPlaceholderGhostText:
    def test_typed_prefix_shows_remainder(self) -> None:
        out = placeholder("jon", "jonschlinkert", 3, Styles())
        assert out == "jon" + inverse("s") + dim("chlinkert")

    def test_plain_rendering_reads_as_full_value(self) -> None:
        out = placeholder("jon", "jonschlinkert", 3, plain_styles())
        assert out == "jonschlinkert"

    def test_empty_input_shows_whole_initial(self) -> None:
        out = placeholder("", "bob", 0, Styles())
        assert out == inverse("b") + dim("ob")

    def test_input_equal_to_initial_at_start(self) -> None:
        out = placeholder("bob", "bob", 0, Styles())
        assert out == inverse("b") + dim("ob")

    def test_cursor_inside_typed_text(self) -> None:
        out = placeholder("jon", "jonschlinkert", 1, Styles())
        assert out == "j" + inverse("o") + "n" + dim("schlinkert")


class TestPlaceholderWithoutSuggestion:
    def test_empty_everything_is_a_blank_cursor(self) -> None:
        assert placeholder("", "", 0, Styles()) == inverse(" ")

    def test_non_prefix_input_has_no_ghost(self) -> None:
        out = placeholder("xyz", "jonschlinkert", 3, Styles())
        assert out == "xyz" + inverse(" ")

    def test_complete_input_has_no_ghost(self) -> None:
        out = placeholder("bob", "bob", 3, Styles())
        assert out == "bob" + inverse(" ")

    def test_cursor_in_middle_without_initial(self) -> None:
        out = placeholder("abc", "", 1, Styles())
        assert out == "a" + inverse("b") + "c"

    def test_hidden_cursor(self) -> None:
        out = placeholder("abc", "", 3, Styles(), show_cursor=False)
        assert out == "abc"
