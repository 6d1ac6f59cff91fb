"""Unit tests for cell escaping and emphasis conversion."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from table2katex.escaping import bold, escape_cell, sans


class TestReservedCharacters:

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("&", r"\&"),
            ("%", r"\%"),
            ("$", r"\$"),
            ("#", r"\#"),
            ("{", r"\{"),
            ("}", r"\}"),
            ("~", r"\textasciitilde{}"),
            ("^", r"\textasciicircum{}"),
            ("\\", r"\textbackslash{}"),
        ],
    )
    def test_single_character(self, raw, expected):
        assert escape_cell(raw) == expected

    def test_backslash_token_braces_not_reescaped(self):
        assert escape_cell("a\\b") == r"a\textbackslash{}b"

    def test_mixed_text(self):
        assert escape_cell("50% of $10 & #1") == r"50\% of \$10 \& \#1"

    def test_plain_text_unchanged(self):
        assert escape_cell("Hello world 123") == "Hello world 123"


class TestEmphasis:

    def test_double_asterisk_bold(self):
        assert escape_cell("**bold**") == r"\textbf{bold}"

    def test_double_underscore_bold(self):
        assert escape_cell("__bold__") == r"\textbf{bold}"

    def test_bold_inside_text(self):
        assert escape_cell("a **b** c") == r"a \textbf{b} c"

    def test_lone_asterisk_removed(self):
        assert escape_cell("*") == ""
        assert escape_cell("a*b") == "ab"

    def test_single_asterisk_italic_stripped(self):
        assert escape_cell("*it*") == "it"

    def test_underscore_escaped(self):
        assert escape_cell("snake_case") == r"snake\_case"

    def test_bold_span_with_reserved_characters(self):
        assert escape_cell("**100%**") == r"\textbf{100\%}"

    def test_no_asterisks_remain(self):
        assert "*" not in escape_cell("**a** *b* ***c***")


class TestWrappers:

    def test_bold(self):
        assert bold("x") == r"\textbf{x}"

    def test_sans(self):
        assert sans("x") == r"\textsf{x}"
