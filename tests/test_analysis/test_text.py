"""Tests for the ECMAScript-compatible text helpers."""

from __future__ import annotations

import pytest

from codeverdict.analysis.text import (
    compile_js,
    is_comment_line,
    js_length,
    js_trim,
    leading_whitespace,
    non_blank_lines,
    utf16_units,
)


class TestWhitespace:
    @pytest.mark.parametrize(
        "space", ["\u00a0", "\ufeff", "\u2003", "\u3000", "\u2028"]
    )
    def test_space_class_covers_unicode_whitespace(self, space: str) -> None:
        assert compile_js(r"a\sb").fullmatch(f"a{space}b")

    def test_information_separators_are_not_whitespace(self) -> None:
        assert compile_js(r"\s").search("\x1c") is None

    def test_trim(self) -> None:
        assert js_trim("\ufeff\u00a0x\u3000") == "x"
        assert js_trim("\x1fx") == "\x1fx"

    def test_comment_after_byte_order_mark(self) -> None:
        assert is_comment_line("\ufeff// header")

    def test_nbsp_only_line_is_blank(self) -> None:
        assert non_blank_lines("\u00a0\nx") == ["x"]

    def test_leading_whitespace(self) -> None:
        assert leading_whitespace("\u00a0\u00a0x") == 2
        assert leading_whitespace("\x1c x") == 0


class TestCompileJs:
    def test_dot_stops_at_line_terminators(self) -> None:
        dot = compile_js(r"a.b")
        assert dot.search("a-b")
        for terminator in ("\n", "\r", "\u2028", "\u2029"):
            assert dot.search(f"a{terminator}b") is None

    def test_escaped_dot_is_literal(self) -> None:
        assert compile_js(r"a\.b").search("axb") is None

    def test_dot_inside_class_is_literal(self) -> None:
        assert compile_js(r"[.]").search("x") is None

    def test_space_inside_class(self) -> None:
        assert compile_js(r"[\s,]+").fullmatch("\u00a0, ")

    def test_word_characters_stay_ascii(self) -> None:
        assert compile_js(r"\w").search("é") is None
        assert compile_js(r"\bif\b").search("éif") is not None


class TestLengths:
    def test_astral_character_counts_twice(self) -> None:
        assert js_length("\U0001f600") == 2
        assert js_length("ab") == 2

    def test_utf16_units(self) -> None:
        units = utf16_units("a\U0001f600")
        assert units == "a\ud83d\ude00"

    def test_bmp_text_unchanged(self) -> None:
        text = "plain text"
        assert utf16_units(text) is text
