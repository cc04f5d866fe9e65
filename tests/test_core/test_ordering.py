"""Tests for farsitype.ordering."""

from itertools import groupby

import pytest

from farsitype.classify import is_script_member
from farsitype.ordering import (
    OrderMode,
    auto_order,
    format_with_order,
    reorder_words_for_display,
    reverse_string,
    segment_and_reverse,
)
from farsitype.shaping import ShapingOptions, shape_text

BEH = "\u0628"
DONYA = "\u062F\u0646\u06CC\u0627"  # "world"


def _reference_rtl(text: str) -> str:
    """Group into runs, emit them last to first, reverse only script runs."""
    runs = ["".join(g) for _, g in groupby(shape_text(text), key=is_script_member)]
    return "".join(run[::-1] if is_script_member(run[0]) else run for run in reversed(runs))


# ── reverse_string ───────────────────────────────────────────────────

class TestReverseString:
    @pytest.mark.parametrize("text, expected", [
        ("", ""),
        (None, None),
        ("a", "a"),
        ("abc", "cba"),
    ])
    def test_reverse_string(self, text, expected):
        assert reverse_string(text) == expected

    def test_long_text(self):
        text = "abcdefgh" * 500
        assert reverse_string(text) == text[::-1]


# ── segment_and_reverse ──────────────────────────────────────────────

class TestSegmentAndReverse:
    @pytest.mark.parametrize("text", ["", None])
    def test_empty(self, text):
        assert segment_and_reverse(text) == text
        assert segment_and_reverse(text, all_runs_rtl=True) == text

    def test_latin_only(self):
        assert segment_and_reverse("abc def") == "abc def"
        assert segment_and_reverse("abc def", all_runs_rtl=True) == "fed cba"

    def test_script_run_reversed(self, salam_shaped):
        assert segment_and_reverse(salam_shaped) == salam_shaped[::-1]

    def test_spaces_between_script_words_stay_in_run(self, salam_shaped):
        text = f"{salam_shaped} {salam_shaped}"
        assert segment_and_reverse(text) == text[::-1]

    def test_last_space_moves_to_following_run(self, salam_shaped):
        text = f"{salam_shaped} world"
        assert segment_and_reverse(text) == salam_shaped[::-1] + " world"

    def test_pull_back_with_two_spaces(self, salam_shaped):
        text = f"{salam_shaped}  world"
        assert segment_and_reverse(text) == " " + salam_shaped[::-1] + " world"

    def test_pull_back_without_space(self, salam_shaped):
        # The last script character is handed to the Latin run.
        text = f"{salam_shaped}abc"
        expected = salam_shaped[:3][::-1] + salam_shaped[3] + "abc"
        assert segment_and_reverse(text) == expected

    def test_latin_then_script(self, salam_shaped):
        text = f"hello {salam_shaped}"
        assert segment_and_reverse(text) == "hello " + salam_shaped[::-1]

    def test_all_runs_rtl_reverses_each_run_in_place(self, salam_shaped):
        text = f"{salam_shaped} world"
        assert segment_and_reverse(text, all_runs_rtl=True) == salam_shaped[::-1] + "dlrow "

    def test_length_preserved(self, salam_shaped):
        for text in (f"{salam_shaped}abc", f"a {salam_shaped}  b{salam_shaped}", "x"):
            assert len(segment_and_reverse(text)) == len(text)
            assert len(segment_and_reverse(text, all_runs_rtl=True)) == len(text)


# ── reorder_words_for_display ────────────────────────────────────────

class TestReorderWordsForDisplay:
    @pytest.mark.parametrize("text", ["", None])
    def test_empty(self, text):
        assert reorder_words_for_display(text) == text

    def test_runs_emitted_last_to_first(self):
        assert reorder_words_for_display(f"ab{BEH}cd") == f"dc{BEH}ba"

    def test_single_script_run_untouched(self, salam_shaped):
        assert reorder_words_for_display(salam_shaped) == salam_shaped

    def test_single_latin_run_reversed_back(self):
        assert reorder_words_for_display("dlrow") == "world"


# ── auto_order ───────────────────────────────────────────────────────

class TestAutoOrder:
    @pytest.mark.parametrize("text", ["", None])
    def test_empty(self, text):
        assert auto_order(text) == text

    def test_plain_text_untouched(self):
        assert auto_order("hello 123") == "hello 123"

    def test_script_first_is_rtl(self, salam, salam_shaped):
        assert auto_order(f"{salam} world") == " world" + salam_shaped[::-1]

    def test_latin_first_is_ltr(self, salam, salam_shaped):
        assert auto_order(f"hello {salam}") == "hello " + salam_shaped[::-1]

    def test_options_passed_through(self):
        text = "\u062F\u0627"
        assert auto_order(text, ShapingOptions(use_isolated=False)) == text[::-1]


# ── format_with_order ────────────────────────────────────────────────

class TestFormatWithOrder:
    def test_default_is_auto(self, salam):
        for text in (f"{salam} world", f"hello {salam}", "abc", salam):
            assert format_with_order(text) == auto_order(text)
            assert format_with_order(text, OrderMode.DEFAULT) == auto_order(text)

    def test_single_run_same_in_both_modes(self, salam, salam_shaped):
        ltr = format_with_order(salam, OrderMode.LTR)
        rtl = format_with_order(salam, OrderMode.RTL)
        assert ltr == rtl == salam_shaped[::-1]

    def test_script_words_only_same_in_both_modes(self, salam):
        text = f"{salam} {DONYA}"
        assert format_with_order(text, OrderMode.LTR) == format_with_order(text, OrderMode.RTL)

    def test_mixed_runs_differ_between_modes(self, salam, salam_shaped):
        text = f"{salam} world"
        ltr = format_with_order(text, OrderMode.LTR)
        rtl = format_with_order(text, OrderMode.RTL)
        assert ltr == salam_shaped[::-1] + " world"
        assert rtl == " world" + salam_shaped[::-1]
        assert ltr != rtl

    def test_rtl_latin_first(self, salam, salam_shaped):
        assert format_with_order(f"hello {salam}", OrderMode.RTL) == salam_shaped[::-1] + "hello "

    @pytest.mark.parametrize("text", [
        "\u0633\u0644\u0627\u0645 world",
        "hello \u0633\u0644\u0627\u0645 world 42 \u062F\u0646\u06CC\u0627",
        "\u0628 a \u0628 b \u0628",
        "abc",
    ])
    def test_rtl_matches_reference(self, text):
        assert format_with_order(text, OrderMode.RTL) == _reference_rtl(text)

    def test_accepts_string_mode(self, salam):
        text = f"{salam} world"
        assert format_with_order(text, "rtl") == format_with_order(text, OrderMode.RTL)
        assert format_with_order(text, "ltr") == format_with_order(text, OrderMode.LTR)

    def test_invalid_mode(self):
        with pytest.raises(ValueError):
            format_with_order("abc", "sideways")

    @pytest.mark.parametrize("mode", list(OrderMode))
    def test_empty(self, mode):
        assert format_with_order("", mode) == ""

    def test_mixed_sentence_keeps_latin_order(self):
        text = "\u0633\u0644\u0627\u0645 \u062F\u0646\u06CC\u0627 hello world hastam \u0686\u0637\u0648\u0631\u06CC"
        out = format_with_order(text)
        assert " hello world hastam " in out
        assert len(out) == len(text)
        # Persian runs come first in visual order for an RTL paragraph.
        assert is_script_member(out[0])
