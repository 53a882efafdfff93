#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for Google Docs text run formatting."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from utils import paragraph, text_run

from gdoc2md.parsers._gdoc_text import (
    clean_text,
    escape_emphasis_chars,
    fix_punctuation_spacing,
    format_text_run,
    paragraph_plain_text,
)


@pytest.mark.unit
class TestCleanAndEscape:
    """Tests for text cleanup helpers."""

    def test_clean_text_strips_newlines_and_whitespace(self):
        assert clean_text("  Hello\nworld \n") == "Helloworld"

    def test_escape_stars_and_underscores(self):
        assert escape_emphasis_chars("a*b_c") == "a\\*b\\_c"

    def test_fix_punctuation_spacing(self):
        assert fix_punctuation_spacing("word . next , more") == "word. next, more"

    def test_fix_punctuation_spacing_only_first_occurrence(self):
        assert fix_punctuation_spacing("a . b . c") == "a. b . c"


@pytest.mark.unit
class TestFormatTextRun:
    """Tests for style wrapping of a single text run."""

    def test_plain_text(self):
        assert format_text_run(text_run("Hello\n")) == "Hello"

    def test_bold(self):
        assert format_text_run(text_run("ok", bold=True)) == "**ok**"

    def test_bold_suppressed_in_heading(self):
        assert format_text_run(text_run("ok", bold=True), is_heading=True) == "ok"

    def test_italic(self):
        assert format_text_run(text_run("ok", italic=True)) == "_ok_"

    def test_underline_maps_to_emphasis(self):
        assert format_text_run(text_run("ok", underline=True)) == "_ok_"

    def test_underline_and_italic_stack(self):
        assert format_text_run(text_run("ok", underline=True, italic=True)) == "__ok__"

    def test_strikethrough(self):
        assert format_text_run(text_run("gone", strikethrough=True)) == "~~gone~~"

    def test_wrapping_order(self):
        run = text_run("x", underline=True, italic=True, bold=True, strikethrough=True)
        assert format_text_run(run) == "~~**__x__**~~"

    def test_link_is_outermost(self):
        run = text_run("docs", bold=True, link="https://example.com")
        assert format_text_run(run) == "[**docs**](https://example.com)"

    def test_link_without_url_is_ignored(self):
        run = {"textRun": {"content": "anchor", "textStyle": {"link": {"bookmarkId": "b1"}}}}
        assert format_text_run(run) == "anchor"

    def test_missing_text_style(self):
        assert format_text_run({"textRun": {"content": "bare"}}) == "bare"

    def test_escaping_happens_before_wrapping(self):
        assert format_text_run(text_run("snake_case*", bold=True)) == "**snake\\_case\\***"

    def test_false_flags_are_off(self):
        run = text_run("plain", bold=False, italic=False, underline=False, strikethrough=False)
        assert format_text_run(run) == "plain"


@pytest.mark.unit
def test_paragraph_plain_text_skips_newline_runs():
    para = paragraph(text_run("a"), text_run("b", italic=True))["paragraph"]
    assert paragraph_plain_text(para) == "a_b_"


@pytest.mark.unit
@given(st.text(alphabet="ab*_ ", min_size=1))
def test_literal_stars_and_underscores_are_always_escaped(content):
    rendered = format_text_run(text_run(content))
    cleaned = content.strip()
    assert rendered.count("\\*") == cleaned.count("*")
    assert rendered.count("\\_") == cleaned.count("_")


@pytest.mark.unit
@given(st.text(alphabet="abc *_", min_size=1).filter(lambda s: s.strip()))
def test_style_markers_are_never_escaped(content):
    rendered = format_text_run(text_run(content, bold=True))
    assert rendered.startswith("**") and rendered.endswith("**")
    assert rendered[2:-2] == escape_emphasis_chars(content.strip())
