"""Tests for spans.py - balanced span extraction."""

import pytest

from spans import Span, SpanKind, extract_span, find_opening


class TestFindOpening:
    """Tests for locating the next construct."""

    def test_finds_bracket_or_hash(self):
        assert find_opening("text #tag#") == 5
        assert find_opening("text [a:b]") == 5

    def test_skips_escaped(self):
        assert find_opening("\\#x\\[y") is None


class TestExtractSpan:
    """Tests for extracting balanced spans."""

    def test_simple_tag(self):
        span = extract_span("say #word# now", 4)
        assert span == Span(kind=SpanKind.TAG, start=4, end=10, content="word")
        assert span.length == 6

    def test_simple_action(self):
        span = extract_span("[pet:dog]rest", 0)
        assert span.kind is SpanKind.ACTION
        assert span.content == "pet:dog"
        assert span.end == 9

    def test_tag_with_inner_action(self):
        text = "#[pet:#animal#]pet.capitalize#!"
        span = extract_span(text, 0)
        assert span.kind is SpanKind.TAG
        assert span.content == "[pet:#animal#]pet.capitalize"
        assert text[span.end:] == "!"

    def test_nested_actions(self):
        span = extract_span("[a:[b:c]x]y", 0)
        assert span.content == "a:[b:c]x"

    def test_empty_spans(self):
        assert extract_span("##", 0).content == ""
        assert extract_span("[]", 0).content == ""

    def test_escaped_closer_skipped(self):
        span = extract_span("#a\\#b#", 0)
        assert span.content == "a\\#b"

    def test_double_escaped_closer_is_live(self):
        span = extract_span("[k\\\\]", 0)
        assert span.content == "k\\\\"

    def test_unclosed_fails(self):
        assert extract_span("#unmatched", 0) is None
        assert extract_span("[pet:unicorn", 0) is None

    def test_unbalanced_inner_bracket_fails(self):
        assert extract_span("#[a#", 0) is None

    def test_stray_close_inside_tag_is_text(self):
        span = extract_span("#a]b[c#", 0)
        assert span.kind is SpanKind.TAG
        assert span.content == "a]b[c"

    def test_stray_close_then_nested_action(self):
        span = extract_span("#x][k:v]y#z", 0)
        assert span.content == "x][k:v]y"

    def test_rejects_non_delimiter(self):
        with pytest.raises(ValueError):
            extract_span("abc", 0)
