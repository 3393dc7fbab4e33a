"""Tests for the regex helpers and snippet extraction."""

import re

import pytest

from web_inspector.evidence import (
    MAX_SNIPPET_LENGTH,
    count,
    extract_snippet,
    find_all,
    has,
    literal,
    percent,
    round_half_up,
)


DOCUMENT = "\n".join([
    "<!DOCTYPE html>",
    "<html>",
    "<head>",
    "<title>Example</title>",
    "</head>",
    "<body>",
    "<img src=\"a.png\">",
    "</body>",
    "</html>",
])


class TestExtractSnippet:
    def test_line_number_is_one_based(self):
        evidence = extract_snippet(DOCUMENT, r"<img", 0)
        assert evidence.line_number == 7
        assert evidence.snippet == '<img src="a.png">'

    def test_context_lines_either_side(self):
        evidence = extract_snippet(DOCUMENT, r"<title>", 1)
        assert evidence.snippet == "<head>\n<title>Example</title>\n</head>"

    def test_context_clamped_at_document_edges(self):
        evidence = extract_snippet(DOCUMENT, r"<!doctype", 3)
        assert evidence.line_number == 1
        assert evidence.snippet.splitlines()[0] == "<!DOCTYPE html>"
        assert len(evidence.snippet.splitlines()) == 4

    def test_first_match_wins(self):
        html = "<p>one</p>\n<p>two</p>"
        assert extract_snippet(html, r"<p>", 0).line_number == 1

    def test_string_patterns_ignore_case(self):
        assert extract_snippet(DOCUMENT, r"<IMG", 0).line_number == 7

    def test_compiled_patterns_used_as_given(self):
        assert extract_snippet(DOCUMENT, re.compile(r"<IMG"), 0) is None

    def test_snippet_is_stripped(self):
        evidence = extract_snippet("   <div>padded</div>   ", r"<div", 0)
        assert evidence.snippet == "<div>padded</div>"

    def test_snippet_is_capped(self):
        evidence = extract_snippet("<p>" + "x" * 2000 + "</p>", r"<p>", 0)
        assert len(evidence.snippet) == MAX_SNIPPET_LENGTH

    def test_no_match(self):
        assert extract_snippet(DOCUMENT, r"<video", 2) is None

    def test_empty_document(self):
        assert extract_snippet("", r"<html", 2) is None


class TestPatternHelpers:
    def test_find_all_returns_full_matches(self):
        html = '<img src="a.png"><img src="b.png" alt="">'
        assert find_all(r"<img[^>]+src=\"(\w+)\.png\"[^>]*>", html) == [
            '<img src="a.png">',
            '<img src="b.png" alt="">',
        ]

    def test_count_and_has(self):
        assert count(r"<li>", "<ul><LI>a<li>b</ul>") == 2
        assert has(r"<ul>", "<UL></UL>")
        assert not has(r"<ol>", "<ul></ul>")

    def test_literal_escapes_metacharacters(self):
        tag = '<script src="/app.js?v=1.2"></script>'
        assert has(literal(tag), "before\n" + tag)
        assert not has(literal(tag), '<script src="/appxjs?v=1.2"></script>')

    def test_percent(self):
        assert percent(1, 2) == 50
        assert percent(2, 3) == 67
        assert percent(0, 0) == 0
        assert percent(1, 8) == 13

    @pytest.mark.parametrize("value, expected", [(12.5, 13), (52.5, 53), (0.5, 1), (2.4, 2), (0.0, 0)])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected
