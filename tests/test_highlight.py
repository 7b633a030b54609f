"""Unit tests for Prism-style highlighting and span normalisation."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from snippet_pages.generator.highlight import (
    highlight_code,
    merge_adjacent_spans,
    normalize_highlight_spans,
)


def _span(kind: str, text: str) -> str:
    return f'<span class="token {kind}">{text}</span>'


def test_adjacent_keyword_spans_merge() -> None:
    """Keyword spans separated by a newline collapse into one span."""
    html = f"{_span('keyword', 'a')}\n{_span('keyword', 'b')}"
    assert normalize_highlight_spans(html) == _span("keyword", "a\nb")


def test_normalisation_is_idempotent() -> None:
    """A second pass finds nothing left to merge."""
    html = (
        f"{_span('punctuation', '(')}{_span('punctuation', ')')} "
        f"{_span('operator', '=')}{_span('operator', '>')}"
        f"{_span('keyword', 'new')} {_span('keyword', 'this')}"
    )
    once = normalize_highlight_spans(html)
    assert normalize_highlight_spans(once) == once


def test_long_runs_collapse_to_a_single_span() -> None:
    """Runs longer than two spans reach a fixed point as one span."""
    html = "".join(_span("punctuation", char) for char in "([{}])")
    assert merge_adjacent_spans(html, "punctuation") == _span("punctuation", "([{}])")


@pytest.mark.parametrize(
    "html",
    [
        f"{_span('keyword', 'a')}{_span('operator', '+')}",
        f"{_span('keyword', 'a')}x{_span('keyword', 'b')}",
        f"{_span('string', 'a')}{_span('string', 'b')}",
    ],
)
def test_spans_that_must_not_merge(html: str) -> None:
    """Different classes, non-whitespace gaps, and other kinds stay split."""
    assert normalize_highlight_spans(html) == html


def test_normalisation_preserves_text() -> None:
    """Merging never changes the visible text of highlighted code."""
    code = "const zip = (...arrays) => arrays[0].map((_, i) => i);\n"
    highlighted = highlight_code(code, "javascript")
    merged = normalize_highlight_spans(highlighted)
    assert merged.count("<span") < highlighted.count("<span")
    assert BeautifulSoup(merged, "html.parser").get_text() == code


def test_highlight_code_emits_prism_classes() -> None:
    """Pygments tokens map onto Prism's ``token <kind>`` classes."""
    html = normalize_highlight_spans(highlight_code("f();", "javascript"))
    assert '<span class="token punctuation">();</span>' in html
    keyword = highlight_code("const x = 1;", "javascript")
    assert _span("keyword", "const") in keyword
    assert '<span class="token number">1</span>' in keyword


def test_highlight_code_escapes_markup() -> None:
    """Source characters that are special in HTML are escaped."""
    html = highlight_code("a < b", "javascript")
    assert "&lt;" in html
    assert "<b" not in html
