"""Tests for page minification.

The minified page must read the same as the assembled one: same visible text,
same anchors, same links. Only whitespace, comments, and the bodies of inline
``<style>``/``<script>`` elements may change.
"""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from snippet_pages.generator import HtmlContentRenderer, PageAssembler
from snippet_pages.generator.highlight import normalize_highlight_spans
from snippet_pages.minifier import (
    minify_inline_css,
    minify_inline_js,
    minify_page,
)
from snippet_pages.snippets import parse_tag_lines

from .sample_site import END_PART, SNIPPETS, START_PART, TAG_DATABASE


@pytest.fixture(scope="module")
def assembled_page() -> str:
    """Return the fixture page before minification."""
    assembler = PageAssembler(HtmlContentRenderer())
    html = assembler.assemble(
        START_PART, END_PART, SNIPPETS, parse_tag_lines(TAG_DATABASE)
    )
    return normalize_highlight_spans(html)


def _structure(html: str) -> tuple[str, list[str], list[str], list[str]]:
    """Return visible text (whitespace collapsed), ids, hrefs, and ``pre`` texts."""
    soup = BeautifulSoup(html, "html.parser")
    pre_texts = [pre.get_text() for pre in soup.find_all("pre")]
    for element in soup(["script", "style"]):
        element.decompose()
    text = " ".join(soup.get_text().split())
    ids = [tag["id"] for tag in soup.find_all(id=True)]
    hrefs = [tag["href"] for tag in soup.find_all("a", href=True)]
    return text, ids, hrefs, pre_texts


def test_minified_page_is_structurally_equivalent(assembled_page: str) -> None:
    minified = minify_page(assembled_page)
    assert len(minified) < len(assembled_page)
    assert _structure(minified) == _structure(assembled_page)


def test_whitespace_between_inline_elements_is_kept() -> None:
    """Inline elements split across lines must not run together."""
    snippets = {"words.md": "### words\n\nUse `first`\n`second` and *a*\n*b* too.\n"}
    assembler = PageAssembler(HtmlContentRenderer())
    html = assembler.assemble(
        START_PART, END_PART, snippets, parse_tag_lines("words:string\n")
    )
    minified = minify_page(html)

    text = _structure(minified)[0]
    assert "Use first second and a b too." in text
    assert _structure(minified) == _structure(html)


def test_comments_removed_and_entities_kept(assembled_page: str) -> None:
    minified = minify_page(assembled_page)
    assert "page header" not in minified
    assert "&#128203;&nbsp;Copy to clipboard" in minified
    assert '<a id="top">&nbsp;</a>' in minified


def test_attribute_quotes_and_empty_attributes_kept() -> None:
    html = '<div class="card fluid"><input value="" disabled="disabled"></div>'
    minified = minify_page(html)
    assert 'class="card fluid"' in minified
    assert 'value=""' in minified


def test_conditional_comments_survive() -> None:
    html = (
        "<head>\n  <!--[if lt IE 9]>\n    <script src=\"html5shiv.js\"></script>\n"
        "  <![endif]-->\n  <!-- plain note -->\n</head>"
    )
    minified = minify_page(html)
    assert "<!--[if lt IE 9]>" in minified
    assert "<![endif]-->" in minified
    assert 'src="html5shiv.js"' in minified
    assert "plain note" not in minified


def test_pre_whitespace_is_preserved() -> None:
    html = "<div>\n  <pre class=\"language-js\">const a = 1;\n\n  a;\n</pre>\n</div>"
    assert "const a = 1;\n\n  a;\n" in minify_page(html)


def test_inline_css_compressed() -> None:
    html = "<style>\n  body {\n    color: #333333;\n  }\n</style>"
    assert minify_inline_css(html) == "<style>body{color:#333}</style>"


def test_inline_js_compressed_but_data_scripts_untouched() -> None:
    html = (
        "<script>\n  // note\n  var copied = false;\n</script>"
        '<script type="application/json">{ "a": 1 }</script>'
    )
    minified = minify_inline_js(html)
    assert "// note" not in minified
    assert "var copied=false;" in minified
    assert '<script type="application/json">{ "a": 1 }</script>' in minified
