"""Prism-compatible syntax highlighting and token span normalisation.

The page stylesheet targets Prism's ``token <kind>`` classes, so code is run
through Pygments with :class:`PrismHtmlFormatter`, which writes bare
``<span class="token keyword">`` markup instead of Pygments' short class
names. Pygments emits one span per token, which leaves runs such as
``)`` ``;`` or ``const`` ``let`` as neighbouring spans; the normaliser merges
those neighbours to cut down the number of nodes in the page.

Example
-------
>>> from snippet_pages.generator.highlight import normalize_highlight_spans
>>> normalize_highlight_spans(
...     '<span class="token keyword">a</span>\\n<span class="token keyword">b</span>'
... )
'<span class="token keyword">a\\nb</span>'
"""

from __future__ import annotations

import re
import typing as typ
from functools import cache
from html import escape

from pygments import highlight
from pygments.formatter import Formatter
from pygments.lexers import get_lexer_by_name
from pygments.token import (
    Comment,
    Keyword,
    Name,
    Number,
    Operator,
    Punctuation,
    String,
)

if typ.TYPE_CHECKING:
    from pygments.token import _TokenType

MERGEABLE_TOKEN_CLASSES = ("punctuation", "operator", "keyword")

PRISM_TOKEN_CLASSES: dict[_TokenType, str] = {
    Comment: "comment",
    String: "string",
    String.Regex: "regex",
    Number: "number",
    Keyword: "keyword",
    Keyword.Constant: "boolean",
    Operator: "operator",
    Operator.Word: "keyword",
    Punctuation: "punctuation",
    Name.Function: "function",
    Name.Builtin: "builtin",
    Name.Class: "class-name",
    Name.Tag: "tag",
    Name.Attribute: "attr-name",
}


class PrismHtmlFormatter(Formatter):
    """Pygments formatter that emits Prism-style ``token`` spans only.

    No wrapping ``<div>``/``<pre>`` is written; callers place the output in
    their own ``<pre>`` element. Tokens without a Prism equivalent are
    written as escaped text.
    """

    name = "Prism HTML"
    aliases = ["prism"]
    filenames: typ.ClassVar[list[str]] = []

    def format_unencoded(
        self,
        tokensource: typ.Iterable[tuple[_TokenType, str]],
        outfile: typ.TextIO,
    ) -> None:
        """Write each token as a Prism span (or plain text) to ``outfile``."""
        for ttype, value in tokensource:
            css_class = _prism_class(ttype)
            text = escape(value, quote=False)
            if css_class:
                outfile.write(f'<span class="token {css_class}">{text}</span>')
            else:
                outfile.write(text)


def _prism_class(ttype: _TokenType) -> str | None:
    """Return the Prism class for ``ttype`` by walking up its parents."""
    while ttype is not None:
        css_class = PRISM_TOKEN_CLASSES.get(ttype)
        if css_class:
            return css_class
        ttype = ttype.parent
    return None


def highlight_code(code: str, lexer_name: str) -> str:
    """Return Prism-style highlighted markup for ``code``.

    Parameters
    ----------
    code : str
        Raw (unescaped) source text.
    lexer_name : str
        Pygments lexer alias, for example ``"javascript"``.

    Raises
    ------
    pygments.util.ClassNotFound
        If ``lexer_name`` is not a known Pygments lexer.
    """
    lexer = get_lexer_by_name(lexer_name, stripnl=False, ensurenl=False)
    return highlight(code, lexer, PrismHtmlFormatter())


@cache
def _adjacent_span_pattern(token_class: str) -> re.Pattern[str]:
    open_tag = re.escape(f'<span class="token {token_class}">')
    return re.compile(
        rf"{open_tag}([^<]*)</span>(\s*){open_tag}([^<]*)</span>",
    )


def merge_adjacent_spans(html: str, token_class: str) -> str:
    """Merge neighbouring ``token_class`` spans separated only by whitespace.

    Substitution is repeated until a pass changes nothing, so runs of any
    length collapse into a single span.
    """
    pattern = _adjacent_span_pattern(token_class)
    replacement = rf'<span class="token {token_class}">\1\2\3</span>'
    changed = True
    while changed:
        html, count = pattern.subn(replacement, html)
        changed = count > 0
    return html


def normalize_highlight_spans(
    html: str, token_classes: typ.Iterable[str] = MERGEABLE_TOKEN_CLASSES
) -> str:
    """Merge adjacent punctuation, operator, and keyword spans in ``html``."""
    for token_class in token_classes:
        html = merge_adjacent_spans(html, token_class)
    return html


__all__ = [
    "MERGEABLE_TOKEN_CLASSES",
    "PrismHtmlFormatter",
    "highlight_code",
    "merge_adjacent_spans",
    "normalize_highlight_spans",
]
