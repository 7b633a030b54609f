"""Utilities for rendering snippet markdown and highlighting code samples."""

from __future__ import annotations

import re
from html import unescape

from markdown import Markdown

from snippet_pages._constants import SHOW_EXAMPLES_LABEL

from .highlight import highlight_code

PARAGRAPH_TAG_PATTERN = re.compile(r"</?p>")
CONSECUTIVE_PRE_PATTERN = re.compile(r"</pre>\s+<pre")


class HtmlContentRenderer:
    """Render snippet markdown with Prism-style highlighting for one language."""

    def __init__(self, language: str = "js", lexer: str = "javascript") -> None:
        """Initialize a renderer for fenced blocks written in ``language``.

        Parameters
        ----------
        language : str, optional
            Fence label whose blocks are highlighted (``language-<label>``
            class on the rendered ``<code>``). Defaults to ``"js"``.
        lexer : str, optional
            Pygments lexer alias used for those blocks. Defaults to
            ``"javascript"``.
        """
        self.language = language
        self.lexer = lexer
        self._code_block = re.compile(
            rf'<pre><code class="language-{re.escape(language)}">(.*?)</code></pre>',
            re.DOTALL,
        )

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using fenced code and tables."""
        if not text.strip():
            return ""
        md = Markdown(extensions=["fenced_code", "tables", "sane_lists"])
        return md.convert(text)

    def inline(self, text: str) -> str:
        """Render a one-line markdown fragment without paragraph wrappers."""
        return PARAGRAPH_TAG_PATTERN.sub("", self.markdown(text))

    def highlight_code_blocks(self, html: str) -> str:
        """Replace rendered ``language-<label>`` blocks with highlighted ``<pre>``.

        Markdown escapes the code body, so entities are decoded before the
        source is handed to the lexer.
        """

        def _repl(match: re.Match[str]) -> str:
            code = unescape(match.group(1))
            highlighted = highlight_code(code, self.lexer)
            return f'<pre class="language-{self.language}">{highlighted}</pre>'

        return self._code_block.sub(_repl, html)

    @staticmethod
    def join_examples(html: str) -> str:
        """Insert a "Show examples" toggle between back-to-back ``<pre>`` blocks."""
        return CONSECUTIVE_PRE_PATTERN.sub(f"</pre>{SHOW_EXAMPLES_LABEL}<pre", html)


__all__ = ["HtmlContentRenderer"]
