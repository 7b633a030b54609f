"""Minify the assembled page, including inline ``<style>`` and ``<script>``.

HTML is compacted with ``htmlmin`` using a fixed option set: comments are
removed, whitespace runs collapsed to a single space (never dropped, so
neighbouring inline elements stay apart), boolean attributes reduced, while
attribute quotes, empty attributes, entities, and ``<pre>`` content are kept
as they are. Inline CSS goes through ``csscompressor`` and inline JavaScript through
``jsmin`` before the HTML pass. Conditional comments survive: their content
is minified with the same settings and the comment itself is kept.
"""

from __future__ import annotations

import dataclasses as dc
import re

import csscompressor
import htmlmin
import jsmin

STYLE_BLOCK_PATTERN = re.compile(
    r"(<style\b[^>]*>)(.*?)(</style>)", re.DOTALL | re.IGNORECASE
)
SCRIPT_BLOCK_PATTERN = re.compile(
    r"(<script\b([^>]*)>)(.*?)(</script>)", re.DOTALL | re.IGNORECASE
)
SCRIPT_TYPE_PATTERN = re.compile(r"""\btype\s*=\s*["']?([^"'\s>]+)""", re.IGNORECASE)
CONDITIONAL_COMMENT_PATTERN = re.compile(
    r"<!--(\[if[^\]]*\]>)(.*?)(<!\[endif\])-->", re.DOTALL | re.IGNORECASE
)
JAVASCRIPT_TYPES = frozenset(
    {
        "",
        "module",
        "text/javascript",
        "application/javascript",
        "application/ecmascript",
        "text/ecmascript",
    }
)


@dc.dataclass(frozen=True, slots=True)
class MinifyOptions:
    """Keyword arguments forwarded to :func:`htmlmin.minify`."""

    remove_comments: bool = True
    remove_empty_space: bool = False
    remove_all_empty_space: bool = False
    reduce_empty_attributes: bool = False
    reduce_boolean_attributes: bool = True
    remove_optional_attribute_quotes: bool = False
    convert_charrefs: bool = False
    keep_pre: bool = False

    def as_kwargs(self) -> dict[str, bool]:
        """Return the options as ``htmlmin.minify`` keyword arguments."""
        return dc.asdict(self)


def minify_inline_css(html: str) -> str:
    """Compress the body of every ``<style>`` element."""

    def _repl(match: re.Match[str]) -> str:
        opening, css, closing = match.groups()
        if not css.strip():
            return match.group(0)
        return f"{opening}{csscompressor.compress(css)}{closing}"

    return STYLE_BLOCK_PATTERN.sub(_repl, html)


def minify_inline_js(html: str) -> str:
    """Compress the body of every inline JavaScript ``<script>`` element.

    Scripts with a non-JavaScript ``type`` (templates, JSON data) are left
    untouched.
    """

    def _repl(match: re.Match[str]) -> str:
        opening, attributes, script, closing = match.groups()
        type_match = SCRIPT_TYPE_PATTERN.search(attributes)
        script_type = type_match.group(1).lower() if type_match else ""
        if script_type not in JAVASCRIPT_TYPES or not script.strip():
            return match.group(0)
        return f"{opening}{jsmin.jsmin(script).strip()}{closing}"

    return SCRIPT_BLOCK_PATTERN.sub(_repl, html)


def _compact(html: str, options: MinifyOptions) -> str:
    html = minify_inline_css(html)
    html = minify_inline_js(html)
    return htmlmin.minify(html, **options.as_kwargs())


def _protect_conditional_comments(html: str, options: MinifyOptions) -> str:
    """Minify conditional comment bodies and mark the comments as kept.

    ``htmlmin`` keeps comments that start with ``!`` and drops that marker
    from the output.
    """

    def _repl(match: re.Match[str]) -> str:
        opening, inner, closing = match.groups()
        return f"<!--!{opening}{_compact(inner, options)}{closing}-->"

    return CONDITIONAL_COMMENT_PATTERN.sub(_repl, html)


def minify_page(html: str, options: MinifyOptions | None = None) -> str:
    """Return ``html`` minified with inline CSS and JavaScript compacted.

    Parameters
    ----------
    html : str
        Fully assembled page.
    options : MinifyOptions, optional
        htmlmin settings; defaults to :class:`MinifyOptions`.

    Returns
    -------
    str
        Minified HTML with the same visible text, anchors, and links.
    """
    opts = options or MinifyOptions()
    return _compact(_protect_conditional_comments(html, opts), opts)


__all__ = ["MinifyOptions", "minify_inline_css", "minify_inline_js", "minify_page"]
