"""Assemble the single-page snippet site from its rendered pieces.

:class:`PageAssembler` turns the loaded snippets and tag map into one HTML
text: the static header, a table of contents grouped by category, the
``<main>`` marker, one card per snippet grouped the same way, and the static
footer. Categories are the distinct non-empty first tags, ordered
alphabetically by their display label with ``Uncategorized`` last.

Example
-------
>>> from snippet_pages.generator import PageAssembler
>>> PageAssembler.categories({"zip": ["array"], "foo": ["uncategorized"], "x": [""]})
['array', 'uncategorized']
"""

from __future__ import annotations

import typing as typ
from html import escape
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from snippet_pages._constants import (
    ADVANCED_BADGE,
    ADVANCED_TAG,
    MAIN_REGION_OPEN,
    UNCATEGORIZED,
)
from snippet_pages.errors import PageGenerationError
from snippet_pages.snippets import capitalize

from .models import CardModel, TocLink

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .renderer import HtmlContentRenderer


class PageAssembler:
    """Render the table of contents and snippet cards around static parts."""

    def __init__(
        self, renderer: HtmlContentRenderer, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the assembler with a renderer and template directory.

        Parameters
        ----------
        renderer : HtmlContentRenderer
            Renderer used for snippet markdown and code highlighting.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        """
        self.renderer = renderer
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._toc_template = self.env.get_template("toc_group.html.jinja")
        self._heading_template = self.env.get_template("category_heading.html.jinja")
        self._card_template = self.env.get_template("card.html.jinja")

    def assemble(
        self,
        start_part: str,
        end_part: str,
        snippets: cabc.Mapping[str, str],
        tags: cabc.Mapping[str, list[str]],
    ) -> str:
        """Return the full page text for ``snippets`` grouped by ``tags``.

        Raises
        ------
        PageGenerationError
            If a snippet named in ``tags`` has no loaded markdown.
        """
        return "".join(
            [
                f"{start_part}\n",
                self.table_of_contents(tags),
                MAIN_REGION_OPEN,
                self.body(snippets, tags),
                f"\n{end_part}\n",
            ]
        )

    @staticmethod
    def categories(tags: cabc.Mapping[str, list[str]]) -> list[str]:
        """Return distinct non-empty primary tags in display order."""
        distinct = {entry[0] for entry in tags.values() if entry and entry[0]}
        return sorted(distinct, key=_category_sort_key)

    @staticmethod
    def tagged_with(
        tags: cabc.Mapping[str, list[str]], category: str
    ) -> list[tuple[str, list[str]]]:
        """Return ``(name, tags)`` pairs whose primary tag equals ``category``."""
        return [
            (name, entry)
            for name, entry in tags.items()
            if entry and entry[0] == category
        ]

    def table_of_contents(self, tags: cabc.Mapping[str, list[str]]) -> str:
        """Render one heading and link list per category."""
        groups: list[str] = []
        for category in self.categories(tags):
            links = [
                TocLink(name=name, anchor=name.lower(), tags=",".join(entry))
                for name, entry in self.tagged_with(tags, category)
            ]
            groups.append(
                self._toc_template.render(
                    label_html=self.renderer.inline(capitalize(category)), links=links
                )
                + "\n"
            )
        return "".join(groups)

    def body(
        self, snippets: cabc.Mapping[str, str], tags: cabc.Mapping[str, list[str]]
    ) -> str:
        """Render a heading per category followed by its snippet cards."""
        blocks: list[str] = []
        for category in self.categories(tags):
            blocks.append(
                self._heading_template.render(
                    label_html=self.renderer.inline(capitalize(category))
                )
            )
            for name, entry in self.tagged_with(tags, category):
                source = _snippet_source(snippets, name)
                blocks.append(self.render_card(name, entry, source))
        return "".join(blocks)

    def render_card(self, name: str, tags: list[str], markdown_text: str) -> str:
        """Render one snippet into a card with anchor, badge, and copy button."""
        html = self.renderer.markdown(f"\n{markdown_text}")
        html, section_open = _decorate_heading(
            html, anchor=name.lower(), advanced=ADVANCED_TAG in tags
        )
        html = self.renderer.highlight_code_blocks(html)
        html = self.renderer.join_examples(html)
        card = CardModel(name=name, content_html=html, section_open=section_open)
        return self._card_template.render(card=card)


def _category_sort_key(tag: str) -> tuple[bool, str, str]:
    """Sort by label, case-insensitively, with ``Uncategorized`` last."""
    return (capitalize(tag) == UNCATEGORIZED, tag.casefold(), tag)


def _snippet_source(snippets: cabc.Mapping[str, str], name: str) -> str:
    """Return the markdown for ``name``, looked up as ``<name>.md`` then ``name``."""
    for key in (f"{name}.md", name):
        if key in snippets:
            return snippets[key]
    msg = f"Snippet '{name}' is listed in the tag database but was not loaded."
    raise PageGenerationError(msg)


def _decorate_heading(html: str, *, anchor: str, advanced: bool) -> tuple[str, bool]:
    """Anchor the first ``<h3>`` and open the card's section after it.

    Returns the updated HTML and whether a section ``<div>`` was opened.
    """
    if "<h3" not in html or "</h3>" not in html:
        return html, False
    safe_anchor = escape(anchor, quote=True)
    html = html.replace(
        "<h3", f'<h3 id="{safe_anchor}" class="section double-padded"', 1
    )
    badge = ADVANCED_BADGE if advanced else ""
    html = html.replace(
        "</h3>", f'{badge}</h3><div class="section double-padded">', 1
    )
    return html, True


__all__ = ["PageAssembler"]
