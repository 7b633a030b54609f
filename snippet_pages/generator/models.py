"""Shared dataclasses used by the page assembly templates."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(slots=True)
class TocLink:
    """Table-of-contents entry pointing at a snippet card.

    Attributes
    ----------
    name : str
        Snippet name shown as the link text.
    anchor : str
        Lower-cased snippet name used as the fragment target.
    tags : str
        Comma-joined tag list exposed for client-side filtering.
    """

    name: str
    anchor: str
    tags: str


@dc.dataclass(slots=True)
class CardModel:
    """Structured data passed to the snippet card template.

    Attributes
    ----------
    name : str
        Snippet name.
    content_html : str
        Rendered and highlighted snippet markdown.
    section_open : bool
        ``True`` when ``content_html`` opened a section ``<div>`` after its
        heading that the template must close.
    """

    name: str
    content_html: str
    section_open: bool


__all__ = ["CardModel", "TocLink"]
