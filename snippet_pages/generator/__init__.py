"""Utilities for rendering, highlighting, and assembling the snippet page."""

from .highlight import PrismHtmlFormatter, highlight_code, normalize_highlight_spans
from .models import CardModel, TocLink
from .page_generator import PageAssembler
from .renderer import HtmlContentRenderer

__all__ = [
    "CardModel",
    "HtmlContentRenderer",
    "PageAssembler",
    "PrismHtmlFormatter",
    "TocLink",
    "highlight_code",
    "normalize_highlight_spans",
]
