"""Exception hierarchy for fatal snippet page build failures.

Each :class:`BuildError` subclass names the pipeline stage that failed so the
CLI can print a status line such as ``ERROR! During static part loading: ...``
before exiting with status ``1``.
"""

from __future__ import annotations


class BuildError(RuntimeError):
    """Raised when a pipeline stage fails and the build must stop."""

    stage = "index.html generation"


class StaticPartError(BuildError):
    """Raised when the header or footer fragment cannot be read."""

    stage = "static part loading"


class SnippetLoadError(BuildError):
    """Raised when the snippets directory cannot be read."""

    stage = "snippet loading"


class TagDatabaseError(BuildError):
    """Raised when the tag database is missing or malformed."""

    stage = "tag database loading"


class PageGenerationError(BuildError):
    """Raised when assembling, minifying, or writing the page fails."""

    stage = "index.html generation"


__all__ = [
    "BuildError",
    "PageGenerationError",
    "SnippetLoadError",
    "StaticPartError",
    "TagDatabaseError",
]
