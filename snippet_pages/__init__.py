"""Build the single-page snippet documentation site.

This package exposes the CLI entry points used by ``snippet-pages`` to compile
the site stylesheet and render ``docs/index.html`` from markdown snippets and
a tag database.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from snippet_pages import main
>>> main(["build", "--config", "config/site.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
