"""Cyclopts CLI entrypoint for building the snippet documentation site.

The ``snippet-pages`` console script defined here compiles the Sass
stylesheet and renders ``docs/index.html`` from the markdown snippets and tag
database. Typical usage runs ``snippet-pages build`` locally or in CI; when CI
rebuilds because of the generator's own output commit, the build stops early
and exits successfully.

Examples
--------
Build the site with the default layout:

>>> from snippet_pages.cli import main
>>> main(["build"])  # doctest: +SKIP

Build without minification into a custom file:

>>> from snippet_pages.cli import app
>>> app(
...     ["build", "--output", "dist/index.html", "--no-minify"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml.error import YAMLError

from . import console
from .builder import run_build
from .config import BuildConfig, SiteConfigError, load_build_config
from .stylesheet import build_stylesheet

app = App(name="snippet-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _load_config(path: Path | None) -> BuildConfig:
    """Load the build configuration, exiting with status 1 when it is invalid."""
    try:
        return load_build_config(path)
    except (FileNotFoundError, SiteConfigError, YAMLError) as exc:
        console.error("configuration loading", exc)
        raise SystemExit(1) from exc


@app.command(help="Build the snippet site page and stylesheet.")
def build(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = None,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the output HTML file", env_var="INPUT_OUTPUT"),
    ] = None,
    minify: typ.Annotated[
        bool, Parameter(help="Minify the generated page", env_var="INPUT_MINIFY")
    ] = True,
) -> None:
    """Run the full build pipeline.

    Parameters
    ----------
    config : Path or None, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``); built-in defaults are used when omitted.
    output : Path or None, optional
        Override for the generated HTML path.
    minify : bool, optional
        Pass ``--no-minify`` to write the assembled page as-is.

    Raises
    ------
    SystemExit
        With status ``1`` when the configuration is invalid or a fatal stage
        fails. Guard exits and successful builds return normally.
    """
    build_config = _load_config(config)
    if output is not None:
        build_config.paths.output = output
    if not minify:
        build_config.minify = False
    status = run_build(build_config)
    if status:
        raise SystemExit(status)


@app.command(help="Compile the Sass stylesheet only.")
def styles(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = None,
) -> None:
    """Compile the stylesheet; failures are reported but never fatal."""
    build_config = _load_config(config)
    written = build_stylesheet(
        build_config.paths.stylesheet_source, build_config.paths.stylesheet_output
    )
    if written is not None:
        console.wrote(written)


def main(tokens: list[str] | None = None) -> None:
    """Invoke the Cyclopts application that powers the ``snippet-pages`` command.

    Parameters
    ----------
    tokens : list[str] or None, optional
        Command-line arguments; ``None`` reads them from ``sys.argv``.

    Examples
    --------
    >>> main(["build"])  # doctest: +SKIP
    """
    app(tokens)


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
