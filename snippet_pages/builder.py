"""High-level orchestration for the snippet site build.

:class:`SiteBuilder` runs the pipeline stage by stage, passing each stage's
result explicitly to the next:

1. guard against builds triggered by the generator's own commits;
2. compile the Sass stylesheet (failures reported, never fatal);
3. load snippets, static parts, and the tag database;
4. assemble the page, merge adjacent highlight spans, minify;
5. write the HTML file.

Fatal failures surface as :class:`~snippet_pages.errors.BuildError`;
:func:`run_build` turns them into a status line and exit code ``1``.

Example
-------
>>> from snippet_pages.builder import run_build
>>> from snippet_pages.config import load_build_config
>>> run_build(load_build_config())  # doctest: +SKIP
0
"""

from __future__ import annotations

import dataclasses as dc
import enum
import os
import time
import typing as typ

from pygments.util import ClassNotFound

from . import console
from .errors import BuildError, PageGenerationError
from .generator import HtmlContentRenderer, PageAssembler, normalize_highlight_spans
from .guard import should_skip_build
from .minifier import minify_page
from .snippets import read_snippets, read_static_parts, read_tags
from .stylesheet import build_stylesheet

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .config import BuildConfig


class BuildStatus(enum.Enum):
    """Result of a single pipeline run."""

    SKIPPED = "skipped"
    BUILT = "built"


@dc.dataclass(slots=True)
class BuildOutcome:
    """Artifacts produced by :meth:`SiteBuilder.run`.

    Attributes
    ----------
    status : BuildStatus
        ``SKIPPED`` when the guard stopped the run, ``BUILT`` otherwise.
    page : Path or None
        Written HTML file, when built.
    stylesheet : Path or None
        Written CSS file, when the stylesheet stage succeeded.
    untagged : list[str]
        Loaded snippet files with no tag database entry (left out of the page).
    """

    status: BuildStatus
    page: Path | None = None
    stylesheet: Path | None = None
    untagged: list[str] = dc.field(default_factory=list)


class SiteBuilder:
    """Run the snippet site pipeline for one :class:`BuildConfig`."""

    def __init__(
        self,
        config: BuildConfig,
        *,
        env: cabc.Mapping[str, str] | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        config : BuildConfig
            Paths and options for the build.
        env : Mapping[str, str], optional
            Environment consulted by the guard; defaults to ``os.environ``.
        templates_dir : Path, optional
            Override for the Jinja templates directory.
        """
        self.config = config
        self.env = os.environ if env is None else env
        self.renderer = HtmlContentRenderer(
            config.highlight.language, config.highlight.lexer
        )
        self.assembler = PageAssembler(self.renderer, templates_dir=templates_dir)

    def run(self) -> BuildOutcome:
        """Execute every stage and write the page.

        Raises
        ------
        BuildError
            If loading inputs, assembling, minifying, or writing fails. The
            output file is only written once the whole page is ready.
        """
        if should_skip_build(self.env, self.config.guard):
            console.nobuild(
                "index build terminated, parent commit is a Travis build!"
            )
            return BuildOutcome(status=BuildStatus.SKIPPED)

        paths = self.config.paths
        stylesheet = None
        if self.config.build_stylesheet:
            stylesheet = build_stylesheet(
                paths.stylesheet_source, paths.stylesheet_output
            )

        snippets = read_snippets(paths.snippets)
        start_part, end_part = read_static_parts(paths.static_parts)
        tags = read_tags(paths.tag_database)
        untagged = untagged_snippets(snippets, tags)
        if untagged:
            console.note(
                "snippets without tag database entries are left out: "
                + ", ".join(untagged)
            )

        html = self.render_page(start_part, end_part, snippets, tags)
        self.write_page(html, paths.output)
        console.success(f"{paths.output.name} file generated!")
        console.wrote(paths.output)
        return BuildOutcome(
            status=BuildStatus.BUILT,
            page=paths.output,
            stylesheet=stylesheet,
            untagged=untagged,
        )

    def render_page(
        self,
        start_part: str,
        end_part: str,
        snippets: cabc.Mapping[str, str],
        tags: cabc.Mapping[str, list[str]],
    ) -> str:
        """Return the assembled, normalised, and (optionally) minified page."""
        try:
            html = self.assembler.assemble(start_part, end_part, snippets, tags)
        except ClassNotFound as exc:
            msg = f"no Pygments lexer named '{self.renderer.lexer}'"
            raise PageGenerationError(msg) from exc
        html = normalize_highlight_spans(html)
        if self.config.minify:
            try:
                html = minify_page(html)
            except Exception as exc:  # noqa: BLE001 - any minifier failure is fatal
                raise PageGenerationError(f"minification failed: {exc}") from exc
        return html

    @staticmethod
    def write_page(html: str, output: Path) -> None:
        """Write ``html`` to ``output``, replacing any previous page."""
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(html, encoding="utf-8")
        except OSError as exc:
            raise PageGenerationError(str(exc)) from exc


def untagged_snippets(
    snippets: cabc.Mapping[str, str], tags: cabc.Mapping[str, list[str]]
) -> list[str]:
    """Return snippet filenames with no matching tag database entry."""
    tagged = set(tags)
    return [
        filename
        for filename in snippets
        if filename not in tagged and filename.removesuffix(".md") not in tagged
    ]


def run_build(
    config: BuildConfig, *, env: cabc.Mapping[str, str] | None = None
) -> int:
    """Run the pipeline, report the outcome, and return a process exit code.

    Returns
    -------
    int
        ``0`` on success or guard exit, ``1`` when a stage failed.
    """
    started = time.perf_counter()
    try:
        outcome = SiteBuilder(config, env=env).run()
    except BuildError as exc:
        console.error(exc.stage, exc)
        return 1
    if outcome.status is BuildStatus.BUILT:
        console.timing("Webber", time.perf_counter() - started)
    return 0


__all__ = [
    "BuildOutcome",
    "BuildStatus",
    "SiteBuilder",
    "run_build",
    "untagged_snippets",
]
