"""Typed dataclasses describing snippet site build configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from snippet_pages._constants import (
    BUILD_COMMIT_PATTERN,
    CI_ENV_VARS,
    COMMIT_MESSAGE_ENV_VAR,
)


class SiteConfigError(ValueError):
    """Raised when the build configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class PathsConfig:
    """Filesystem inputs and outputs consumed by the build pipeline."""

    snippets: Path = Path("snippets")
    static_parts: Path = Path("static-parts")
    tag_database: Path = Path("tag_database")
    stylesheet_source: Path = Path("docs/mini/flavor.scss")
    stylesheet_output: Path = Path("docs/mini.css")
    output: Path = Path("docs/index.html")


@dc.dataclass(slots=True)
class HighlightConfig:
    """Fenced code language that is passed through the highlighter."""

    language: str = "js"
    lexer: str = "javascript"


@dc.dataclass(slots=True)
class GuardConfig:
    """Environment lookups used to detect automated build commits."""

    ci_env_vars: tuple[str, ...] = CI_ENV_VARS
    message_env_var: str = COMMIT_MESSAGE_ENV_VAR
    build_commit_pattern: str = BUILD_COMMIT_PATTERN


@dc.dataclass(slots=True)
class BuildConfig:
    """Complete configuration for one site build.

    Attributes
    ----------
    paths : PathsConfig
        Locations of snippets, static parts, tag database, and outputs.
    highlight : HighlightConfig
        Fenced code language and Pygments lexer used for highlighting.
    guard : GuardConfig
        CI detection settings for the self-trigger guard.
    build_stylesheet : bool
        When ``False`` the Sass compile step is skipped.
    minify : bool
        When ``False`` the assembled page is written without minification.
    """

    paths: PathsConfig = dc.field(default_factory=PathsConfig)
    highlight: HighlightConfig = dc.field(default_factory=HighlightConfig)
    guard: GuardConfig = dc.field(default_factory=GuardConfig)
    build_stylesheet: bool = True
    minify: bool = True


__all__ = [
    "BuildConfig",
    "GuardConfig",
    "HighlightConfig",
    "PathsConfig",
    "SiteConfigError",
]
