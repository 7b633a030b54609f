"""Load build configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _as_bool,
    _optional_str,
    _resolve_path,
    _section,
    _string_tuple,
    _validate_pattern,
)
from .models import (
    BuildConfig,
    GuardConfig,
    HighlightConfig,
    PathsConfig,
    SiteConfigError,
)


def load_build_config(path: Path | None = None) -> BuildConfig:
    """Load the YAML configuration describing build inputs and outputs.

    Parameters
    ----------
    path : Path or None, optional
        Filesystem path to the YAML configuration file. When ``None`` the
        defaults are used and relative paths resolve against the current
        working directory.

    Returns
    -------
    BuildConfig
        Parsed configuration with every relative path resolved against the
        directory containing the configuration file.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given but does not exist.
    SiteConfigError
        If the document is not a mapping or a section has the wrong shape.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from snippet_pages.config import load_build_config
    >>> config = load_build_config()
    >>> config.highlight.lexer
    'javascript'
    """
    if path is None:
        return _build_config({}, Path.cwd())
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    return _build_config(dict(loaded), path.resolve().parent)


def _build_config(raw: typ.Mapping[str, typ.Any], base_dir: Path) -> BuildConfig:
    """Build a BuildConfig from a raw mapping, applying defaults."""
    defaults = BuildConfig()
    return BuildConfig(
        paths=_build_paths(_section(raw, "paths"), base_dir, defaults.paths),
        highlight=_build_highlight(_section(raw, "highlight"), defaults.highlight),
        guard=_build_guard(_section(raw, "guard"), defaults.guard),
        build_stylesheet=_as_bool(
            raw.get("build_stylesheet"), default=defaults.build_stylesheet
        ),
        minify=_as_bool(raw.get("minify"), default=defaults.minify),
    )


def _build_paths(
    payload: typ.Mapping[str, typ.Any], base_dir: Path, base: PathsConfig
) -> PathsConfig:
    return PathsConfig(
        snippets=_resolve_path(base_dir, payload.get("snippets"), base.snippets),
        static_parts=_resolve_path(
            base_dir, payload.get("static_parts"), base.static_parts
        ),
        tag_database=_resolve_path(
            base_dir, payload.get("tag_database"), base.tag_database
        ),
        stylesheet_source=_resolve_path(
            base_dir, payload.get("stylesheet_source"), base.stylesheet_source
        ),
        stylesheet_output=_resolve_path(
            base_dir, payload.get("stylesheet_output"), base.stylesheet_output
        ),
        output=_resolve_path(base_dir, payload.get("output"), base.output),
    )


def _build_highlight(
    payload: typ.Mapping[str, typ.Any], base: HighlightConfig
) -> HighlightConfig:
    return HighlightConfig(
        language=_optional_str(payload.get("language")) or base.language,
        lexer=_optional_str(payload.get("lexer")) or base.lexer,
    )


def _build_guard(payload: typ.Mapping[str, typ.Any], base: GuardConfig) -> GuardConfig:
    pattern = _optional_str(payload.get("build_commit_pattern"))
    return GuardConfig(
        ci_env_vars=_string_tuple(payload.get("ci_env_vars"), base.ci_env_vars),
        message_env_var=_optional_str(payload.get("message_env_var"))
        or base.message_env_var,
        build_commit_pattern=_validate_pattern(pattern or base.build_commit_pattern),
    )


__all__ = ["load_build_config"]
