"""Load and validate build configuration YAML for snippet site builds.

This subpackage parses an optional ``site.yaml`` file, merges it with the
built-in defaults, resolves relative paths against the file's directory, and
produces typed dataclasses (:class:`BuildConfig`, :class:`PathsConfig`, etc.)
that the pipeline consumes. The primary entry point is
:func:`load_build_config`.

Examples
--------
>>> from pathlib import Path
>>> from snippet_pages.config import load_build_config
>>> config = load_build_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> config.paths.output  # doctest: +SKIP
PosixPath('/srv/site/docs/index.html')
"""

from .loader import load_build_config
from .models import (
    BuildConfig,
    GuardConfig,
    HighlightConfig,
    PathsConfig,
    SiteConfigError,
)

__all__ = [
    "BuildConfig",
    "GuardConfig",
    "HighlightConfig",
    "PathsConfig",
    "SiteConfigError",
    "load_build_config",
]
