"""Shared fixtures describing a small snippet site on disk."""

from __future__ import annotations

from pathlib import Path

import pytest

from snippet_pages.config import BuildConfig, PathsConfig

from .sample_site import END_PART, SNIPPETS, START_PART, TAG_DATABASE


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Write snippets, static parts, a tag database, and a stylesheet."""
    snippets_dir = tmp_path / "snippets"
    snippets_dir.mkdir()
    for name, body in SNIPPETS.items():
        (snippets_dir / name).write_text(body, encoding="utf-8")
    (snippets_dir / "drafts").mkdir()
    (snippets_dir / "drafts" / "draft.md").write_text("### draft\n", encoding="utf-8")

    static_dir = tmp_path / "static-parts"
    static_dir.mkdir()
    (static_dir / "index-start.html").write_text(START_PART, encoding="utf-8")
    (static_dir / "index-end.html").write_text(END_PART, encoding="utf-8")

    (tmp_path / "tag_database").write_text(TAG_DATABASE, encoding="utf-8")

    scss_dir = tmp_path / "docs" / "mini"
    scss_dir.mkdir(parents=True)
    (scss_dir / "flavor.scss").write_text(
        "$fore-color: #111;\nbody {\n  color: $fore-color;\n}\n", encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def build_config(site_root: Path) -> BuildConfig:
    """Return a BuildConfig whose paths all point into ``site_root``."""
    return BuildConfig(
        paths=PathsConfig(
            snippets=site_root / "snippets",
            static_parts=site_root / "static-parts",
            tag_database=site_root / "tag_database",
            stylesheet_source=site_root / "docs" / "mini" / "flavor.scss",
            stylesheet_output=site_root / "docs" / "mini.css",
            output=site_root / "docs" / "index.html",
        )
    )


@pytest.fixture
def local_env() -> dict[str, str]:
    """Environment of a developer machine (no CI variables)."""
    return {"HOME": "/home/dev"}
