"""Compile the Sass flavour of the site stylesheet into compressed CSS.

Failures here never stop the page build: the error is reported and the caller
carries on with the HTML pipeline.
"""

from __future__ import annotations

import typing as typ

import sass

from . import console

if typ.TYPE_CHECKING:
    from pathlib import Path


def compile_stylesheet(source: Path) -> str:
    """Return compressed CSS compiled from the Sass file at ``source``.

    Raises
    ------
    FileNotFoundError
        If ``source`` does not exist.
    sass.CompileError
        If libsass rejects the stylesheet.
    """
    if not source.is_file():
        msg = f"Stylesheet source '{source}' not found."
        raise FileNotFoundError(msg)
    return sass.compile(filename=str(source), output_style="compressed")


def build_stylesheet(source: Path, output: Path) -> Path | None:
    """Compile ``source`` and write the CSS to ``output``.

    Returns
    -------
    Path or None
        ``output`` when the stylesheet was written, ``None`` when compiling or
        writing failed (the failure is reported on the console).
    """
    label = output.name
    try:
        css = compile_stylesheet(source)
    except (sass.CompileError, OSError) as exc:
        console.error(f"{label} file generation", exc)
        return None
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(css, encoding="utf-8")
    except OSError as exc:
        console.error(f"{label} file generation", exc)
        return None
    console.success(f"{label} file generated!")
    return output


__all__ = ["build_stylesheet", "compile_stylesheet"]
