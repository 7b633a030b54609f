"""Coloured status lines printed while the site is being built."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False, soft_wrap=True)


def _display_path(path: Path) -> str:
    """Show ``path`` relative to the working directory when it lives below it."""
    cwd = Path.cwd()
    return str(path.relative_to(cwd)) if path.is_relative_to(cwd) else str(path)


def success(message: str) -> None:
    """Print a green ``SUCCESS!`` line."""
    console.print(f"[green]SUCCESS![/green] {escape(message)}", markup=True)


def error(stage: str, exc: BaseException | str) -> None:
    """Print a red ``ERROR!`` line naming the failed ``stage``."""
    console.print(
        f"[red]ERROR![/red] During {escape(stage)}: {escape(str(exc))}", markup=True
    )


def nobuild(message: str) -> None:
    """Print a green ``NOBUILD`` line for planned early exits."""
    console.print(f"[green]NOBUILD[/green] {escape(message)}", markup=True)


def note(message: str) -> None:
    """Print a yellow informational line."""
    console.print(f"[yellow]NOTE[/yellow] {escape(message)}", markup=True)


def wrote(path: Path) -> None:
    """Report an artifact written to disk."""
    console.print(f"wrote {_display_path(path)}", markup=False)


def timing(label: str, seconds: float) -> None:
    """Print the wall-clock time taken by ``label``."""
    console.print(f"{label}: {seconds:.3f}s", markup=False)


__all__ = ["console", "error", "nobuild", "note", "success", "timing", "wrote"]
