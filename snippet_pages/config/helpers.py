"""Utility helpers shared by the snippet site configuration loader."""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

from .models import SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _section(
    raw: typ.Mapping[str, typ.Any], key: str
) -> typ.Mapping[str, typ.Any]:
    """Return the mapping stored under ``key`` or an empty mapping."""
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"Configuration section '{key}' must be a mapping."
        raise SiteConfigError(msg)
    return value


def _resolve_path(base_dir: Path, value: object | None, default: Path) -> Path:
    """Resolve ``value`` relative to ``base_dir``, falling back to ``default``."""
    text = _optional_str(value)
    path = Path(text) if text else default
    if path.is_absolute():
        return path
    return base_dir / path


def _string_tuple(value: object | None, default: tuple[str, ...]) -> tuple[str, ...]:
    """Normalize a string or list of strings into a tuple of non-empty names."""
    match value:
        case None:
            return default
        case str() as text:
            return tuple(text.replace(",", " ").split())
        case list() | tuple():
            normalized: list[str] = []
            for segment in value:
                text = str(segment).strip()
                if text:
                    normalized.append(text)
            return tuple(normalized)
        case _:
            msg = f"Expected a string or list of names, got {type(value).__name__}."
            raise SiteConfigError(msg)


def _as_bool(value: object | None, *, default: bool) -> bool:
    """Interpret YAML scalars such as ``true``/``"no"`` as booleans."""
    match value:
        case None:
            return default
        case bool():
            return value
        case str() as text:
            lowered = text.strip().lower()
            if lowered in {"1", "true", "yes", "on"}:
                return True
            if lowered in {"0", "false", "no", "off"}:
                return False
    msg = f"Expected a boolean value, got {value!r}."
    raise SiteConfigError(msg)


def _validate_pattern(pattern: str) -> str:
    """Ensure ``pattern`` compiles as a regular expression."""
    try:
        re.compile(pattern)
    except re.error as exc:
        msg = f"Invalid build commit pattern {pattern!r}: {exc}"
        raise SiteConfigError(msg) from exc
    return pattern


__all__ = [
    "_as_bool",
    "_optional_str",
    "_resolve_path",
    "_section",
    "_string_tuple",
    "_validate_pattern",
]
