r"""Load markdown snippets, static page parts, and the tag database.

Snippets live as ``<name>.md`` files in a flat directory. Tags come from a
tag database that maps each snippet name to an ordered list of tags; the
first tag is the snippet's category and the rest are flags such as
``advanced``.

Three tag database formats are accepted, picked by file suffix:

* plain text (the classic ``tag_database`` file), one ``name:tag,tag`` per line;
* ``.yaml``/``.yml`` mapping names to lists (or comma-separated strings);
* ``.json`` mapping names to lists.

Example
-------
>>> from snippet_pages.snippets import parse_tag_lines
>>> parse_tag_lines("head:array\nzip:array,advanced\n")
{'head': ['array'], 'zip': ['array', 'advanced']}
"""

from __future__ import annotations

import typing as typ

import msgspec
import msgspec.json as msgspec_json
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ._constants import STATIC_PART_END, STATIC_PART_START
from .errors import SnippetLoadError, StaticPartError, TagDatabaseError

if typ.TYPE_CHECKING:
    from pathlib import Path

TagMap = dict[str, list[str]]


def capitalize(text: str, *, lower_rest: bool = True) -> str:
    """Upper-case the first character, optionally lower-casing the rest.

    >>> capitalize("uNCATEGORIZED")
    'Uncategorized'
    >>> capitalize("fooBar", lower_rest=False)
    'FooBar'
    """
    if not text:
        return text
    rest = text[1:].lower() if lower_rest else text[1:]
    return text[0].upper() + rest


def read_snippets(directory: Path) -> dict[str, str]:
    """Read every regular file directly inside ``directory``.

    Parameters
    ----------
    directory : Path
        Folder holding the markdown snippets (not searched recursively).

    Returns
    -------
    dict[str, str]
        Mapping of filename to file contents, ordered case-insensitively by
        filename.

    Raises
    ------
    SnippetLoadError
        If the directory or one of its files cannot be read.
    """
    try:
        entries = sorted(
            (entry for entry in directory.iterdir() if entry.is_file()),
            key=lambda entry: entry.name.lower(),
        )
        return {entry.name: entry.read_text(encoding="utf-8") for entry in entries}
    except (OSError, UnicodeDecodeError) as exc:
        raise SnippetLoadError(str(exc)) from exc


def read_static_parts(directory: Path) -> tuple[str, str]:
    """Return the header and footer fragments stored in ``directory``."""
    try:
        start = (directory / STATIC_PART_START).read_text(encoding="utf-8")
        end = (directory / STATIC_PART_END).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StaticPartError(str(exc)) from exc
    return start, end


def parse_tag_lines(text: str) -> TagMap:
    """Parse ``name:tag1,tag2`` lines into a tag map.

    Blank lines are skipped. Only the first ``:`` separates the name from its
    tags, and a line without tags yields an empty list.
    """
    tags: TagMap = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        name, _sep, tag_text = line.partition(":")
        tag_text = tag_text.split(":", 1)[0]
        tags[name.strip()] = (
            [tag.strip() for tag in tag_text.split(",")] if tag_text else []
        )
    return tags


def _normalize_tag_mapping(loaded: object, source: Path) -> TagMap:
    """Validate a decoded YAML/JSON document and coerce its values to tag lists."""
    if not isinstance(loaded, dict):
        msg = f"Tag database '{source}' must contain a mapping of names to tags."
        raise TagDatabaseError(msg)
    tags: TagMap = {}
    for name, value in loaded.items():
        match value:
            case None:
                tags[str(name)] = []
            case str() as text:
                tags[str(name)] = [tag.strip() for tag in text.split(",")]
            case list():
                tags[str(name)] = [
                    "" if tag is None else str(tag).strip() for tag in value
                ]
            case _:
                msg = f"Tags for '{name}' in '{source}' must be a list or string."
                raise TagDatabaseError(msg)
    return tags


def read_tags(path: Path) -> TagMap:
    """Load the tag database at ``path`` in file order.

    Raises
    ------
    TagDatabaseError
        If the file is missing, unreadable, or not a mapping of tag lists.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TagDatabaseError(str(exc)) from exc

    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        loader = YAML(typ="safe")
        loader.version = (1, 2)
        try:
            loaded = loader.load(text) or {}
        except YAMLError as exc:
            raise TagDatabaseError(str(exc)) from exc
        return _normalize_tag_mapping(loaded, path)
    if suffix == ".json":
        try:
            loaded = msgspec_json.decode(text.encode("utf-8"))
        except msgspec.DecodeError as exc:
            raise TagDatabaseError(str(exc)) from exc
        return _normalize_tag_mapping(loaded, path)
    return parse_tag_lines(text)


__all__ = [
    "TagMap",
    "capitalize",
    "parse_tag_lines",
    "read_snippets",
    "read_static_parts",
    "read_tags",
]
