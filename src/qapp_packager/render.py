"""Render application records into ``app.toml`` text."""

from __future__ import annotations

from qapp_packager.schemas import ApplicationRecord
from qapp_packager.types import TextList

MANIFEST_TABLE = "app"
AUTHOR_SEPARATOR = ", "
OTHER_METADATA_SEPARATOR = ","

_BASIC_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def escape_basic_string(value: str) -> str:
    """Escape ``value`` for use inside a TOML basic (double-quoted) string."""
    out: list[str] = []
    for char in value:
        escaped = _BASIC_ESCAPES.get(char)
        if escaped is not None:
            out.append(escaped)
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            out.append(f"\\u{ord(char):04X}")
        else:
            out.append(char)
    return "".join(out)


def _quoted(value: str) -> str:
    return f'"{escape_basic_string(value)}"'


def render_authors(authors: TextList, split_authors: bool = False) -> str:
    """Render the ``author`` array.

    By default every author is joined into one list item, so ``Alice`` and
    ``Bob`` become ``["Alice, Bob"]``. With ``split_authors`` each author is
    its own item: ``["Alice", "Bob"]``.
    """
    if split_authors:
        items = ", ".join(_quoted(author) for author in authors)
        return f"[{items}]"
    return f"[{_quoted(AUTHOR_SEPARATOR.join(authors))}]"


def render_other_metadata(other_metadata: TextList) -> str:
    """Render ``other_metadata`` as a quoted bracket literal: ``"[a,b,c]"``."""
    return _quoted(f"[{OTHER_METADATA_SEPARATOR.join(other_metadata)}]")


def render_app_toml(record: ApplicationRecord, *, split_authors: bool = False) -> str:
    """Render ``record`` as the ``[app]`` manifest block.

    Parameters
    ----------
    record : ApplicationRecord
        Validated metadata.
    split_authors : bool, default=False
        Render each author as a separate array item.

    Returns
    -------
    str
        Manifest text ending with a single newline.
    """
    lines = [
        f"[{MANIFEST_TABLE}]",
        f"name = {_quoted(record.name)}",
        f"repo = {_quoted(str(record.repo))}",
        f"version = {_quoted(record.version)}",
        f"author = {render_authors(record.authors, split_authors=split_authors)}",
        f"description = {_quoted(record.description)}",
        f"icon = {_quoted(record.icon)}",
        f"other_metadata = {render_other_metadata(record.other_metadata)}",
    ]
    return "\n".join(lines) + "\n"
