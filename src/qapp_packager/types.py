"""Shared type aliases for packager modules."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

type FieldName = Literal[
    "name",
    "repo",
    "version",
    "authors",
    "description",
    "icon",
    "other_metadata",
]
type TextList = Sequence[str]
type WriteStatus = Literal["written", "overwritten", "aborted", "written_as_new_file"]
