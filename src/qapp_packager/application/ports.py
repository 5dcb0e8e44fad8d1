"""Application ports for operator I/O and manifest storage."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from qapp_packager.application.options import OpenOptions


class Prompter(Protocol):
    """Line-oriented conversation with the operator."""

    def ask(self, label: str) -> str:
        """Show ``label``, read one line and return it trimmed.

        Raises ``InputReadError`` when no line can be read.
        """

    def say(self, message: str) -> None:
        """Show one line of output."""


class ManifestWriter(Protocol):
    """Persist rendered manifest text."""

    def write(self, path: Path, text: str, options: OpenOptions) -> Path:
        """Write ``text`` to ``path`` and return the written path."""
