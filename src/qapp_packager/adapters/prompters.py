"""Terminal prompter built on Typer's console helpers."""

from __future__ import annotations

import sys
from typing import TextIO

import typer

from qapp_packager.errors import InputReadError


class TerminalPrompter:
    """Ask the operator for one line at a time on stdin/stdout.

    Parameters
    ----------
    stdin : TextIO | None, default=None
        Stream to read from. Defaults to ``sys.stdin`` looked up on every
        read, so runners that swap the stream (``CliRunner``) are honored.
    """

    def __init__(self, stdin: TextIO | None = None) -> None:
        self._stdin = stdin

    def ask(self, label: str) -> str:
        # typer.echo flushes stdout after writing
        typer.echo(label, nl=False)
        stream = self._stdin if self._stdin is not None else sys.stdin
        try:
            line = stream.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(f"Failed to read line: {exc}") from exc
        if not line:
            raise InputReadError("Failed to read line: end of input")
        return line.strip()

    def say(self, message: str) -> None:
        typer.echo(message)
