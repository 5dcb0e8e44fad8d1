"""Filesystem access for manifest files."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from qapp_packager.application.options import OpenOptions
from qapp_packager.errors import ManifestLoadError, ManifestWriteError

logger = logging.getLogger(__name__)


class FileManifestWriter:
    """Write manifest text to the local filesystem."""

    encoding = "utf-8"

    def write(self, path: Path, text: str, options: OpenOptions) -> Path:
        """Open ``path`` according to ``options`` and write ``text``.

        Parameters
        ----------
        path : Path
            Destination file.
        text : str
            Rendered manifest.
        options : OpenOptions
            Exclusive creation or truncation.

        Returns
        -------
        Path
            The path that was written.

        Raises
        ------
        ManifestWriteError
            If the file exists under exclusive creation, or any other OS
            error occurs while opening or writing.
        """
        logger.debug("opening %s with mode %r", path, options.mode)
        try:
            with path.open(options.mode, encoding=self.encoding, newline="\n") as handle:
                handle.write(text)
        except FileExistsError as exc:
            raise ManifestWriteError(
                f"Failed to open file '{path}': file already exists"
            ) from exc
        except OSError as exc:
            raise ManifestWriteError(f"Failed to write file '{path}': {exc}") from exc
        logger.info("wrote %d bytes to %s", len(text.encode(self.encoding)), path)
        return path


def read_manifest_table(path: Path, table: str = "app") -> dict[str, Any]:
    """Read ``path`` as TOML and return its ``[table]`` section.

    Raises
    ------
    ManifestLoadError
        If the file cannot be read, is not valid TOML, or lacks the table.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestLoadError(f"Failed to read manifest '{path}': {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ManifestLoadError(f"Manifest '{path}' is not valid TOML: {exc}") from exc

    section = data.get(table)
    if not isinstance(section, dict):
        raise ManifestLoadError(f"Manifest '{path}' has no [{table}] table.")
    return section
