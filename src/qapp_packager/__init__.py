"""Top-level API for building Quantii application manifests."""

from __future__ import annotations

from pathlib import Path

from qapp_packager.schemas import AppManifest, ApplicationRecord

__version__ = "0.1.0"


def render_app_toml(record: ApplicationRecord, *, split_authors: bool = False) -> str:
    """Render an application record as ``app.toml`` text.

    Parameters
    ----------
    record : ApplicationRecord
        Validated application metadata.
    split_authors : bool, default=False
        Render each author as a separate array item.

    Returns
    -------
    str
        Manifest text.
    """
    from .render import render_app_toml as _impl

    return _impl(record, split_authors=split_authors)


def validate_version(version: str) -> tuple[int, int, int]:
    """Validate a ``major.minor.patch`` version string.

    Returns
    -------
    tuple[int, int, int]
        Parsed major, minor and patch components.
    """
    from .validate import validate_version as _impl

    return _impl(version)


def load_manifest(path: Path) -> AppManifest:
    """Read and validate the ``[app]`` table of a manifest file.

    Parameters
    ----------
    path : Path
        Manifest location.
    """
    from .application.use_cases import load_manifest as _impl

    return _impl(path)


__all__ = [
    "AppManifest",
    "ApplicationRecord",
    "render_app_toml",
    "validate_version",
    "load_manifest",
]
