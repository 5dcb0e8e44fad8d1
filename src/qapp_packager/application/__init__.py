"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from qapp_packager.application.options import (
    ManifestOptions,
    OpenOptions,
    RenderOptions,
)
from qapp_packager.application.ports import ManifestWriter, Prompter
from qapp_packager.application.results import ManifestResult, WriteOutcome
from qapp_packager.schemas import AppManifest, ApplicationRecord


def build_manifest_options(
    *,
    output_path: Path | None = None,
    split_authors: bool = False,
) -> ManifestOptions:
    """Build typed manifest options via lazy use-case import."""
    from qapp_packager.application.use_cases import build_manifest_options as _impl

    return _impl(output_path=output_path, split_authors=split_authors)


def collect_record(prompter: Prompter) -> ApplicationRecord:
    """Collect an application record via lazy use-case import."""
    from qapp_packager.application.use_cases import collect_record as _impl

    return _impl(prompter)


def write_manifest(
    *,
    text: str,
    target: Path,
    prompter: Prompter,
    writer: ManifestWriter | None = None,
) -> WriteOutcome:
    """Write manifest text via lazy use-case import."""
    from qapp_packager.application.use_cases import write_manifest as _impl

    return _impl(text=text, target=target, prompter=prompter, writer=writer)


def create_manifest(
    *,
    prompter: Prompter,
    options: ManifestOptions,
    writer: ManifestWriter | None = None,
) -> ManifestResult:
    """Run the interactive manifest flow via lazy use-case import."""
    from qapp_packager.application.use_cases import create_manifest as _impl

    return _impl(prompter=prompter, options=options, writer=writer)


def load_manifest(path: Path) -> AppManifest:
    """Load and validate an existing manifest via lazy use-case import."""
    from qapp_packager.application.use_cases import load_manifest as _impl

    return _impl(path)


__all__ = [
    "ManifestOptions",
    "OpenOptions",
    "RenderOptions",
    "ManifestResult",
    "WriteOutcome",
    "build_manifest_options",
    "collect_record",
    "write_manifest",
    "create_manifest",
    "load_manifest",
]
