"""Typed option objects shared across packager use-cases."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_MANIFEST_NAME = "app.toml"


@dataclass(frozen=True)
class OpenOptions:
    """How a manifest file is opened for writing.

    Exactly one of ``create_new`` (fail if the file exists) and ``truncate``
    (replace existing content) is set. Build one per write with
    :meth:`create_exclusive` or :meth:`overwrite`.
    """

    create_new: bool = True
    truncate: bool = False

    def __post_init__(self) -> None:
        if self.create_new == self.truncate:
            raise ValueError("OpenOptions needs exactly one of create_new or truncate.")

    @classmethod
    def create_exclusive(cls) -> OpenOptions:
        return cls(create_new=True, truncate=False)

    @classmethod
    def overwrite(cls) -> OpenOptions:
        return cls(create_new=False, truncate=True)

    @property
    def mode(self) -> str:
        """File mode string for :func:`open`."""
        return "x" if self.create_new else "w"


@dataclass(frozen=True)
class RenderOptions:
    """Manifest rendering configuration."""

    split_authors: bool = False


@dataclass(frozen=True)
class ManifestOptions:
    """Options for one interactive manifest run."""

    output_path: Path = Path(DEFAULT_MANIFEST_NAME)
    render: RenderOptions = field(default_factory=RenderOptions)
