"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from qapp_packager.schemas import ApplicationRecord
from qapp_packager.types import WriteStatus


@dataclass(frozen=True)
class WriteOutcome:
    """Where (and whether) manifest text ended up."""

    status: WriteStatus
    path: Path | None = None

    @property
    def written(self) -> bool:
        return self.path is not None


@dataclass(frozen=True)
class ManifestResult:
    """Structured outcome of an interactive manifest run."""

    record: ApplicationRecord
    text: str
    outcome: WriteOutcome
