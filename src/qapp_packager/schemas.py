"""Pydantic schemas for application metadata."""

from __future__ import annotations

from pathlib import Path

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, field_validator

from qapp_packager.validate import validate_repo_url, validate_version


class ApplicationRecord(BaseModel):
    """Validated metadata collected for one application bundle."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    repo: AnyUrl
    version: str
    authors: tuple[str, ...] = Field(default_factory=tuple)
    description: str = ""
    icon: str = ""
    other_metadata: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("repo", mode="before")
    @classmethod
    def _validate_repo(cls, value: object) -> object:
        if isinstance(value, str):
            return validate_repo_url(value)
        return value

    @field_validator("version")
    @classmethod
    def _validate_version(cls, value: str) -> str:
        validate_version(value)
        return value

    @property
    def icon_path(self) -> Path:
        """Icon location as a path object."""
        return Path(self.icon)


class AppManifest(BaseModel):
    """Validated ``[app]`` table read back from an existing manifest."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    repo: AnyUrl
    version: str
    author: list[str]
    description: str
    icon: str
    other_metadata: str

    @field_validator("repo", mode="before")
    @classmethod
    def _validate_repo(cls, value: object) -> object:
        if isinstance(value, str):
            return validate_repo_url(value)
        return value

    @field_validator("version")
    @classmethod
    def _validate_version(cls, value: str) -> str:
        validate_version(value)
        return value

    @field_validator("other_metadata")
    @classmethod
    def _validate_other_metadata(cls, value: str) -> str:
        if not (value.startswith("[") and value.endswith("]")):
            raise ValueError("other_metadata must be a bracketed list, e.g. \"[a,b]\".")
        return value
