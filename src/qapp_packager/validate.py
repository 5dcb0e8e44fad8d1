"""Field validators for collected application metadata."""

from __future__ import annotations

import re

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from qapp_packager.errors import FieldValidationError

VERSION_FORMAT_MESSAGE = "Version must be in the format of major.minor.patch"
VERSION_COMPONENTS = ("major", "minor", "patch")
U32_MAX = 2**32 - 1

_UINT_PATTERN = re.compile(r"\+?[0-9]+")
_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def validate_repo_url(raw: str) -> AnyUrl:
    """Parse repository link text as an absolute URL.

    Parameters
    ----------
    raw : str
        Operator-supplied link, already trimmed.

    Returns
    -------
    AnyUrl
        Parsed URL. ``str()`` of the result is its normalized form.

    Raises
    ------
    FieldValidationError
        If the text is not a well-formed absolute URL.
    """
    try:
        return _URL_ADAPTER.validate_python(raw)
    except PydanticValidationError as exc:
        errors = exc.errors()
        reason = errors[0]["msg"] if errors else "invalid URL"
        raise FieldValidationError(f"Failed to parse link '{raw}': {reason}") from exc


def _parse_component(segment: str) -> int | None:
    if not _UINT_PATTERN.fullmatch(segment):
        return None
    value = int(segment)
    if value > U32_MAX:
        return None
    return value


def validate_version(version: str) -> tuple[int, int, int]:
    """Check that ``version`` starts with three unsigned integer components.

    Segments after the third are ignored and the text itself is never
    rewritten; the parsed triple is returned for callers that need it.

    Raises
    ------
    FieldValidationError
        If fewer than three segments exist or one of the first three is not
        an unsigned 32-bit integer.
    """
    segments = version.split(".")
    if len(segments) < len(VERSION_COMPONENTS):
        missing = VERSION_COMPONENTS[len(segments)]
        raise FieldValidationError(
            f"{VERSION_FORMAT_MESSAGE} (missing {missing} in '{version}')"
        )

    parsed: list[int] = []
    for component, segment in zip(VERSION_COMPONENTS, segments):
        value = _parse_component(segment)
        if value is None:
            raise FieldValidationError(
                f"{VERSION_FORMAT_MESSAGE} ({component} '{segment}' is not a "
                "non-negative integer)"
            )
        parsed.append(value)
    major, minor, patch = parsed
    return major, minor, patch


def split_authors(raw: str) -> tuple[str, ...]:
    """Split comma-separated authors, trimming each entry."""
    return tuple(part.strip() for part in raw.split(","))


def split_other_metadata(raw: str) -> tuple[str, ...]:
    """Split comma-separated metadata; entries keep their surrounding spaces."""
    return tuple(raw.split(","))
