"""Exception hierarchy for the application packager."""

from __future__ import annotations


class PackagerError(Exception):
    """Base class for all packager failures.

    Attributes
    ----------
    exit_code : int
        Process exit code used by the CLI when the error is fatal.
    """

    exit_code: int = 1


class InputReadError(PackagerError):
    """Raised when a line cannot be read from the operator."""

    exit_code = 2


class FieldValidationError(PackagerError, ValueError):
    """Raised when a collected field fails validation."""

    exit_code = 3


class MenuSelectionError(PackagerError):
    """Raised when a conflict-menu selection is not a number."""

    exit_code = 4


class ManifestWriteError(PackagerError):
    """Raised when the manifest cannot be opened or written."""

    exit_code = 5


class ManifestLoadError(PackagerError):
    """Raised when an existing manifest cannot be read or parsed."""

    exit_code = 6
