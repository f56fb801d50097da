"""
duo-pin Error Classes

Every fatal condition of a pin run is represented by a subclass of
DuoPinError. Each carries a stable machine-readable code and a
human-readable message; the CLI renders exactly one diagnostic per error
and exits with a non-zero status.

Duplicates are not errors and have no class here.
"""

from typing import Any, Dict, Optional


class DuoPinError(Exception):
    """Base error for all duo-pin failures."""

    code = "DUOPIN_ERROR"

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Serialize error for machine-readable output."""
        payload: Dict[str, Any] = {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
        }
        if self.path is not None:
            payload["path"] = self.path
        return payload


class MissingManifestError(DuoPinError):
    """The resolved manifest does not exist; `duo` has not been run yet."""

    code = "MISSING_MANIFEST"


class MalformedManifestError(DuoPinError):
    """The manifest exists but is not a JSON object."""

    code = "MALFORMED_MANIFEST"


class MalformedIdentifierError(DuoPinError):
    """A manifest key does not have the `<owner>-<name>@<version>` shape."""

    code = "MALFORMED_IDENTIFIER"

    def __init__(self, message: str, key: str):
        super().__init__(message)
        self.key = key

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["key"] = self.key
        return payload


class MalformedLockfileError(DuoPinError):
    """An existing lockfile cannot be read as a JSON object."""

    code = "MALFORMED_LOCKFILE"


class WriteFailureError(DuoPinError):
    """Persisting the lockfile failed."""

    code = "WRITE_FAILURE"


__all__ = [
    "DuoPinError",
    "MissingManifestError",
    "MalformedManifestError",
    "MalformedIdentifierError",
    "MalformedLockfileError",
    "WriteFailureError",
]
