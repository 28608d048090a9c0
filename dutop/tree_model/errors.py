"""Error taxonomy for filesystem scans.

Low-level ``OSError`` failures are classified into a small set of kinds with
human-readable descriptions used when a root cannot be scanned.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorKind(Enum):
    """Classified scan failure with its user-facing description."""

    NOT_FOUND = "File not found"
    PERMISSION_DENIED = "Permission denied"
    TIMED_OUT = "Timed out"
    INTERRUPTED = "Interrupted"
    UNRECOGNIZED = "Unrecognized error"
    NOT_FILE_OR_DIRECTORY = "Not a file or directory"

    @property
    def description(self) -> str:
        return self.value


def classify_os_error(exc: OSError) -> ErrorKind:
    """Map an ``OSError`` to an ``ErrorKind``, falling back to ``UNRECOGNIZED``."""
    if isinstance(exc, FileNotFoundError):
        return ErrorKind.NOT_FOUND
    if isinstance(exc, PermissionError):
        return ErrorKind.PERMISSION_DENIED
    if isinstance(exc, TimeoutError):
        return ErrorKind.TIMED_OUT
    if isinstance(exc, InterruptedError):
        return ErrorKind.INTERRUPTED
    return ErrorKind.UNRECOGNIZED


class ScanError(Exception):
    """Raised when a path cannot be turned into an entry."""

    def __init__(self, kind: ErrorKind, path: Path) -> None:
        super().__init__(kind.description)
        self.kind = kind
        self.path = path

    @classmethod
    def from_os_error(cls, exc: OSError, path: Path) -> ScanError:
        return cls(classify_os_error(exc), path)

    def __str__(self) -> str:
        return self.kind.description


__all__ = [
    "ErrorKind",
    "ScanError",
    "classify_os_error",
]
