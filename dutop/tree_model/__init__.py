"""Domain model for size-aggregated filesystem trees.

This package contains non-rendering tree primitives:
- entry/root datatypes with frozen aggregate sizes and sorted children
- the filesystem scanner that builds them
- display-name helpers and the scan error taxonomy
"""

from __future__ import annotations

from .errors import ErrorKind, ScanError, classify_os_error
from .names import full_name, short_name
from .scanner import list_directory, read_metadata, scan, scan_root
from .types import DisplayNode, Entry, Root

__all__ = [
    "DisplayNode",
    "Entry",
    "Root",
    "ErrorKind",
    "ScanError",
    "classify_os_error",
    "full_name",
    "short_name",
    "list_directory",
    "read_metadata",
    "scan",
    "scan_root",
]
