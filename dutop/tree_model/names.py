"""Display-name helpers for scanned paths."""

from __future__ import annotations

import os
from pathlib import Path

_SEPARATORS = "/" + (os.sep if os.sep != "/" else "") + (os.altsep or "")


def _with_directory_suffix(raw: str, is_dir: bool) -> str:
    stripped = raw.rstrip(_SEPARATORS)
    if not stripped:
        # The filesystem root is all separators.
        return "/" if raw else raw
    return f"{stripped}/" if is_dir else stripped


def short_name(path: Path | str, is_dir: bool) -> str:
    """Return the basename of ``path``, ``/``-suffixed for directories.

    ``"."`` keeps its name (``"./"``) rather than collapsing to an empty string.
    """
    raw = os.fspath(path)
    normalized = os.path.normpath(raw) if raw else raw
    base = os.path.basename(normalized.rstrip(_SEPARATORS)) or normalized
    return _with_directory_suffix(base, is_dir)


def full_name(path: Path | str, is_dir: bool) -> str:
    """Return the entire given path, ``/``-suffixed for directories."""
    return _with_directory_suffix(os.fspath(path), is_dir)


__all__ = [
    "full_name",
    "short_name",
]
