"""Filesystem scanning and size-aggregated tree construction.

Directories are read eagerly: each listing is collected in full before any
child is examined, and every directory is finished (sorted and summed) before
its parent. Failures below the root are dropped from the tree; only the root
itself reports a ``ScanError``.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ErrorKind, ScanError
from .names import full_name, short_name
from .types import Entry, Root

logger = logging.getLogger(__name__)


@dataclass
class _PendingDirectory:
    """Directory whose children are still being scanned."""

    path: Path
    self_size: int
    child_paths: Iterator[Path]
    children: list[Entry] = field(default_factory=list)

    def finish(self) -> Entry:
        return Entry.build(
            path=self.path,
            name=short_name(self.path, True),
            is_dir=True,
            self_size=self.self_size,
            children=self.children,
        )


def read_metadata(path: Path) -> os.stat_result:
    """Return ``os.stat`` for ``path``, raising ``ScanError`` on failure."""
    try:
        return os.stat(path)
    except OSError as exc:
        raise ScanError.from_os_error(exc, path) from exc


def list_directory(directory: Path) -> list[Path]:
    """Return child paths of ``directory`` in enumeration order.

    An unlistable directory yields ``[]``. An error part-way through the
    listing keeps the children enumerated before it.
    """
    child_paths: list[Path] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                child_paths.append(Path(child.path))
    except OSError as exc:
        logger.debug("Cannot list %s: %s", directory, exc)
    return child_paths


def _file_entry(path: Path, metadata: os.stat_result) -> Entry:
    if not stat.S_ISREG(metadata.st_mode):
        raise ScanError(ErrorKind.NOT_FILE_OR_DIRECTORY, path)
    return Entry.build(
        path=path,
        name=short_name(path, False),
        is_dir=False,
        self_size=int(metadata.st_size),
    )


def _open_directory(path: Path, metadata: os.stat_result) -> _PendingDirectory:
    return _PendingDirectory(
        path=path,
        self_size=int(metadata.st_size),
        child_paths=iter(list_directory(path)),
    )


def scan(path: Path | str) -> Entry:
    """Scan ``path`` and everything below it into an ``Entry`` tree.

    Raises ``ScanError`` when ``path`` itself cannot be read or is neither a
    regular file nor a directory. Children that fail the same checks are left
    out of the tree.
    """
    path = Path(path)
    metadata = read_metadata(path)
    if not stat.S_ISDIR(metadata.st_mode):
        return _file_entry(path, metadata)

    # Explicit stack instead of recursion so deep trees stay within the
    # interpreter's recursion limit.
    stack = [_open_directory(path, metadata)]
    while True:
        current = stack[-1]
        child_path = next(current.child_paths, None)
        if child_path is None:
            finished = stack.pop().finish()
            if not stack:
                return finished
            stack[-1].children.append(finished)
            continue

        try:
            child_metadata = read_metadata(child_path)
            if stat.S_ISDIR(child_metadata.st_mode):
                stack.append(_open_directory(child_path, child_metadata))
            else:
                current.children.append(_file_entry(child_path, child_metadata))
        except ScanError as exc:
            logger.debug("Skipping %s: %s", child_path, exc)


def scan_root(path: Path | str) -> Root:
    """Scan a user-given root and name it by its full path."""
    entry = scan(path)
    return Root(name=full_name(path, entry.is_dir), entry=entry)


__all__ = [
    "list_directory",
    "read_metadata",
    "scan",
    "scan_root",
]
