"""Domain datatypes for size-aggregated file trees."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """One scanned file or directory with its aggregate size.

    ``children`` are ordered by descending aggregate size and ``size`` is
    ``self_size`` plus every child's ``size``. Both are fixed by ``build`` and
    never recomputed.
    """

    name: str
    path: Path
    is_dir: bool
    self_size: int
    size: int
    children: tuple[Entry, ...] = ()

    @classmethod
    def build(
        cls,
        path: Path,
        name: str,
        is_dir: bool,
        self_size: int,
        children: Iterable[Entry] = (),
    ) -> Entry:
        """Sort ``children`` and freeze the aggregate size."""
        # sorted() is stable with reverse=True, so ties keep listing order.
        ordered = tuple(sorted(children, key=lambda child: child.size, reverse=True))
        return cls(
            name=name,
            path=path,
            is_dir=is_dir,
            self_size=self_size,
            size=self_size + sum(child.size for child in ordered),
            children=ordered,
        )

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")


@dataclass(frozen=True)
class Root:
    """User-given top-level path wrapping its scanned entry.

    A root is displayed by its full path and is never hidden, even when that
    path is ``.`` or starts with a dot.
    """

    name: str
    entry: Entry

    @property
    def path(self) -> Path:
        return self.entry.path

    @property
    def is_dir(self) -> bool:
        return self.entry.is_dir

    @property
    def self_size(self) -> int:
        return self.entry.self_size

    @property
    def size(self) -> int:
        return self.entry.size

    @property
    def children(self) -> tuple[Entry, ...]:
        return self.entry.children

    @property
    def is_hidden(self) -> bool:
        return False


DisplayNode = Entry | Root


__all__ = [
    "DisplayNode",
    "Entry",
    "Root",
]
