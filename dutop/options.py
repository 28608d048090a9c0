"""Traversal options shared by the command line and the renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

UNLIMITED_TOKEN = "all"


@dataclass(frozen=True)
class Bound:
    """Depth or fan-out cap where ``None`` and ``0`` both mean unlimited."""

    value: int | None = None

    @classmethod
    def unlimited(cls) -> Bound:
        return cls(None)

    @classmethod
    def parse(cls, text: str) -> Bound:
        """Parse ``"all"`` or a non-negative integer.

        Raises ``ValueError`` for anything else.
        """
        stripped = text.strip()
        if stripped.lower() == UNLIMITED_TOKEN:
            return cls.unlimited()
        parsed = int(stripped)
        if parsed < 0:
            raise ValueError(f"negative value: {parsed}")
        return cls(parsed)

    @property
    def is_unlimited(self) -> bool:
        return not self.value

    def accepts(self, count: int) -> bool:
        """Return whether ``count`` (a level or a shown-entry tally) is within bounds."""
        if self.is_unlimited:
            return True
        return count < self.value


class Mode(Enum):
    TREE = "tree"
    FILES = "files"


@dataclass(frozen=True)
class Options:
    """Validated settings for one invocation."""

    roots: tuple[str, ...] = (".",)
    depth: Bound = field(default_factory=lambda: Bound(1))
    limit: Bound = field(default_factory=lambda: Bound(1))
    show_hidden: bool = False
    mode: Mode = Mode.TREE


__all__ = [
    "Bound",
    "Mode",
    "Options",
]
