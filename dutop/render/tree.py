"""Indented tree rendering bounded by depth and per-directory limit."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

from ..options import Options
from ..tree_model import DisplayNode, Entry
from .sizes import format_size

INDENT = "  "


@dataclass
class _OpenDirectory:
    """Directory whose children are still being visited."""

    children: Iterator[Entry]
    level: int
    shown: int = 0


def format_node_line(node: DisplayNode, level: int = 0) -> str:
    """Return ``name size`` indented by ``level``."""
    return f"{INDENT * level}{node.name} {format_size(node.size)}"


def iter_tree(root: DisplayNode, options: Options) -> Iterator[tuple[int, DisplayNode]]:
    """Yield ``(level, node)`` pairs in depth-first display order.

    Depth decides whether a visited node's children are explored, never
    whether the node itself is shown. Hidden children are skipped without
    counting toward the limit, which restarts for every directory.
    """
    yield 0, root
    if not options.depth.accepts(0):
        return

    stack = [_OpenDirectory(children=iter(root.children), level=0)]
    while stack:
        current = stack[-1]
        if not options.limit.accepts(current.shown):
            stack.pop()
            continue
        child = next(current.children, None)
        if child is None:
            stack.pop()
            continue
        if not options.show_hidden and child.is_hidden:
            continue

        child_level = current.level + 1
        yield child_level, child
        current.shown += 1
        if options.depth.accepts(child_level) and child.children:
            stack.append(_OpenDirectory(children=iter(child.children), level=child_level))


def print_tree(root: DisplayNode, options: Options, out: TextIO | None = None) -> None:
    """Write the tree for ``root``, one line per visited node."""
    out = out if out is not None else sys.stdout
    for level, node in iter_tree(root, options):
        out.write(format_node_line(node, level) + "\n")


__all__ = [
    "format_node_line",
    "iter_tree",
    "print_tree",
]
