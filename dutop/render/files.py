"""Flat ranking of the largest files under a root.

Every file anywhere below the root is considered. The depth setting does not
apply in this mode.
"""

from __future__ import annotations

import os
import sys
from typing import TextIO

from ..options import Options
from ..tree_model import DisplayNode, Entry
from .sizes import format_size
from .tree import INDENT, format_node_line


def collect_files(root: DisplayNode, show_hidden: bool) -> list[Entry]:
    """Return non-directory leaves under ``root`` ranked by descending size.

    Hidden-ness is decided by each file's own name; files inside hidden
    directories are kept. Equal sizes keep depth-first listing order.
    """
    files: list[Entry] = []
    stack: list[Entry] = list(reversed(root.children))
    while stack:
        node = stack.pop()
        if node.is_dir:
            stack.extend(reversed(node.children))
            continue
        if not show_hidden and node.is_hidden:
            continue
        files.append(node)
    files.sort(key=lambda entry: entry.size, reverse=True)
    return files


def _relative_label(root: DisplayNode, entry: Entry) -> str:
    try:
        return os.path.relpath(entry.path, root.path)
    except ValueError:
        return entry.name


def print_files(root: DisplayNode, options: Options, out: TextIO | None = None) -> None:
    """Write the root summary followed by up to ``options.limit`` largest files."""
    out = out if out is not None else sys.stdout
    out.write(format_node_line(root) + "\n")
    if not root.is_dir:
        return

    shown = 0
    for entry in collect_files(root, options.show_hidden):
        if not options.limit.accepts(shown):
            break
        out.write(f"{INDENT}{_relative_label(root, entry)} {format_size(entry.size)}\n")
        shown += 1


__all__ = [
    "collect_files",
    "print_files",
]
