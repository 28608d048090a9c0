"""Text renderers for scanned roots.

Two modes share one traversal policy (``Options``):
- tree: indented listing bounded by depth and per-directory limit
- files: global ranking of the largest files
"""

from __future__ import annotations

import sys
from typing import TextIO

from ..options import Mode, Options
from ..tree_model import Root
from .files import collect_files, print_files
from .sizes import format_size
from .tree import format_node_line, iter_tree, print_tree


def render_root(root: Root, options: Options, out: TextIO | None = None) -> None:
    """Render ``root`` in the mode selected by ``options``."""
    out = out if out is not None else sys.stdout
    if options.mode is Mode.FILES:
        print_files(root, options, out)
    else:
        print_tree(root, options, out)


__all__ = [
    "collect_files",
    "format_node_line",
    "format_size",
    "iter_tree",
    "print_files",
    "print_tree",
    "render_root",
]
