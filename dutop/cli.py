"""Command-line front door for dutop.

Parses CLI options into an ``Options`` value, then scans and renders each
root in order. A root that cannot be scanned is reported and skipped.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from . import __version__, config
from .options import Bound, Mode, Options
from .render import render_root
from .tree_model import ScanError, scan_root

DEFAULT_LIMIT = Bound(1)
DEFAULT_DEPTH = Bound(1)
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def _bound(value: str) -> Bound:
    """argparse type for ``N`` or ``all`` values."""
    try:
        return Bound.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"invalid value: {value!r} (expected a non-negative integer or 'all')"
        ) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dutop",
        description="Prints the largest entries in a directory.",
    )
    parser.add_argument(
        "roots",
        metavar="DIR",
        nargs="*",
        default=["."],
        help="Directories to look in. Defaults to the current directory.",
    )
    parser.add_argument(
        "-n",
        "--limit",
        type=_bound,
        default=None,
        help="Entries to show per directory, or files in total with --files. 0 or 'all' for no limit (default: 1).",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=_bound,
        default=None,
        help="How deep to descend into directories. 0 or 'all' for no limit (default: 1, or all with -r).",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="Descend without a depth limit unless --depth is given.",
    )
    parser.add_argument(
        "-a",
        "--all",
        dest="show_hidden",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show hidden entries (--no-all hides them despite config). They are always counted in sizes.",
    )
    parser.add_argument(
        "--files",
        action="store_true",
        help="Rank the largest files anywhere below each root instead of printing a tree.",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Remember the given --limit, --depth and --all/--no-all for future runs.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped entries to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def options_from_args(args: argparse.Namespace) -> Options:
    """Resolve parsed arguments against persisted defaults.

    Explicit flags win over config, and ``--recursive`` only changes the depth
    when ``--depth`` is absent.
    """
    limit = args.limit
    if limit is None:
        limit = config.load_default_limit() or DEFAULT_LIMIT

    depth = args.depth
    if depth is None:
        depth = Bound.unlimited() if args.recursive else (config.load_default_depth() or DEFAULT_DEPTH)

    return Options(
        roots=tuple(args.roots),
        depth=depth,
        limit=limit,
        show_hidden=config.load_show_hidden() if args.show_hidden is None else args.show_hidden,
        mode=Mode.FILES if args.files else Mode.TREE,
    )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def run(options: Options) -> None:
    """Scan and render every root, reporting per-root failures on stdout."""
    for root_path in options.roots:
        try:
            root = scan_root(root_path)
        except ScanError as exc:
            sys.stdout.write(f"{root_path}: {exc}\n")
            continue
        render_root(root, options, sys.stdout)


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and print a size summary for each root.

    Invalid ``--limit``/``--depth`` values exit with status 2 before any path
    is touched.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.save_defaults:
        config.save_defaults(
            limit=args.limit,
            depth=args.depth,
            show_hidden=args.show_hidden,
        )
        logger.debug("Saved defaults to %s", config.CONFIG_PATH)

    run(options_from_args(args))


if __name__ == "__main__":
    main()
