"""Persistent JSON config helpers.

Stores default limit, depth and hidden-entry preference.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .options import Bound

APP_NAME = "dutop"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("Ignoring config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.debug("Cannot write config %s: %s", CONFIG_PATH, exc)


def _coerce_bound(value: object) -> Bound | None:
    """Normalize a JSON scalar into a ``Bound``.

    Accepts non-negative integers and the ``"all"`` token. Booleans, floats and
    other values are treated as unset.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return Bound(value) if value >= 0 else None
    if isinstance(value, str):
        try:
            return Bound.parse(value)
        except ValueError:
            return None
    return None


def load_default_limit() -> Bound | None:
    """Load the persisted default ``--limit``, or ``None`` when unset/invalid."""
    return _coerce_bound(load_config().get("limit"))


def load_default_depth() -> Bound | None:
    """Load the persisted default ``--depth``, or ``None`` when unset/invalid."""
    return _coerce_bound(load_config().get("depth"))


def load_show_hidden() -> bool:
    """Return persisted hidden-entry preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("show_hidden")
    return bool(value) if isinstance(value, bool) else False


def save_defaults(
    limit: Bound | None = None,
    depth: Bound | None = None,
    show_hidden: bool | None = None,
) -> None:
    """Persist the given defaults, leaving other keys untouched."""
    config = load_config()
    if limit is not None:
        config["limit"] = limit.value or 0
    if depth is not None:
        config["depth"] = depth.value or 0
    if show_hidden is not None:
        config["show_hidden"] = bool(show_hidden)
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_default_limit",
    "load_default_depth",
    "load_show_hidden",
    "save_defaults",
]
