"""Persistent JSON config helpers.

Stores ignore patterns, the UI theme, and the sidebar width. MRU history is
never persisted. All access is defensive: malformed or missing config falls
back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .host.ignore import IgnoreRules

APP_NAME = "mrusidebar"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

IGNORE_KEYS = ("ignored_buffer_names", "ignored_filetypes", "ignored_buftypes")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _string_list(value: object) -> list[str]:
    """Keep only non-empty strings from a JSON list; anything else is empty."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str) and item]


def load_ignore_patterns() -> dict[str, list[str]]:
    """Return raw ignore patterns per config key, in configured order."""
    data = load_config()
    return {key: _string_list(data.get(key)) for key in IGNORE_KEYS}


def load_ignore_rules(
    extra_names: list[str] | None = None,
    extra_filetypes: list[str] | None = None,
    extra_buftypes: list[str] | None = None,
) -> IgnoreRules:
    """Build ignore rules from config, appending any extra patterns.

    Config patterns come first so first-match order follows the file.
    """
    patterns = load_ignore_patterns()
    return IgnoreRules.from_strings(
        names=patterns["ignored_buffer_names"] + list(extra_names or []),
        filetypes=patterns["ignored_filetypes"] + list(extra_filetypes or []),
        buftypes=patterns["ignored_buftypes"] + list(extra_buftypes or []),
    )


def save_ignore_patterns(key: str, patterns: list[str]) -> None:
    """Persist one ignore-pattern list; unknown keys are rejected silently."""
    if key not in IGNORE_KEYS:
        return
    config = load_config()
    config[key] = [pattern for pattern in patterns if isinstance(pattern, str) and pattern]
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_sidebar_width() -> int | None:
    """Return persisted sidebar width when it is a positive integer.

    Booleans are rejected even though they are ``int`` instances.
    """
    value = load_config().get("sidebar_width")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def save_sidebar_width(width: int) -> None:
    if width <= 0:
        return
    config = load_config()
    config["sidebar_width"] = int(width)
    save_config(config)
