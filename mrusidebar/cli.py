"""Command-line front door for mrusidebar.

Parses CLI options, loads config and the session script, replays the script
against an in-memory host, and prints the drawn sidebar frames.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from .config import (
    IGNORE_KEYS,
    load_ignore_patterns,
    load_ignore_rules,
    load_sidebar_width,
    load_theme_name,
    save_ignore_patterns,
    save_sidebar_width,
    save_theme_name,
)
from .host.memory import MemoryHost
from .mru.controller import MruController
from .session import SessionReplay, SessionScriptError, parse_script
from .sidebar.rendering import DEFAULT_TITLE, SidebarFrame
from .sidebar.section import DEFAULT_WIDTH, SidebarSection
from .ui_theme import available_theme_names, normalize_theme_name, resolve_theme

LOG_FORMAT = "<level>{level: <8}</level> | {message}"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def configure_logging(verbose: bool) -> None:
    """Route loguru output to stderr; debug level only when ``verbose``."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level="DEBUG" if verbose else "WARNING")


def format_frames(frames: list[SidebarFrame]) -> str:
    """Join frames into printable text, one blank line between frames."""
    return "\n\n".join("\n".join(frame.lines) for frame in frames) + "\n"


def _read_script(raw_path: str) -> list[str]:
    if raw_path == "-":
        return sys.stdin.read().splitlines()
    path = Path(raw_path)
    if not path.is_file():
        raise SystemExit(f"Path not found: {path}")
    return path.read_text(encoding="utf-8").splitlines()


def _save_settings(theme_name: str, width: int, extra_patterns: tuple[list[str], ...]) -> None:
    """Persist effective settings; extra ignore patterns append to stored ones."""
    save_theme_name(theme_name)
    save_sidebar_width(width)
    stored = load_ignore_patterns()
    for key, extra in zip(IGNORE_KEYS, extra_patterns):
        if extra:
            save_ignore_patterns(key, stored[key] + [pattern for pattern in extra if pattern not in stored[key]])
    logger.debug("saved settings: theme={} width={}", theme_name, width)


def main() -> None:
    """Parse CLI arguments and replay a session script.

    Every ``show`` in the script prints one frame. A script without ``show``
    prints the final state once.
    """
    parser = argparse.ArgumentParser(
        description="Replay an editor session and print the most-recently-used buffers sidebar."
    )
    parser.add_argument("script", help="Session script path, or - to read from stdin.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--width", type=_positive_int, default=None, help="Sidebar width in columns.")
    parser.add_argument("--no-title", action="store_true", help="Omit the section title row.")
    parser.add_argument("--ignore-name", action="append", default=[], metavar="PATTERN", help="Ignore buffers whose name matches PATTERN.")
    parser.add_argument("--ignore-filetype", action="append", default=[], metavar="PATTERN", help="Ignore buffers whose filetype matches PATTERN.")
    parser.add_argument("--ignore-buftype", action="append", default=[], metavar="PATTERN", help="Ignore buffers whose buftype matches PATTERN.")
    parser.add_argument("--save", action="store_true", help="Persist theme, width and extra ignore patterns to config.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log MRU mutations to stderr.")
    args = parser.parse_args()

    configure_logging(args.verbose)

    try:
        steps = parse_script(_read_script(args.script))
    except SessionScriptError as exc:
        raise SystemExit(f"Invalid session script: {exc}") from exc

    rules = load_ignore_rules(args.ignore_name, args.ignore_filetype, args.ignore_buftype)
    no_color = args.no_color or not sys.stdout.isatty()
    theme_name = normalize_theme_name(args.theme or load_theme_name())
    theme = resolve_theme(theme_name, no_color=no_color)
    width = args.width or load_sidebar_width() or DEFAULT_WIDTH
    if args.save:
        _save_settings(theme_name, width, (args.ignore_name, args.ignore_filetype, args.ignore_buftype))

    host = MemoryHost(rules)
    section = SidebarSection(
        MruController(host),
        width=width,
        theme=theme,
        title=None if args.no_title else DEFAULT_TITLE,
    )
    replay = SessionReplay(section, host)
    try:
        frames = replay.run(steps)
    except SessionScriptError as exc:
        raise SystemExit(f"Invalid session script: {exc}") from exc

    if not frames:
        if not replay.initialised:
            replay.controller.initialise()
        frames = [section.draw(show_cursor=True)]
    sys.stdout.write(format_frames(frames))
