"""Line-oriented editor session scripts and their replay.

A script is one command per line, shell-quoted, ``#`` starting a comment::

    open 1 src/app.py
    open 2 "docs/read me.md" modified=yes
    init
    focus 2
    next
    key j
    key enter
    show

Buffers are described with ``key=value`` options naming :class:`BufferInfo`
fields. Replay drives a :class:`MemoryHost` wired to an
:class:`MruController`, and every ``show`` captures a drawn frame. ``key``
presses one sidebar key (``j``, ``k``, ``enter``, ``n``, ``p``) against the
sidebar as currently drawn.
"""

from __future__ import annotations

import shlex
from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field

from loguru import logger

from .host.memory import MemoryHost
from .mru.controller import MruController
from .sidebar.rendering import SidebarFrame
from .sidebar.section import SidebarSection

BOOL_FIELDS = {"swapfile", "listed", "loaded", "modified"}
STR_FIELDS = {"filetype", "buftype", "bufhidden", "window_type"}
TRUE_WORDS = {"1", "true", "yes", "on"}
FALSE_WORDS = {"0", "false", "no", "off"}

# command -> (min positional args, max positional args, accepts options)
COMMANDS: dict[str, tuple[int, int, bool]] = {
    "open": (1, 2, True),
    "set": (1, 1, True),
    "sidebar": (1, 1, False),
    "modify": (1, 2, False),
    "init": (0, 0, False),
    "focus": (1, 1, False),
    "hide": (1, 1, False),
    "close": (1, 1, False),
    "next": (0, 0, False),
    "prev": (0, 0, False),
    "show": (0, 0, False),
    "key": (1, 1, False),
}
SETUP_COMMANDS = {"open", "set", "sidebar", "modify", "init"}


class SessionScriptError(ValueError):
    """Raised for malformed session script lines."""

    def __init__(self, line_no: int, message: str) -> None:
        super().__init__(f"line {line_no}: {message}")
        self.line_no = line_no


@dataclass(frozen=True)
class SessionStep:
    line_no: int
    command: str
    args: tuple[str, ...] = ()
    options: dict[str, object] = field(default_factory=dict)


def parse_handle(token: str) -> Hashable:
    """ASCII digit tokens become ``int`` handles, anything else stays a string."""
    return int(token) if token.isascii() and token.isdigit() else token


def _parse_bool(line_no: int, key: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in TRUE_WORDS:
        return True
    if lowered in FALSE_WORDS:
        return False
    raise SessionScriptError(line_no, f"invalid boolean for {key}: {raw!r}")


def _parse_option(line_no: int, token: str) -> tuple[str, object]:
    key, _, raw = token.partition("=")
    if key in BOOL_FIELDS:
        return key, _parse_bool(line_no, key, raw)
    if key in STR_FIELDS:
        return key, raw
    raise SessionScriptError(line_no, f"unknown buffer field: {key!r}")


def parse_line(line_no: int, line: str) -> SessionStep | None:
    """Parse one script line; blank and comment lines yield ``None``."""
    try:
        tokens = shlex.split(line, comments=True)
    except ValueError as exc:
        raise SessionScriptError(line_no, str(exc)) from exc
    if not tokens:
        return None

    command, rest = tokens[0].lower(), tokens[1:]
    arity = COMMANDS.get(command)
    if arity is None:
        raise SessionScriptError(line_no, f"unknown command: {tokens[0]!r}")
    min_args, max_args, accepts_options = arity

    args: list[str] = []
    options: dict[str, object] = {}
    for token in rest:
        key = token.partition("=")[0]
        if accepts_options and "=" in token and (key in BOOL_FIELDS or key in STR_FIELDS or len(args) >= max_args):
            key, value = _parse_option(line_no, token)
            options[key] = value
        else:
            args.append(token)

    if not min_args <= len(args) <= max_args:
        raise SessionScriptError(line_no, f"{command} takes {min_args}-{max_args} arguments, got {len(args)}")
    return SessionStep(line_no=line_no, command=command, args=tuple(args), options=options)


def parse_script(lines: Iterable[str]) -> list[SessionStep]:
    steps: list[SessionStep] = []
    for line_no, line in enumerate(lines, start=1):
        step = parse_line(line_no, line)
        if step is not None:
            steps.append(step)
    return steps


class SessionReplay:
    """Run parsed steps against a memory host and collect drawn frames.

    The controller initialises itself before the first event step when the
    script has no explicit ``init``.
    """

    def __init__(self, section: SidebarSection, host: MemoryHost) -> None:
        self.section = section
        self.host = host
        self.controller: MruController = section.controller
        self.initialised = False
        self.frames: list[SidebarFrame] = []
        host.attach(self.controller)

    def run(self, steps: Iterable[SessionStep]) -> list[SidebarFrame]:
        for step in steps:
            self.apply(step)
        return self.frames

    def _ensure_initialised(self) -> None:
        if not self.initialised:
            self.controller.initialise()
            self.initialised = True

    def apply(self, step: SessionStep) -> None:
        logger.debug("session line {}: {} {}", step.line_no, step.command, " ".join(step.args))
        if step.command not in SETUP_COMMANDS:
            self._ensure_initialised()

        handle = parse_handle(step.args[0]) if step.args else None
        if step.command == "open":
            name = step.args[1] if len(step.args) > 1 else ""
            self.host.open(handle, name, **step.options)
        elif step.command == "set":
            if self.host.update(handle, **step.options) is None:
                raise SessionScriptError(step.line_no, f"unknown buffer: {step.args[0]!r}")
        elif step.command == "sidebar":
            if handle not in self.host.buffers:
                self.host.open(handle, "", filetype="sidebar")
            self.host.sidebar = handle
        elif step.command == "modify":
            flag = _parse_bool(step.line_no, "modify", step.args[1]) if len(step.args) > 1 else True
            if self.host.update(handle, modified=flag) is None:
                raise SessionScriptError(step.line_no, f"unknown buffer: {step.args[0]!r}")
        elif step.command == "init":
            self.controller.initialise()
            self.initialised = True
        elif step.command == "focus":
            self.host.focus(handle)
        elif step.command == "hide":
            self.host.hide(handle)
        elif step.command == "close":
            self.host.close(handle)
        elif step.command == "next":
            self.controller.on_cycle_forward()
        elif step.command == "prev":
            self.controller.on_cycle_backward()
        elif step.command == "key":
            # keys act on the sidebar as currently drawn
            self.section.draw(show_cursor=True)
            if self.section.handle_key(step.args[0]) is None:
                raise SessionScriptError(step.line_no, f"unbound key: {step.args[0]!r}")
        elif step.command == "show":
            self.frames.append(self.section.draw(show_cursor=True))
