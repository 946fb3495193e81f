"""Buffer records and the validity predicate built on them.

A host that can describe its buffers as :class:`BufferInfo` records gets the
sidebar's tracking rules for free through :func:`is_trackable`.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass

from .ignore import IgnoreRules

NORMAL_WINDOW_TYPE = ""


@dataclass(frozen=True)
class BufferInfo:
    """Snapshot of the host state that decides whether a buffer is tracked.

    ``window_type`` describes the window showing the buffer: empty for a
    normal editing window (or none at all), otherwise a kind such as
    ``"popup"``, ``"quickfix"`` or ``"loclist"``.
    """

    handle: Hashable
    name: str = ""
    filetype: str = ""
    buftype: str = ""
    bufhidden: str = ""
    swapfile: bool = True
    listed: bool = True
    loaded: bool = True
    exists: bool = True
    modified: bool = False
    window_type: str = NORMAL_WINDOW_TYPE


def is_scratch(info: BufferInfo) -> bool:
    """Return whether ``info`` is a throwaway or help buffer."""
    if info.buftype == "help":
        return True
    return info.buftype == "nofile" and info.bufhidden == "hide" and not info.swapfile


def is_trackable(info: BufferInfo, rules: IgnoreRules | None = None) -> bool:
    """Return whether the sidebar should track the buffer described by ``info``."""
    if not info.exists:
        return False
    if rules is not None and rules.is_ignored(info.name, info.filetype, info.buftype):
        return False
    if not (info.listed or info.loaded):
        return False
    if is_scratch(info):
        return False
    return info.window_type == NORMAL_WINDOW_TYPE
