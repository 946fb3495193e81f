"""In-memory host for replaying editor sessions and for tests.

``MemoryHost`` keeps :class:`BufferInfo` records in open order and forwards
focus, hide, and close events to an attached controller, the way an editor
fires autocommands. Focus requests from the controller are applied as a
focus switch, which in turn delivers a focus event.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import replace
from typing import Protocol

from loguru import logger

from .ignore import IgnoreRules
from .validity import BufferInfo, is_trackable


class HostListener(Protocol):
    """Receiver of host document events, normally an ``MruController``."""

    def on_focus(self, handle: Hashable) -> None: ...

    def on_hide(self, handle: Hashable) -> None: ...

    def on_close(self) -> None: ...


class MemoryHost:
    """Scripted editor state implementing the ``DocumentHost`` protocol."""

    def __init__(self, rules: IgnoreRules | None = None) -> None:
        self.rules = rules if rules is not None else IgnoreRules()
        self.buffers: dict[Hashable, BufferInfo] = {}
        self.current: Hashable | None = None
        self.sidebar: Hashable | None = None
        self.listener: HostListener | None = None
        self.focus_requests: list[Hashable] = []

    def attach(self, listener: HostListener) -> None:
        self.listener = listener

    # DocumentHost protocol

    def is_valid_document(self, handle: Hashable) -> bool:
        info = self.buffers.get(handle)
        if info is None:
            return False
        return is_trackable(info, self.rules)

    def current_document(self) -> Hashable | None:
        return self.current

    def list_documents(self) -> list[Hashable]:
        return [handle for handle, info in self.buffers.items() if info.exists]

    def display_path(self, handle: Hashable) -> str:
        info = self.buffers.get(handle)
        return info.name if info is not None else ""

    def is_modified(self, handle: Hashable) -> bool:
        info = self.buffers.get(handle)
        return bool(info is not None and info.modified)

    def sidebar_document(self) -> Hashable | None:
        return self.sidebar

    def request_focus(self, handle: Hashable) -> None:
        self.focus_requests.append(handle)
        self.focus(handle)

    # Editor-side actions

    def open(self, handle: Hashable, name: str = "", **fields: object) -> BufferInfo:
        """Register a buffer without focusing it."""
        info = BufferInfo(handle=handle, name=name, **fields)  # type: ignore[arg-type]
        self.buffers[handle] = info
        return info

    def update(self, handle: Hashable, **fields: object) -> BufferInfo | None:
        """Change fields of an existing buffer record; no event is fired."""
        info = self.buffers.get(handle)
        if info is None:
            return None
        updated = replace(info, **fields)  # type: ignore[arg-type]
        self.buffers[handle] = updated
        return updated

    def focus(self, handle: Hashable) -> None:
        """Make ``handle`` current and fire a focus event.

        Unknown handles are still made current; the listener's validity check
        decides whether the event counts.
        """
        self.current = handle
        logger.debug("host focus {!r}", handle)
        if self.listener is not None:
            self.listener.on_focus(handle)

    def hide(self, handle: Hashable) -> None:
        if handle not in self.buffers:
            return
        if self.listener is not None:
            self.listener.on_hide(handle)

    def close(self, handle: Hashable) -> None:
        """Delete a buffer and fire a close event.

        The record is kept with ``exists=False`` so late lookups stay defined.
        """
        if self.update(handle, exists=False, listed=False, loaded=False) is None:
            return
        logger.debug("host close {!r}", handle)
        if self.current == handle:
            self.current = None
        if self.listener is not None:
            self.listener.on_close()
