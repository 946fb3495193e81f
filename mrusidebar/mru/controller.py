"""Event-driven controller owning MRU state for one sidebar instance.

Every host event enters through one method here. Methods run to completion
synchronously and never raise for unknown or invalid handles.
"""

from __future__ import annotations

from collections.abc import Hashable

from loguru import logger

from ..host.protocol import DocumentHost
from .history import MruList
from .windowing import EMPTY_RENDER_LIST, RenderList, build_render_list


class MruController:
    """Apply host events to the MRU list and keep a render list in sync.

    The controller is an explicit context object: create one per sidebar and
    pass the host in. ``current`` caches the last valid focused document so a
    focus change into an untracked window leaves the list untouched.
    """

    def __init__(self, host: DocumentHost) -> None:
        self.host = host
        self.mru = MruList(host.is_valid_document)
        self.current: Hashable | None = None
        self.items: RenderList = EMPTY_RENDER_LIST

    def initialise(self) -> None:
        """Seed from the host's open documents, then focus the active one."""
        documents = self.host.list_documents()
        self.mru.replace(handle for handle in documents if self.host.is_valid_document(handle))
        logger.debug("mru initialised with {}", self.mru.as_list())
        active = self.host.current_document()
        if active is not None:
            self.on_focus(active)
        else:
            self.regenerate()

    def on_focus(self, handle: Hashable) -> None:
        # No reconcile here: other documents may be mid-transition.
        if not self.host.is_valid_document(handle):
            logger.debug("mru focus ignored for untracked {!r}", handle)
            return
        self.current = handle
        self.mru.promote_to_front(handle)
        self.regenerate()

    def on_hide(self, handle: Hashable) -> None:
        # Hidden does not imply invalid; the next close event reconciles.
        logger.debug("mru hide {!r} left for next reconcile", handle)

    def on_close(self) -> None:
        self.mru.reconcile()
        self.regenerate()

    def on_cycle_forward(self) -> None:
        """Bring the oldest entry to the front and ask the host to focus it."""
        target = self.mru.cycle_forward()
        if target is None:
            return
        logger.debug("mru cycle forward to {!r}", target)
        self.host.request_focus(target)

    def on_cycle_backward(self) -> None:
        """Demote the current entry to the back and focus the new front."""
        target = self.mru.cycle_backward(self.current, self.host.current_document())
        if target is None:
            return
        logger.debug("mru cycle backward to {!r}", target)
        self.host.request_focus(target)

    def regenerate(self) -> RenderList:
        self.items = build_render_list(self.host, self.mru, self.current)
        return self.items

    def render(self) -> RenderList:
        """Return the render list for the current state.

        Recomputed on each call so validity and modified flags are read fresh.
        """
        return build_render_list(self.host, self.mru, self.current)
