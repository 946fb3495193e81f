"""Capability interface the MRU core needs from its editor host."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Protocol

DocumentHandle = Hashable


class DocumentHost(Protocol):
    """Everything the controller asks of the host, and nothing more.

    Handles are opaque to the core; the host decides what they are.
    """

    def is_valid_document(self, handle: DocumentHandle) -> bool:
        """Return whether ``handle`` should currently be tracked and shown."""
        ...

    def current_document(self) -> DocumentHandle | None:
        """Return the document the host considers focused right now."""
        ...

    def list_documents(self) -> list[DocumentHandle]:
        """Return every open document in host order."""
        ...

    def display_path(self, handle: DocumentHandle) -> str:
        """Return a human-readable path, or ``""`` to hide the entry."""
        ...

    def is_modified(self, handle: DocumentHandle) -> bool:
        """Return whether the document has unsaved changes."""
        ...

    def sidebar_document(self) -> DocumentHandle | None:
        """Return the document backing the sidebar itself, if any."""
        ...

    def request_focus(self, handle: DocumentHandle) -> None:
        """Ask the host to switch focus to ``handle``."""
        ...
