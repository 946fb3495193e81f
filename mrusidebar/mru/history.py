"""Most-recently-used document ordering.

The list is most-recent-first and never holds the same handle twice.
Validity is injected as a predicate so the list has no host concerns.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator

from loguru import logger

DocumentHandle = Hashable


class MruList:
    """Ordered, duplicate-free sequence of document handles.

    ``is_valid`` is consulted by :meth:`reconcile` only; promotion and removal
    trust their caller.
    """

    def __init__(
        self,
        is_valid: Callable[[DocumentHandle], bool],
        handles: Iterable[DocumentHandle] = (),
    ) -> None:
        self._is_valid = is_valid
        self._entries: list[DocumentHandle] = []
        self.replace(handles)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DocumentHandle]:
        return iter(list(self._entries))

    def __contains__(self, handle: object) -> bool:
        return handle in self._entries

    def __repr__(self) -> str:
        return f"MruList({self._entries!r})"

    @property
    def front(self) -> DocumentHandle | None:
        return self._entries[0] if self._entries else None

    @property
    def last(self) -> DocumentHandle | None:
        return self._entries[-1] if self._entries else None

    def as_list(self) -> list[DocumentHandle]:
        return list(self._entries)

    def replace(self, handles: Iterable[DocumentHandle]) -> None:
        """Reset entries to ``handles``, keeping the first occurrence of each."""
        entries: list[DocumentHandle] = []
        for handle in handles:
            if handle not in entries:
                entries.append(handle)
        self._entries = entries

    def remove(self, handle: DocumentHandle) -> bool:
        """Drop ``handle`` if present and report whether anything changed."""
        try:
            self._entries.remove(handle)
        except ValueError:
            return False
        return True

    def promote_to_front(self, handle: DocumentHandle) -> None:
        self.remove(handle)
        self._entries.insert(0, handle)

    def reconcile(self) -> list[DocumentHandle]:
        """Purge entries that no longer pass the validity predicate.

        Relative order of surviving entries is preserved. Returns the purged
        handles so callers can log them.
        """
        kept: list[DocumentHandle] = []
        purged: list[DocumentHandle] = []
        for handle in self._entries:
            if self._is_valid(handle):
                kept.append(handle)
            else:
                purged.append(handle)
        self._entries = kept
        if purged:
            logger.debug("mru reconcile purged {}", purged)
        return purged

    def cycle_forward(self) -> DocumentHandle | None:
        """Move the oldest entry to the front, walking deeper into history.

        The oldest entry is taken off before reconciliation so it is reinserted
        even when the reconcile pass would have dropped it. Returns the new
        front, or ``None`` when the list is empty.
        """
        if not self._entries:
            return None
        oldest = self._entries.pop()
        self.reconcile()
        self._entries.insert(0, oldest)
        return oldest

    def cycle_backward(
        self,
        current: DocumentHandle | None,
        live: DocumentHandle | None,
    ) -> DocumentHandle | None:
        """Demote the current entry to the back, walking toward the present.

        ``current`` is the cached current handle, which is removed even when
        it is no longer the front. ``live`` is the host's focused document at
        cycle time; it is appended at the back when it is still valid.
        Returns the new front, or ``None`` when the list ends up empty.
        """
        if not self._entries:
            return None
        if current is not None:
            self.remove(current)
        self.reconcile()
        if live is not None and self._is_valid(live):
            self.remove(live)
            self._entries.append(live)
        return self.front
