"""Display windowing: turn the MRU order into a list centered on the anchor.

The anchor (MRU front) sits in the middle. Roughly half of the remaining
entries go above it, most recent nearest; the rest go below it, oldest
nearest. Moving one row up from the anchor therefore lands on what cycling
backward reveals, and one row down on what cycling forward reveals. The
split is a heuristic and only approximates the next cycle target.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import PurePath

from ..host.protocol import DocumentHost
from ..icons import CURRENT_ICON, file_icon

HL_ACTIVE = "active"
HL_ACTIVE_MODIFIED = "active_modified"
HL_NORMAL = "normal"
HL_NORMAL_MODIFIED = "normal_modified"

MODIFIED_SUFFIX = " *"


@dataclass(frozen=True)
class ItemData:
    """Back-reference from a rendered row to the document it shows."""

    handle: Hashable
    filepath: str


@dataclass(frozen=True)
class RenderItem:
    """One displayable row: label, highlight tag, icon, and document back-reference."""

    label: str
    highlight: str
    icon: str
    data: ItemData

    @property
    def handle(self) -> Hashable:
        return self.data.handle

    @property
    def is_current(self) -> bool:
        return self.highlight in (HL_ACTIVE, HL_ACTIVE_MODIFIED)


@dataclass(frozen=True)
class RenderList:
    """Ordered rows for one draw; ``empty`` is the "no documents" signal."""

    items: tuple[RenderItem, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[RenderItem]:
        return iter(self.items)

    def __getitem__(self, index: int) -> RenderItem:
        return self.items[index]

    @property
    def empty(self) -> bool:
        return not self.items

    def handles(self) -> list[Hashable]:
        return [item.handle for item in self.items]

    def current_item(self) -> RenderItem | None:
        for item in self.items:
            if item.is_current:
                return item
        return None


EMPTY_RENDER_LIST = RenderList()


def render_item_for(
    host: DocumentHost,
    handle: Hashable,
    current: Hashable | None,
) -> RenderItem | None:
    """Build the row for ``handle``, or ``None`` when it should not be shown.

    Documents failing validity (a focused quickfix window, for example) and
    documents without a display path produce no row.
    """
    if not host.is_valid_document(handle):
        return None

    filepath = host.display_path(handle)
    if not filepath:
        return None
    filename = PurePath(filepath).name
    if not filename:
        return None

    is_current = handle == current
    modified = host.is_modified(handle)
    if modified:
        highlight = HL_ACTIVE_MODIFIED if is_current else HL_NORMAL_MODIFIED
    else:
        highlight = HL_ACTIVE if is_current else HL_NORMAL

    return RenderItem(
        label=filename + (MODIFIED_SUFFIX if modified else ""),
        highlight=highlight,
        icon=CURRENT_ICON if is_current else file_icon(filepath),
        data=ItemData(handle=handle, filepath=filepath),
    )


def arrange_around_anchor(anchor: RenderItem, remaining: Sequence[RenderItem]) -> list[RenderItem]:
    """Place ``anchor`` at the midpoint of ``remaining``.

    ``remaining`` is most-recent-first. With ``midpoint = len // 2 + 1``
    (1-indexed), entries before the midpoint are pushed on top, so the most
    recent ends up directly above the anchor. The anchor is placed when the
    walk reaches the midpoint, and every later entry is inserted directly
    below it, so the oldest ends up adjacent to the anchor.
    """
    if len(remaining) <= 1:
        return [anchor, *remaining]

    midpoint = len(remaining) // 2 + 1
    arranged: list[RenderItem] = []
    for index, item in enumerate(remaining, start=1):
        if index == midpoint:
            arranged.append(anchor)
        if index < midpoint:
            arranged.insert(0, item)
        else:
            arranged.insert(midpoint, item)
    return arranged


def build_render_list(
    host: DocumentHost,
    entries: Iterable[Hashable],
    current: Hashable | None,
) -> RenderList:
    """Derive the render list from MRU ``entries`` (most-recent-first)."""
    ordered = list(entries)
    if not ordered:
        return EMPTY_RENDER_LIST

    first = ordered[0]
    sidebar = host.sidebar_document()
    remaining: list[RenderItem] = []
    for handle in ordered[1:]:
        if handle == first:
            continue
        if sidebar is not None and handle == sidebar:
            continue
        item = render_item_for(host, handle, current)
        if item is not None:
            remaining.append(item)

    anchor = render_item_for(host, first, current)
    if anchor is None:
        return RenderList(tuple(remaining))

    return RenderList(tuple(arrange_around_anchor(anchor, remaining)))
