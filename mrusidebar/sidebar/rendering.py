"""Draw a render list as styled sidebar rows.

Drawing is presentation-only: it never touches MRU state. Each drawn line is
paired with the data payload of the item it shows so bindings can map a
cursor line back to a document.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..ansi import clip_ansi_line
from ..mru.windowing import ItemData, RenderItem, RenderList
from ..ui_theme import DEFAULT_THEME, SidebarTheme

EMPTY_TEXT = "<no buffers>"
DEFAULT_TITLE = "Buffers"


@dataclass
class SidebarFrame:
    lines: list[str] = field(default_factory=list)
    locations: list[ItemData | None] = field(default_factory=list)

    def location_at(self, line: int) -> ItemData | None:
        if line < 0 or line >= len(self.locations):
            return None
        return self.locations[line]


def format_item_row(item: RenderItem, theme: SidebarTheme) -> str:
    """Return one row: two-space indent, icon, then styled file label."""
    icon = f"{theme.icon}{item.icon}{theme.reset}" if item.icon.strip() else item.icon
    style = theme.style_for(item.highlight)
    return f"  {icon} {style}{item.label}{theme.reset}"


def draw_render_list(
    render_list: RenderList,
    width: int,
    theme: SidebarTheme = DEFAULT_THEME,
    title: str | None = DEFAULT_TITLE,
    cursor_line: int | None = None,
) -> SidebarFrame:
    """Lay out ``render_list`` into clipped lines for a ``width``-column pane.

    An empty list draws the literal ``<no buffers>`` row. ``cursor_line``
    indexes the returned lines and is shown in reverse video.
    """
    frame = SidebarFrame()
    if title:
        frame.lines.append(f"{theme.title}{title}{theme.reset}")
        frame.locations.append(None)

    if render_list.empty:
        frame.lines.append(f"{theme.empty}{EMPTY_TEXT}{theme.reset}")
        frame.locations.append(None)
    else:
        for item in render_list:
            frame.lines.append(format_item_row(item, theme))
            frame.locations.append(item.data)

    frame.lines = [clip_ansi_line(line, width) for line in frame.lines]
    if cursor_line is not None and 0 <= cursor_line < len(frame.lines) and theme.cursor:
        line = frame.lines[cursor_line]
        frame.lines[cursor_line] = theme.cursor + line.replace(theme.reset, theme.reset + theme.cursor) + theme.reset
    return frame
