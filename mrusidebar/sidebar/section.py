"""The buffers section: controller, drawing, and bindings wired together."""

from __future__ import annotations

from loguru import logger

from ..mru.controller import MruController
from ..mru.windowing import ItemData
from ..ui_theme import DEFAULT_THEME, SidebarTheme
from .bindings import KeyBinding, KeyBindingRegistry
from .rendering import DEFAULT_TITLE, SidebarFrame, draw_render_list

DEFAULT_WIDTH = 32


class SidebarSection:
    """Buffers sidebar section backed by an :class:`MruController`.

    The section remembers the last drawn frame so a cursor line can be mapped
    back to the document drawn on it.
    """

    def __init__(
        self,
        controller: MruController,
        width: int = DEFAULT_WIDTH,
        theme: SidebarTheme = DEFAULT_THEME,
        title: str | None = DEFAULT_TITLE,
    ) -> None:
        self.controller = controller
        self.width = max(1, width)
        self.theme = theme
        self.title = title
        self.cursor = 0
        self.frame = SidebarFrame()
        self.bindings = KeyBindingRegistry().register_bindings(
            KeyBinding(("e", "enter"), self.open_at_cursor, "open buffer under cursor"),
            KeyBinding(("n",), self.cycle_next, "cycle to older buffer"),
            KeyBinding(("p",), self.cycle_previous, "cycle to newer buffer"),
            KeyBinding(("j", "down"), lambda: self.move_cursor(1), "cursor down"),
            KeyBinding(("k", "up"), lambda: self.move_cursor(-1), "cursor up"),
        )

    def draw(self, show_cursor: bool = False) -> SidebarFrame:
        self.frame = draw_render_list(
            self.controller.render(),
            self.width,
            theme=self.theme,
            title=self.title,
            cursor_line=self.cursor if show_cursor else None,
        )
        return self.frame

    def location_at(self, line: int) -> ItemData | None:
        return self.frame.location_at(line)

    def open_at(self, line: int) -> bool:
        """Focus the document drawn on ``line``; ``False`` when there is none."""
        location = self.location_at(line)
        if location is None:
            return False
        logger.debug("sidebar open {!r} at line {}", location.handle, line)
        self.controller.host.request_focus(location.handle)
        return True

    def open_at_cursor(self) -> bool:
        return self.open_at(self.cursor)

    def move_cursor(self, delta: int) -> bool:
        last = max(0, len(self.frame.lines) - 1)
        target = max(0, min(last, self.cursor + delta))
        moved = target != self.cursor
        self.cursor = target
        return moved

    def cycle_next(self) -> bool:
        self.controller.on_cycle_forward()
        return True

    def cycle_previous(self) -> bool:
        self.controller.on_cycle_backward()
        return True

    def handle_key(self, key: str) -> bool | None:
        return self.bindings.dispatch(key)
