"""Buffers sidebar section UI components."""

from .bindings import KeyBinding, KeyBindingRegistry
from .rendering import EMPTY_TEXT, SidebarFrame, draw_render_list
from .section import SidebarSection

__all__ = [
    "EMPTY_TEXT",
    "KeyBinding",
    "KeyBindingRegistry",
    "SidebarFrame",
    "SidebarSection",
    "draw_render_list",
]
