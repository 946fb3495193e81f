"""MRU ordering, display windowing, and the event controller."""

from .controller import MruController
from .history import MruList
from .windowing import (
    EMPTY_RENDER_LIST,
    ItemData,
    RenderItem,
    RenderList,
    arrange_around_anchor,
    build_render_list,
)

__all__ = [
    "EMPTY_RENDER_LIST",
    "ItemData",
    "MruController",
    "MruList",
    "RenderItem",
    "RenderList",
    "arrange_around_anchor",
    "build_render_list",
]
