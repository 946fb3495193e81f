"""Sidebar theme definitions and selection helpers.

Themes map render-item highlight tags to ANSI styles. The plain theme is used
when color is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SidebarTheme:
    """Semantic ANSI palette used by the sidebar renderer."""

    name: str
    reset: str
    title: str
    empty: str
    icon: str
    active: str
    active_modified: str
    normal: str
    normal_modified: str
    cursor: str

    def style_for(self, highlight: str) -> str:
        """Return the ANSI style for a render-item highlight tag."""
        return {
            "active": self.active,
            "active_modified": self.active_modified,
            "normal": self.normal,
            "normal_modified": self.normal_modified,
        }.get(highlight, self.normal)


DEFAULT_THEME = SidebarTheme(
    name="default",
    reset="\033[0m",
    title="\033[1;38;5;81m",
    empty="\033[2;38;5;250m",
    icon="\033[38;5;110m",
    active="\033[1;38;5;81m",
    active_modified="\033[1;38;5;214m",
    normal="\033[38;5;252m",
    normal_modified="\033[38;5;214m",
    cursor="\033[7m",
)

OCEAN_THEME = SidebarTheme(
    name="ocean",
    reset="\033[0m",
    title="\033[1;38;5;45m",
    empty="\033[2;38;5;110m",
    icon="\033[38;5;117m",
    active="\033[1;38;5;45m",
    active_modified="\033[1;38;5;215m",
    normal="\033[38;5;153m",
    normal_modified="\033[38;5;215m",
    cursor="\033[7m",
)

PLAIN_THEME = SidebarTheme(
    name="plain",
    reset="",
    title="",
    empty="",
    icon="",
    active="",
    active_modified="",
    normal="",
    normal_modified="",
    cursor="",
)

_THEMES: dict[str, SidebarTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> SidebarTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "SidebarTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
