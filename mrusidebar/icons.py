"""File-type icons for sidebar rows.

Icons are keyed by Pygments lexer name so any file Pygments recognizes gets
a language-specific glyph. Unknown files fall back to a generic document.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import PurePath

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

DEFAULT_ICON = "\uf016"
CURRENT_ICON = " "

LEXER_ICONS: dict[str, str] = {
    "Python": "\ue606",
    "JavaScript": "\ue60c",
    "TypeScript": "\ue628",
    "TSX": "\ue7ba",
    "JSON": "\ue60b",
    "Lua": "\ue620",
    "Markdown": "\ue609",
    "HTML": "\ue60e",
    "CSS": "\ue614",
    "Rust": "\ue7a8",
    "Go": "\ue627",
    "C": "\ue61e",
    "C++": "\ue61d",
    "Java": "\ue738",
    "Ruby": "\ue739",
    "Bash": "\ue795",
    "YAML": "\ue6a8",
    "TOML": "\ue6b2",
    "VimL": "\ue62b",
}


@lru_cache(maxsize=512)
def lexer_name_for(filename: str) -> str | None:
    """Return the Pygments lexer name for ``filename``, if one matches."""
    try:
        lexer = get_lexer_for_filename(filename)
    except ClassNotFound:
        return None
    return lexer.name


def file_icon(path: str) -> str:
    """Return the icon glyph for a document path."""
    name = PurePath(path).name
    if not name:
        return DEFAULT_ICON
    lexer_name = lexer_name_for(name)
    if lexer_name is None:
        return DEFAULT_ICON
    return LEXER_ICONS.get(lexer_name, DEFAULT_ICON)
