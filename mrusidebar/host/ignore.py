"""Pattern rules for documents the sidebar should never track.

Rules are ordered tuples of regular expressions per category. Matching is an
unanchored ``re.search`` and case sensitive; the first matching pattern wins.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from loguru import logger


def matches_any(value: str, patterns: Iterable[re.Pattern[str]]) -> re.Pattern[str] | None:
    """Return the first pattern found anywhere in ``value``, else ``None``."""
    for pattern in patterns:
        if pattern.search(value):
            return pattern
    return None


def compile_patterns(raw_patterns: Iterable[object]) -> tuple[re.Pattern[str], ...]:
    """Compile string patterns, dropping non-strings and invalid expressions."""
    compiled: list[re.Pattern[str]] = []
    for raw in raw_patterns:
        if not isinstance(raw, str) or not raw:
            continue
        try:
            compiled.append(re.compile(raw))
        except re.error as exc:
            logger.warning("ignoring invalid pattern {!r}: {}", raw, exc)
    return tuple(compiled)


@dataclass(frozen=True)
class IgnoreRules:
    names: tuple[re.Pattern[str], ...] = ()
    filetypes: tuple[re.Pattern[str], ...] = ()
    buftypes: tuple[re.Pattern[str], ...] = ()

    @classmethod
    def from_strings(
        cls,
        names: Iterable[object] = (),
        filetypes: Iterable[object] = (),
        buftypes: Iterable[object] = (),
    ) -> IgnoreRules:
        return cls(
            names=compile_patterns(names),
            filetypes=compile_patterns(filetypes),
            buftypes=compile_patterns(buftypes),
        )

    def is_ignored(self, name: str, filetype: str, buftype: str) -> bool:
        """Check name, then filetype, then buftype rules."""
        for value, patterns in (
            (name, self.names),
            (filetype, self.filetypes),
            (buftype, self.buftypes),
        ):
            if matches_any(value, patterns) is not None:
                return True
        return False
