"""Key bindings for the buffers section.

Bindings map key tokens to zero-argument actions. Tokens are matched
case-sensitively except named keys such as ``ENTER``, which are normalized
to upper case.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

NAMED_KEYS = {"enter", "up", "down", "tab", "esc"}


def normalize_key(key: str) -> str:
    """Upper-case named keys, leave printable characters untouched."""
    if key.lower() in NAMED_KEYS:
        return key.upper()
    return key


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key tokens to a single action callback."""

    keys: tuple[str, ...]
    handler: Callable[[], bool | None]
    description: str = ""


class KeyBindingRegistry:
    """Small key-dispatch table with key normalization."""

    def __init__(self, normalize: Callable[[str], str] = normalize_key) -> None:
        self._normalize = normalize
        self._bindings: dict[str, KeyBinding] = {}

    def register_binding(self, binding: KeyBinding) -> KeyBindingRegistry:
        """Register one binding, overwriting existing handlers for same keys."""
        for key in binding.keys:
            self._bindings[self._normalize(key)] = binding
        return self

    def register_bindings(self, *bindings: KeyBinding) -> KeyBindingRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def bound_keys(self) -> tuple[str, ...]:
        return tuple(self._bindings)

    def dispatch(self, key: str) -> bool | None:
        """Invoke bound handler for ``key``; ``None`` means the key is unbound."""
        binding = self._bindings.get(self._normalize(key))
        if binding is None:
            return None
        return binding.handler()
