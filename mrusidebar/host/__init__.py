"""Host-side collaborators: capability interface, validity rules, memory host."""

from .ignore import IgnoreRules, compile_patterns, matches_any
from .memory import MemoryHost
from .protocol import DocumentHandle, DocumentHost
from .validity import BufferInfo, is_scratch, is_trackable

__all__ = [
    "BufferInfo",
    "DocumentHandle",
    "DocumentHost",
    "IgnoreRules",
    "MemoryHost",
    "compile_patterns",
    "is_scratch",
    "is_trackable",
    "matches_any",
]
