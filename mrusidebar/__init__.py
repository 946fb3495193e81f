"""Public package surface for mrusidebar.

Exports ``main`` for programmatic CLI invocation.
The MRU core lives in ``mrusidebar.mru``; host collaborators in
``mrusidebar.host``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
