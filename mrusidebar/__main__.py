"""Module entrypoint for ``python -m mrusidebar``.

All argument parsing and replay setup happen in ``mrusidebar.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
