"""Entry point for ``python -m src.todo``.

Usage:
    python -m src.todo <command> [options]
"""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
