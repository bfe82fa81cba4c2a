"""
CLI entry point for ``python -m radixclock``.
"""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
