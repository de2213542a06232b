"""Entry point for ``python -m dotinstall``."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
