"""Entry point for ``python -m skicka_deploy``."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
