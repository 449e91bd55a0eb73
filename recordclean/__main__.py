"""Module entrypoint for running recordclean as ``python -m recordclean``."""

from __future__ import annotations

from recordclean.cli import main


if __name__ == "__main__":
    main()
