"""Module entrypoint for running microconf as ``python -m microconf``."""

from __future__ import annotations

from microconf.cli import main


if __name__ == "__main__":
    main()
