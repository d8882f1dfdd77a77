"""Module entrypoint for running localeyaml as ``python -m localeyaml``."""

from __future__ import annotations

from localeyaml.cli import main


if __name__ == "__main__":
    main()
