"""Module entrypoint for ``python -m termtree``."""

from .cli import main


if __name__ == "__main__":
    main()
