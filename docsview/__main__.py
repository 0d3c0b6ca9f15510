"""Module entrypoint for ``python -m docsview``.

All argument parsing and runtime setup happen in ``docsview.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
