"""Module entrypoint for ``python -m csfm``.

All argument parsing and runtime setup happen in ``csfm.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
