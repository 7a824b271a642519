"""csfm: directory browsing core with a small command-line front-end.

Importing the package stays cheap: ``main`` pulls in argparse and the
runtime only when called.
"""

from __future__ import annotations

__version__ = "0.1.0"


def main(argv: list[str] | None = None) -> None:
    """Run the ``csfm`` command with ``argv`` (defaults to ``sys.argv``)."""
    from .cli import main as cli_main

    cli_main(argv)


__all__ = ["__version__", "main"]
