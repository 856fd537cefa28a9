"""Console entrypoint for the pixelcanvas application.

This module delegates to :mod:`pixelcanvas.cli` so that running
``python -m pixelcanvas`` or the installed ``pixelcanvas`` console script
executes the same application code.
"""

from __future__ import annotations

import sys

from pixelcanvas.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`pixelcanvas.cli.main`)."""
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
