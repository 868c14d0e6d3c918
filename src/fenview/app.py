"""Application entry point."""

from __future__ import annotations

import logging
import os
import sys


def _configure_logging() -> None:
    level_name = os.environ.get("FENVIEW_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """Launch the fenview application."""
    from fenview.ui.bootstrap import run_application

    _configure_logging()
    sys.exit(run_application())


if __name__ == "__main__":
    main()
