"""Application entry point."""

from __future__ import annotations

import logging
import os
import sys

_LOG_LEVEL_ENV = "SANTREE_LOG_LEVEL"


def _configure_logging() -> None:
    level_name = os.environ.get(_LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """Launch the SanTree application."""
    from santree.ui.bootstrap import run_application

    _configure_logging()
    sys.exit(run_application())


if __name__ == "__main__":
    main()
