# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the Session, then runs the console loop in the
main thread until the user exits.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_session
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING

    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s...", settings.app_name)

    session = create_session(settings=settings)
    try:
        run_console_loop(session)
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
