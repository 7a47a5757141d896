# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.state import Session

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

EXIT_WORDS = ("exit", "quit", "q")
HELP_WORDS = ("help", "menu", "?", "0")


def _console_input(prompt: str) -> str:
    return input(prompt)


def run_console_loop(
    session: Session,
    *,
    registry: CommandRegistry | None = None,
    read: InputFn = _console_input,
    write: OutputFn = print,
) -> None:
    """
    Read a menu code, dispatch it, print the outcome. Repeat until exit/EOF.

    read/write are injectable so tests can script a whole session.
    """
    registry = registry or command_registry
    app_name = session.settings.app_name

    def ask(prompt: str) -> str:
        return read(prompt).strip()

    logger.info("Console connector started.")
    write(f"[{app_name}] Type a command number. Use help to show the menu, exit to quit.")
    write(registry.build_help())

    while True:
        try:
            line = ask("Enter command index: ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not line:
            continue

        if line.lower() in EXIT_WORDS:
            logger.info("Console exit command received.")
            break

        if line.lower() in HELP_WORDS:
            write(registry.build_help())
            continue

        try:
            response = registry.handle(session, line, ask)
        except EOFError:
            logger.info("Console EOF received mid-command, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Command interrupted.")
            write("Cancelled.")
            continue
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        write(response)

    logger.info("Console connector finished.")
