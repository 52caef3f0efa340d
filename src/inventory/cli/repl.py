"""Read-eval-print loop for the inventory counter.

Reads one line at a time, routes it, and runs the handler. User errors are
printed and the loop carries on; the loop ends when the input stream closes.
"""

import sys
from typing import TextIO

import structlog
from protean.exceptions import ValidationError

from inventory.cli.handlers import InventoryHandlers, error_message
from inventory.cli.router import InvalidCommandError, parse_command

logger = structlog.get_logger(__name__)

DEFAULT_PROMPT = "> "


def run(
    handlers: InventoryHandlers,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    prompt: str = DEFAULT_PROMPT,
) -> None:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    while True:
        stdout.write(prompt)
        stdout.flush()

        line = stdin.readline()
        if not line:
            logger.debug("Input stream closed")
            return

        line = line.strip()
        if not line:
            # Blank lines just bring the prompt back
            continue

        try:
            command = parse_command(line)
            handlers.dispatch(command)
        except InvalidCommandError as exc:
            logger.info("Invalid command", line=line)
            stdout.write(f"{exc}\n")
        except ValidationError as exc:
            message = error_message(exc)
            logger.info("Command rejected", line=line, reason=message)
            stdout.write(f"{message}\n")
