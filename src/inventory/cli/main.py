"""Inventory counter command-line entry point.

Opens a fresh in-memory inventory and hands the terminal to the REPL.

Usage:
    inventory-counter
    inventory-counter --initial-quantity 10 --prompt "stock> "
"""

import argparse
import sys

from protean.utils.globals import current_domain

from inventory.cli import repl
from inventory.cli.handlers import InventoryHandlers
from inventory.domain import inventory
from inventory.stock.opening import OpenInventory
from inventory.utils.logging import add_context, clear_context, configure_logging, get_logger

logger = get_logger(__name__)


def non_negative_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog="inventory-counter",
        description="Interactive inventory counter. Commands: I<n> restock, S<n> sell, L print inventory.",
    )
    parser.add_argument("--prompt", default=repl.DEFAULT_PROMPT, help="Prompt text (default: %(default)r)")
    parser.add_argument(
        "--initial-quantity",
        type=non_negative_int,
        default=0,
        help="Starting inventory count (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level (default: from LOG_LEVEL or the environment)",
    )
    parser.add_argument("--log-dir", help="Also write logs to a rotating file in this directory")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    configure_logging(level=args.log_level, log_dir=args.log_dir)
    inventory.init()

    with inventory.domain_context():
        inventory_id = current_domain.process(
            OpenInventory(initial_quantity=args.initial_quantity),
            asynchronous=False,
        )
        add_context(inventory_id=inventory_id)
        handlers = InventoryHandlers(inventory_id, out=sys.stdout)
        try:
            repl.run(handlers, prompt=args.prompt)
        except KeyboardInterrupt:
            sys.stdout.write("\n")
            logger.debug("Interrupted")
        finally:
            clear_context()

    return 0


if __name__ == "__main__":
    sys.exit(main())
