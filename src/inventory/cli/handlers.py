"""Command handlers bound to one open inventory and one output stream."""

import sys
from typing import Callable, TextIO

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from inventory.cli.router import ParsedCommand
from inventory.stock.restocking import RestockInventory
from inventory.stock.selling import SellStock
from inventory.stock.stock import Inventory

INVENTORY_MESSAGE = "Current inventory is: {on_hand}"


def error_message(exc: ValidationError) -> str:
    """Flatten a ValidationError's field messages into one line of text."""
    messages = exc.messages
    if isinstance(messages, dict):
        return " ".join(str(msg) for msgs in messages.values() for msg in msgs)
    return str(messages)


class InventoryHandlers:
    def __init__(self, inventory_id: str, out: TextIO | None = None) -> None:
        self.inventory_id = inventory_id
        self.out = out or sys.stdout

    @property
    def routes(self) -> dict[str, Callable[..., None]]:
        return {
            "restock": self.restock,
            "sell": self.sell,
            "print_inventory": self.print_inventory,
        }

    def dispatch(self, command: ParsedCommand) -> None:
        """Invoke the handler for a routed command."""
        handler = self.routes[command.route]
        handler(**command.args)

    def current_level(self) -> int:
        item = current_domain.repository_for(Inventory).get(self.inventory_id)
        return item.on_hand or 0

    def restock(self, qty: int) -> None:
        current_domain.process(
            RestockInventory(inventory_id=self.inventory_id, quantity=qty),
            asynchronous=False,
        )

    def sell(self, qty: int) -> None:
        current_domain.process(
            SellStock(inventory_id=self.inventory_id, quantity=qty),
            asynchronous=False,
        )

    def print_inventory(self) -> None:
        self.out.write(INVENTORY_MESSAGE.format(on_hand=self.current_level()) + "\n")
