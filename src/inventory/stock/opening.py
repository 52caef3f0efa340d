"""Inventory opening: command and handler."""

import structlog
from protean import handle
from protean.fields import Integer
from protean.utils.globals import current_domain

from inventory.domain import inventory
from inventory.stock.stock import Inventory

logger = structlog.get_logger(__name__)


@inventory.command(part_of="Inventory")
class OpenInventory:
    """Open a new inventory with a starting count."""

    initial_quantity = Integer(default=0)


@inventory.command_handler(part_of=Inventory)
class OpenInventoryHandler:
    @handle(OpenInventory)
    def open_inventory(self, command):
        item = Inventory.open(initial_quantity=command.initial_quantity or 0)
        current_domain.repository_for(Inventory).add(item)
        logger.info("Inventory opened", inventory_id=str(item.id), on_hand=item.on_hand)
        return str(item.id)
