"""Selling: command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from inventory.domain import inventory
from inventory.stock.stock import Inventory

logger = structlog.get_logger(__name__)


@inventory.command(part_of="Inventory")
class SellStock:
    """Record a sale, removing stock from the inventory."""

    inventory_id = Identifier(required=True)
    quantity = Integer(required=True)


@inventory.command_handler(part_of=Inventory)
class SellStockHandler:
    @handle(SellStock)
    def sell(self, command):
        repo = current_domain.repository_for(Inventory)
        item = repo.get(command.inventory_id)
        item.sell(quantity=command.quantity)
        repo.add(item)
        logger.info(
            "Stock sold",
            inventory_id=str(command.inventory_id),
            quantity=command.quantity,
            on_hand=item.on_hand,
        )
