"""Inventory aggregate (Event Sourced), the single stock counter.

All state changes are captured as domain events, and the current count is
rebuilt by replaying them through @apply handlers. The count can never go
negative, and an update that would leave it unchanged is rejected.
"""

from datetime import UTC, datetime

from protean import apply
from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer

from inventory.domain import inventory
from inventory.stock.events import InventoryOpened, StockRestocked, StockSold

NEGATIVE_INVENTORY = "Inventory cannot be negative."
NO_EFFECT = "The command has no effect on the inventory."
NEGATIVE_QUANTITY = "Quantity cannot be negative."


@inventory.aggregate(is_event_sourced=True)
class Inventory:
    """Event-sourced aggregate tracking the count of stock on hand."""

    on_hand = Integer(default=0)
    opened_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def open(cls, initial_quantity=0):
        """Open a new inventory with a starting count.

        All state is established by the InventoryOpened event's @apply
        handler.
        """
        if initial_quantity < 0:
            raise ValidationError({"initial_quantity": [NEGATIVE_INVENTORY]})

        item = cls._create_new()
        item.raise_(
            InventoryOpened(
                inventory_id=str(item.id),
                initial_quantity=initial_quantity,
                opened_at=datetime.now(UTC),
            )
        )
        return item

    # -------------------------------------------------------------------
    # Guard
    # -------------------------------------------------------------------
    def _guard(self, quantity, new_on_hand):
        """Reject updates that change nothing or drive the count below zero."""
        if quantity < 0:
            raise ValidationError({"quantity": [NEGATIVE_QUANTITY]})
        if new_on_hand == (self.on_hand or 0):
            raise ValidationError({"quantity": [NO_EFFECT]})
        if new_on_hand < 0:
            raise ValidationError({"quantity": [NEGATIVE_INVENTORY]})

    # -------------------------------------------------------------------
    # Stock movements
    # -------------------------------------------------------------------
    def restock(self, quantity):
        """Add stock to the inventory."""
        prev_on_hand = self.on_hand or 0
        new_on_hand = prev_on_hand + quantity
        self._guard(quantity, new_on_hand)

        self.raise_(
            StockRestocked(
                inventory_id=str(self.id),
                quantity=quantity,
                previous_on_hand=prev_on_hand,
                new_on_hand=new_on_hand,
                restocked_at=datetime.now(UTC),
            )
        )

    def sell(self, quantity):
        """Remove sold stock from the inventory."""
        prev_on_hand = self.on_hand or 0
        new_on_hand = prev_on_hand - quantity
        self._guard(quantity, new_on_hand)

        self.raise_(
            StockSold(
                inventory_id=str(self.id),
                quantity=quantity,
                previous_on_hand=prev_on_hand,
                new_on_hand=new_on_hand,
                sold_at=datetime.now(UTC),
            )
        )

    # -------------------------------------------------------------------
    # @apply methods: rebuild state during event replay
    # -------------------------------------------------------------------
    @apply
    def _on_inventory_opened(self, event: InventoryOpened):
        self.id = event.inventory_id
        self.on_hand = event.initial_quantity
        self.opened_at = event.opened_at
        self.updated_at = event.opened_at

    @apply
    def _on_stock_restocked(self, event: StockRestocked):
        self.on_hand = event.new_on_hand
        self.updated_at = event.restocked_at

    @apply
    def _on_stock_sold(self, event: StockSold):
        self.on_hand = event.new_on_hand
        self.updated_at = event.sold_at
