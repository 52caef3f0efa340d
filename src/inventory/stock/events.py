"""Domain events for the Inventory aggregate.

All events are versioned, immutable facts representing stock movements.
They are persisted to the event store and replayed through @apply to
rebuild the current count.
"""

from protean.fields import DateTime, Identifier, Integer

from inventory.domain import inventory


@inventory.event(part_of="Inventory")
class InventoryOpened:
    """A new inventory was opened with a starting count."""

    __version__ = 1

    inventory_id = Identifier(required=True)
    initial_quantity = Integer(required=True)
    opened_at = DateTime(required=True)


@inventory.event(part_of="Inventory")
class StockRestocked:
    """Stock was added, increasing the on-hand count."""

    __version__ = 1

    inventory_id = Identifier(required=True)
    quantity = Integer(required=True)
    previous_on_hand = Integer(required=True)
    new_on_hand = Integer(required=True)
    restocked_at = DateTime(required=True)


@inventory.event(part_of="Inventory")
class StockSold:
    """Stock was sold, decreasing the on-hand count."""

    __version__ = 1

    inventory_id = Identifier(required=True)
    quantity = Integer(required=True)
    previous_on_hand = Integer(required=True)
    new_on_hand = Integer(required=True)
    sold_at = DateTime(required=True)
