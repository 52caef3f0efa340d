"""Inventory bounded context: a single stock counter driven from the terminal.

Tracks the on-hand count of one inventory (event-sourced). Stock moves in
through restocking and out through sales; every accepted change is recorded
as a domain event.
"""

import structlog
from protean.domain import Domain

inventory = Domain(name="inventory")

logger = structlog.get_logger(__name__)
