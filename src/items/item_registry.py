"""
Item registry: the one collection that owns every placed item.

Each item is stored once, keyed by its identity, with a location status.
The world list and the inventory are views over that collection, so an
item can never sit in both.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from src.data_models import Item, ItemLocation

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    item: Item
    location: ItemLocation = ItemLocation.WORLD


class ItemRegistry:
    """Items keyed by item_id, in placement order, with pickup order tracked."""

    def __init__(self, items: Optional[Iterable[Item]] = None):
        self._entries: dict[str, _Entry] = {}
        self._pickup_order: list[str] = []
        for item in items or []:
            self.add(item)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item_id: str) -> bool:
        return item_id in self._entries

    def add(self, item: Item) -> bool:
        """
        Place an item in the world.

        Returns:
            False if an item with the same identity is already registered
            (the new placement is dropped)
        """
        if item.item_id in self._entries:
            logger.warning(f"Duplicate item '{item.item_id}' - keeping the first placement")
            return False
        self._entries[item.item_id] = _Entry(item=item)
        return True

    def get(self, item_id: str) -> Optional[Item]:
        entry = self._entries.get(item_id)
        return entry.item if entry else None

    def location_of(self, item_id: str) -> Optional[ItemLocation]:
        entry = self._entries.get(item_id)
        return entry.location if entry else None

    def world_items(self) -> list[Item]:
        """Items still lying on the map, in placement order."""
        return [
            entry.item
            for entry in self._entries.values()
            if entry.location == ItemLocation.WORLD
        ]

    def inventory(self) -> list[Item]:
        """Held items in the order they were picked up."""
        return [self._entries[item_id].item for item_id in self._pickup_order]

    def item_at(self, x: int, y: int) -> Optional[Item]:
        """First world item at a cell, or None."""
        for entry in self._entries.values():
            if entry.location == ItemLocation.WORLD and entry.item.is_at(x, y):
                return entry.item
        return None

    def has_item_at(self, x: int, y: int) -> bool:
        return self.item_at(x, y) is not None

    def transfer_to_inventory(self, item_id: str) -> Item:
        """
        Move an item from the world into the inventory.

        Raises:
            KeyError: Unknown item_id
            ValueError: The item is already held
        """
        entry = self._entries[item_id]
        if entry.location == ItemLocation.INVENTORY:
            raise ValueError(f"Item '{item_id}' is already in the inventory")

        entry.location = ItemLocation.INVENTORY
        self._pickup_order.append(item_id)
        logger.debug(f"Item '{item_id}' moved to inventory")
        return entry.item
