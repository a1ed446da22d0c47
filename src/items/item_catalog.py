"""
Item catalog loader for item templates.

Templates come from ``items.json`` in the config directory: a mapping of
template key to an attribute bundle, e.g.

    {
        "Sword": {
            "name": "Sword",
            "type": "melee_weapon",
            "description": "A sharp blade.",
            "weight": 3,
            "average_market_price": 15,
            "rarity": "common",
            "damage_range": "2-6",
            "damage_type": "slashing"
        }
    }

The catalog turns a template key plus a placement coordinate into an Item.
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

from src.data_models import Item, ItemCategory, Position

logger = logging.getLogger(__name__)


# Category-specific payload builders. Each reads only the keys its category
# carries from the (read-only) template.

def _melee_weapon_attributes(template: dict[str, Any]) -> dict[str, Any]:
    return {
        "damage_range": str(template.get("damage_range", "")),
        "damage_type": str(template.get("damage_type", "")),
    }


def _armor_attributes(template: dict[str, Any]) -> dict[str, Any]:
    return {"armor_class": int(template.get("armor_class", 0))}


def _grenade_attributes(template: dict[str, Any]) -> dict[str, Any]:
    return {"explosive_power": int(template.get("explosive_power", 0))}


def _no_attributes(template: dict[str, Any]) -> dict[str, Any]:
    return {}


VARIANT_BUILDERS: dict[ItemCategory, Callable[[dict[str, Any]], dict[str, Any]]] = {
    ItemCategory.MELEE_WEAPON: _melee_weapon_attributes,
    ItemCategory.ARMOR: _armor_attributes,
    ItemCategory.POTION: _no_attributes,
    ItemCategory.GRENADE: _grenade_attributes,
    ItemCategory.DEFAULT: _no_attributes,
}


class ItemCatalog:
    """
    Catalog of item templates keyed by template key.

    The template table is treated as read-only input; created items copy
    what they need out of it.
    """

    def __init__(self, templates: Optional[dict[str, dict[str, Any]]] = None):
        """
        Initialize the item catalog.

        Args:
            templates: Mapping of template key -> attribute bundle
        """
        self._templates: dict[str, dict[str, Any]] = dict(templates or {})

    @classmethod
    def from_file(cls, path: Path) -> "ItemCatalog":
        """Load templates from an ``items.json`` file."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Item templates in {path} must be a JSON object")

        catalog = cls(data)
        logger.info(f"Loaded {len(catalog)} item templates from {path}")
        return catalog

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, key: str) -> bool:
        return key in self._templates

    def keys(self) -> list[str]:
        return list(self._templates)

    def get(self, key: str) -> Optional[dict[str, Any]]:
        """
        Get the template for a key.

        Args:
            key: The template key

        Returns:
            Template dictionary or None if not found
        """
        return self._templates.get(key)

    def create_item(self, key: str, x: int, y: int) -> Optional[Item]:
        """
        Create an Item instance from the catalog.

        Coordinates are stored as given; bounds checking is the caller's job.

        Args:
            key: The template key
            x: Placement column
            y: Placement row

        Returns:
            Item instance, or None if the key is unknown or the template
            is malformed
        """
        template = self._templates.get(key)
        if template is None:
            logger.warning(f"Item not found: {key}")
            return None

        if not isinstance(template, dict):
            logger.warning(f"Item template '{key}' is not an object")
            return None

        category = ItemCategory.parse(template.get("type"))
        try:
            return Item(
                name=str(template.get("name") or key),
                category=category,
                description=str(template.get("description", "")),
                weight=float(template.get("weight", 0)),
                average_market_price=float(template.get("average_market_price", 0)),
                rarity=str(template.get("rarity", "")),
                position=Position(int(x), int(y)),
                attributes=VARIANT_BUILDERS[category](template),
            )
        except (TypeError, ValueError) as e:
            logger.warning(f"Malformed item template '{key}': {e}")
            return None

    def create_placements(self, placements: Iterable[dict[str, Any]]) -> list[Item]:
        """
        Build items for a list of ``{"key", "x", "y"}`` placement records.

        Placements whose key is unknown, or whose record is malformed, are
        logged and left out of the result.
        """
        items: list[Item] = []
        for placement in placements:
            try:
                key = placement["key"]
                if not isinstance(key, str):
                    raise TypeError(f"key must be a string, got {type(key).__name__}")
                x, y = int(placement["x"]), int(placement["y"])
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed item placement {placement!r}: {e}")
                continue

            item = self.create_item(key, x, y)
            if item is not None:
                items.append(item)
        return items
