"""
Item catalog and ownership tracking for Gridwalk.

This module provides:
- ItemCatalog: Loads item templates and creates typed items from them
- ItemRegistry: Tracks whether each placed item is in the world or held
"""

from src.items.item_catalog import ItemCatalog
from src.items.item_registry import ItemRegistry

__all__ = ["ItemCatalog", "ItemRegistry"]
