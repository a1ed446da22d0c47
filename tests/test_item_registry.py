"""
Tests for ItemRegistry ownership tracking.
"""

import pytest

from src.data_models import ItemLocation
from src.items.item_registry import ItemRegistry


@pytest.fixture
def registry(catalog):
    return ItemRegistry([
        catalog.create_item("Sword", 3, 3),
        catalog.create_item("Rope", 5, 5),
        catalog.create_item("Grenade", 1, 8),
    ])


class TestWorldItems:
    """Tests for the world-item view."""

    def test_placement_order_preserved(self, registry):
        assert [item.name for item in registry.world_items()] == ["Sword", "Rope", "Grenade"]

    def test_item_at(self, registry):
        assert registry.item_at(5, 5).name == "Rope"
        assert registry.item_at(0, 0) is None
        assert registry.has_item_at(3, 3)

    def test_duplicate_identity_keeps_first(self, catalog, registry):
        assert registry.add(catalog.create_item("Sword", 3, 3)) is False
        assert len(registry) == 3

    def test_first_match_wins_on_shared_cell(self, catalog):
        registry = ItemRegistry([
            catalog.create_item("Rope", 2, 2),
            catalog.create_item("Sword", 2, 2),
        ])
        assert registry.item_at(2, 2).name == "Rope"


class TestTransfer:
    """Tests for moving items into the inventory."""

    def test_item_in_exactly_one_collection(self, registry):
        registry.transfer_to_inventory("Rope_5_5")

        world_ids = [item.item_id for item in registry.world_items()]
        held_ids = [item.item_id for item in registry.inventory()]
        assert "Rope_5_5" not in world_ids
        assert held_ids == ["Rope_5_5"]
        assert registry.location_of("Rope_5_5") == ItemLocation.INVENTORY

    def test_inventory_in_pickup_order(self, registry):
        registry.transfer_to_inventory("Grenade_1_8")
        registry.transfer_to_inventory("Sword_3_3")
        assert [item.name for item in registry.inventory()] == ["Grenade", "Sword"]

    def test_held_item_no_longer_found_in_world(self, registry):
        registry.transfer_to_inventory("Sword_3_3")
        assert registry.item_at(3, 3) is None

    def test_double_transfer_rejected(self, registry):
        registry.transfer_to_inventory("Sword_3_3")
        with pytest.raises(ValueError):
            registry.transfer_to_inventory("Sword_3_3")
        assert len(registry.inventory()) == 1

    def test_unknown_id_rejected(self, registry):
        with pytest.raises(KeyError):
            registry.transfer_to_inventory("Nothing_0_0")
