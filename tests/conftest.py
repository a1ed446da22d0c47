"""
Pytest fixtures for the Gridwalk test suite.

Provides reusable terrain tables, maps, item templates, game states and
on-disk config directories.
"""

import pytest

from src.data_models import Position, TerrainType
from src.game_state.controller import GameController
from src.game_state.game_state import GameState
from src.items.item_catalog import ItemCatalog
from src.items.item_registry import ItemRegistry
from src.world.game_map import GameMap
from tests.helpers import write_config


# =============================================================================
# TERRAIN FIXTURES
# =============================================================================


@pytest.fixture
def terrain_types():
    """Grass is passable, walls and water are not."""
    return {
        ".": TerrainType(label=".", description="a patch of grass", colour="green"),
        "#": TerrainType(label="#", description="a stone wall", passable=False),
        "~": TerrainType(label="~", description="deep water", passable=False, colour="blue"),
    }


@pytest.fixture
def open_map(terrain_types):
    """A 10x10 map of grass."""
    return GameMap(["." * 10] * 10, terrain_types)


@pytest.fixture
def walled_map(terrain_types):
    """A 5x5 map with a wall at (2,1) and water at (1,2)."""
    return GameMap(
        [
            ".....",
            "..#..",
            ".~...",
            ".....",
            ".....",
        ],
        terrain_types,
    )


# =============================================================================
# ITEM FIXTURES
# =============================================================================


@pytest.fixture
def item_templates():
    """One template per item category plus a generic item."""
    return {
        "Sword": {
            "name": "Sword",
            "type": "melee_weapon",
            "description": "A sharp blade.",
            "weight": 3,
            "average_market_price": 15,
            "rarity": "common",
            "damage_range": "2-6",
            "damage_type": "slashing",
        },
        "Chain Mail": {
            "name": "Chain Mail",
            "type": "armor",
            "description": "Interlocking rings.",
            "weight": 20,
            "average_market_price": 75,
            "rarity": "uncommon",
            "armor_class": 15,
        },
        "Health Potion": {
            "name": "Health Potion",
            "type": "potion",
            "description": "A red vial.",
            "weight": 0.5,
            "average_market_price": 50,
            "rarity": "common",
        },
        "Grenade": {
            "name": "Grenade",
            "type": "grenade",
            "description": "Handle with care.",
            "weight": 1,
            "average_market_price": 40,
            "rarity": "rare",
            "explosive_power": 8,
        },
        "Rope": {
            "name": "Rope",
            "description": "Fifty feet of rope.",
            "weight": 5,
            "average_market_price": 1,
            "rarity": "common",
        },
    }


@pytest.fixture
def catalog(item_templates):
    return ItemCatalog(item_templates)


# =============================================================================
# STATE FIXTURES
# =============================================================================


@pytest.fixture
def sword_state(open_map, catalog):
    """10x10 grass map, player at (1,1), a Sword at (3,3)."""
    registry = ItemRegistry([catalog.create_item("Sword", 3, 3)])
    return GameState(open_map, registry, player_start=Position(1, 1))


@pytest.fixture
def controller(sword_state):
    return GameController(sword_state)


# =============================================================================
# CONFIG DIRECTORY FIXTURES
# =============================================================================


@pytest.fixture
def config_dir(tmp_path, item_templates):
    """A complete, valid config directory."""
    return write_config(
        tmp_path / "config",
        general={
            "chars": {"player": "@", "item": "I"},
            "viewPort": {"map": {"width": 8, "height": 6}},
            "colors": {"heading": {"fg": "magenta"}},
            "debug": True,
        },
        map={
            "terrainRows": [
                "..........",
                "..........",
                "...#......",
                "..........",
                "..........",
            ],
            "items": [
                {"key": "Sword", "x": 3, "y": 3},
                {"key": "Health Potion", "x": 5, "y": 1},
            ],
            "playerStart": {"x": 0, "y": 0},
        },
        items=item_templates,
        terrainTypes={
            ".": {"description": "grass", "colour": "green", "isPassable": True},
            "#": {"description": "wall", "fg": "white", "isPassable": False},
        },
    )
