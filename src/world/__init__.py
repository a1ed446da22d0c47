"""World map module."""

from src.world.game_map import GameMap

__all__ = ["GameMap"]
