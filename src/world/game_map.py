"""
Game map: a fixed terrain grid plus the terrain-type table.

Both are loaded once and never change during a session.
"""

import logging
from typing import Sequence, Union

from src.data_models import ConfigurationError, TerrainType

logger = logging.getLogger(__name__)


class GameMap:
    """
    A rectangular grid of terrain labels, indexed ``terrain[y][x]``.

    Rows may be given as strings (one label per character) or as lists of
    labels.
    """

    def __init__(
        self,
        terrain_rows: Sequence[Union[str, Sequence[str]]],
        terrain_types: dict[str, TerrainType],
    ):
        if not isinstance(terrain_rows, (list, tuple)):
            raise ConfigurationError("Terrain rows must be a list")
        for y, row in enumerate(terrain_rows):
            if not isinstance(row, (str, list, tuple)):
                raise ConfigurationError(f"Map row {y} must be a string or a list")
        self.terrain: list[list[str]] = [list(row) for row in terrain_rows]
        self.terrain_types = dict(terrain_types)
        self._validate()
        logger.debug(f"Map loaded: {self.width}x{self.height}")

    def _validate(self) -> None:
        if not self.terrain or not self.terrain[0]:
            raise ConfigurationError("Map has no terrain rows")

        width = len(self.terrain[0])
        for y, row in enumerate(self.terrain):
            if len(row) != width:
                raise ConfigurationError(
                    f"Map row {y} has {len(row)} cells, expected {width}"
                )
            for x, label in enumerate(row):
                if not isinstance(label, str) or label not in self.terrain_types:
                    raise ConfigurationError(
                        f"Unknown terrain type '{label}' at {x},{y}"
                    )

    @property
    def width(self) -> int:
        return len(self.terrain[0])

    @property
    def height(self) -> int:
        return len(self.terrain)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def terrain_label(self, x: int, y: int) -> str:
        return self.terrain[y][x]

    def terrain_at(self, x: int, y: int) -> TerrainType:
        return self.terrain_types[self.terrain[y][x]]

    def is_passable(self, x: int, y: int) -> bool:
        """Passability of a cell; cells off the map are never passable."""
        if not self.in_bounds(x, y):
            return False
        return self.terrain_at(x, y).passable

    def describe_terrain(self, x: int, y: int) -> str:
        return self.terrain_at(x, y).description
