"""
Shared data structures for Gridwalk.

Items, terrain definitions, positions and action results are plain
dataclasses shared by the catalog, the map, the game state and the shells.
No structure here owns another; the game state holds them together.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from enum import Enum
from typing import Any, Callable, Mapping, Optional


# =============================================================================
# ERRORS
# =============================================================================


class ConfigurationError(Exception):
    """Raised when game configuration cannot be loaded or is inconsistent."""
    pass


# =============================================================================
# ENUMS
# =============================================================================


class ItemCategory(str, Enum):
    """Closed set of item categories declared by item templates."""
    MELEE_WEAPON = "melee_weapon"
    ARMOR = "armor"
    POTION = "potion"
    GRENADE = "grenade"
    DEFAULT = "default"

    @classmethod
    def parse(cls, value: Optional[str]) -> "ItemCategory":
        """Map a template ``type`` string to a category, falling back to DEFAULT."""
        if not value:
            return cls.DEFAULT
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.DEFAULT


class ItemLocation(str, Enum):
    """Where an item currently lives."""
    WORLD = "world"
    INVENTORY = "inventory"


class Direction(str, Enum):
    """The four axis-aligned movement directions."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DIRECTION_DELTAS[self]


_DIRECTION_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


# =============================================================================
# POSITIONS
# =============================================================================


@dataclass(frozen=True)
class Position:
    """An integer grid coordinate. ``y`` grows downwards."""
    x: int
    y: int

    def moved(self, direction: Direction) -> "Position":
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


# =============================================================================
# ITEMS
# =============================================================================


def make_item_id(name: str, x: int, y: int) -> str:
    """Identity of a placed item: its name plus its placement coordinate."""
    return f"{name}_{x}_{y}"


def _melee_clause(attributes: Mapping[str, Any]) -> str:
    return f"Damage: {attributes.get('damage_range', '')} ({attributes.get('damage_type', '')})"


def _armor_clause(attributes: Mapping[str, Any]) -> str:
    return f"Armor Class: {attributes.get('armor_class', 0)}"


def _potion_clause(attributes: Mapping[str, Any]) -> str:
    return "Effect: restores health"


def _grenade_clause(attributes: Mapping[str, Any]) -> str:
    return f"Explosive Power: {attributes.get('explosive_power', 0)}"


# Variant clause appended after the base description, selected by category.
# DEFAULT items have no clause.
DESCRIPTION_CLAUSES: dict[ItemCategory, Callable[[Mapping[str, Any]], str]] = {
    ItemCategory.MELEE_WEAPON: _melee_clause,
    ItemCategory.ARMOR: _armor_clause,
    ItemCategory.POTION: _potion_clause,
    ItemCategory.GRENADE: _grenade_clause,
}


@dataclass(frozen=True)
class Item:
    """
    A placeable, collectible object.

    One record type covers every category. Category-specific values live in
    the read-only ``attributes`` mapping:

        melee_weapon: damage_range (str, e.g. "2-6"), damage_type (str)
        armor:        armor_class (int)
        grenade:      explosive_power (int)
        potion, default: nothing extra

    ``position`` is where the item was placed on the map. It is kept after
    pickup because it is part of the item's identity.
    """
    name: str
    category: ItemCategory
    description: str
    weight: float
    average_market_price: float
    rarity: str
    position: Position
    attributes: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self):
        if not self.name:
            raise ValueError("Item name must not be empty")
        if self.weight < 0:
            raise ValueError(f"Item weight must be non-negative: {self.weight}")
        if self.average_market_price < 0:
            raise ValueError(
                f"Item market price must be non-negative: {self.average_market_price}"
            )
        # Read-only copy; the caller's dict stays independent
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @property
    def item_id(self) -> str:
        return make_item_id(self.name, self.position.x, self.position.y)

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    # Variant accessors; None for categories that do not carry the value.

    @property
    def damage_range(self) -> Optional[str]:
        return self.attributes.get("damage_range")

    @property
    def damage_type(self) -> Optional[str]:
        return self.attributes.get("damage_type")

    @property
    def armor_class(self) -> Optional[int]:
        return self.attributes.get("armor_class")

    @property
    def explosive_power(self) -> Optional[int]:
        return self.attributes.get("explosive_power")

    def is_at(self, x: int, y: int) -> bool:
        return self.position.x == x and self.position.y == y

    def describe(self) -> str:
        """Human-readable summary: base description plus the variant clause."""
        base = f"{self.name} (Type: {self.category.value}) - {self.description}"
        clause = DESCRIPTION_CLAUSES.get(self.category)
        if clause is None:
            return base
        return f"{base} | {clause(self.attributes)}"


# =============================================================================
# TERRAIN
# =============================================================================


@dataclass(frozen=True)
class TerrainType:
    """An entry of the terrain-type table."""
    label: str
    description: str
    passable: bool = True
    glyph: str = ""
    colour: Optional[str] = None

    def __post_init__(self):
        # The label doubles as the glyph unless one is configured
        if not self.glyph:
            object.__setattr__(self, "glyph", self.label)


# =============================================================================
# ACTION RESULTS
# =============================================================================


@dataclass
class ActionResult:
    """Result of attempting a move or a pickup."""
    success: bool
    reason: str = ""
    message: str = ""
    item: Optional[Item] = None
    position: Optional[Position] = None
