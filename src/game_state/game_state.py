"""
Game state for Gridwalk.

GameState is the explicit handle the shells hold: the player, the map and
the item registry. Movement and pickup are methods on it; each one returns
an ActionResult instead of raising, so the input loop can show the outcome
and carry on.
"""

from dataclasses import dataclass
import logging
from typing import Optional

from src.data_models import (
    ActionResult,
    ConfigurationError,
    Direction,
    Item,
    Position,
)
from src.items.item_registry import ItemRegistry
from src.world.game_map import GameMap

logger = logging.getLogger(__name__)


DEFAULT_PLAYER_START = Position(1, 1)


@dataclass
class Player:
    """
    The player's position plus a view of what they hold.

    Held items live in the registry; ``inventory`` reads them back in
    pickup order.
    """
    position: Position
    registry: ItemRegistry

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    @property
    def inventory(self) -> list[Item]:
        return self.registry.inventory()


class GameState:
    """Single in-process game state, owned by the input loop."""

    def __init__(
        self,
        game_map: GameMap,
        registry: Optional[ItemRegistry] = None,
        player_start: Position = DEFAULT_PLAYER_START,
        exit_position: Optional[Position] = None,
    ):
        self.game_map = game_map
        self.registry = registry if registry is not None else ItemRegistry()

        if not game_map.in_bounds(player_start.x, player_start.y):
            raise ConfigurationError(
                f"Player start {player_start} is outside the "
                f"{game_map.width}x{game_map.height} map"
            )
        if not game_map.is_passable(player_start.x, player_start.y):
            raise ConfigurationError(f"Player start {player_start} is impassable")
        if exit_position is not None and not game_map.in_bounds(exit_position.x, exit_position.y):
            raise ConfigurationError(f"Exit {exit_position} is outside the map")

        self.player = Player(position=player_start, registry=self.registry)
        self.exit_position = exit_position

    # =========================================================================
    # QUERIES
    # =========================================================================

    @property
    def map_width(self) -> int:
        return self.game_map.width

    @property
    def map_height(self) -> int:
        return self.game_map.height

    @property
    def world_items(self) -> list[Item]:
        return self.registry.world_items()

    @property
    def inventory(self) -> list[Item]:
        return self.registry.inventory()

    def is_passable(self, x: int, y: int) -> bool:
        return self.game_map.is_passable(x, y)

    def terrain_under_player(self) -> str:
        """Description of the terrain the player stands on."""
        return self.game_map.describe_terrain(self.player.x, self.player.y)

    def item_under_player(self) -> Optional[Item]:
        return self.registry.item_at(self.player.x, self.player.y)

    def at_exit(self) -> bool:
        return self.exit_position is not None and self.player.position == self.exit_position

    # =========================================================================
    # TRANSITIONS
    # =========================================================================

    def move(self, direction: Direction) -> ActionResult:
        """
        Step one cell in ``direction``.

        The move is refused, leaving the position unchanged, when the target
        is off the map or its terrain is impassable.
        """
        target = self.player.position.moved(direction)

        if not self.game_map.in_bounds(target.x, target.y):
            logger.debug(f"Move {direction.value} from {self.player.position} blocked by map edge")
            return ActionResult(
                success=False,
                reason="out_of_bounds",
                message="You cannot move beyond the edge of the map.",
                position=self.player.position,
            )

        if not self.game_map.is_passable(target.x, target.y):
            logger.debug(f"Move {direction.value} to {target} blocked by terrain")
            return ActionResult(
                success=False,
                reason="impassable",
                message="The terrain is impassable in that direction.",
                position=self.player.position,
            )

        self.player.position = target
        return ActionResult(success=True, reason="moved", position=target)

    def pick_up(self) -> ActionResult:
        """Move the item under the player, if any, into the inventory."""
        item = self.item_under_player()
        if item is None:
            return ActionResult(
                success=False,
                reason="nothing_here",
                message="There is no item to pick up here.",
                position=self.player.position,
            )

        self.registry.transfer_to_inventory(item.item_id)
        logger.info(f"Picked up {item.item_id}")
        return ActionResult(
            success=True,
            reason="picked_up",
            message=f"You picked up a {item.name}!",
            item=item,
            position=self.player.position,
        )
