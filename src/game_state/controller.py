"""
Game controller: turns discrete input actions into state transitions.

Both shells feed actions here and draw whatever ActionOutcome comes back,
so the rules for what a key press means live in one place.
"""

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Optional

from src.data_models import ActionResult, Direction
from src.game_state.game_state import GameState

logger = logging.getLogger(__name__)


class Action(str, Enum):
    """Discrete signals delivered by the input source."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    PICK_UP = "pick_up"
    INVENTORY = "inventory"
    HELP = "help"
    QUIT = "quit"
    NONE = "none"


MOVE_ACTIONS: dict[Action, Direction] = {
    Action.MOVE_UP: Direction.UP,
    Action.MOVE_DOWN: Direction.DOWN,
    Action.MOVE_LEFT: Direction.LEFT,
    Action.MOVE_RIGHT: Direction.RIGHT,
}


class Popup(str, Enum):
    """Full-screen overlays a shell can show until the next key press."""

    HELP = "help"
    INVENTORY = "inventory"


@dataclass
class ActionOutcome:
    """What the shell should show after an action."""

    messages: list[str] = field(default_factory=list)
    popup: Optional[Popup] = None
    quit: bool = False
    redraw: bool = True
    result: Optional[ActionResult] = None


class GameController:
    """Dispatches actions against a GameState."""

    def __init__(self, state: GameState, auto_pickup: bool = False):
        self.state = state
        self.auto_pickup = auto_pickup
        self.finished = False

    def handle(self, action: Action) -> ActionOutcome:
        """
        Apply one action.

        Args:
            action: The decoded input signal

        Returns:
            ActionOutcome describing messages, popups and whether to quit
        """
        if action in MOVE_ACTIONS:
            return self._handle_move(MOVE_ACTIONS[action])

        if action == Action.PICK_UP:
            result = self.state.pick_up()
            return ActionOutcome(messages=[result.message], result=result)

        if action == Action.INVENTORY:
            return ActionOutcome(popup=Popup.INVENTORY)

        if action == Action.HELP:
            return ActionOutcome(popup=Popup.HELP)

        if action == Action.QUIT:
            self.finished = True
            return ActionOutcome(messages=["You quit the game."], quit=True)

        return ActionOutcome(redraw=False)

    def _handle_move(self, direction: Direction) -> ActionOutcome:
        result = self.state.move(direction)
        outcome = ActionOutcome(result=result)

        if not result.success:
            outcome.messages.append(result.message)
            return outcome

        # Without auto pickup the item under the player shows in the status block
        if self.auto_pickup and self.state.item_under_player() is not None:
            outcome.result = self.state.pick_up()
            outcome.messages.append(outcome.result.message)

        if self.state.at_exit():
            logger.info(f"Player reached the exit at {self.state.player.position}")
            self.finished = True
            outcome.messages.append("You found the exit! You win!")
            outcome.quit = True

        return outcome
