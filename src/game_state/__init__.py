"""Game state management module."""

from src.game_state.game_state import GameState, Player, DEFAULT_PLAYER_START
from src.game_state.controller import (
    Action,
    ActionOutcome,
    GameController,
    Popup,
)

__all__ = [
    "GameState",
    "Player",
    "DEFAULT_PLAYER_START",
    "Action",
    "ActionOutcome",
    "GameController",
    "Popup",
]
