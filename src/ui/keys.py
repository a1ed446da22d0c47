"""
Single-keypress input.

Keys are read one at a time with ``readchar`` (no line buffering) and
mapped to controller actions. Ctrl-C never arrives as a key: readchar
raises KeyboardInterrupt, which the shells treat as quit.
"""

from typing import Callable

import readchar

from src.game_state.controller import Action


KeySource = Callable[[], str]


KEY_ACTIONS: dict[str, Action] = {
    "w": Action.MOVE_UP,
    "a": Action.MOVE_LEFT,
    "s": Action.MOVE_DOWN,
    "d": Action.MOVE_RIGHT,
    readchar.key.UP: Action.MOVE_UP,
    readchar.key.LEFT: Action.MOVE_LEFT,
    readchar.key.DOWN: Action.MOVE_DOWN,
    readchar.key.RIGHT: Action.MOVE_RIGHT,
    "p": Action.PICK_UP,
    "i": Action.INVENTORY,
    "h": Action.HELP,
    "q": Action.QUIT,
    readchar.key.ESC: Action.QUIT,
}


def action_for_key(key: str) -> Action:
    """Map a raw key to an Action; letters are case-insensitive."""
    if key in KEY_ACTIONS:
        return KEY_ACTIONS[key]
    if len(key) == 1:
        return KEY_ACTIONS.get(key.lower(), Action.NONE)
    return Action.NONE


def read_key() -> str:
    """Block until one key is pressed."""
    return readchar.readkey()
