"""
Tests for key to action mapping.
"""

import readchar

from src.game_state.controller import Action
from src.ui.keys import action_for_key


class TestActionForKey:
    """Tests for the single-keypress mapping."""

    def test_wasd(self):
        assert action_for_key("w") == Action.MOVE_UP
        assert action_for_key("a") == Action.MOVE_LEFT
        assert action_for_key("s") == Action.MOVE_DOWN
        assert action_for_key("d") == Action.MOVE_RIGHT

    def test_arrow_keys(self):
        assert action_for_key(readchar.key.UP) == Action.MOVE_UP
        assert action_for_key(readchar.key.DOWN) == Action.MOVE_DOWN
        assert action_for_key(readchar.key.LEFT) == Action.MOVE_LEFT
        assert action_for_key(readchar.key.RIGHT) == Action.MOVE_RIGHT

    def test_commands(self):
        assert action_for_key("p") == Action.PICK_UP
        assert action_for_key("i") == Action.INVENTORY
        assert action_for_key("h") == Action.HELP
        assert action_for_key("q") == Action.QUIT

    def test_quit_keys(self):
        assert action_for_key(readchar.key.ESC) == Action.QUIT

    def test_case_insensitive(self):
        assert action_for_key("W") == Action.MOVE_UP
        assert action_for_key("P") == Action.PICK_UP

    def test_unmapped(self):
        assert action_for_key("x") == Action.NONE
        assert action_for_key("\x1b[H") == Action.NONE
