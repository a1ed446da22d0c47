"""Terminal front ends: key input, text blocks and the two shells."""

from src.ui.console_shell import ConsoleShell
from src.ui.panel_shell import PanelShell
from src.ui.keys import action_for_key, read_key

__all__ = ["ConsoleShell", "PanelShell", "action_for_key", "read_key"]
