"""
Raw console shell.

Clears the terminal and prints the viewport and a status block after every
key press. Help and inventory replace the screen until any key is pressed.
"""

import logging
from typing import Optional

from rich.console import Console

from src.content_loader.runtime_bootstrap import GameSettings
from src.game_state.controller import Action, ActionOutcome, GameController, Popup
from src.rendering.viewport import ViewportRenderer
from src.ui.keys import KeySource, action_for_key, read_key
from src.ui.text import help_lines, info_lines, inventory_lines
from src.ui.theme import map_text

logger = logging.getLogger(__name__)


class ConsoleShell:
    """Interactive console loop driven by single key presses."""

    def __init__(
        self,
        controller: GameController,
        settings: GameSettings,
        console: Optional[Console] = None,
        key_source: KeySource = read_key,
    ):
        self.controller = controller
        self.settings = settings
        self.console = console or Console()
        self.key_source = key_source
        self.renderer = ViewportRenderer(
            width=settings.viewport_width,
            height=settings.viewport_height,
            player_glyph=settings.player_char,
            item_glyph=settings.item_char,
        )
        self.running = False

    def draw(self, messages: Optional[list[str]] = None) -> None:
        state = self.controller.state
        self.console.clear()
        self.console.print(map_text(self.renderer.render_cells(state), state.game_map, self.settings))
        self.console.print("[green]Use h for help.[/green]")
        for line in info_lines(state, self.settings, messages or []):
            if line:
                self.console.print(line)

    def show_popup(self, popup: Popup) -> None:
        if popup == Popup.HELP:
            lines = help_lines(self.settings)
        else:
            lines = inventory_lines(self.settings, self.controller.state.inventory)

        self.console.clear()
        for line in lines:
            self.console.print(line)
        self.console.print("[green]Press any key to return to the game.[/green]")
        self.key_source()

    def step(self, key: str) -> ActionOutcome:
        """Handle one key press and redraw."""
        action = action_for_key(key)
        outcome = self.controller.handle(action)

        if outcome.popup is not None:
            self.show_popup(outcome.popup)
            self.draw()
        elif outcome.quit:
            for message in outcome.messages:
                self.console.print(message)
        elif outcome.redraw:
            self.draw(outcome.messages)
        return outcome

    def run(self) -> None:
        """Run until the player quits or reaches the exit."""
        self.running = True
        self.console.print("Welcome to Gridwalk!")
        self.draw()

        while self.running:
            try:
                key = self.key_source()
            except KeyboardInterrupt:
                key = None

            if key is None:
                outcome = self.controller.handle(Action.QUIT)
                self.console.print(outcome.messages[0])
                break

            outcome = self.step(key)
            if outcome.quit:
                break

        self.running = False
        logger.info("Console session ended")
