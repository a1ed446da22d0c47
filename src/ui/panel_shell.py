"""
Terminal UI panel shell.

A full-screen ``rich`` layout with a bordered map panel, an info panel
below it and, when debug is on, a panel showing the viewport arithmetic.
Help and inventory open as a popup over the map until any key is pressed.
"""

import logging
from typing import Optional

from rich.align import Align
from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.table import Table

from src.content_loader.runtime_bootstrap import GameSettings
from src.game_state.controller import Action, ActionOutcome, GameController, Popup
from src.rendering.viewport import ViewportRenderer
from src.ui.keys import KeySource, action_for_key, read_key
from src.ui.text import help_lines, info_lines, inventory_lines
from src.ui.theme import map_text

logger = logging.getLogger(__name__)


class PanelShell:
    """Panel layout game loop."""

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
        self.popup: Optional[Popup] = None
        self.messages: list[str] = []
        self.layout = self.generate_layout()

    def generate_layout(self) -> Layout:
        layout = Layout()
        layout.split_row(
            Layout(name="main"),
            Layout(name="debug", size=self.settings.debug_panel_width, visible=self.settings.debug),
        )
        # Borders take one row above and one below
        layout["main"].split_column(
            Layout(name="map", size=self.settings.viewport_height + 2),
            Layout(name="info", size=self.settings.info_panel_height),
            Layout(name="filler"),
        )
        layout["main"]["filler"].update("")
        return layout

    def map_panel(self) -> Panel:
        state = self.controller.state
        rows = self.renderer.render_cells(state)
        return Panel(
            map_text(rows, state.game_map, self.settings),
            title="Map",
            border_style="magenta",
            width=self.settings.viewport_width + 4,
        )

    def popup_panel(self, popup: Popup) -> Panel:
        if popup == Popup.HELP:
            lines = help_lines(self.settings)
        else:
            lines = inventory_lines(self.settings, self.controller.state.inventory)
        return Panel(
            Align.center("\n".join(lines), vertical="middle"),
            border_style="white",
            subtitle="Press any key to return",
        )

    def info_panel(self) -> Panel:
        lines = info_lines(self.controller.state, self.settings, self.messages)
        return Panel("\n".join(lines), title="Info", border_style="yellow")

    def debug_panel(self) -> Panel:
        table = Table.grid(expand=True)
        table.add_column()
        table.add_column(justify="right")
        for label, value in self.renderer.debug_lines(self.controller.state):
            table.add_row(f"{label}:", value)
        return Panel(table, title="Debug", border_style="white")

    def update_layout(self) -> None:
        if self.popup is not None:
            self.layout["main"]["map"].update(self.popup_panel(self.popup))
        else:
            self.layout["main"]["map"].update(self.map_panel())
        self.layout["main"]["info"].update(self.info_panel())
        if self.settings.debug:
            self.layout["debug"].update(self.debug_panel())

    def step(self, key: str) -> ActionOutcome:
        """Handle one key press; any key closes an open popup."""
        if self.popup is not None:
            self.popup = None
            self.update_layout()
            return ActionOutcome()

        outcome = self.controller.handle(action_for_key(key))
        if outcome.redraw:
            self.messages = list(outcome.messages)
            self.popup = outcome.popup
            self.update_layout()
        return outcome

    def run(self) -> None:
        """Run the full-screen loop until quit."""
        self.update_layout()
        with Live(self.layout, console=self.console, screen=True, auto_refresh=False) as live:
            live.refresh()
            while True:
                try:
                    key = self.key_source()
                except KeyboardInterrupt:
                    self.controller.handle(Action.QUIT)
                    break

                outcome = self.step(key)
                if outcome.quit:
                    break
                live.refresh()

        for message in self.messages:
            if message:
                self.console.print(message)
        logger.info("Panel session ended")
