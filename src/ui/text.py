"""
Text blocks shared by the console and panel shells.

Everything here returns ``rich`` markup strings built from the theme, so
the shells only decide where the text goes.
"""

from rich.markup import escape

from src.content_loader.runtime_bootstrap import GameSettings
from src.data_models import Item
from src.game_state.game_state import GameState


HELP_COMMANDS: list[tuple[str, str]] = [
    ("WASD", "Move up, left, down, right."),
    ("I   ", "View inventory."),
    ("P   ", "Pick up items."),
    ("H   ", "Show this help screen."),
    ("Q   ", "Quit the game."),
]


def styled(text: str, colour: str) -> str:
    return f"[{colour}]{escape(text)}[/{colour}]"


def help_lines(settings: GameSettings) -> list[str]:
    colon = styled(" : ", settings.punctuation_color)
    lines = [
        styled("Help Screen", settings.heading_color),
        styled("Use the following keys to control the game:", settings.text_color),
    ]
    for keys, text in HELP_COMMANDS:
        lines.append(
            f"{styled(keys, settings.pertinent_color)}{colon}"
            f"{styled(text, settings.text_color)}"
        )
    return lines


def inventory_lines(settings: GameSettings, inventory: list[Item]) -> list[str]:
    lines = [styled("Inventory", settings.heading_color)]
    if not inventory:
        lines.append(styled("Your inventory is empty.", settings.text_color))
        return lines
    for index, item in enumerate(inventory, start=1):
        lines.append(f"[blue]{index}[/blue]. {styled(item.describe(), settings.text_color)}")
    return lines


def terrain_line(state: GameState) -> str:
    terrain = state.game_map.terrain_at(state.player.x, state.player.y)
    description = escape(terrain.description)
    if terrain.colour:
        description = f"[{terrain.colour}]{description}[/{terrain.colour}]"
    return f"[cyan]You are standing on [/cyan]{description}"


def item_line(state: GameState, settings: GameSettings) -> str:
    item = state.item_under_player()
    if item is None:
        return ""
    return styled(f"You see a {item.name} here: {item.description}", settings.item_color)


def info_lines(state: GameState, settings: GameSettings, extra: list[str]) -> list[str]:
    """Status block: terrain under the player, item under the player, messages."""
    lines = [terrain_line(state), item_line(state, settings)]
    lines.extend(escape(message) for message in extra if message)
    return lines
