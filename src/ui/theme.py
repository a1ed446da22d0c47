"""Colouring of rendered viewport cells."""

from typing import Optional

from rich.text import Text

from src.content_loader.runtime_bootstrap import GameSettings
from src.rendering.viewport import CellKind, ViewportCell
from src.world.game_map import GameMap


def cell_style(cell: ViewportCell, game_map: GameMap, settings: GameSettings) -> Optional[str]:
    if cell.kind == CellKind.PLAYER:
        return f"bold {settings.player_color}"
    if cell.kind == CellKind.ITEM:
        return settings.item_color
    return game_map.terrain_types[cell.terrain_label].colour


def map_text(rows: list[list[ViewportCell]], game_map: GameMap, settings: GameSettings) -> Text:
    """Join rendered rows into one styled block."""
    text = Text()
    for index, row in enumerate(rows):
        if index:
            text.append("\n")
        for cell in row:
            text.append(cell.glyph, style=cell_style(cell, game_map, settings))
    return text
