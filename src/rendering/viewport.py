"""
Viewport rendering.

Computes the rectangle of the map shown around the player and resolves what
each visible cell displays. Output is renderer-agnostic: rows of glyph
strings (or tagged cells for shells that colour by kind). Joining rows and
applying colour are left to the shells.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.game_state.game_state import GameState


DEFAULT_VIEWPORT_WIDTH = 20
DEFAULT_VIEWPORT_HEIGHT = 12


class CellKind(str, Enum):
    """What occupies a rendered cell, in display priority order."""
    PLAYER = "player"
    ITEM = "item"
    TERRAIN = "terrain"


@dataclass(frozen=True)
class ViewportCell:
    """One resolved cell of the viewport."""
    kind: CellKind
    glyph: str
    x: int
    y: int
    terrain_label: str


@dataclass(frozen=True)
class Viewport:
    """Half-open map rectangle ``[start_x, end_x) x [start_y, end_y)``."""
    start_x: int
    start_y: int
    end_x: int
    end_y: int

    @property
    def width(self) -> int:
        return self.end_x - self.start_x

    @property
    def height(self) -> int:
        return self.end_y - self.start_y

    def contains(self, x: int, y: int) -> bool:
        return self.start_x <= x < self.end_x and self.start_y <= y < self.end_y


def _axis_start(player: int, map_size: int, view_size: int) -> int:
    # When the map is smaller than the view the upper bound goes negative;
    # the lower bound wins and the whole axis is shown.
    return max(0, min(player - view_size // 2, map_size - view_size))


def compute_viewport(
    player_x: int,
    player_y: int,
    map_width: int,
    map_height: int,
    width: int,
    height: int,
) -> Viewport:
    """
    Centre a ``width`` x ``height`` window on the player, clamped to the map.

    Args:
        player_x: Player column
        player_y: Player row
        map_width: Map columns
        map_height: Map rows
        width: Viewport columns
        height: Viewport rows

    Returns:
        Viewport spanning ``min(width, map_width)`` x ``min(height, map_height)``
    """
    start_x = _axis_start(player_x, map_width, width)
    start_y = _axis_start(player_y, map_height, height)
    return Viewport(
        start_x=start_x,
        start_y=start_y,
        end_x=min(map_width, start_x + width),
        end_y=min(map_height, start_y + height),
    )


class ViewportRenderer:
    """Renders the visible part of the map for a GameState snapshot."""

    def __init__(
        self,
        width: int = DEFAULT_VIEWPORT_WIDTH,
        height: int = DEFAULT_VIEWPORT_HEIGHT,
        player_glyph: str = "@",
        item_glyph: str = "I",
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport size must be positive: {width}x{height}")
        self.width = width
        self.height = height
        self.player_glyph = player_glyph
        self.item_glyph = item_glyph

    def viewport_for(self, state: GameState) -> Viewport:
        return compute_viewport(
            state.player.x,
            state.player.y,
            state.map_width,
            state.map_height,
            self.width,
            self.height,
        )

    def render_cells(self, state: GameState, viewport: Optional[Viewport] = None) -> list[list[ViewportCell]]:
        """
        Resolve every visible cell.

        Priority: the player wins over an item, an item wins over terrain.
        If several world items share a cell the first in placement order is
        shown.
        """
        viewport = viewport or self.viewport_for(state)
        game_map = state.game_map
        player = state.player.position

        item_cells = set()
        for item in state.world_items:
            item_cells.add((item.x, item.y))

        rows: list[list[ViewportCell]] = []
        for y in range(viewport.start_y, viewport.end_y):
            row: list[ViewportCell] = []
            for x in range(viewport.start_x, viewport.end_x):
                label = game_map.terrain_label(x, y)
                if x == player.x and y == player.y:
                    row.append(ViewportCell(CellKind.PLAYER, self.player_glyph, x, y, label))
                elif (x, y) in item_cells:
                    row.append(ViewportCell(CellKind.ITEM, self.item_glyph, x, y, label))
                else:
                    glyph = game_map.terrain_types[label].glyph
                    row.append(ViewportCell(CellKind.TERRAIN, glyph, x, y, label))
            rows.append(row)
        return rows

    def render(self, state: GameState) -> list[list[str]]:
        """Rows of per-cell glyph strings."""
        return [[cell.glyph for cell in row] for row in self.render_cells(state)]

    def render_text(self, state: GameState) -> str:
        """Plain-text block, one line per row."""
        return "\n".join("".join(row) for row in self.render(state))

    def debug_lines(self, state: GameState) -> list[tuple[str, str]]:
        """Label/value pairs describing the viewport arithmetic for the debug panel."""
        viewport = self.viewport_for(state)
        half_x = self.width // 2
        half_y = self.height // 2
        px, py = state.player.x, state.player.y
        return [
            ("view size", f"{self.width},{self.height}"),
            ("start offset", f"{viewport.start_x},{viewport.start_y}"),
            ("end offset", f"{viewport.end_x},{viewport.end_y}"),
            ("map size", f"{state.map_width},{state.map_height}"),
            ("player pos", f"{px},{py}"),
            ("relative pos", f"{px - viewport.start_x},{py - viewport.start_y}"),
            ("halfView", f"{half_x},{half_y}"),
            ("player.x - halfX", f"{px - half_x}"),
            ("player.y - halfY", f"{py - half_y}"),
        ]
