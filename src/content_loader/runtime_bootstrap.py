"""
Runtime Content Bootstrapper for Gridwalk.

Loads the game configuration from a config directory and returns
runtime-ready structures: settings, the terrain map, the item catalog and
the placed items.

Expected files:
    general.json       display settings (optional, defaults apply)
    map.json           terrainRows, items, playerStart, exit
    items.json         item templates keyed by template key
    terrainTypes.json  terrain label -> description, colour, isPassable

Usage:
    from src.content_loader.runtime_bootstrap import load_runtime_content

    content = load_runtime_content(Path("data/config"))
    state = content.build_game_state()
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from src.data_models import ConfigurationError, Item, Position, TerrainType
from src.game_state.game_state import DEFAULT_PLAYER_START, GameState
from src.items.item_catalog import ItemCatalog
from src.items.item_registry import ItemRegistry
from src.rendering.viewport import DEFAULT_VIEWPORT_HEIGHT, DEFAULT_VIEWPORT_WIDTH
from src.world.game_map import GameMap

logger = logging.getLogger(__name__)


GENERAL_FILE = "general.json"
MAP_FILE = "map.json"
ITEMS_FILE = "items.json"
TERRAIN_FILE = "terrainTypes.json"


def default_config_dir() -> Path:
    """The bundled sample configuration, relative to the project root."""
    return Path(__file__).parent.parent.parent / "data" / "config"


# =============================================================================
# SETTINGS
# =============================================================================


@dataclass
class GameSettings:
    """Display and behaviour settings from ``general.json``."""

    player_char: str = "@"
    item_char: str = "I"
    player_color: str = "green"
    item_color: str = "yellow"
    viewport_width: int = DEFAULT_VIEWPORT_WIDTH
    viewport_height: int = DEFAULT_VIEWPORT_HEIGHT
    info_panel_height: int = 7
    debug_panel_width: int = 40
    text_color: str = "white"
    heading_color: str = "green"
    punctuation_color: str = "yellow"
    pertinent_color: str = "cyan"
    debug: bool = False
    auto_pickup: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameSettings":
        """
        Build settings from the parsed ``general.json`` layout.

        Raises:
            ConfigurationError: If a value has the wrong shape or type
        """
        try:
            return cls._parse_general(data)
        except (AttributeError, TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid general settings: {e}") from e

    @classmethod
    def _parse_general(cls, data: dict[str, Any]) -> "GameSettings":
        settings = cls()
        chars = data.get("chars", {})
        settings.player_char = chars.get("player", settings.player_char)
        settings.item_char = chars.get("item", settings.item_char)
        settings.player_color = data.get("playerColor", settings.player_color)
        settings.item_color = data.get("itemColor", settings.item_color)

        view_map = data.get("viewPort", {}).get("map", {})
        settings.viewport_width = int(view_map.get("width", settings.viewport_width))
        settings.viewport_height = int(view_map.get("height", settings.viewport_height))
        if settings.viewport_width <= 0 or settings.viewport_height <= 0:
            raise ConfigurationError(
                f"Viewport size must be positive, got "
                f"{settings.viewport_width}x{settings.viewport_height}"
            )

        settings.info_panel_height = int(
            data.get("infoPanel", {}).get("height", settings.info_panel_height)
        )
        settings.debug_panel_width = int(
            data.get("debugPanel", {}).get("width", settings.debug_panel_width)
        )

        colors = data.get("colors", {})
        settings.text_color = colors.get("text", {}).get("fg", settings.text_color)
        settings.heading_color = colors.get("heading", {}).get("fg", settings.heading_color)
        settings.punctuation_color = colors.get("punctuation1", {}).get(
            "fg", settings.punctuation_color
        )
        settings.pertinent_color = colors.get("pertinent", {}).get(
            "fg", settings.pertinent_color
        )

        settings.debug = bool(data.get("debug", settings.debug))
        settings.auto_pickup = bool(data.get("autoPickup", settings.auto_pickup))
        return settings


# =============================================================================
# RUNTIME CONTENT
# =============================================================================


@dataclass
class RuntimeContentStats:
    """Statistics about loaded content."""

    terrain_types_loaded: int = 0
    templates_loaded: int = 0
    items_placed: int = 0
    items_failed: int = 0


@dataclass
class RuntimeContent:
    """
    Runtime-ready configuration.

    Attributes:
        settings: Parsed general settings
        game_map: Terrain grid and terrain-type table
        catalog: Item templates
        items: Items created from the map's placement list
        player_start: Starting position
        exit_position: Optional exit cell
        warnings: Non-fatal problems found while loading
        stats: Load statistics
    """

    settings: GameSettings
    game_map: GameMap
    catalog: ItemCatalog
    items: list[Item] = field(default_factory=list)
    player_start: Position = DEFAULT_PLAYER_START
    exit_position: Optional[Position] = None
    warnings: list[str] = field(default_factory=list)
    stats: RuntimeContentStats = field(default_factory=RuntimeContentStats)

    def build_game_state(self) -> GameState:
        """Fresh GameState with every placed item in the world."""
        return GameState(
            game_map=self.game_map,
            registry=ItemRegistry(self.items),
            player_start=self.player_start,
            exit_position=self.exit_position,
        )


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e


def _parse_position(data: Any, what: str) -> Position:
    try:
        return Position(int(data["x"]), int(data["y"]))
    except (KeyError, TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid {what} position {data!r}") from e


def load_terrain_types(path: Path) -> dict[str, TerrainType]:
    """
    Load the terrain-type table.

    Each entry accepts ``colour`` (console style) or ``fg`` (panel style)
    for its display colour, and an optional ``glyph`` overriding the label.
    """
    data = _read_json(path)
    if not isinstance(data, dict) or not data:
        raise ConfigurationError(f"Terrain types in {path} must be a non-empty object")

    terrain_types: dict[str, TerrainType] = {}
    for label, entry in data.items():
        if not isinstance(entry, dict):
            raise ConfigurationError(f"Terrain type '{label}' must be an object")
        terrain_types[label] = TerrainType(
            label=label,
            description=str(entry.get("description", label)),
            passable=bool(entry.get("isPassable", True)),
            glyph=str(entry.get("glyph", "")),
            colour=entry.get("colour") or entry.get("fg"),
        )
    return terrain_types


def load_runtime_content(config_dir: Optional[Path] = None) -> RuntimeContent:
    """
    Load all runtime configuration from disk.

    Args:
        config_dir: Directory holding the JSON config files.
            Defaults to data/config relative to the project root.

    Returns:
        RuntimeContent with all loaded data

    Raises:
        ConfigurationError: A required file is missing or malformed, or the
            map references an unknown terrain type
    """
    if config_dir is None:
        config_dir = default_config_dir()
    config_dir = Path(config_dir)

    if not config_dir.is_dir():
        raise ConfigurationError(f"Config directory not found: {config_dir}")

    logger.info(f"Loading runtime content from: {config_dir}")
    warnings: list[str] = []

    general_path = config_dir / GENERAL_FILE
    if general_path.exists():
        general = _read_json(general_path)
        if not isinstance(general, dict):
            raise ConfigurationError(f"{general_path} must contain a JSON object")
        settings = GameSettings.from_dict(general)
    else:
        warnings.append(f"{GENERAL_FILE} not found, using default settings")
        logger.warning(f"{general_path} not found, using default settings")
        settings = GameSettings()

    terrain_types = load_terrain_types(config_dir / TERRAIN_FILE)

    map_data = _read_json(config_dir / MAP_FILE)
    if not isinstance(map_data, dict) or "terrainRows" not in map_data:
        raise ConfigurationError(f"{config_dir / MAP_FILE} must define terrainRows")
    game_map = GameMap(map_data["terrainRows"], terrain_types)

    try:
        catalog = ItemCatalog.from_file(config_dir / ITEMS_FILE)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Config file not found: {config_dir / ITEMS_FILE}") from e
    except (json.JSONDecodeError, ValueError) as e:
        raise ConfigurationError(f"Invalid item templates: {e}") from e

    placements = map_data.get("items", [])
    if not isinstance(placements, list):
        raise ConfigurationError(f"{config_dir / MAP_FILE} items must be a list")

    items = catalog.create_placements(placements)
    items_failed = len(placements) - len(items)
    if items_failed:
        warnings.append(f"{items_failed} item placement(s) could not be created")

    for item in items:
        if not game_map.in_bounds(item.x, item.y):
            warnings.append(f"Item '{item.item_id}' is placed outside the map")
            logger.warning(f"Item '{item.item_id}' is placed outside the map")

    player_start = DEFAULT_PLAYER_START
    if "playerStart" in map_data:
        player_start = _parse_position(map_data["playerStart"], "playerStart")

    exit_position = None
    if map_data.get("exit") is not None:
        exit_position = _parse_position(map_data["exit"], "exit")

    content = RuntimeContent(
        settings=settings,
        game_map=game_map,
        catalog=catalog,
        items=items,
        player_start=player_start,
        exit_position=exit_position,
        warnings=warnings,
        stats=RuntimeContentStats(
            terrain_types_loaded=len(terrain_types),
            templates_loaded=len(catalog),
            items_placed=len(items),
            items_failed=items_failed,
        ),
    )

    logger.info(
        f"Content loaded: {game_map.width}x{game_map.height} map, "
        f"{content.stats.templates_loaded} templates, "
        f"{content.stats.items_placed} items placed"
    )
    return content
