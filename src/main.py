"""
Gridwalk - Main Entry Point

A small terminal grid-movement game: walk the map, pick up items, read the
terrain. Runs either as a raw console display or as a full-screen panel
layout.
"""

import sys
from pathlib import Path

# Add the project root to the Python path for module discovery
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import argparse
import logging
from dataclasses import dataclass
from typing import Optional

from src.content_loader.runtime_bootstrap import (
    RuntimeContent,
    default_config_dir,
    load_runtime_content,
)
from src.data_models import ConfigurationError
from src.game_state.controller import GameController


# Configure logging
def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Configure logging based on verbosity level.

    Records go to ``log_file`` when given so they do not draw over the
    game screen.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler_args = {"filename": str(log_file)} if log_file else {}
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        **handler_args,
    )


logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class GameConfig:
    """Command-line options for a session."""

    config_dir: Path
    ui: str = "panel"
    debug: bool = False
    auto_pickup: bool = False
    verbose: bool = False
    log_file: Optional[Path] = None

    def __post_init__(self):
        """Ensure paths are Path objects."""
        if isinstance(self.config_dir, str):
            self.config_dir = Path(self.config_dir)
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)


# =============================================================================
# ARGUMENT PARSING
# =============================================================================

def parse_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Gridwalk - a terminal grid-movement game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src.main                        # Panel layout with bundled config
  python -m src.main --ui console           # Plain console output
  python -m src.main --config-dir my_map    # Use another config directory
  python -m src.main --debug --log-file gridwalk.log
        """
    )

    parser.add_argument(
        "--config-dir",
        type=Path,
        default=default_config_dir(),
        help="Directory with general.json, map.json, items.json, terrainTypes.json",
    )
    parser.add_argument(
        "--ui",
        type=str,
        default="panel",
        choices=["console", "panel"],
        help="Display mode (default: panel)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show the viewport debug panel (overrides general.json)",
    )
    parser.add_argument(
        "--auto-pickup",
        action="store_true",
        help="Pick items up as soon as the player steps on them",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write log records to this file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def create_config_from_args(args: argparse.Namespace) -> GameConfig:
    """Create GameConfig from parsed arguments."""
    return GameConfig(
        config_dir=args.config_dir,
        ui=args.ui,
        debug=args.debug,
        auto_pickup=args.auto_pickup,
        verbose=args.verbose,
        log_file=args.log_file,
    )


def create_shell(config: GameConfig, content: RuntimeContent):
    """Build the controller and the selected shell for loaded content."""
    from src.ui.console_shell import ConsoleShell
    from src.ui.panel_shell import PanelShell

    settings = content.settings
    if config.debug:
        settings.debug = True
    if config.auto_pickup:
        settings.auto_pickup = True

    controller = GameController(content.build_game_state(), auto_pickup=settings.auto_pickup)
    if config.ui == "console":
        return ConsoleShell(controller, settings)
    return PanelShell(controller, settings)


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI usage."""
    args = parse_arguments(argv)
    config = create_config_from_args(args)
    setup_logging(config.verbose, config.log_file)

    try:
        content = load_runtime_content(config.config_dir)
        shell = create_shell(config, content)
    except ConfigurationError as e:
        logger.error(f"Failed to load configuration: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for warning in content.warnings:
        logger.warning(warning)

    shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
