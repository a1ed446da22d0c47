"""
Tests for the command-line entry point.
"""

from pathlib import Path
from unittest.mock import patch

from src.main import GameConfig, create_config_from_args, create_shell, main, parse_arguments
from src.content_loader.runtime_bootstrap import load_runtime_content
from src.ui.console_shell import ConsoleShell
from src.ui.panel_shell import PanelShell
from tests.helpers import write_config


class TestArguments:
    """Tests for argument parsing."""

    def test_defaults(self):
        config = create_config_from_args(parse_arguments([]))
        assert config.ui == "panel"
        assert config.debug is False
        assert config.config_dir.name == "config"

    def test_options(self, tmp_path):
        args = parse_arguments([
            "--config-dir", str(tmp_path),
            "--ui", "console",
            "--debug",
            "--auto-pickup",
            "--log-file", str(tmp_path / "game.log"),
            "-v",
        ])
        config = create_config_from_args(args)
        assert config.config_dir == tmp_path
        assert config.ui == "console"
        assert config.debug and config.auto_pickup and config.verbose
        assert config.log_file == tmp_path / "game.log"

    def test_string_paths_converted(self):
        config = GameConfig(config_dir="somewhere", log_file="x.log")
        assert isinstance(config.config_dir, Path)
        assert isinstance(config.log_file, Path)


class TestCreateShell:
    """Tests for wiring content into a shell."""

    def test_console_shell(self, config_dir):
        content = load_runtime_content(config_dir)
        shell = create_shell(GameConfig(config_dir=config_dir, ui="console"), content)
        assert isinstance(shell, ConsoleShell)
        assert shell.renderer.width == 8

    def test_panel_shell_with_overrides(self, config_dir):
        content = load_runtime_content(config_dir)
        config = GameConfig(config_dir=config_dir, ui="panel", auto_pickup=True)
        shell = create_shell(config, content)
        assert isinstance(shell, PanelShell)
        assert shell.controller.auto_pickup is True


class TestMain:
    """Tests for the process-level behaviour."""

    def test_missing_config_exits_with_error(self, tmp_path, capsys):
        assert main(["--config-dir", str(tmp_path / "missing")]) == 1
        assert "Config directory not found" in capsys.readouterr().err

    def test_runs_selected_shell(self, config_dir):
        with patch.object(ConsoleShell, "run") as run:
            assert main(["--config-dir", str(config_dir), "--ui", "console"]) == 0
        run.assert_called_once()

    def test_malformed_settings_exit_with_error(self, config_dir, capsys):
        write_config(config_dir, general={"chars": None})
        assert main(["--config-dir", str(config_dir)]) == 1
        assert "Invalid general settings" in capsys.readouterr().err
