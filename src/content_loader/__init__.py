"""Configuration loading module."""

from src.content_loader.runtime_bootstrap import (
    GameSettings,
    RuntimeContent,
    RuntimeContentStats,
    default_config_dir,
    load_runtime_content,
    load_terrain_types,
)

__all__ = [
    "GameSettings",
    "RuntimeContent",
    "RuntimeContentStats",
    "default_config_dir",
    "load_runtime_content",
    "load_terrain_types",
]
