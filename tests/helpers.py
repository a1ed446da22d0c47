"""
Test helpers for the Gridwalk test suite.

Provides config directory writers and a scripted key source for driving
the shells without a terminal.
"""

import json
from pathlib import Path
from typing import Iterable


def write_config(config_dir: Path, **files) -> Path:
    """Write ``name=data`` pairs as ``<name>.json`` files into config_dir."""
    config_dir.mkdir(parents=True, exist_ok=True)
    for name, data in files.items():
        (config_dir / f"{name}.json").write_text(json.dumps(data), encoding="utf-8")
    return config_dir


class ScriptedKeys:
    """Key source that replays a fixed sequence, then raises KeyboardInterrupt."""

    def __init__(self, keys: Iterable[str]):
        self.keys = list(keys)
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        if not self.keys:
            raise KeyboardInterrupt
        return self.keys.pop(0)
