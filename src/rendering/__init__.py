"""Viewport rendering module."""

from src.rendering.viewport import (
    CellKind,
    Viewport,
    ViewportCell,
    ViewportRenderer,
    compute_viewport,
    DEFAULT_VIEWPORT_WIDTH,
    DEFAULT_VIEWPORT_HEIGHT,
)

__all__ = [
    "CellKind",
    "Viewport",
    "ViewportCell",
    "ViewportRenderer",
    "compute_viewport",
    "DEFAULT_VIEWPORT_WIDTH",
    "DEFAULT_VIEWPORT_HEIGHT",
]
