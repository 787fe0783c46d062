"""Renderers that turn a layout geometry into rasters."""

from __future__ import annotations

from .canvas import compose, to_rgb
from .debug import REGION_COLORS, render_debug

__all__ = ["REGION_COLORS", "compose", "render_debug", "to_rgb"]
