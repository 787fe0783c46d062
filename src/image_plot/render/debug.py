"""Diagnostic overlay that paints every region of a layout geometry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PIL import Image, ImageDraw

from image_plot.constants import (
    COLOR_DEBUG_BORDER,
    COLOR_DEBUG_CELL,
    COLOR_DEBUG_COLUMN_LABEL,
    COLOR_DEBUG_PADDING,
    COLOR_DEBUG_ROW_LABEL,
    COLOR_MODE_RGB,
    COLOR_WHITE,
    DEBUG_BORDER_PX,
)
from image_plot.layout.geometry import Insets, Rect
from image_plot.layout.model import RegionKind

if TYPE_CHECKING:  # pragma: no cover
    from image_plot.layout.model import LayoutGeometry

_RGB = tuple[int, int, int]

REGION_COLORS: dict[RegionKind, _RGB] = {
    RegionKind.CELL: COLOR_DEBUG_CELL,
    RegionKind.ROW_LABEL: COLOR_DEBUG_ROW_LABEL,
    RegionKind.COLUMN_LABEL: COLOR_DEBUG_COLUMN_LABEL,
    RegionKind.PADDING: COLOR_DEBUG_PADDING,
}


def render_debug(geometry: LayoutGeometry) -> Image.Image:
    """
    Render the geometry as color-coded rectangles on a white canvas.

    Cells are light blue, row-label slices light red, column-label slices
    light green, and padding light gray; each region gets a 1px dark-gray
    border drawn inside its own bounds so neighbours never share pixels.
    """
    canvas = Image.new(COLOR_MODE_RGB, (geometry.width, geometry.height),
                       COLOR_WHITE)
    draw = ImageDraw.Draw(canvas)
    border = Insets.uniform(DEBUG_BORDER_PX)
    for kind, rect in geometry.regions():
        if rect.is_empty:
            continue
        draw.rectangle(_corners(rect), fill=COLOR_DEBUG_BORDER)
        inner = rect.shrink(border)
        if not inner.is_empty:
            draw.rectangle(_corners(inner), fill=REGION_COLORS[kind])
    return canvas


def _corners(rect: Rect) -> list[int]:
    # Pillow rectangles include their end coordinates.
    return [rect.x0, rect.y0, rect.x1 - 1, rect.y1 - 1]
