"""Compose the output raster from images and a computed geometry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PIL import Image, ImageDraw, ImageFont

from image_plot.constants import COLOR_BLACK, COLOR_MODE_RGB, COLOR_WHITE
from image_plot.layout.labels import PillowFontMetrics

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from image_plot.fonts import PillowFont
    from image_plot.layout.model import LayoutGeometry

_RGB = tuple[int, int, int]


def to_rgb(img: Image.Image, *, bg_color: _RGB = COLOR_WHITE) -> Image.Image:
    """Convert PIL image to RGB, alpha compositing if needed."""
    if img.mode == COLOR_MODE_RGB:
        return img
    if img.mode in ("RGBA", "LA") or (
        img.mode == "P" and "transparency" in img.info
    ):
        bg = Image.new("RGBA", img.size, (*bg_color, 255))
        comp = Image.alpha_composite(bg, img.convert("RGBA"))
        return comp.convert(COLOR_MODE_RGB)
    return img.convert(COLOR_MODE_RGB)


def draw_label_lines(
    canvas: Image.Image,
    geometry: LayoutGeometry,
    font: PillowFont,
    *,
    fill: _RGB = COLOR_BLACK,
) -> None:
    """Draw every label line at the position the geometry computed."""
    draw = ImageDraw.Draw(canvas)
    metrics = PillowFontMetrics(font)
    # Bitmap fonts do not support anchors; they already draw from the top.
    anchor = "la" if isinstance(font, ImageFont.FreeTypeFont) else None
    for placement in geometry.labels:
        for text, rect in placement.lines:
            if not text:
                continue
            x = rect.x0 + metrics.left_overhang(text)
            draw.text((x, rect.y0), text, font=font, fill=fill,
                      anchor=anchor)


def compose(
    geometry: LayoutGeometry,
    images: Sequence[Image.Image],
    font: PillowFont,
    *,
    bg_color: _RGB = COLOR_WHITE,
) -> Image.Image:
    """
    Paint images and labels onto a fresh canvas.

    ``images`` is indexed by ``Cell.index``. Each image is pasted at native
    size, centered in its cell; the remainder of the cell keeps the
    background color.
    """
    canvas = Image.new(COLOR_MODE_RGB, (geometry.width, geometry.height),
                       bg_color)
    for placement in geometry.cells:
        img = images[placement.cell.index]
        if img.size != placement.image_rect.size():
            msg = (f"Image {placement.cell.index} is {img.size[0]}x"
                   f"{img.size[1]} but the layout expects "
                   f"{placement.image_rect.w}x{placement.image_rect.h}")
            raise ValueError(msg)
        canvas.paste(to_rgb(img, bg_color=bg_color),
                     (placement.image_rect.x0, placement.image_rect.y0))
    draw_label_lines(canvas, geometry, font)
    return canvas
