"""Font loading for label measurement and drawing."""

from __future__ import annotations

from functools import lru_cache

from PIL import ImageFont

from image_plot.constants import FONT_FILE
from image_plot.errors import FontLoadError
from image_plot.logging_utils import logger

PillowFont = ImageFont.FreeTypeFont | ImageFont.ImageFont


@lru_cache(maxsize=8)
def get_font(px: int, path: str | None = None) -> PillowFont:
    """
    Load a font at the given pixel size; cached.

    Uses ``path`` when given, otherwise DejaVu Sans, and falls back to
    Pillow's built-in font when the file cannot be found. An explicit
    ``path`` that cannot be opened is an error rather than a fallback.
    """
    if px <= 0:
        msg = f"Font size must be positive, got {px}"
        raise ValueError(msg)
    if path is not None:
        try:
            return ImageFont.truetype(path, px)
        except OSError as e:
            raise FontLoadError(path, str(e)) from e
    try:
        return ImageFont.truetype(FONT_FILE, px)
    except OSError:
        logger.debug("%s not found, using Pillow's default font", FONT_FILE)
        return ImageFont.load_default(px)
