"""Top-level orchestration: images and config in, rasters or files out."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import image_plot.image_io as ip_image_io
import image_plot.runtime as ip_runtime
from image_plot.fonts import get_font
from image_plot.layout.labels import PillowFontMetrics
from image_plot.layout.model import LayoutGeometry, build_geometry
from image_plot.logging_utils import logger
from image_plot.render.canvas import compose
from image_plot.render.debug import render_debug

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from PIL import Image

    from image_plot.config import PlotConfig


@dataclass(frozen=True)
class RenderedPlot:
    """In-memory result of a plot: the raster, its overlay, and geometry."""

    image: Image.Image
    geometry: LayoutGeometry
    debug_image: Image.Image | None = None


@dataclass(slots=True)
class PlotResult:
    """Files written by ``save_image_plot``."""

    output_path: Path
    geometry: LayoutGeometry
    debug_path: Path | None = None


def build_plot(
    images: Sequence[Image.Image],
    config: PlotConfig,
) -> RenderedPlot:
    """
    Lay out and render ``images`` without touching disk.

    The debug overlay is rendered from the same geometry as the main
    raster when ``config.output.debug`` is set.
    """
    grid = ip_runtime.validate_grid(len(images), config.layout.rows)
    row_labels, column_labels = ip_runtime.validate_labels(
        grid, config.labels,
    )
    font = get_font(config.labels.font_size, config.labels.font_path)

    geometry = build_geometry(
        [im.size for im in images],
        grid,
        row_labels,
        column_labels,
        config.layout.padding(),
        PillowFontMetrics(font),
        line_spacing=config.labels.line_spacing,
    )
    logger.info("Canvas size: %dx%d (%d rows x %d columns)",
                geometry.width, geometry.height,
                len(geometry.row_heights), len(geometry.column_widths))

    canvas = compose(geometry, images, font)
    debug_image = render_debug(geometry) if config.output.debug else None
    return RenderedPlot(image=canvas, geometry=geometry,
                        debug_image=debug_image)


def save_image_plot(
    paths: Sequence[Path | str],
    config: PlotConfig,
) -> PlotResult:
    """
    Load images from ``paths``, build the plot, and write the output files.

    Grid and label settings are validated before any image is decoded, so
    configuration mistakes fail fast.
    """
    grid = ip_runtime.validate_grid(len(paths), config.layout.rows)
    ip_runtime.validate_labels(grid, config.labels)
    ip_runtime.validate_input_paths(paths)

    refs = ip_image_io.load_images(
        paths,
        max_workers=config.output.workers,
        progress=config.output.progress,
    )
    rendered = build_plot([ref.image for ref in refs], config)

    output_path, debug_path = ip_runtime.resolve_output_paths(
        config.output.output, debug=config.output.debug,
    )
    ip_image_io.save_image(rendered.image, output_path)
    logger.info("Generated plot saved as %s", output_path)
    if debug_path is not None and rendered.debug_image is not None:
        ip_image_io.save_image(rendered.debug_image, debug_path)
        logger.info("Debug overlay saved as %s", debug_path)

    return PlotResult(
        output_path=output_path,
        geometry=rendered.geometry,
        debug_path=debug_path,
    )
