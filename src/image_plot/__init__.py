"""Public package exports for image-plot."""

from __future__ import annotations

from .config import PlotConfig
from .errors import (
    EncodeError,
    GeometryError,
    ImageLoadError,
    ImagePlotError,
    InvalidGridSpec,
    InvalidLabelSpec,
)
from .plot import PlotResult, RenderedPlot, build_plot, save_image_plot

__all__ = [
    "EncodeError",
    "GeometryError",
    "ImageLoadError",
    "ImagePlotError",
    "InvalidGridSpec",
    "InvalidLabelSpec",
    "PlotConfig",
    "PlotResult",
    "RenderedPlot",
    "build_plot",
    "save_image_plot",
]
