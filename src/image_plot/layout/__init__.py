"""
Layout engine: partitioning, cell sizing, label bands, and geometry.

The package exposes the entry points the renderers and the plot
orchestration use so callers rarely need the submodules directly.
"""

from __future__ import annotations

from . import geometry, labels, model, partition, sizing
from .geometry import Alignment, Insets, Rect, align_span
from .labels import (
    Axis,
    AxisBands,
    FontMetrics,
    LabelPlacement,
    LabelSpec,
    PillowFontMetrics,
    build_labels,
    compute_label_bands,
)
from .model import (
    CellPlacement,
    LayoutGeometry,
    PaddingConfig,
    RegionKind,
    build_geometry,
)
from .partition import Cell, GridSpec
from .sizing import CellSizes, center_in, size_cells

__all__ = [
    "Alignment",
    "Axis",
    "AxisBands",
    "Cell",
    "CellPlacement",
    "CellSizes",
    "FontMetrics",
    "GridSpec",
    "Insets",
    "LabelPlacement",
    "LabelSpec",
    "LayoutGeometry",
    "PaddingConfig",
    "PillowFontMetrics",
    "Rect",
    "RegionKind",
    "align_span",
    "build_geometry",
    "build_labels",
    "center_in",
    "compute_label_bands",
    "geometry",
    "labels",
    "model",
    "partition",
    "size_cells",
    "sizing",
]
