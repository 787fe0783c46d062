"""
Immutable geometry model shared by the canvas composer and debug overlay.

``build_geometry`` runs the partitioner, the cell sizer, and the label band
calculator, then freezes the result into a ``LayoutGeometry``. The model
checks once, at construction, that every region fits on the canvas and
that no two regions overlap; both renderers can then trust it blindly.
"""

from __future__ import annotations

import heapq
from bisect import bisect_left
from dataclasses import dataclass
from enum import Enum
from itertools import accumulate
from typing import TYPE_CHECKING

from image_plot.config_defaults import (
    DEFAULT_GUTTER,
    DEFAULT_LEFT_PADDING,
    DEFAULT_LINE_SPACING,
    DEFAULT_TOP_PADDING,
)
from image_plot.errors import GeometryError
from image_plot.layout.geometry import Rect
from image_plot.layout.labels import (
    Axis,
    AxisBands,
    LabelPlacement,
    band_thickness,
    compute_label_bands,
    required_spans,
)
from image_plot.layout.partition import Cell, GridSpec, partition
from image_plot.layout.sizing import center_in, size_cells
from image_plot.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterator, Sequence

    from image_plot.layout.labels import FontMetrics, LabelSpec


class RegionKind(str, Enum):
    """Category of a painted region in the debug overlay."""

    CELL = "cell"
    ROW_LABEL = "row_label"
    COLUMN_LABEL = "column_label"
    PADDING = "padding"


@dataclass(frozen=True)
class PaddingConfig:
    """Minimum band thickness and inter-cell spacing, in pixels."""

    top_padding: int = DEFAULT_TOP_PADDING
    left_padding: int = DEFAULT_LEFT_PADDING
    gutter: int = DEFAULT_GUTTER

    def __post_init__(self) -> None:
        for name in ("top_padding", "left_padding", "gutter"):
            value = getattr(self, name)
            if value < 0:
                msg = f"{name} must be non-negative, got {value}"
                raise ValueError(msg)


@dataclass(frozen=True)
class CellPlacement:
    """A grid cell and the centered rectangle its image is pasted into."""

    cell: Cell
    rect: Rect
    image_rect: Rect


@dataclass(frozen=True)
class LayoutGeometry:
    """Every rectangle computed for one plot."""

    width: int
    height: int
    row_heights: tuple[int, ...]
    column_widths: tuple[int, ...]
    cells: tuple[CellPlacement, ...]
    row_bands: AxisBands
    column_bands: AxisBands
    padding: tuple[Rect, ...] = ()

    def __post_init__(self) -> None:
        self.validate()

    @property
    def canvas(self) -> Rect:
        """The full canvas rectangle."""
        return Rect(0, 0, self.width, self.height)

    @property
    def labels(self) -> tuple[LabelPlacement, ...]:
        """Placements of every row and column label, rows first."""
        return tuple(
            p
            for bands in (self.row_bands, self.column_bands)
            for p in bands.placements
            if p is not None
        )

    def regions(self) -> Iterator[tuple[RegionKind, Rect]]:
        """
        Yield every region the debug overlay paints.

        Band slices of unlabeled rows or columns count as padding.
        """
        for placement in self.cells:
            yield RegionKind.CELL, placement.rect
        for bands, kind in (
            (self.row_bands, RegionKind.ROW_LABEL),
            (self.column_bands, RegionKind.COLUMN_LABEL),
        ):
            if not bands.has_band:
                continue
            for band_slice, label in zip(bands.slices, bands.placements,
                                         strict=True):
                yield (RegionKind.PADDING if label is None else kind,
                       band_slice)
        for rect in self.padding:
            yield RegionKind.PADDING, rect

    def validate(self) -> None:
        """Raise ``GeometryError`` if any region is misplaced or overlaps."""
        if self.width <= 0 or self.height <= 0:
            msg = (f"Canvas size must be positive, got "
                   f"{self.width}x{self.height}")
            raise GeometryError(msg)
        canvas = self.canvas
        regions = [(k, r) for k, r in self.regions() if not r.is_empty]
        for kind, rect in regions:
            if not canvas.contains(rect):
                msg = f"{kind.value} region {rect} lies outside the canvas"
                raise GeometryError(msg)
        for placement in self.cells:
            if not placement.rect.contains(placement.image_rect):
                msg = (f"Image rectangle {placement.image_rect} overflows "
                       f"cell {placement.rect}")
                raise GeometryError(msg)
        overlap = _first_overlap(regions)
        if overlap is not None:
            (kind_a, a), (kind_b, b) = overlap
            msg = (f"{kind_a.value} region {a} overlaps "
                   f"{kind_b.value} region {b}")
            raise GeometryError(msg)


_Region = tuple[RegionKind, Rect]


def _first_overlap(
    regions: Sequence[_Region],
) -> tuple[_Region, _Region] | None:
    """
    Return two overlapping non-empty regions, or None when all are disjoint.

    Sweeps top to bottom, keeping the regions that cross the current row
    ordered by left edge. Those are pairwise disjoint along x, so a new
    region can only overlap its nearest neighbour starting left of its
    right edge.
    """
    lefts: list[int] = []
    active: list[_Region] = []
    expiry: list[tuple[int, int]] = []
    for kind, rect in sorted(regions, key=lambda r: (r[1].y0, r[1].x0)):
        while expiry and expiry[0][0] <= rect.y0:
            _, x0 = heapq.heappop(expiry)
            i = bisect_left(lefts, x0)
            del lefts[i], active[i]
        i = bisect_left(lefts, rect.x1)
        if i and active[i - 1][1].x1 > rect.x0:
            return active[i - 1], (kind, rect)
        i = bisect_left(lefts, rect.x0)
        lefts.insert(i, rect.x0)
        active.insert(i, (kind, rect))
        heapq.heappush(expiry, (rect.y1, rect.x0))
    return None


def _starts(origin: int, lengths: Sequence[int], gutter: int) -> list[int]:
    """Leading coordinate of each span laid out with ``gutter`` between."""
    return [
        origin + offset + i * gutter
        for i, offset in enumerate(accumulate(lengths, initial=0))
    ][:len(lengths)]


def build_geometry(  # noqa: PLR0913
    sizes: Sequence[tuple[int, int]],
    grid: GridSpec,
    row_labels: Sequence[LabelSpec | None],
    column_labels: Sequence[LabelSpec | None],
    padding: PaddingConfig,
    metrics: FontMetrics,
    *,
    line_spacing: int = DEFAULT_LINE_SPACING,
) -> LayoutGeometry:
    """
    Compute the full layout for images of the given ``(width, height)``.

    Label lists must hold one entry per row and per column (``None`` for
    unlabeled slots); see ``labels.build_labels``. A row or column is
    widened beyond its images only when its label text needs more room,
    so text is never clipped.
    """
    if len(sizes) != grid.image_count:
        msg = (f"Got {len(sizes)} image sizes for a grid of "
               f"{grid.image_count} images")
        raise ValueError(msg)
    rows = partition(grid.image_count, grid.row_count)
    cell_sizes = size_cells(rows, sizes)

    row_need = required_spans(row_labels, metrics, line_spacing=line_spacing)
    column_need = required_spans(column_labels, metrics,
                                 line_spacing=line_spacing)
    row_heights = tuple(
        max(h, need) for h, need in zip(cell_sizes.row_heights, row_need,
                                        strict=True)
    )
    column_widths = tuple(
        max(w, need) for w, need in zip(cell_sizes.column_widths,
                                        column_need, strict=True)
    )

    left = band_thickness(row_labels, padding.left_padding, metrics,
                          axis=Axis.ROW, line_spacing=line_spacing)
    top = band_thickness(column_labels, padding.top_padding, metrics,
                         axis=Axis.COLUMN, line_spacing=line_spacing)
    gutter = padding.gutter
    xs = _starts(left, column_widths, gutter)
    ys = _starts(top, row_heights, gutter)

    row_bands = compute_label_bands(
        row_labels, list(zip(ys, row_heights, strict=True)),
        padding.left_padding, metrics,
        axis=Axis.ROW, line_spacing=line_spacing,
    )
    column_bands = compute_label_bands(
        column_labels, list(zip(xs, column_widths, strict=True)),
        padding.top_padding, metrics,
        axis=Axis.COLUMN, line_spacing=line_spacing,
    )

    cells: list[CellPlacement] = []
    for row in rows:
        for cell in row:
            rect = Rect.from_size(xs[cell.column], ys[cell.row],
                                  column_widths[cell.column],
                                  row_heights[cell.row])
            cells.append(CellPlacement(
                cell=cell,
                rect=rect,
                image_rect=center_in(rect, sizes[cell.index]),
            ))

    corner = (Rect(0, 0, left, top),) if left and top else ()
    width = left + sum(column_widths) + gutter * (len(column_widths) - 1)
    height = top + sum(row_heights) + gutter * (len(row_heights) - 1)

    logger.debug("Row heights: %s", list(row_heights))
    logger.debug("Column widths: %s", list(column_widths))
    logger.debug("Label bands: left=%d top=%d", left, top)

    return LayoutGeometry(
        width=width,
        height=height,
        row_heights=row_heights,
        column_widths=column_widths,
        cells=tuple(cells),
        row_bands=row_bands,
        column_bands=column_bands,
        padding=corner,
    )
