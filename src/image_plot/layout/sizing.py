"""Per-row heights and per-column widths from heterogeneous images."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from image_plot.layout.geometry import Alignment, Rect, align_span

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from image_plot.layout.partition import Cell


@dataclass(frozen=True)
class CellSizes:
    """Row heights and column widths of a partitioned grid."""

    row_heights: tuple[int, ...]
    column_widths: tuple[int, ...]


def size_cells(
    rows: Sequence[Sequence[Cell]],
    sizes: Sequence[tuple[int, int]],
) -> CellSizes:
    """
    Compute row heights and column widths for a partitioned grid.

    ``sizes`` holds the ``(width, height)`` of each input image, indexed by
    ``Cell.index``. A row is as tall as its tallest image. A column is as
    wide as the widest image occupying that column in any row, so columns
    stay aligned even when the last row holds fewer images.
    """
    row_heights = [max(sizes[cell.index][1] for cell in row) for row in rows]
    column_count = max(len(row) for row in rows)
    column_widths = [0] * column_count
    for row in rows:
        for cell in row:
            width = sizes[cell.index][0]
            column_widths[cell.column] = max(column_widths[cell.column], width)
    return CellSizes(
        row_heights=tuple(row_heights),
        column_widths=tuple(column_widths),
    )


def center_in(cell: Rect, size: tuple[int, int]) -> Rect:
    """
    Letterbox an image of ``size`` inside ``cell``.

    The image keeps its native size; any slack is split evenly with the
    odd pixel going to the right and bottom.
    """
    w, h = size
    x = align_span(cell.x0, cell.w, w, Alignment.CENTER)
    y = align_span(cell.y0, cell.h, h, Alignment.CENTER)
    return Rect.from_size(x, y, w, h)
