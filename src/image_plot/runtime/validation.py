"""Input validation run before any image is decoded."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from image_plot.errors import ImageLoadError
from image_plot.layout.labels import Axis, LabelSpec, build_labels
from image_plot.layout.partition import GridSpec

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from image_plot.config import LabelConfig


def validate_input_paths(paths: Sequence[Path | str]) -> None:
    """Ensure every input path points to a file."""
    for path in paths:
        if not Path(path).is_file():
            raise ImageLoadError(path, "file not found")


def validate_grid(image_count: int, rows: int) -> GridSpec:
    """Return the grid spec, raising ``InvalidGridSpec`` when out of range."""
    return GridSpec(image_count=image_count, row_count=rows)


def validate_labels(
    grid: GridSpec,
    labels: LabelConfig,
) -> tuple[tuple[LabelSpec | None, ...], tuple[LabelSpec | None, ...]]:
    """
    Build per-row and per-column label specs for ``grid``.

    Raises ``InvalidLabelSpec`` when more labels than rows or columns are
    supplied.
    """
    row_labels = build_labels(
        labels.row_labels,
        axis=Axis.ROW,
        slot_count=grid.row_count,
        alignment=labels.row_label_alignment,
    )
    column_labels = build_labels(
        labels.column_labels,
        axis=Axis.COLUMN,
        slot_count=grid.column_count,
        alignment=labels.column_label_alignment,
    )
    return row_labels, column_labels
