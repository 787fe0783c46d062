"""Tests for the color-coded layout overlay."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
import pytest

from image_plot.constants import (
    COLOR_DEBUG_BORDER,
    COLOR_DEBUG_CELL,
    COLOR_DEBUG_COLUMN_LABEL,
    COLOR_DEBUG_PADDING,
    COLOR_DEBUG_ROW_LABEL,
    COLOR_WHITE,
)
from image_plot.layout.labels import Axis, build_labels
from image_plot.layout.model import PaddingConfig, RegionKind, build_geometry
from image_plot.layout.partition import GridSpec
from image_plot.render.debug import REGION_COLORS, render_debug

pytestmark = pytest.mark.visual


def _interior(rect) -> tuple[int, int]:
    return (rect.x0 + rect.w // 2, rect.y0 + rect.h // 2)


@pytest.fixture
def labeled_geometry(example_sizes: list[tuple[int, int]], metrics: Callable):
    return build_geometry(
        example_sizes, GridSpec(4, 2),
        build_labels(["Top"], axis=Axis.ROW, slot_count=2),
        build_labels(["A", "B"], axis=Axis.COLUMN, slot_count=2),
        PaddingConfig(top_padding=40, left_padding=0), metrics,
    )


def test_every_region_kind_has_a_distinct_color() -> None:
    assert set(REGION_COLORS) == set(RegionKind)
    assert len(set(REGION_COLORS.values())) == len(RegionKind)


def test_overlay_matches_canvas_size(labeled_geometry) -> None:
    overlay = render_debug(labeled_geometry)
    assert overlay.mode == "RGB"
    assert overlay.size == (labeled_geometry.width, labeled_geometry.height)


def test_regions_are_filled_with_their_color(labeled_geometry) -> None:
    overlay = render_debug(labeled_geometry)
    for placement in labeled_geometry.cells:
        assert overlay.getpixel(_interior(placement.rect)) == COLOR_DEBUG_CELL

    row_slices = labeled_geometry.row_bands.slices
    assert overlay.getpixel(_interior(row_slices[0])) == COLOR_DEBUG_ROW_LABEL
    # second row has no label
    assert overlay.getpixel(_interior(row_slices[1])) == COLOR_DEBUG_PADDING

    for band_slice in labeled_geometry.column_bands.slices:
        assert (overlay.getpixel(_interior(band_slice))
                == COLOR_DEBUG_COLUMN_LABEL)

    (corner,) = labeled_geometry.padding
    assert overlay.getpixel(_interior(corner)) == COLOR_DEBUG_PADDING


def test_regions_have_a_border_inside_their_bounds(labeled_geometry) -> None:
    overlay = render_debug(labeled_geometry)
    for _, rect in labeled_geometry.regions():
        assert overlay.getpixel((rect.x0, rect.y0)) == COLOR_DEBUG_BORDER
        assert overlay.getpixel((rect.x1 - 1, rect.y1 - 1)) == \
            COLOR_DEBUG_BORDER


def test_empty_trailing_slot_and_gutters_stay_white(
    metrics: Callable,
) -> None:
    geometry = build_geometry(
        [(10, 10)] * 5, GridSpec(5, 2), (None, None), (None,) * 3,
        PaddingConfig(top_padding=0, left_padding=0, gutter=4), metrics,
    )
    arr = np.asarray(render_debug(geometry))
    # gutter column between the first two cells
    assert np.all(arr[:, 10:14] == 255)
    # trailing slot of the shorter second row
    assert np.all(arr[14:24, 28:38] == 255)
    assert tuple(int(c) for c in arr[0, 0]) == COLOR_DEBUG_BORDER


def test_overlay_is_deterministic(labeled_geometry) -> None:
    assert (render_debug(labeled_geometry).tobytes()
            == render_debug(labeled_geometry).tobytes())


def test_unlabeled_grid_has_only_cells(
    example_sizes: list[tuple[int, int]], metrics: Callable,
) -> None:
    geometry = build_geometry(example_sizes, GridSpec(4, 2), (None, None),
                              (None, None), PaddingConfig(), metrics)
    arr = np.asarray(render_debug(geometry))
    colors = {tuple(int(c) for c in px) for px in arr.reshape(-1, 3)}
    assert colors == {COLOR_DEBUG_CELL, COLOR_DEBUG_BORDER}
    assert COLOR_WHITE not in colors
