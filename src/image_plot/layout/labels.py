"""
Label band sizing and label text placement.

Row labels live in a band along the left edge of the grid and column
labels in a band along the top edge. A band only exists when its axis has
at least one non-empty label, and then every row (or column) reserves the
same band thickness so the grid stays rectangular. The configured padding
is a floor for that thickness, never a cap.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from PIL import ImageFont

from image_plot.constants import LINE_BREAK_MARKERS
from image_plot.errors import InvalidLabelSpec
from image_plot.layout.geometry import Alignment, Rect, align_span

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence


class Axis(str, Enum):
    """Grid axis a label is attached to."""

    ROW = "row"
    COLUMN = "column"


def split_lines(text: str) -> tuple[str, ...]:
    """Split label text on any of the accepted line-break markers."""
    for marker in LINE_BREAK_MARKERS:
        text = text.replace(marker, "\n")
    return tuple(text.split("\n"))


@dataclass(frozen=True)
class LabelSpec:
    """Text for one row or column label, already split into lines."""

    lines: tuple[str, ...]
    alignment: Alignment
    axis: Axis
    index: int

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        axis: Axis,
        index: int,
        alignment: Alignment = Alignment.CENTER,
    ) -> LabelSpec:
        """Build a label, splitting ``text`` on line-break markers."""
        return cls(
            lines=split_lines(text),
            alignment=Alignment(alignment),
            axis=Axis(axis),
            index=index,
        )


def build_labels(
    texts: Sequence[str],
    *,
    axis: Axis,
    slot_count: int,
    alignment: Alignment = Alignment.CENTER,
) -> tuple[LabelSpec | None, ...]:
    """
    Map label strings onto ``slot_count`` rows or columns.

    Missing trailing labels and blank strings leave their slot unlabeled.
    Supplying more labels than slots raises ``InvalidLabelSpec``.
    """
    if len(texts) > slot_count:
        raise InvalidLabelSpec(Axis(axis).value, len(texts), slot_count)
    labels: list[LabelSpec | None] = []
    for index in range(slot_count):
        text = texts[index] if index < len(texts) else ""
        if any(line.strip() for line in split_lines(text)):
            labels.append(LabelSpec.from_text(
                text, axis=axis, index=index, alignment=alignment,
            ))
        else:
            labels.append(None)
    return tuple(labels)


class FontMetrics(Protocol):
    """The subset of font measurement the layout engine relies on."""

    @property
    def line_height(self) -> int:
        """Height in pixels of one line of text."""
        ...

    def text_width(self, text: str) -> int:
        """Width in pixels a single line of text occupies when drawn."""
        ...


class PillowFontMetrics:
    """
    ``FontMetrics`` backed by a Pillow font.

    Widths cover the inked box as well as the advance: glyphs such as "f"
    draw past their advance, and "j" can start left of the pen position.
    Text drawn at ``left_overhang(text)`` right of a line rect's left edge
    stays inside a rect of ``text_width(text)``.
    """

    def __init__(
        self,
        font: ImageFont.FreeTypeFont | ImageFont.ImageFont,
    ) -> None:
        self.font = font
        if isinstance(font, ImageFont.FreeTypeFont):
            ascent, descent = font.getmetrics()
            self._line_height = ascent + descent
        else:
            self._line_height = font.getbbox("Ag")[3]

    @property
    def line_height(self) -> int:
        return self._line_height

    def _ink_span(self, text: str) -> tuple[int, int]:
        # Default anchor is "la", the one the canvas draws with.
        left, _, right, _ = self.font.getbbox(text)
        return math.floor(left), math.ceil(right)

    def left_overhang(self, text: str) -> int:
        """Pixels of ink left of the pen origin."""
        if not text:
            return 0
        left, _ = self._ink_span(text)
        return max(0, -left)

    def text_width(self, text: str) -> int:
        if not text:
            return 0
        _, right = self._ink_span(text)
        advance = math.ceil(self.font.getlength(text))
        return self.left_overhang(text) + max(advance, right)


@dataclass(frozen=True)
class TextExtent:
    """Natural bounding size of a label's text block."""

    width: int
    height: int


def measure_label(
    label: LabelSpec,
    metrics: FontMetrics,
    *,
    line_spacing: int,
) -> TextExtent:
    """Return the natural width and height of a multi-line label."""
    count = len(label.lines)
    width = max(metrics.text_width(line) for line in label.lines)
    height = count * metrics.line_height + (count - 1) * line_spacing
    return TextExtent(width=width, height=height)


def required_spans(
    labels: Sequence[LabelSpec | None],
    metrics: FontMetrics,
    *,
    line_spacing: int,
) -> tuple[int, ...]:
    """
    Return the along-axis space each slot needs for its label.

    That is the text width for column labels and the text height for row
    labels; unlabeled slots need nothing.
    """
    spans: list[int] = []
    for label in labels:
        if label is None:
            spans.append(0)
            continue
        extent = measure_label(label, metrics, line_spacing=line_spacing)
        spans.append(
            extent.width if label.axis is Axis.COLUMN else extent.height,
        )
    return tuple(spans)


@dataclass(frozen=True)
class LabelPlacement:
    """Where a label's text block and each of its lines are drawn."""

    label: LabelSpec
    box: Rect
    lines: tuple[tuple[str, Rect], ...]


@dataclass(frozen=True)
class AxisBands:
    """Band thickness, per-slot band slices, and label placements."""

    axis: Axis
    thickness: int
    slices: tuple[Rect, ...]
    placements: tuple[LabelPlacement | None, ...]

    @property
    def has_band(self) -> bool:
        """True when the axis reserves any space for labels."""
        return self.thickness > 0


def _place_label(
    label: LabelSpec,
    band_slice: Rect,
    extent: TextExtent,
    metrics: FontMetrics,
    line_spacing: int,
) -> LabelPlacement:
    """Position a label's text block and lines inside its band slice."""
    if label.axis is Axis.COLUMN:
        x = align_span(band_slice.x0, band_slice.w, extent.width,
                       label.alignment)
        y = align_span(band_slice.y0, band_slice.h, extent.height,
                       Alignment.CENTER)
        line_alignment = label.alignment
    else:
        x = align_span(band_slice.x0, band_slice.w, extent.width,
                       Alignment.CENTER)
        y = align_span(band_slice.y0, band_slice.h, extent.height,
                       label.alignment)
        line_alignment = Alignment.CENTER
    box = Rect.from_size(x, y, extent.width, extent.height)

    lines: list[tuple[str, Rect]] = []
    step = metrics.line_height + line_spacing
    for i, text in enumerate(label.lines):
        width = metrics.text_width(text)
        lx = align_span(box.x0, box.w, width, line_alignment)
        lines.append(
            (text, Rect.from_size(lx, box.y0 + i * step, width,
                                  metrics.line_height)),
        )
    return LabelPlacement(label=label, box=box, lines=tuple(lines))


def band_thickness(
    labels: Sequence[LabelSpec | None],
    padding: int,
    metrics: FontMetrics,
    *,
    axis: Axis,
    line_spacing: int,
) -> int:
    """
    Return the band thickness for one axis.

    This is the larger of ``padding`` and the largest natural text extent
    across the band: text height for column labels, text width for row
    labels. Without any label the band is empty and padding is not
    reserved.
    """
    extents = [
        measure_label(label, metrics, line_spacing=line_spacing)
        for label in labels
        if label is not None
    ]
    if not extents:
        return 0
    if Axis(axis) is Axis.COLUMN:
        natural = max(e.height for e in extents)
    else:
        natural = max(e.width for e in extents)
    return max(padding, natural)


def compute_label_bands(  # noqa: PLR0913
    labels: Sequence[LabelSpec | None],
    spans: Sequence[tuple[int, int]],
    padding: int,
    metrics: FontMetrics,
    *,
    axis: Axis,
    line_spacing: int,
) -> AxisBands:
    """
    Size the label band for one axis and place every label inside it.

    ``spans`` gives the ``(start, length)`` of each row (for row labels,
    along y) or column (for column labels, along x). Column bands hug the
    top edge of the canvas and row bands the left edge.
    """
    axis = Axis(axis)
    thickness = band_thickness(labels, padding, metrics, axis=axis,
                               line_spacing=line_spacing)
    if thickness == 0:
        return AxisBands(axis=axis, thickness=0, slices=(),
                         placements=tuple(None for _ in labels))
    extents = [
        measure_label(label, metrics, line_spacing=line_spacing)
        if label is not None else None
        for label in labels
    ]

    slices: list[Rect] = []
    placements: list[LabelPlacement | None] = []
    for label, extent, (start, length) in zip(labels, extents, spans,
                                              strict=True):
        if axis is Axis.COLUMN:
            band_slice = Rect(start, 0, start + length, thickness)
        else:
            band_slice = Rect(0, start, thickness, start + length)
        slices.append(band_slice)
        if label is None or extent is None:
            placements.append(None)
        else:
            placements.append(
                _place_label(label, band_slice, extent, metrics,
                             line_spacing),
            )
    return AxisBands(
        axis=axis,
        thickness=thickness,
        slices=tuple(slices),
        placements=tuple(placements),
    )
