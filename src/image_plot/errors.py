"""
Exception hierarchy for image-plot.

Every failure the pipeline can report derives from ``ImagePlotError`` so
callers can catch the whole family in one place. Configuration errors also
subclass ``ValueError`` and the internal geometry error subclasses
``RuntimeError`` to keep them usable with generic handlers.
"""

from __future__ import annotations

from pathlib import Path


class ImagePlotError(Exception):
    """Base class for all image-plot errors."""


class InvalidGridSpec(ImagePlotError, ValueError):
    """Row count is out of range for the number of images."""

    def __init__(self, image_count: int, row_count: int) -> None:
        self.image_count = image_count
        self.row_count = row_count
        if image_count < 1:
            msg = "At least one image is required"
        elif row_count < 1:
            msg = f"Number of rows must be at least 1, got {row_count}"
        else:
            msg = (
                f"Number of rows ({row_count}) cannot exceed the number of "
                f"images ({image_count})"
            )
        super().__init__(msg)


class InvalidLabelSpec(ImagePlotError, ValueError):
    """More labels were supplied than there are rows or columns."""

    def __init__(self, axis: str, label_count: int, slot_count: int) -> None:
        self.axis = axis
        self.label_count = label_count
        self.slot_count = slot_count
        msg = (
            f"Number of {axis} labels ({label_count}) exceeds the number "
            f"of {axis}s ({slot_count})"
        )
        super().__init__(msg)


class ImageLoadError(ImagePlotError):
    """An input image could not be read or decoded."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to open image '{path}': {reason}")


class EncodeError(ImagePlotError):
    """An output image could not be encoded or written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to save output image '{path}': {reason}")


class GeometryError(ImagePlotError, RuntimeError):
    """Computed layout regions overlap or fall outside the canvas."""


class FontLoadError(ImagePlotError):
    """An explicitly requested font file could not be opened."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to load font '{path}': {reason}")
