"""
Test configuration and shared fixtures for image_plot.

Provides image factories (in memory and on disk), deterministic font
metrics for exact layout assertions, and logger propagation so caplog can
observe the package logger.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest
from PIL import Image

from image_plot.constants import COLOR_MODE_RGB
from image_plot.logging_utils import logger

# Sizes used by the four-image example layout
EXAMPLE_SIZES: list[tuple[int, int]] = [(100, 50), (80, 60), (120, 40), (90, 70)]


class FixedMetrics:
    """
    Font metrics with fixed glyph advance and line height.

    With the defaults a two-line label is ``2 * 23 + 4 = 50`` pixels tall
    at the default line spacing, and each character is 10 pixels wide.
    """

    def __init__(self, line_height: int = 23, char_width: int = 10) -> None:
        self._line_height = line_height
        self.char_width = char_width

    @property
    def line_height(self) -> int:
        return self._line_height

    def text_width(self, text: str) -> int:
        return len(text) * self.char_width


@pytest.fixture
def metrics() -> FixedMetrics:
    """Deterministic font metrics for layout tests."""
    return FixedMetrics()


@pytest.fixture
def make_metrics() -> Callable[..., FixedMetrics]:
    """Factory for fixed metrics with custom line height or glyph width."""
    return FixedMetrics


@pytest.fixture
def example_sizes() -> list[tuple[int, int]]:
    """Sizes (w, h) of the four-image example: 2 rows -> 210x130 canvas."""
    return list(EXAMPLE_SIZES)


@pytest.fixture
def sample_image() -> Image.Image:
    """Create a sample 100x100 red RGB PIL image."""
    return Image.new(COLOR_MODE_RGB, (100, 100), color="red")


@pytest.fixture
def make_images() -> Callable[[Sequence[tuple[int, int]]], list[Image.Image]]:
    """Factory for solid-color RGB images of the given sizes."""
    palette = ["red", "green", "blue", "orange", "purple", "teal"]

    def _make(sizes: Sequence[tuple[int, int]]) -> list[Image.Image]:
        return [
            Image.new(COLOR_MODE_RGB, size, palette[i % len(palette)])
            for i, size in enumerate(sizes)
        ]

    return _make


@pytest.fixture
def make_image_files(
    tmp_path: Path,
) -> Callable[[Sequence[tuple[int, int]]], list[Path]]:
    """Factory that writes gradient PNGs of the given sizes to tmp_path."""

    def _make(sizes: Sequence[tuple[int, int]]) -> list[Path]:
        paths: list[Path] = []
        for i, (w, h) in enumerate(sizes):
            img = Image.new(COLOR_MODE_RGB, (w, h))
            img.putdata([
                ((x * 255) // w, (y * 255) // h, 128)
                for y in range(h)
                for x in range(w)
            ])
            path = tmp_path / f"test{i}.png"
            img.save(path)
            paths.append(path)
        return paths

    return _make


@pytest.fixture
def example_files(
    make_image_files: Callable[[Sequence[tuple[int, int]]], list[Path]],
) -> list[Path]:
    """The four example images written to disk."""
    return make_image_files(EXAMPLE_SIZES)


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the package logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)
