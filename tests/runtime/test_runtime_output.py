"""Tests for runtime.output helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from image_plot.runtime import output as runtime_output


@pytest.mark.parametrize(
    ("output", "expected"),
    [
        ("output.jpg", "output_debug.jpg"),
        ("plots/grid.png", "plots/grid_debug.png"),
        ("noext", "noext_debug"),
        ("archive.tar.png", "archive.tar_debug.png"),
    ],
)
def test_debug_output_path(output: str, expected: str) -> None:
    assert runtime_output.debug_output_path(output) == Path(expected)


def test_resolve_output_paths_with_debug(tmp_path: Path) -> None:
    target = tmp_path / "plot.png"
    path, debug = runtime_output.resolve_output_paths(target, debug=True)
    assert path == target
    assert debug == tmp_path / "plot_debug.png"


def test_resolve_output_paths_without_debug() -> None:
    path, debug = runtime_output.resolve_output_paths("plot.png", debug=False)
    assert path == Path("plot.png")
    assert debug is None
