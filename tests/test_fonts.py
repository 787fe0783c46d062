"""Tests for label font loading."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from PIL import ImageFont

from image_plot.constants import FONT_FILE
from image_plot.errors import FontLoadError
from image_plot.fonts import get_font

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


@pytest.fixture(autouse=True)
def clear_font_cache() -> Iterator[None]:
    get_font.cache_clear()
    yield
    get_font.cache_clear()


def test_explicit_path_is_the_only_font_loaded(mocker: MockerFixture) -> None:
    truetype = mocker.patch("image_plot.fonts.ImageFont.truetype")
    font = get_font(20, "Labels.ttf")
    truetype.assert_called_once_with("Labels.ttf", 20)
    assert font is truetype.return_value


def test_missing_explicit_path_raises(tmp_path: Path) -> None:
    path = tmp_path / "missing.ttf"
    with pytest.raises(FontLoadError, match="missing.ttf") as excinfo:
        get_font(20, str(path))
    assert excinfo.value.path == path


def test_missing_default_falls_back_to_builtin(mocker: MockerFixture) -> None:
    mocker.patch("image_plot.fonts.ImageFont.truetype",
                 side_effect=OSError("not found"))
    builtin = mocker.patch("image_plot.fonts.ImageFont.load_default")
    assert get_font(18) is builtin.return_value
    builtin.assert_called_once_with(18)


def test_default_font_is_dejavu(mocker: MockerFixture) -> None:
    truetype = mocker.patch("image_plot.fonts.ImageFont.truetype")
    get_font(16)
    truetype.assert_called_once_with(FONT_FILE, 16)


@pytest.mark.parametrize("px", [0, -3])
def test_non_positive_size_rejected(px: int) -> None:
    with pytest.raises(ValueError, match="Font size must be positive"):
        get_font(px)


def test_loaded_font_measures_text() -> None:
    font = get_font(24)
    assert isinstance(font, ImageFont.FreeTypeFont | ImageFont.ImageFont)
    assert font.getlength("Label") > 0
