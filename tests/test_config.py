"""
Unit tests for the image-plot config module.

Covers:
- Successful loading of a valid config.toml
- Default fallbacks for missing values
- Error handling for missing files and invalid values
- Merging of command-line overrides onto a loaded configuration
"""
import tempfile
from typing import Any

import pytest
import tomlkit
from pydantic import ValidationError

import image_plot.config as ip_config
from image_plot.config_defaults import (
    DEFAULT_FONT_SIZE,
    DEFAULT_GUTTER,
    DEFAULT_LEFT_PADDING,
    DEFAULT_LINE_SPACING,
    DEFAULT_OUTPUT,
    DEFAULT_ROWS,
    DEFAULT_TOP_PADDING,
)
from image_plot.layout.geometry import Alignment
from image_plot.layout.model import PaddingConfig


def create_toml_file(data: dict[str, Any]) -> str:
    """Write a TOML string to a temporary file and return its path."""
    doc = tomlkit.document()
    doc.update(data)
    toml_str = tomlkit.dumps(doc)

    with tempfile.NamedTemporaryFile(
        delete=False,
        suffix=".toml",
        mode="w",
        encoding="utf-8",
    ) as temp:
        temp.write(toml_str)
        return temp.name


def test_load_valid_config() -> None:
    """Test that a well-formed config.toml loads successfully."""
    config_data = {
        "layout": {"rows": 3, "top_padding": 12, "gutter": 2},
        "labels": {
            "row_labels": ["A", "B", "C"],
            "column_labels": ["Before", "After"],
            "column_label_alignment": "start",
            "font_size": 18,
        },
        "output": {"output": "grid.png", "debug": True},
    }
    path = create_toml_file(config_data)
    cfg = ip_config.ConfigLoader.load(path)

    assert isinstance(cfg, ip_config.PlotConfig)
    assert cfg.layout.rows == 3  # noqa: PLR2004
    assert cfg.layout.top_padding == 12  # noqa: PLR2004
    assert cfg.layout.gutter == 2  # noqa: PLR2004
    assert cfg.labels.row_labels == ["A", "B", "C"]
    assert cfg.labels.column_labels == ["Before", "After"]
    assert cfg.labels.column_label_alignment is Alignment.START
    assert cfg.labels.row_label_alignment is Alignment.CENTER
    assert cfg.labels.font_size == 18  # noqa: PLR2004
    assert cfg.output.output == "grid.png"
    assert cfg.output.debug is True


def test_empty_config_uses_defaults() -> None:
    """Missing sections fall back to their defaults."""
    cfg = ip_config.ConfigLoader.load(create_toml_file({}))
    assert cfg.layout.rows == DEFAULT_ROWS
    assert cfg.layout.top_padding == DEFAULT_TOP_PADDING
    assert cfg.layout.left_padding == DEFAULT_LEFT_PADDING
    assert cfg.layout.gutter == DEFAULT_GUTTER
    assert cfg.labels.row_labels == []
    assert cfg.labels.font_size == DEFAULT_FONT_SIZE
    assert cfg.labels.line_spacing == DEFAULT_LINE_SPACING
    assert cfg.labels.font_path is None
    assert cfg.output.output == DEFAULT_OUTPUT
    assert cfg.output.debug is False
    assert cfg.output.workers is None


def test_missing_config_file() -> None:
    """A missing path raises FileNotFoundError with the path in it."""
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        ip_config.ConfigLoader.load("does/not/exist.toml")


@pytest.mark.parametrize(
    "data",
    [
        {"layout": {"rows": 0}},
        {"layout": {"top_padding": -1}},
        {"labels": {"row_label_alignment": "middle"}},
        {"labels": {"font_size": 0}},
        {"output": {"workers": 0}},
    ],
)
def test_invalid_values_are_rejected(data: dict[str, Any]) -> None:
    with pytest.raises(ValidationError):
        ip_config.ConfigLoader.load(create_toml_file(data))


def test_layout_padding_view() -> None:
    layout = ip_config.LayoutConfig(rows=2, top_padding=5, left_padding=6,
                                    gutter=7)
    assert layout.padding() == PaddingConfig(top_padding=5, left_padding=6,
                                             gutter=7)


class TestBuildConfigFromCli:
    def test_defaults_when_nothing_passed(self) -> None:
        cfg = ip_config.build_config_from_cli({})
        assert cfg == ip_config.PlotConfig()

    def test_cli_overrides_config_file(self) -> None:
        base = ip_config.ConfigLoader.load(create_toml_file({
            "layout": {"rows": 3},
            "output": {"output": "from_file.png"},
        }))
        cfg = ip_config.build_config_from_cli(
            {"rows": 2, "font": "MyFont.ttf", "config": "ignored.toml"},
            base_config=base,
        )
        assert cfg.layout.rows == 2  # noqa: PLR2004
        assert cfg.labels.font_path == "MyFont.ttf"
        assert cfg.output.output == "from_file.png"

    def test_none_values_do_not_override(self) -> None:
        base = ip_config.PlotConfig.model_validate(
            {"output": {"workers": 3}},
        )
        cfg = ip_config.build_config_from_cli({"workers": None},
                                              base_config=base)
        assert cfg.output.workers == 3  # noqa: PLR2004

    def test_alignment_strings_are_validated(self) -> None:
        cfg = ip_config.build_config_from_cli(
            {"row_label_alignment": "end"},
        )
        assert cfg.labels.row_label_alignment is Alignment.END
        with pytest.raises(ValidationError):
            ip_config.build_config_from_cli({"column_label_alignment": "up"})
