"""
Configuration schema and loader for image-plot.

Defines Pydantic models representing structured configuration sections,
a TOML-based config loader, and the merge of command-line overrides on
top of a loaded (or default) configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, Field

from image_plot.config_defaults import (
    DEFAULT_ALIGNMENT,
    DEFAULT_DEBUG,
    DEFAULT_FONT_SIZE,
    DEFAULT_GUTTER,
    DEFAULT_LEFT_PADDING,
    DEFAULT_LINE_SPACING,
    DEFAULT_OUTPUT,
    DEFAULT_PROGRESS,
    DEFAULT_ROWS,
    DEFAULT_TOP_PADDING,
)
from image_plot.layout.geometry import Alignment
from image_plot.layout.model import PaddingConfig


class LayoutConfig(BaseModel):
    """Grid shape and band spacing."""

    rows: int = Field(DEFAULT_ROWS, ge=1)
    top_padding: int = Field(DEFAULT_TOP_PADDING, ge=0)
    left_padding: int = Field(DEFAULT_LEFT_PADDING, ge=0)
    gutter: int = Field(DEFAULT_GUTTER, ge=0)

    def padding(self) -> PaddingConfig:
        """Return the layout engine's view of the spacing settings."""
        return PaddingConfig(
            top_padding=self.top_padding,
            left_padding=self.left_padding,
            gutter=self.gutter,
        )


class LabelConfig(BaseModel):
    """Row and column label text, alignment, and font."""

    row_labels: list[str] = Field(default_factory=list)
    column_labels: list[str] = Field(default_factory=list)
    row_label_alignment: Alignment = Field(Alignment(DEFAULT_ALIGNMENT))
    column_label_alignment: Alignment = Field(Alignment(DEFAULT_ALIGNMENT))
    font_size: int = Field(DEFAULT_FONT_SIZE, ge=1)
    font_path: str | None = None
    line_spacing: int = Field(DEFAULT_LINE_SPACING, ge=0)


class OutputConfig(BaseModel):
    """Output location, debug overlay, and loading behaviour."""

    output: str = Field(DEFAULT_OUTPUT)
    debug: bool = DEFAULT_DEBUG
    progress: bool = DEFAULT_PROGRESS
    workers: int | None = Field(None, ge=1)


class PlotConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of a config.toml file with ``[layout]``,
    ``[labels]``, and ``[output]`` tables.
    """

    layout: LayoutConfig = Field(
        default_factory=lambda: LayoutConfig.model_validate({}),
    )
    labels: LabelConfig = Field(
        default_factory=lambda: LabelConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )


# CLI destination name -> (config section, field name)
CLI_FIELD_MAP: dict[str, tuple[str, str]] = {
    "rows": ("layout", "rows"),
    "top_padding": ("layout", "top_padding"),
    "left_padding": ("layout", "left_padding"),
    "gutter": ("layout", "gutter"),
    "row_labels": ("labels", "row_labels"),
    "column_labels": ("labels", "column_labels"),
    "row_label_alignment": ("labels", "row_label_alignment"),
    "column_label_alignment": ("labels", "column_label_alignment"),
    "font_size": ("labels", "font_size"),
    "font": ("labels", "font_path"),
    "line_spacing": ("labels", "line_spacing"),
    "output": ("output", "output"),
    "debug": ("output", "debug"),
    "progress": ("output", "progress"),
    "workers": ("output", "workers"),
}


def build_config_from_cli(
    args: dict[str, Any],
    base_config: PlotConfig | None = None,
) -> PlotConfig:
    """
    Overlay command-line values onto ``base_config``.

    Only keys present in ``args`` with a value other than ``None`` are
    applied, so options the user did not pass keep their config-file or
    default value. The merged result is validated again.
    """
    base = base_config or PlotConfig.model_validate({})
    data = base.model_dump()
    for key, (section, field) in CLI_FIELD_MAP.items():
        value = args.get(key)
        if value is not None:
            data[section][field] = value
    return PlotConfig.model_validate(data)


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> PlotConfig:
        """
        Load a plot configuration from a TOML file.

        Returns a validated PlotConfig instance based on the file contents.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return PlotConfig.model_validate(doc.unwrap())
