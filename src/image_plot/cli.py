"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from pydantic import ValidationError

import image_plot.config as ip_config
import image_plot.plot as ip_plot
from image_plot.config_defaults import (
    DEFAULT_FONT_SIZE,
    DEFAULT_LEFT_PADDING,
    DEFAULT_OUTPUT,
    DEFAULT_ROWS,
    DEFAULT_TOP_PADDING,
)
from image_plot.errors import (
    EncodeError,
    FontLoadError,
    ImageLoadError,
    InvalidGridSpec,
    InvalidLabelSpec,
)
from image_plot.layout.geometry import Alignment
from image_plot.logging_utils import logger, set_verbosity
from image_plot.runtime import resolve_project_version

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

T = TypeVar("T")

ALIGNMENT_CHOICES = [a.value for a in Alignment]


def positive_int(text: str) -> int:
    """Argparse-style validator that enforces a strictly positive integer."""
    try:
        value = int(text)
    except ValueError as exc:
        msg = "must be an integer"
        raise ValueError(msg) from exc
    if value <= 0:
        msg = "must be positive"
        raise ValueError(msg)
    return value


def non_negative_int(text: str) -> int:
    """Argparse-style validator for pixel sizes that may be zero."""
    try:
        value = int(text)
    except ValueError as exc:
        msg = "must be an integer"
        raise ValueError(msg) from exc
    if value < 0:
        msg = "must not be negative"
        raise ValueError(msg)
    return value


def _wrap_validator(
    validator: Callable[[str], T],
    error_cls: type[argparse.ArgumentTypeError] = argparse.ArgumentTypeError,
) -> Callable[[str], T]:
    """Convert ``ValueError`` from a validator into ``ArgumentTypeError``."""

    def wrapper(text: str) -> T:
        try:
            return validator(text)
        except ValueError as exc:
            raise error_cls(str(exc)) from exc

    return wrapper


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        prog="image-plot",
        description=(
            "Combine images into a labeled row/column grid and save it as "
            "a single image"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "image-plot a.png b.png c.png d.png --rows 2\n"
            "image-plot a.png b.png --column-labels Before After "
            "--output cmp.png\n"
            "image-plot a.png b.png --rows 2 --row-labels 'Top\\nRow' "
            "Bottom --debug\n\n"
            "Note:\n"
            "  Label text may contain \\n to break it across lines."
        ),
    )
    p.add_argument(
        "images", nargs="*", type=Path, metavar="IMAGE",
        help="List of image file paths")
    p.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}")

    output = p.add_argument_group("output")
    output.add_argument(
        "--output", type=str, default=argparse.SUPPRESS,
        help=f"Output file name for the generated plot "
             f"(default: {DEFAULT_OUTPUT})")
    output.add_argument(
        "--debug", action="store_true", default=argparse.SUPPRESS,
        help="Also save a color-coded layout overlay next to the output, "
             "with a _debug suffix")
    output.add_argument(
        "--progress", action="store_true", default=argparse.SUPPRESS,
        help="Show a progress bar while loading images")
    output.add_argument(
        "--workers", type=_wrap_validator(positive_int),
        default=argparse.SUPPRESS,
        help="Number of threads used to decode images")
    output.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log layout details")

    layout = p.add_argument_group("layout")
    layout.add_argument(
        "--rows", type=_wrap_validator(positive_int),
        default=argparse.SUPPRESS,
        help=f"Number of rows to display the images "
             f"(default: {DEFAULT_ROWS})")
    layout.add_argument(
        "--top-padding", type=_wrap_validator(non_negative_int),
        default=argparse.SUPPRESS,
        help=f"Minimum height of the column label band "
             f"(default: {DEFAULT_TOP_PADDING})")
    layout.add_argument(
        "--left-padding", type=_wrap_validator(non_negative_int),
        default=argparse.SUPPRESS,
        help=f"Minimum width of the row label band "
             f"(default: {DEFAULT_LEFT_PADDING})")
    layout.add_argument(
        "--gutter", type=_wrap_validator(non_negative_int),
        default=argparse.SUPPRESS,
        help="Spacing in pixels between adjacent cells (default: 0)")

    labels = p.add_argument_group("labels")
    labels.add_argument(
        "--row-labels", nargs="+", action="extend", default=argparse.SUPPRESS,
        metavar="LABEL", help="List of optional labels for each row")
    labels.add_argument(
        "--column-labels", nargs="+", action="extend",
        default=argparse.SUPPRESS, metavar="LABEL",
        help="List of optional labels for each column")
    labels.add_argument(
        "--row-label-alignment", choices=ALIGNMENT_CHOICES,
        default=argparse.SUPPRESS,
        help="Vertical placement of row labels (default: center)")
    labels.add_argument(
        "--column-label-alignment", choices=ALIGNMENT_CHOICES,
        default=argparse.SUPPRESS,
        help="Horizontal placement of column labels (default: center)")
    labels.add_argument(
        "--font-size", type=_wrap_validator(positive_int),
        default=argparse.SUPPRESS,
        help=f"Label font size in pixels (default: {DEFAULT_FONT_SIZE})")
    labels.add_argument(
        "--font", type=str, default=argparse.SUPPRESS,
        help="Path to a TrueType font for labels (default: DejaVu Sans)")
    labels.add_argument(
        "--line-spacing", type=_wrap_validator(non_negative_int),
        default=argparse.SUPPRESS,
        help="Extra pixels between lines of a multi-line label")

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to config.toml file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and exit without building a plot")

    return p


def log_parameters(
    paths: Sequence[Path],
    cfg: ip_config.PlotConfig,
    args: argparse.Namespace,
) -> None:
    """Log the effective plot parameters."""
    logger.info("Images: %d", len(paths))
    if getattr(args, "config", None):
        logger.info("Loaded config from: %s", args.config)
    logger.info("Output: %s", cfg.output.output)
    logger.info("Rows: %d", cfg.layout.rows)
    logger.info("Row Labels: %s", cfg.labels.row_labels or "(none)")
    logger.info("Column Labels: %s", cfg.labels.column_labels or "(none)")
    logger.info("Row Label Alignment: %s",
                cfg.labels.row_label_alignment.value)
    logger.info("Column Label Alignment: %s",
                cfg.labels.column_label_alignment.value)
    logger.info("Padding (top, left): %d, %d",
                cfg.layout.top_padding, cfg.layout.left_padding)
    logger.info("Gutter: %d", cfg.layout.gutter)
    logger.info("Debug Overlay: %s",
                "Enabled" if cfg.output.debug else "Disabled")


def run_from_args(
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
) -> int:
    """Build the plot described by parsed command-line arguments."""
    try:
        base_cfg: ip_config.PlotConfig | None = None
        if args.config:
            base_cfg = ip_config.ConfigLoader.load(args.config)
            if args.validate_config_only:
                logger.info("Config %s validated successfully.", args.config)
                return 0
        cfg = ip_config.build_config_from_cli(vars(args),
                                              base_config=base_cfg)
    except (FileNotFoundError, ValidationError) as exc:
        parser.error(str(exc))

    log_parameters(args.images, cfg, args)

    try:
        ip_plot.save_image_plot(args.images, cfg)
    except (InvalidGridSpec, InvalidLabelSpec, FontLoadError) as exc:
        parser.error(str(exc))
    except (ImageLoadError, EncodeError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line interface for building an image plot."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    if args.validate_config_only and not args.config:
        arg_parser.error("--validate-config-only requires --config")
    if not args.validate_config_only and not args.images:
        arg_parser.error("the following arguments are required: IMAGE")
    set_verbosity(args.verbose)

    return run_from_args(args, arg_parser)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
