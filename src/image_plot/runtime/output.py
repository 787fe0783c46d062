"""Helpers for deriving output locations."""

from __future__ import annotations

from pathlib import Path

from image_plot.constants import DEBUG_SUFFIX


def debug_output_path(output_path: Path | str) -> Path:
    """
    Return the debug overlay path for ``output_path``.

    The ``_debug`` suffix goes before the extension, so ``plot.png``
    becomes ``plot_debug.png``.
    """
    path = Path(output_path)
    return path.with_name(f"{path.stem}{DEBUG_SUFFIX}{path.suffix}")


def resolve_output_paths(
    output_path: Path | str,
    *,
    debug: bool,
) -> tuple[Path, Path | None]:
    """Return the main output path and, when requested, the debug path."""
    path = Path(output_path)
    return path, debug_output_path(path) if debug else None
