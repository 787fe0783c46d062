"""Version lookup for ``image-plot --version``."""

from __future__ import annotations

import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path

from image_plot.logging_utils import logger

_DISTRIBUTION_NAMES = ("image-plot", "image_plot")
_FALLBACK_VERSION = "0.0.0"


def _installed_version() -> str | None:
    """Return the version of the installed distribution, if any."""
    for name in _DISTRIBUTION_NAMES:
        try:
            return importlib_metadata.version(name)
        except importlib_metadata.PackageNotFoundError:
            continue
    return None


def _source_tree_version(start: Path) -> str | None:
    """Read ``project.version`` from the nearest pyproject.toml above start."""
    for parent in start.resolve().parents:
        pyproject_path = parent / "pyproject.toml"
        if not pyproject_path.is_file():
            continue
        try:
            with pyproject_path.open("rb") as handle:
                data = tomllib.load(handle)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.warning("Error reading %s: %s", pyproject_path, exc)
            return None
        version = data.get("project", {}).get("version")
        if isinstance(version, str) and version.strip():
            return version.strip()
        return None
    return None


def resolve_project_version() -> str:
    """
    Return the installed version, else the source tree's, else "0.0.0".

    Running from a checkout without installing still reports the version
    declared in pyproject.toml.
    """
    return (
        _installed_version()
        or _source_tree_version(Path(__file__))
        or _FALLBACK_VERSION
    )
