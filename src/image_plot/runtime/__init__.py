"""Runtime utilities for validation, output naming, and version helpers."""

from .output import debug_output_path, resolve_output_paths
from .validation import validate_grid, validate_input_paths, validate_labels
from .version import resolve_project_version

__all__ = [
    "debug_output_path",
    "resolve_output_paths",
    "resolve_project_version",
    "validate_grid",
    "validate_input_paths",
    "validate_labels",
]
