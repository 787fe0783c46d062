"""
Centralized logging utilities for image-plot.

Defines a shared logger instance and setup function so every module logs
through the same configuration. Centralization also avoids circular
imports between the layout, rendering, and CLI modules.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logger(
        name: str = "image_plot",
        level: int = logging.INFO,
        formatter: logging.Formatter | None = None,
        handler: logging.Handler | None = None,
) -> logging.Logger:
    """
    Return the named logger, attaching a stream handler on first use.

    Later calls only adjust the level; the handler and formatter chosen on
    the first call are kept.

    Args:
        name: Logger name.
        level: Logging level (e.g., logging.INFO, logging.DEBUG).
        formatter: Optional custom formatter, defaults to ``LOG_FORMAT``.
        handler: Optional custom handler, defaults to stderr.

    Returns:
        The configured logger.

    """
    log = logging.getLogger(name)
    log.setLevel(level)
    if log.handlers:
        return log
    handler = handler or logging.StreamHandler()
    handler.setFormatter(formatter or logging.Formatter(LOG_FORMAT))
    log.addHandler(handler)
    log.propagate = False
    return log


def set_verbosity(verbose: bool) -> None:  # noqa: FBT001
    """Switch the shared logger between INFO and DEBUG."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


# Shared logger used across modules
logger = setup_logger()
