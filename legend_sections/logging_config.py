"""
Logging configuration for the legend_sections namespace.
"""

from __future__ import annotations

import logging
import sys

from .constants import DEBUG_LEGEND


def setup_logging(level: int | None = None, log_file: str | None = None) -> None:
    """Configure the ``legend_sections`` logger.

    Args:
        level: Logging level; when None, DEBUG if ``DEBUG_LEGEND`` is set, else INFO.
        log_file: Optional path to also write logs to.
    """

    if level is None:
        level = logging.DEBUG if DEBUG_LEGEND else logging.INFO
    logger = logging.getLogger("legend_sections")
    logger.setLevel(level)

    # Repeated calls must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
