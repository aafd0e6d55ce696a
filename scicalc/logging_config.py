"""Logging setup for the scicalc package logger."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "scicalc"


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """Configure the ``scicalc`` logger.

    Args:
        level: Logging level (e.g. logging.DEBUG).
        log_file: Optional path to also write plain-text logs to.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Repeated calls (tests, REPL restarts) must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = RichHandler(console=Console(stderr=True), show_path=False)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
