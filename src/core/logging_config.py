"""
Logging Configuration
Sets up the loggers for the `core` and `cli` packages.
"""
from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAMESPACES = ("core", "cli")


def setup_logging(level: int | str = logging.WARNING, log_file: Path | None = None) -> None:
    """
    Configures the package loggers.

    Args:
        level: Logging level (e.g. logging.DEBUG or "INFO")
        log_file: Optional path to save logs to a file.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError("Unknown log level.")

    # Console output goes to stderr so it never mixes with the menu on stdout.
    console_handler = RichHandler(console=Console(stderr=True), show_path=False)
    console_handler.setLevel(level)

    handlers: list[logging.Handler] = [console_handler]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S")
        )
        handlers.append(file_handler)

    for namespace in LOGGER_NAMESPACES:
        logger = logging.getLogger(namespace)
        logger.setLevel(level)
        # Avoid duplicate handlers when the app is invoked more than once (tests).
        for old_handler in list(logger.handlers):
            logger.removeHandler(old_handler)
            old_handler.close()
        for handler in handlers:
            logger.addHandler(handler)

    logging.getLogger("core").debug("Logging initialized.")
