"""
Logging Configuration
Sets up the console (stderr) and optional file logging for the pipeline.
"""
import logging
import sys
from typing import Optional

LOGGER_NAMESPACES = ("main", "utils", "detectors", "visualization")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the loggers of every pipeline package.

    Decode/export failures are logged at ERROR level, so the console handler
    writes to stderr.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for name in LOGGER_NAMESPACES:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Avoid duplicate handlers when called more than once
        if logger.hasHandlers():
            logger.handlers.clear()

        for handler in handlers:
            logger.addHandler(handler)
