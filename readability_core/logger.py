"""
Logging configuration for readability_core.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "readability_core"


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: int = logging.WARNING,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up and return a logger instance.

    Scoring passes call into this package once per node, so the default
    level is WARNING; pass logging.DEBUG to see per-node score decisions.

    Args:
        name: Logger name
        level: Logging level (default: WARNING)
        log_file: Optional file path for logging

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Already configured: only adjust the level
    if logger.handlers:
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    logger.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


logger = setup_logger()


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get a child logger for a specific module.

    Child loggers (e.g. "readability_core.tree") share the root logger's
    handlers, and their name tells which layer produced each message.

    Args:
        module_name: Name of the module (e.g., 'tree', 'traversal')

    Returns:
        Child logger instance
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{module_name}")
