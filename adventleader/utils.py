"""
Shared utilities for adventleader.

This module provides common functions used across multiple modules
to avoid code duplication.
"""

import logging
import re

# --- Shared Regex Patterns ---
# Fixed-offset timestamp: 2018-12-01T06:12:44+0100 (no colon in the offset, no "Z")
TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{4}$", re.ASCII)

# Trailing ".json" on the API URL; the same URL without it is the web page
JSON_SUFFIX_RE = re.compile(r"\.json$")

PACKAGE_LOGGER = "adventleader"


# --- Logging Setup ---
def setup_logging(name: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (usually __name__ from the calling module)
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def set_log_level(level: int | str) -> None:
    """Apply a level to every logger already created under the package."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    for name, logger in logging.root.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and (
            name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + ".")
        ):
            logger.setLevel(level)


# --- URL Helpers ---
def display_url(source_url: str) -> str:
    """Strip a trailing `.json` so the link points at the human-readable page."""
    return JSON_SUFFIX_RE.sub("", source_url)


__all__ = [
    # Logging
    'setup_logging',
    'set_log_level',
    # URLs
    'display_url',
    # Patterns
    'TIMESTAMP_RE',
    'JSON_SUFFIX_RE',
]
