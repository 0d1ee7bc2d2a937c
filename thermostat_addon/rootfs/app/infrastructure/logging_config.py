"""Logging setup for the thermostat controller."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "info") -> int:
    """Configure root logging.

    Args:
        level: Level name, case-insensitive. Unknown names fall back to INFO.

    Returns:
        The numeric level applied
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    return numeric_level
