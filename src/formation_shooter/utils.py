"""
Formation Shooter utils
"""

from __future__ import annotations

import logging
from typing import Protocol

LOGGER_NAME = "formation_shooter"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """
    Configure the package logger

    :param level: Level name or number
    :type level: int | str

    :return: logging.Logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)

    return logger


class Box(Protocol):
    """
    Anything with an axis-aligned bounding box
    """

    x: float
    y: float
    width: float
    height: float


def intersects(a: Box, b: Box) -> bool:
    """
    Strict axis-aligned bounding box overlap; touching edges do not count

    :param a: First box
    :type a: Box

    :param b: Second box
    :type b: Box

    :return: bool
    """
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )
