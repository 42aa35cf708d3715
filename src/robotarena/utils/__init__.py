"""Utility helpers for the robot arena."""

from .errors import PlacementError
from .real_time_logger import get_logger

__all__ = [
    "PlacementError",
    "get_logger",
]
