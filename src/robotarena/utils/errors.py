"""Exception types raised by the arena."""

from __future__ import annotations


class PlacementError(ValueError):
    """Raised when a robot is placed by hand on an illegal cell."""
