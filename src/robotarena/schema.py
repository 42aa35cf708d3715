"""Shared enumerations and Pydantic models for the robot arena."""

from __future__ import annotations

from enum import Enum
from typing import Dict

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Direction(str, Enum):
    """Cardinal directions a robot can face, in clockwise order."""

    NORTH = "NORTH"
    EAST = "EAST"
    SOUTH = "SOUTH"
    WEST = "WEST"

    def next(self) -> "Direction":
        """Return the direction one quarter turn clockwise."""
        return next_direction(self)

    @classmethod
    def parse(cls, token: str) -> "Direction":
        """Parse a direction name, ignoring case and surrounding whitespace."""
        name = token.strip().upper()
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown direction: {token!r}") from None


_CLOCKWISE: Dict[Direction, Direction] = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
}


def next_direction(direction: Direction) -> Direction:
    return _CLOCKWISE[direction]


class MoveOutcome(str, Enum):
    """Result of a single move attempt."""

    MOVED = "MOVED"
    BLOCK_OOB = "BLOCK_OOB"
    BLOCK_ROBOT = "BLOCK_ROBOT"


class LoadIssueKind(str, Enum):
    """Why a line of a saved arena was rejected."""

    MALFORMED_DIMENSIONS = "MALFORMED_DIMENSIONS"
    WRONG_FIELD_COUNT = "WRONG_FIELD_COUNT"
    BAD_COORDINATE = "BAD_COORDINATE"
    UNKNOWN_DIRECTION = "UNKNOWN_DIRECTION"


# ---------------------------------------------------------------------------
# Geometry helpers
# ---------------------------------------------------------------------------


class GridSize(BaseModel):
    """Arena dimensions."""

    width: int = Field(ge=1, description="Number of columns along +X.")
    height: int = Field(ge=1, description="Number of rows along +Y.")


class Position(BaseModel):
    """Integer coordinates. Loaded robots may sit outside the grid."""

    x: int = Field(description="Column index, 0-based from left.")
    y: int = Field(description="Row index, 0-based from top.")
