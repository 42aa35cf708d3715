"""Robot state and the single-step movement rule."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from robotarena.schema import Direction, MoveOutcome

if TYPE_CHECKING:
    from robotarena.env.arena import RobotArena


def _direction_delta(direction: Direction) -> Tuple[int, int]:
    return {
        Direction.NORTH: (0, -1),
        Direction.EAST: (1, 0),
        Direction.SOUTH: (0, 1),
        Direction.WEST: (-1, 0),
    }[direction]


def next_cell(direction: Direction, x: int, y: int) -> Tuple[int, int]:
    """Return the cell one step from (x, y) in `direction`."""
    dx, dy = _direction_delta(direction)
    return x + dx, y + dy


class RobotIdSequence:
    """Hands out robot ids in increasing order, never reusing one."""

    def __init__(self, start: int = 0) -> None:
        self._next = start

    def next_id(self) -> int:
        robot_id = self._next
        self._next += 1
        return robot_id

    def peek(self) -> int:
        return self._next

    def reset(self, start: int = 0) -> None:
        self._next = start


DEFAULT_ID_SEQUENCE = RobotIdSequence()


@dataclass
class MoveResult:
    robot_id: int
    start: Tuple[int, int]
    final: Tuple[int, int]
    target: Tuple[int, int]
    outcome: MoveOutcome
    direction: Direction


@dataclass
class Robot:
    robot_id: int
    x: int
    y: int
    direction: Direction

    @property
    def pos(self) -> Tuple[int, int]:
        return self.x, self.y

    def is_here(self, x: int, y: int) -> bool:
        return self.x == x and self.y == y

    def try_to_move(self, arena: "RobotArena") -> MoveResult:
        """Step forward if the arena allows it, otherwise turn clockwise once."""
        start = (self.x, self.y)
        tx, ty = next_cell(self.direction, self.x, self.y)
        if arena.can_move_here(tx, ty):
            self.x, self.y = tx, ty
            outcome = MoveOutcome.MOVED
        else:
            self.direction = self.direction.next()
            outcome = MoveOutcome.BLOCK_ROBOT if arena.in_bounds(tx, ty) else MoveOutcome.BLOCK_OOB
        return MoveResult(
            robot_id=self.robot_id,
            start=start,
            final=(self.x, self.y),
            target=(tx, ty),
            outcome=outcome,
            direction=self.direction,
        )

    def describe(self) -> str:
        return f"Robot {self.robot_id} is at ({self.x}, {self.y}) facing {self.direction.value}"
