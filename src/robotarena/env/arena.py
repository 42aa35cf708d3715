"""Bounded grid arena that owns the robots and decides which moves are legal."""

from __future__ import annotations

import random
from typing import List, Optional, Tuple

from robotarena.env.codec import (
    LineIssue,
    LoadReport,
    format_header,
    format_robot_line,
    parse_dimensions,
    parse_robot_line,
)
from robotarena.env.robot import DEFAULT_ID_SEQUENCE, MoveResult, Robot, RobotIdSequence
from robotarena.schema import Direction, GridSize, LoadIssueKind
from robotarena.utils.errors import PlacementError
from robotarena.utils.real_time_logger import get_logger
from robotarena.vis.console import render_arena

LOGGER = get_logger("arena")


class RobotArena:
    """Rectangular arena of ``width`` x ``height`` cells holding an ordered list of robots.

    Robots move strictly one after another in insertion order, so a robot
    sees the positions the earlier robots took in the same tick.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        ids: Optional[RobotIdSequence] = None,
    ) -> None:
        self.size = GridSize(width=width, height=height)
        self.rng = rng if rng is not None else random.Random(seed)
        self.ids = ids if ids is not None else DEFAULT_ID_SEQUENCE
        self._robots: List[Robot] = []

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    @property
    def robots(self) -> Tuple[Robot, ...]:
        return tuple(self._robots)

    # ------------------------------------------------------------------
    # Occupancy queries
    # ------------------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size.width and 0 <= y < self.size.height

    def robot_at(self, x: int, y: int) -> Optional[Robot]:
        for robot in self._robots:
            if robot.is_here(x, y):
                return robot
        return None

    def can_move_here(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return self.robot_at(x, y) is None

    def positions(self) -> List[Tuple[int, int]]:
        return [robot.pos for robot in self._robots]

    def free_cell_count(self) -> int:
        return sum(
            1
            for y in range(self.size.height)
            for x in range(self.size.width)
            if self.robot_at(x, y) is None
        )

    # ------------------------------------------------------------------
    # Placement and movement
    # ------------------------------------------------------------------

    def add_robot(self) -> Robot:
        """Add a robot with a random facing on a random free cell.

        The caller must make sure a free cell exists; on a full arena the
        sampling loop never ends.
        """
        direction = self.rng.choice(list(Direction))
        while True:
            x = self.rng.randrange(self.size.width)
            y = self.rng.randrange(self.size.height)
            if self.can_move_here(x, y):
                break
        return self._append(x, y, direction)

    def place_robot(self, x: int, y: int, direction: Direction) -> Robot:
        if not self.in_bounds(x, y):
            raise PlacementError(f"Cell ({x}, {y}) is outside the {self.width}x{self.height} arena.")
        if self.robot_at(x, y) is not None:
            raise PlacementError(f"Cell ({x}, {y}) is already occupied.")
        return self._append(x, y, direction)

    def _append(self, x: int, y: int, direction: Direction) -> Robot:
        robot = Robot(robot_id=self.ids.next_id(), x=x, y=y, direction=direction)
        self._robots.append(robot)
        return robot

    def move_all_robots(self) -> List[MoveResult]:
        return [robot.try_to_move(self) for robot in self._robots]

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def describe(self) -> List[str]:
        lines = [f"Arena Size: {self.width} x {self.height}"]
        lines.extend(robot.describe() for robot in self._robots)
        return lines

    def render(self, title: str = "") -> str:
        return render_arena(self.width, self.height, self.positions(), title=title)

    # ------------------------------------------------------------------
    # Text persistence
    # ------------------------------------------------------------------

    def to_text(self) -> str:
        lines = [format_header(self.width, self.height)]
        lines.extend(format_robot_line(r.x, r.y, r.direction) for r in self._robots)
        return "\n".join(lines) + "\n"

    def load_from_text(self, text: str) -> LoadReport:
        """Replace the arena contents with a saved state.

        Robots are cleared before parsing starts. When the header line is
        malformed the load stops there, leaving no robots and the previous
        dimensions. Bad robot lines are skipped and reported. Robot
        coordinates are taken as written, without bounds or overlap checks.
        """
        self._robots.clear()
        lines = text.splitlines()

        header_index = next((i for i, line in enumerate(lines) if line.strip()), None)
        dimensions = parse_dimensions(lines[header_index]) if header_index is not None else None
        if dimensions is None:
            line_number = header_index + 1 if header_index is not None else 1
            header_text = lines[header_index] if header_index is not None else ""
            LOGGER.warning(
                "Error parsing arena dimensions at line %d: %r. Ensure the file format is correct.",
                line_number,
                header_text,
            )
            issue = LineIssue(
                line_number=line_number,
                kind=LoadIssueKind.MALFORMED_DIMENSIONS,
                text=header_text,
                detail="expected two positive integers",
            )
            return LoadReport(dimensions_ok=False, issues=[issue])

        width, height = dimensions
        self.size = GridSize(width=width, height=height)
        report = LoadReport(dimensions_ok=True)

        for index in range(header_index + 1, len(lines)):
            line = lines[index].strip()
            if not line:
                continue
            parsed = parse_robot_line(line, index + 1)
            if isinstance(parsed, LineIssue):
                LOGGER.warning("Skipping line %d (%s): %s", parsed.line_number, parsed.kind.value, parsed.detail)
                report.issues.append(parsed)
                continue
            self._append(parsed.x, parsed.y, parsed.direction)
            report.loaded += 1
        return report
