"""Line-level codec for the saved arena text format.

The format is one header line ``"<W> <H>"`` followed by one
``"<x> <y> <DIRECTION>"`` line per robot, in arena order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from robotarena.schema import Direction, LoadIssueKind

# Plain decimal integers only: no underscores, no surrounding text.
INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


@dataclass
class RobotLine:
    x: int
    y: int
    direction: Direction


@dataclass
class LineIssue:
    line_number: int
    kind: LoadIssueKind
    text: str
    detail: str


@dataclass
class LoadReport:
    dimensions_ok: bool
    loaded: int = 0
    issues: List[LineIssue] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        return sum(1 for issue in self.issues if issue.kind != LoadIssueKind.MALFORMED_DIMENSIONS)


def format_header(width: int, height: int) -> str:
    return f"{width} {height}"


def format_robot_line(x: int, y: int, direction: Direction) -> str:
    return f"{x} {y} {direction.value}"


def parse_dimensions(line: str) -> Optional[Tuple[int, int]]:
    """Parse a header line; None unless it holds exactly two positive integers."""
    tokens = line.split()
    if len(tokens) != 2:
        return None
    if not all(INTEGER_TOKEN.fullmatch(token) for token in tokens):
        return None
    width, height = int(tokens[0]), int(tokens[1])
    if width <= 0 or height <= 0:
        return None
    return width, height


def parse_robot_line(line: str, line_number: int) -> Union[RobotLine, LineIssue]:
    tokens = line.split()
    if len(tokens) != 3:
        return LineIssue(
            line_number=line_number,
            kind=LoadIssueKind.WRONG_FIELD_COUNT,
            text=line,
            detail=f"expected 3 fields, got {len(tokens)}",
        )
    bad = [token for token in tokens[:2] if not INTEGER_TOKEN.fullmatch(token)]
    if bad:
        return LineIssue(
            line_number=line_number,
            kind=LoadIssueKind.BAD_COORDINATE,
            text=line,
            detail=f"not an integer: {bad[0]!r}",
        )
    x, y = int(tokens[0]), int(tokens[1])
    try:
        direction = Direction.parse(tokens[2])
    except ValueError as exc:
        return LineIssue(
            line_number=line_number,
            kind=LoadIssueKind.UNKNOWN_DIRECTION,
            text=line,
            detail=str(exc),
        )
    return RobotLine(x=x, y=y, direction=direction)
