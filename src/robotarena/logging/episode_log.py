from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from robotarena.schema import Direction, GridSize, MoveOutcome, Position


class EpisodeMeta(BaseModel):
    grid_size: GridSize
    title: Optional[str] = None
    seed: Optional[int] = None


class RobotState(BaseModel):
    robot_id: int
    pos: Position
    direction: Direction
    outcome: Optional[MoveOutcome] = Field(
        None,
        description="Result of the move attempt that produced this frame; empty for the initial frame.",
    )


class Frame(BaseModel):
    t: int = Field(ge=0)
    robots: List[RobotState]


class EpisodeLog(BaseModel):
    meta: EpisodeMeta
    frames: List[Frame]
