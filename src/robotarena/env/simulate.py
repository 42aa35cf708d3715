"""Tick driver that runs an arena forward and records episode frames."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from robotarena.env.arena import RobotArena
from robotarena.env.robot import MoveResult
from robotarena.logging.episode_log import EpisodeLog, EpisodeMeta, Frame, RobotState
from robotarena.schema import GridSize, MoveOutcome, Position

TickCallback = Callable[[int, List[MoveResult]], None]


@dataclass
class SimulationMetrics:
    ticks: int
    robots: int
    moves: int = 0
    turns: int = 0
    outcome_counts: Dict[str, int] = field(default_factory=dict)


def snapshot_frame(arena: RobotArena, t: int, results: Optional[List[MoveResult]] = None) -> Frame:
    outcomes = {result.robot_id: result.outcome for result in results or []}
    return Frame(
        t=t,
        robots=[
            RobotState(
                robot_id=robot.robot_id,
                pos=Position(x=robot.x, y=robot.y),
                direction=robot.direction,
                outcome=outcomes.get(robot.robot_id),
            )
            for robot in arena.robots
        ],
    )


def run_simulation(
    arena: RobotArena,
    ticks: int,
    *,
    frames: Optional[List[Frame]] = None,
    on_tick: Optional[TickCallback] = None,
) -> SimulationMetrics:
    """Advance `arena` by `ticks` ticks.

    When `frames` is given, the starting state is appended as frame 0 and one
    frame follows each tick. `on_tick` is called with the 1-based tick number
    and the move results of that tick.
    """
    if ticks < 0:
        raise ValueError("ticks must be non-negative.")

    counts: Counter[str] = Counter()
    if frames is not None:
        frames.append(snapshot_frame(arena, 0))

    for tick in range(1, ticks + 1):
        results = arena.move_all_robots()
        counts.update(result.outcome.value for result in results)
        if frames is not None:
            frames.append(snapshot_frame(arena, tick, results))
        if on_tick is not None:
            on_tick(tick, results)

    moves = counts.get(MoveOutcome.MOVED.value, 0)
    return SimulationMetrics(
        ticks=ticks,
        robots=len(arena.robots),
        moves=moves,
        turns=sum(counts.values()) - moves,
        outcome_counts=dict(counts),
    )


def build_episode_log(
    arena: RobotArena,
    frames: List[Frame],
    *,
    title: Optional[str] = None,
    seed: Optional[int] = None,
) -> EpisodeLog:
    return EpisodeLog(
        meta=EpisodeMeta(
            grid_size=GridSize(width=arena.width, height=arena.height),
            title=title,
            seed=seed,
        ),
        frames=frames,
    )
