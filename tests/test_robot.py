from robotarena.env.arena import RobotArena
from robotarena.env.robot import Robot, RobotIdSequence, next_cell
from robotarena.schema import Direction, MoveOutcome


def test_next_cell_moves_one_axis_by_one():
    expected = {
        Direction.NORTH: (3, 2),
        Direction.EAST: (4, 3),
        Direction.SOUTH: (3, 4),
        Direction.WEST: (2, 3),
    }
    for direction, cell in expected.items():
        nx, ny = next_cell(direction, 3, 3)
        assert (nx, ny) == cell
        assert abs(nx - 3) + abs(ny - 3) == 1


def test_robot_moves_into_free_cell():
    arena = RobotArena(5, 5, ids=RobotIdSequence())
    robot = arena.place_robot(2, 2, Direction.NORTH)
    result = robot.try_to_move(arena)
    assert robot.pos == (2, 1)
    assert robot.direction == Direction.NORTH
    assert result.outcome == MoveOutcome.MOVED
    assert result.target == (2, 1)


def test_robot_turns_at_the_edge():
    arena = RobotArena(5, 5, ids=RobotIdSequence())
    robot = arena.place_robot(2, 0, Direction.NORTH)
    result = robot.try_to_move(arena)
    assert robot.pos == (2, 0)
    assert robot.direction == Direction.EAST
    assert result.outcome == MoveOutcome.BLOCK_OOB


def test_robot_turns_once_per_blocked_attempt():
    arena = RobotArena(1, 2, ids=RobotIdSequence())
    robot = arena.place_robot(0, 0, Direction.SOUTH)
    arena.place_robot(0, 1, Direction.NORTH)
    result = robot.try_to_move(arena)
    assert result.outcome == MoveOutcome.BLOCK_ROBOT
    assert robot.direction == Direction.WEST
    robot.try_to_move(arena)
    assert robot.direction == Direction.NORTH
    assert robot.pos == (0, 0)


def test_describe_reports_position_and_facing():
    robot = Robot(robot_id=7, x=1, y=4, direction=Direction.WEST)
    assert robot.describe() == "Robot 7 is at (1, 4) facing WEST"


def test_id_sequence_is_monotonic_and_resettable():
    ids = RobotIdSequence()
    assert [ids.next_id() for _ in range(3)] == [0, 1, 2]
    ids.reset()
    assert ids.next_id() == 0
    assert ids.peek() == 1
