from robotarena.env.arena import RobotArena
from robotarena.env.persistence import read_text_file, write_text_file
from robotarena.env.robot import RobotIdSequence
from robotarena.schema import Direction


def test_write_then_read(tmp_path):
    arena = RobotArena(4, 4, ids=RobotIdSequence())
    arena.place_robot(3, 0, Direction.SOUTH)
    path = tmp_path / "arena.txt"
    assert write_text_file(path, arena.to_text())
    assert read_text_file(path) == "4 4\n3 0 SOUTH\n"


def test_write_failure_returns_false(tmp_path, caplog):
    path = tmp_path / "missing" / "arena.txt"
    assert write_text_file(path, "1 1\n") is False
    assert "Error saving file" in caplog.text


def test_read_missing_file_returns_none(tmp_path):
    assert read_text_file(tmp_path / "nope.txt") is None


def test_unusable_path_is_reported_not_raised(tmp_path, caplog):
    path = str(tmp_path / "bad\0name.txt")
    assert write_text_file(path, "1 1\n") is False
    assert read_text_file(path) is None
    assert "Error reading file" in caplog.text
