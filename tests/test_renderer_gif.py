import pytest
from PIL import Image

from robotarena.logging.episode_log import EpisodeLog, EpisodeMeta, Frame, RobotState
from robotarena.schema import Direction, GridSize, Position
from robotarena.vis.gif import GifRenderer, RenderOptions


def build_tiny_episode() -> EpisodeLog:
    meta = EpisodeMeta(grid_size=GridSize(width=4, height=3), title="viz")
    frames = [
        Frame(t=0, robots=[RobotState(robot_id=0, pos=Position(x=1, y=1), direction=Direction.NORTH)]),
        Frame(t=1, robots=[RobotState(robot_id=0, pos=Position(x=1, y=0), direction=Direction.NORTH)]),
    ]
    return EpisodeLog(meta=meta, frames=frames)


def test_robot_cell_is_filled_with_its_colour():
    episode = build_tiny_episode()
    renderer = GifRenderer(episode, RenderOptions(cell_size=20, show_legend=False))
    frame = renderer.render_frames()[0]

    x0, y0, x1, y1 = renderer._cell_rect(1, 1)
    assert frame.getpixel(((x0 + x1) // 2, (y0 + y1) // 2 + 2)) == (31, 119, 180)

    ex0, ey0, ex1, ey1 = renderer._cell_rect(3, 2)
    assert frame.getpixel(((ex0 + ex1) // 2, (ey0 + ey1) // 2)) == (255, 255, 255)


def test_save_gif_writes_all_frames(tmp_path):
    renderer = GifRenderer(build_tiny_episode(), RenderOptions(cell_size=16, fps=2))
    out = tmp_path / "episode.gif"
    renderer.save_gif(renderer.render_frames(), str(out))
    with Image.open(out) as image:
        assert image.n_frames == 2


def test_save_gif_requires_frames(tmp_path):
    renderer = GifRenderer(build_tiny_episode())
    with pytest.raises(ValueError):
        renderer.save_gif([], str(tmp_path / "empty.gif"))
