import json

import yaml
from PIL import Image
from typer.testing import CliRunner

from robotarena.cli import render_gif, simulate
from robotarena.logging.episode_log import EpisodeLog, Frame

runner = CliRunner()


def test_simulate_writes_state_episode_and_config(tmp_path):
    save = tmp_path / "final.txt"
    episode = tmp_path / "out" / "episode.json"
    config = tmp_path / "config.yaml"
    result = runner.invoke(
        simulate.app,
        [
            "--width", "5", "--height", "5", "--robots", "3", "--ticks", "4", "--seed", "1",
            "--save", str(save), "--episode-json", str(episode), "--emit-config", str(config), "--quiet",
        ],
    )
    assert result.exit_code == 0, result.output

    lines = save.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "5 5"
    assert len(lines) == 4

    log = EpisodeLog.model_validate(json.loads(episode.read_text(encoding="utf-8")))
    assert len(log.frames) == 5
    assert log.meta.seed == 1

    assert yaml.safe_load(config.read_text(encoding="utf-8"))["ticks"] == 4


def test_simulate_continues_from_saved_state(tmp_path):
    saved = tmp_path / "start.txt"
    saved.write_text("3 1\n0 0 EAST\n", encoding="utf-8")
    result = runner.invoke(simulate.app, ["--load", str(saved), "--robots", "0", "--ticks", "2", "--save", str(saved)])
    assert result.exit_code == 0, result.output
    assert saved.read_text(encoding="utf-8") == "3 1\n2 0 EAST\n"


def test_simulate_refuses_more_robots_than_cells():
    result = runner.invoke(simulate.app, ["--width", "2", "--height", "1", "--robots", "3"])
    assert result.exit_code == 2


def test_simulate_rejects_unknown_preset():
    result = runner.invoke(simulate.app, ["--preset", "maze"])
    assert result.exit_code == 2
    assert "Unknown arena preset" in result.output


def test_simulate_uses_preset_dimensions(tmp_path):
    save = tmp_path / "corridor.txt"
    result = runner.invoke(simulate.app, ["--preset", "corridor", "--ticks", "1", "--save", str(save), "--quiet"])
    assert result.exit_code == 0, result.output
    lines = save.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "30 2"
    assert len(lines) == 6


def test_render_gif_cli(tmp_path):
    episode = tmp_path / "episode.json"
    runner.invoke(simulate.app, ["--width", "4", "--height", "4", "--robots", "2", "--ticks", "3", "--episode-json", str(episode), "--quiet"])
    out = tmp_path / "anim" / "episode.gif"
    result = runner.invoke(render_gif.app, [str(episode), "--out", str(out), "--cell-size", "12"])
    assert result.exit_code == 0, result.output
    assert out.is_file()


def test_render_gif_draws_every_nth_tick_and_the_last(tmp_path):
    episode = tmp_path / "episode.json"
    runner.invoke(simulate.app, ["--width", "4", "--height", "4", "--robots", "1", "--ticks", "4", "--episode-json", str(episode), "--quiet"])
    out = tmp_path / "sparse.gif"
    result = runner.invoke(render_gif.app, [str(episode), "--out", str(out), "--every", "3", "--cell-size", "8"])
    assert result.exit_code == 0, result.output
    with Image.open(out) as image:
        assert image.n_frames == 3


def test_select_frames_stops_at_last_tick():
    frames = [Frame(t=t, robots=[]) for t in range(6)]
    assert [f.t for f in render_gif.select_frames(frames, 2)] == [0, 2, 4, 5]
    assert [f.t for f in render_gif.select_frames(frames, 2, last_tick=2)] == [0, 2]
    assert render_gif.select_frames([], 1) == []


def test_render_gif_rejects_non_episode_json(tmp_path):
    episode = tmp_path / "episode.json"
    episode.write_text("{\"frames\": 3}", encoding="utf-8")
    result = runner.invoke(render_gif.app, [str(episode), "--out", str(tmp_path / "x.gif")])
    assert result.exit_code == 2


def test_render_gif_missing_episode(tmp_path):
    result = runner.invoke(render_gif.app, [str(tmp_path / "nope.json"), "--out", str(tmp_path / "x.gif")])
    assert result.exit_code == 1
