"""Turn a recorded robot episode into an animated GIF."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError

from robotarena.env.persistence import read_text_file
from robotarena.logging.episode_log import EpisodeLog, Frame
from robotarena.vis.gif import GifRenderer, RenderOptions

app = typer.Typer(add_completion=False)


def select_frames(frames: List[Frame], every: int, last_tick: Optional[int] = None) -> List[Frame]:
    """Keep every ``every``-th frame up to ``last_tick``; the final kept state is always shown."""
    window = [frame for frame in frames if last_tick is None or frame.t <= last_tick]
    if not window:
        return []
    picked = window[::every]
    if picked[-1] is not window[-1]:
        picked.append(window[-1])
    return picked


def _load_episode(path: Path) -> EpisodeLog:
    text = read_text_file(path)
    if text is None:
        typer.secho(f"Cannot read episode file: {path}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    try:
        return EpisodeLog.model_validate(json.loads(text))
    except (json.JSONDecodeError, ValidationError) as exc:
        typer.secho(f"{path} is not a robot episode log", fg=typer.colors.RED)
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=2) from exc


@app.command()
def main(
    episode: Path = typer.Argument(..., help="Episode JSON written by robotarena-sim --episode-json."),
    out: Path = typer.Option(..., "--out", "-o", help="Output GIF path."),
    fps: int = typer.Option(6, "--fps", min=1, help="Ticks shown per second."),
    cell_size: int = typer.Option(32, "--cell-size", min=4, help="Pixel size of one arena cell."),
    every: int = typer.Option(1, "--every", min=1, help="Draw only every Nth tick."),
    last_tick: Optional[int] = typer.Option(None, "--last-tick", min=0, help="Stop after this tick."),
    no_grid: bool = typer.Option(False, "--no-grid", help="Hide the cell grid."),
    no_legend: bool = typer.Option(False, "--no-legend", help="Hide the side panel listing the tick and each robot."),
    title: Optional[str] = typer.Option(None, "--title", help="Arena title shown in the side panel."),
):
    """Render the ticks of a recorded arena run as an animated GIF."""

    ep = _load_episode(episode)
    frames = select_frames(ep.frames, every, last_tick)
    if not frames:
        typer.secho("No ticks to render", fg=typer.colors.RED)
        raise typer.Exit(code=2)

    meta = ep.meta.model_copy(update={"title": title}) if title else ep.meta
    ep = ep.model_copy(update={"meta": meta, "frames": frames})

    options = RenderOptions(
        cell_size=cell_size,
        fps=fps,
        show_gridlines=not no_grid,
        show_legend=not no_legend,
    )
    renderer = GifRenderer(ep, options)
    images = renderer.render_frames()
    out.parent.mkdir(parents=True, exist_ok=True)
    renderer.save_gif(images, str(out))
    typer.secho(f"Wrote {out}: {len(images)} ticks of a {ep.meta.grid_size.width}x{ep.meta.grid_size.height} arena", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
