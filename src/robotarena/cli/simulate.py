"""Batch CLI: build or load an arena, run it for a number of ticks, save the result."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

import typer

from robotarena.env.arena import RobotArena
from robotarena.env.persistence import read_text_file, write_text_file
from robotarena.env.robot import RobotIdSequence
from robotarena.env.simulate import build_episode_log, run_simulation
from robotarena.logging.episode_log import Frame

app = typer.Typer(add_completion=False)


ARENA_PRESETS = {
    "console": {
        "width": 20,
        "height": 6,
        "robots": 4,
        "description": "Wide, shallow arena sized for an 80-column terminal.",
    },
    "square": {
        "width": 10,
        "height": 10,
        "robots": 6,
        "description": "Open square with room to roam.",
    },
    "corridor": {
        "width": 30,
        "height": 2,
        "robots": 5,
        "description": "Two-lane corridor where robots keep running into each other.",
    },
    "crowded": {
        "width": 6,
        "height": 6,
        "robots": 24,
        "description": "Two thirds of the cells taken; most attempts end in a turn.",
    },
}


@app.command()
def main(
    preset: str = typer.Option(
        "none",
        "--preset",
        help="Arena preset name (console, square, corridor, crowded) or 'none' for custom settings.",
    ),
    width: int = typer.Option(20, "--width", min=1, help="Arena width."),
    height: int = typer.Option(6, "--height", min=1, help="Arena height."),
    robots: int = typer.Option(3, "--robots", min=0, help="Robots to add at random free cells."),
    ticks: int = typer.Option(10, "--ticks", min=0, help="Ticks to simulate."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for placement."),
    load: Optional[Path] = typer.Option(
        None,
        "--load",
        help="Start from a saved arena text file; --robots are added on top of it.",
    ),
    save: Optional[Path] = typer.Option(None, "--save", help="Write the final arena state to this text file."),
    episode_json: Optional[Path] = typer.Option(
        None,
        "--episode-json",
        help="Optional path for the EpisodeLog JSON used by robotarena-gif.",
    ),
    emit_config: Optional[Path] = typer.Option(
        None,
        "--emit-config",
        help="Optional path to dump the resolved configuration YAML.",
    ),
    title: str = typer.Option("", "--title", help="Title shown in the top border of the canvas."),
    quiet: bool = typer.Option(False, "--quiet", help="Only print the final metrics."),
) -> None:
    preset_name = preset.lower()
    if preset_name != "none":
        preset_details = ARENA_PRESETS.get(preset_name)
        if preset_details is None:
            typer.secho(
                f"Unknown arena preset '{preset}'. Available presets: {', '.join(ARENA_PRESETS.keys())}, or 'none'.",
                fg=typer.colors.RED,
            )
            raise typer.Exit(code=2)
        width = preset_details["width"]
        height = preset_details["height"]
        robots = preset_details["robots"]
        typer.secho(
            f"Using arena preset '{preset_name}': {preset_details['description']}",
            fg=typer.colors.BLUE,
        )

    arena = RobotArena(width, height, seed=seed, ids=RobotIdSequence())

    if load is not None:
        text = read_text_file(load)
        if text is None:
            typer.secho(f"Failed to load arena from '{load}'", fg=typer.colors.RED)
            raise typer.Exit(code=2)
        report = arena.load_from_text(text)
        if not report.dimensions_ok:
            typer.secho(f"'{load}' has no valid dimension line", fg=typer.colors.RED)
            raise typer.Exit(code=2)
        if report.issues:
            typer.secho(
                f"Loaded {report.loaded} robots from '{load}', skipped {report.skipped} malformed lines",
                fg=typer.colors.YELLOW,
            )

    free = arena.free_cell_count()
    if robots > free:
        raise typer.BadParameter(
            f"cannot add {robots} robots to an arena with {free} free cells.",
            param_hint="--robots",
        )

    if emit_config:
        _write_config(
            emit_config,
            {
                "preset": preset_name,
                "width": arena.width,
                "height": arena.height,
                "robots": robots,
                "ticks": ticks,
                "seed": seed,
                "load": str(load) if load is not None else None,
                "title": title,
            },
        )

    for _ in range(robots):
        arena.add_robot()

    frames: Optional[List[Frame]] = [] if episode_json is not None else None
    if not quiet:
        typer.echo(arena.render(title))
    metrics = run_simulation(arena, ticks, frames=frames)

    if not quiet:
        typer.echo(arena.render(title))
        for line in arena.describe():
            typer.echo(line)
    typer.secho(json.dumps(asdict(metrics), indent=2), fg=typer.colors.GREEN)

    if save is not None:
        if write_text_file(save, arena.to_text()):
            typer.secho(f"Successfully saved arena to '{save}'", fg=typer.colors.BLUE)
        else:
            typer.secho(f"Failed to save arena to '{save}'", fg=typer.colors.RED)
            raise typer.Exit(code=1)

    if frames is not None and episode_json is not None:
        episode_log = build_episode_log(arena, frames, title=title or None, seed=seed)
        episode_json.parent.mkdir(parents=True, exist_ok=True)
        with episode_json.open("w", encoding="utf-8") as handle:
            handle.write(episode_log.model_dump_json(indent=2))
        typer.secho(f"Episode log saved to {episode_json}", fg=typer.colors.BLUE)


def _write_config(path: Path, data: dict) -> None:
    import yaml

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=True)


if __name__ == "__main__":
    app()
