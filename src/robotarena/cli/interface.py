"""Interactive console for adding, moving, saving and loading robots."""

from __future__ import annotations

import random
import time
from typing import Callable, Dict, Optional

import typer

from robotarena.env.arena import RobotArena
from robotarena.env.persistence import read_text_file, write_text_file
from robotarena.env.robot import RobotIdSequence

app = typer.Typer(add_completion=False)

MENU = (
    "Enter (A)dd Robot, get (I)nformation, (D)isplay arena, (M)ove robots, "
    "(S)imulate, (N)ew arena, (L)oad, (W)rite or e(X)it"
)

DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 6
SIMULATE_STEPS = 10
SIMULATE_DELAY_S = 0.2


class RobotInterface:
    """Menu loop driving one arena per session.

    Every arena created in a session shares the session's random source and
    robot id sequence, so ids keep increasing across new arenas and loads.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        *,
        title: str = "",
        seed: Optional[int] = None,
        simulate_steps: int = SIMULATE_STEPS,
        delay: float = SIMULATE_DELAY_S,
    ) -> None:
        self.rng = random.Random(seed)
        self.ids = RobotIdSequence()
        self.title = title
        self.simulate_steps = simulate_steps
        self.delay = delay
        self.arena = RobotArena(width, height, rng=self.rng, ids=self.ids)
        self.commands: Dict[str, Callable[[], None]] = {
            "A": self.add_robot,
            "I": self.print_robot_info,
            "D": self.display_arena,
            "M": self.move_robots,
            "S": self.simulate,
            "N": self.new_arena,
            "L": self.load_arena,
            "W": self.save_arena,
        }

    def run(self) -> None:
        while True:
            try:
                choice = typer.prompt(MENU, prompt_suffix=" > ")
                if not self.handle(choice):
                    break
            except typer.Abort:
                # stdin closed, possibly inside a command prompt
                typer.echo()
                break

    def handle(self, choice: str) -> bool:
        """Run one menu command; False means the session should end."""
        command = choice.strip()[:1].upper()
        if command == "X":
            return False
        action = self.commands.get(command)
        if action is None:
            typer.secho(f"Unknown command '{choice.strip()}'.", fg=typer.colors.YELLOW)
            return True
        action()
        return True

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add_robot(self) -> None:
        if self.arena.free_cell_count() == 0:
            typer.secho("Arena is full, no room for another robot.", fg=typer.colors.YELLOW)
            return
        self.arena.add_robot()
        self.print_robot_info()

    def print_robot_info(self) -> None:
        typer.echo("\nUpdated Robot Information:")
        for line in self.arena.describe():
            typer.echo(line)

    def display_arena(self) -> None:
        typer.echo(self.arena.render(self.title))

    def move_robots(self) -> None:
        self.arena.move_all_robots()
        self.display_arena()
        self.print_robot_info()

    def simulate(self) -> None:
        for _ in range(self.simulate_steps):
            self.print_robot_info()
            self.move_robots()
            if self.delay > 0:
                time.sleep(self.delay)

    def new_arena(self) -> None:
        if typer.confirm("Do you want to specify new dimensions?", default=False):
            width = self._prompt_dimension("width")
            height = self._prompt_dimension("height")
        else:
            width, height = self.arena.width, self.arena.height
        self.arena = RobotArena(width, height, rng=self.rng, ids=self.ids)
        typer.echo("New arena created.")

    def _prompt_dimension(self, name: str) -> int:
        while True:
            value = typer.prompt(f"Enter new arena {name}", type=int)
            if value > 0:
                return value
            typer.echo(f"Invalid input. Please enter a positive integer value for {name}.")

    def save_arena(self) -> None:
        filename = typer.prompt("Enter filename to save the arena")
        if write_text_file(filename, self.arena.to_text()):
            typer.echo(f"Successfully saved arena to '{filename}'")
        else:
            typer.echo(f"Failed to save arena to '{filename}'")

    def load_arena(self) -> None:
        filename = typer.prompt("Enter filename to load the arena")
        text = read_text_file(filename)
        if text is None:
            typer.echo(f"Failed to load arena from '{filename}'")
            return
        report = self.arena.load_from_text(text)
        if not report.dimensions_ok:
            typer.echo(f"Failed to load arena from '{filename}': bad dimension line")
        else:
            typer.echo(f"Successfully loaded arena from '{filename}'")
            if report.issues:
                typer.echo(f"Skipped {report.skipped} malformed line(s).")
        self.print_robot_info()


@app.command()
def main(
    width: int = typer.Option(DEFAULT_WIDTH, "--width", min=1, help="Initial arena width."),
    height: int = typer.Option(DEFAULT_HEIGHT, "--height", min=1, help="Initial arena height."),
    title: str = typer.Option("", "--title", help="Title shown in the top border of the arena."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for robot placement."),
    steps: int = typer.Option(SIMULATE_STEPS, "--steps", min=1, help="Ticks run by the (S)imulate command."),
    delay: float = typer.Option(SIMULATE_DELAY_S, "--delay", min=0.0, help="Seconds to pause between simulated ticks."),
) -> None:
    """Start the interactive robot arena console."""

    RobotInterface(width, height, title=title, seed=seed, simulate_steps=steps, delay=delay).run()


if __name__ == "__main__":
    app()
