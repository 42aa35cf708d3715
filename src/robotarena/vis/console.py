"""Bordered text canvas for showing the arena in a terminal."""

from __future__ import annotations

from typing import Iterable, List, Tuple

BORDER = "#"
EMPTY = " "


class ConsoleCanvas:
    """Character grid with a one-cell border and an optional title in the top edge."""

    def __init__(self, width: int, height: int, title: str = "") -> None:
        self.width = width + 2
        self.height = height + 2
        self.title = title
        self.cells: List[List[str]] = [
            [
                BORDER if y in (0, self.height - 1) or x in (0, self.width - 1) else EMPTY
                for x in range(self.width)
            ]
            for y in range(self.height)
        ]
        self._write_title()

    def _write_title(self) -> None:
        title = self.title[: self.width]
        start = (self.width - len(title)) // 2
        for i, ch in enumerate(title):
            self.cells[0][start + i] = ch

    def clear(self) -> None:
        for y in range(1, self.height - 1):
            for x in range(1, self.width - 1):
                self.cells[y][x] = EMPTY

    def show_it(self, x: int, y: int, symbol: str) -> None:
        # cells outside the interior are dropped so the border stays intact
        if 0 <= x < self.width - 2 and 0 <= y < self.height - 2:
            self.cells[y + 1][x + 1] = symbol

    def __str__(self) -> str:
        return "".join("".join(row) + "\n" for row in self.cells)


def render_arena(
    width: int,
    height: int,
    positions: Iterable[Tuple[int, int]],
    title: str = "",
    symbol: str = "R",
) -> str:
    canvas = ConsoleCanvas(width, height, title)
    for x, y in positions:
        canvas.show_it(x, y, symbol)
    return str(canvas)
