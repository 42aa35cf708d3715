from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from robotarena.logging.episode_log import EpisodeLog, Frame, RobotState
from robotarena.schema import Direction

# Colors
WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
GRID_LINE = (220, 220, 220, 255)
BORDER_FILL = (90, 90, 90, 255)
LEGEND_WIDTH = 200

ROBOT_PALETTE = [
    "#1f77b4",
    "#d62728",
    "#2ca02c",
    "#9467bd",
    "#ff7f0e",
    "#17becf",
]


def hex_to_rgb(h: str) -> Tuple[int, int, int]:
    h = h.lstrip("#")
    return tuple(int(h[i:i + 2], 16) for i in (0, 2, 4))  # type: ignore[return-value]


@dataclass
class RenderOptions:
    cell_size: int = 32
    border: int = 12
    show_gridlines: bool = True
    fps: int = 6
    font_size: int = 14
    show_legend: bool = True


class GifRenderer:
    def __init__(self, episode: EpisodeLog, options: Optional[RenderOptions] = None):
        self.episode = episode
        self.opts = options or RenderOptions()
        self.grid_w = episode.meta.grid_size.width
        self.grid_h = episode.meta.grid_size.height
        self.robot_colors = self._build_robot_colors()
        self.font = self._load_font(self.opts.font_size)

    def _build_robot_colors(self) -> Dict[int, Tuple[int, int, int]]:
        colors: Dict[int, Tuple[int, int, int]] = {}
        for frame in self.episode.frames:
            for robot in frame.robots:
                if robot.robot_id not in colors:
                    colors[robot.robot_id] = hex_to_rgb(ROBOT_PALETTE[len(colors) % len(ROBOT_PALETTE)])
        return colors

    def _load_font(self, size: int) -> ImageFont.ImageFont:
        try:
            return ImageFont.truetype("arial.ttf", size)  # type: ignore[return-value]
        except OSError:
            return ImageFont.load_default()

    def render_frames(self) -> List[Image.Image]:
        frames: List[Image.Image] = []
        for frame in self.episode.frames:
            canvas = self._create_canvas()
            draw = ImageDraw.Draw(canvas, "RGBA")
            self._draw_gridlines(draw)
            self._draw_robots(draw, frame)
            if self.opts.show_legend:
                self._draw_legend(draw, frame)
            frames.append(canvas.convert("RGB"))
        return frames

    def save_gif(self, frames: List[Image.Image], out_path: str) -> None:
        if not frames:
            raise ValueError("No frames to save")
        duration = int(1000 / max(1, self.opts.fps))
        frames[0].save(
            out_path,
            save_all=True,
            append_images=frames[1:],
            duration=duration,
            loop=0,
            disposal=2,
        )

    # Drawing helpers -------------------------------------------------

    def _create_canvas(self) -> Image.Image:
        w = self.opts.border * 2 + self.grid_w * self.opts.cell_size
        h = self.opts.border * 2 + self.grid_h * self.opts.cell_size
        if self.opts.show_legend:
            w += LEGEND_WIDTH + self.opts.border
        canvas = Image.new("RGBA", (w, h), WHITE)
        draw = ImageDraw.Draw(canvas)
        grid_right = self.opts.border * 2 + self.grid_w * self.opts.cell_size
        draw.rectangle((0, 0, grid_right - 1, h - 1), fill=BORDER_FILL)
        left, top = self.opts.border, self.opts.border
        draw.rectangle(
            (left, top, left + self.grid_w * self.opts.cell_size - 1, top + self.grid_h * self.opts.cell_size - 1),
            fill=WHITE,
        )
        return canvas

    def _cell_rect(self, x: int, y: int) -> Tuple[int, int, int, int]:
        cs = self.opts.cell_size
        bx = self.opts.border + x * cs
        by = self.opts.border + y * cs
        return (bx, by, bx + cs, by + cs)

    def _draw_gridlines(self, draw: ImageDraw.ImageDraw) -> None:
        if not self.opts.show_gridlines:
            return
        cs = self.opts.cell_size
        left = self.opts.border
        top = self.opts.border
        width_px = self.grid_w * cs
        height_px = self.grid_h * cs
        for x in range(self.grid_w + 1):
            x0 = left + x * cs
            draw.line([(x0, top), (x0, top + height_px)], fill=GRID_LINE, width=1)
        for y in range(self.grid_h + 1):
            y0 = top + y * cs
            draw.line([(left, y0), (left + width_px, y0)], fill=GRID_LINE, width=1)

    def _draw_robots(self, draw: ImageDraw.ImageDraw, frame: Frame) -> None:
        for robot in frame.robots:
            # loaded states can hold robots outside the grid
            if not (0 <= robot.pos.x < self.grid_w and 0 <= robot.pos.y < self.grid_h):
                continue
            color = self.robot_colors.get(robot.robot_id, (80, 80, 80))
            draw.polygon(self._robot_triangle(robot), fill=(*color, 255), outline=BLACK)

    def _robot_triangle(self, robot: RobotState) -> List[Tuple[int, int]]:
        x0, y0, x1, y1 = self._cell_rect(robot.pos.x, robot.pos.y)
        inset = max(2, self.opts.cell_size // 6)
        x0, y0, x1, y1 = x0 + inset, y0 + inset, x1 - inset, y1 - inset
        cx, cy = (x0 + x1) // 2, (y0 + y1) // 2
        return {
            Direction.NORTH: [(cx, y0), (x1, y1), (x0, y1)],
            Direction.EAST: [(x1, cy), (x0, y1), (x0, y0)],
            Direction.SOUTH: [(cx, y1), (x0, y0), (x1, y0)],
            Direction.WEST: [(x0, cy), (x1, y0), (x1, y1)],
        }[robot.direction]

    def _draw_legend(self, draw: ImageDraw.ImageDraw, frame: Frame) -> None:
        cs = self.opts.cell_size
        grid_right = self.opts.border * 2 + self.grid_w * cs
        left = grid_right + self.opts.border
        top = self.opts.border
        height = self.grid_h * cs
        draw.rectangle((left, top, left + LEGEND_WIDTH, top + height), fill=WHITE, outline=BLACK, width=1)

        text_y = top + 8
        title = self.episode.meta.title or "arena"
        draw.text((left + 8, text_y), title, fill=BLACK, font=self.font)
        line_height = self.font.getbbox("Ag")[3]
        text_y += line_height + 6
        draw.text((left + 8, text_y), f"tick {frame.t}", fill=BLACK, font=self.font)
        text_y += line_height + 12

        for robot in frame.robots:
            color = self.robot_colors.get(robot.robot_id, (0, 0, 0))
            draw.rectangle((left + 8, text_y, left + 28, text_y + 20), fill=(*color, 255), outline=BLACK)
            info = f"{robot.robot_id} ({robot.pos.x},{robot.pos.y}) {robot.direction.value}"
            draw.text((left + 36, text_y + 2), info, fill=BLACK, font=self.font)
            text_y += 24
