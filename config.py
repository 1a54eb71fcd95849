# config.py
from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class AppConfig:
    # grid
    grid_w: int = 40
    grid_h: int = 30
    cell: int = 16
    seed: Optional[int] = None

    # gameplay
    fps: float = 2.0            # gameplay ticks per second
    refresh_rate: int = 60      # redraw opportunities per second (display pump)
    snake_color: str = "green"
    fruit_color: str = "red"

    # render
    render_title: str = "Snake"
    render_show_hud: bool = True
    render_record_dir: Optional[str] = None
    game_over_text: str = "Game over"

    # headless
    max_ticks: int = 2000
    games: int = 1

    # session log
    log_csv: Optional[str] = None

    def __post_init__(self):
        if self.grid_w <= 0 or self.grid_h <= 0:
            raise ValueError(f"grid must be positive, got {self.grid_w}x{self.grid_h}")
        if self.cell <= 0:
            raise ValueError(f"cell size must be positive, got {self.cell}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

    @property
    def canvas_size(self) -> tuple[int, int]:
        return self.grid_w * self.cell, self.grid_h * self.cell

    def fit_window(self, window_w: int, ratio: float = 4 / 3) -> "AppConfig":
        """Grid that fits a canvas `window_w` wide at the given width/height ratio.

        Both canvas sides are rounded down to a multiple of the cell size.
        """
        width = window_w - (window_w % self.cell)
        height = int(width / ratio)
        height -= height % self.cell
        return self.with_(grid_w=width // self.cell, grid_h=height // self.cell)

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
