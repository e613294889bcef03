from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Window & grid -----
CELL_SIZE = 28
GRID_W, GRID_H = 20, 12
HUD_H = 32

# ----- Colors -----
BG    = (20, 20, 24)
GRID  = (32, 34, 40)
GREEN = (80, 200, 80)
HEAD  = (120, 235, 120)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)
GOLD  = (235, 200, 90)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    seed: Optional[int] = None      # None draws fresh entropy for food placement
    width: int = GRID_W
    height: int = GRID_H
    cell_size: int = CELL_SIZE
    move_interval_ms: int = 140
    starter_length: int = 3          # extra segments stacked on the head at start
    growth_increment: int = 3
    win_length: int = 240
    start_cell: Tuple[int, int] = (0, 6)
    countdown_seconds: int = 3
    countdown_step_ms: int = 1000
    start_delay_ms: int = 3000
    game_over_delay_ms: int = 2400
    restart_delay_ms: int = 100

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"board must be at least 1x1, got {self.width}x{self.height}")
        if self.move_interval_ms < 0:
            raise ValueError("move_interval_ms must be >= 0")
        if self.starter_length < 0 or self.growth_increment < 0:
            raise ValueError("starter_length and growth_increment must be >= 0")
        x, y = self.start_cell
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"start_cell {self.start_cell} is outside the board")

    @property
    def window_size(self) -> Tuple[int, int]:
        return self.width * self.cell_size, self.height * self.cell_size + HUD_H

CFG = Config(seed=0)
