"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from snake_clone.grid import Board, Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board, snake and timing settings for a game.

    The default board is what a 1920x1080 screen with 30px cells and a
    200px HUD band yields. Supports JSON serialization.
    """

    # Board
    max_cells_x: int = 64
    max_cells_y: int = 29
    origin_x: int | None = None
    origin_y: int | None = None
    cell_size: int = 30

    # Snake
    start_x: int = 0
    start_y: int = 0
    start_direction: str = "right"
    start_length: int = 8
    growth: int = 3
    initial_speed: float = 4.0
    max_speed: float = 17.5

    # Timing: elapsed milliseconds are divided by this before use.
    time_scale: float = 20.0

    # Food
    max_placement_attempts: int = 1000
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.max_cells_x < 2 or self.max_cells_y < 2:
            raise ValueError("max_cells_x and max_cells_y must be at least 2.")
        if self.cell_size <= 0:
            raise ValueError("cell_size must be positive.")
        if self.start_length < 1:
            raise ValueError("start_length must be at least 1.")
        if self.max_cells_x * self.max_cells_y <= self.start_length:
            raise ValueError("Board area must exceed start_length.")
        if self.growth < 0:
            raise ValueError("growth must be non-negative.")
        if self.initial_speed <= 0:
            raise ValueError("initial_speed must be positive.")
        if self.initial_speed > self.max_speed:
            raise ValueError("initial_speed must not exceed max_speed.")
        if self.time_scale <= 0:
            raise ValueError("time_scale must be positive.")
        if self.max_placement_attempts < 1:
            raise ValueError("max_placement_attempts must be at least 1.")
        try:
            Direction(self.start_direction)
        except ValueError:
            raise ValueError(
                f"Unknown start_direction {self.start_direction!r}."
            ) from None
        if not self.board().in_bounds(self.start_cell):
            raise ValueError("Start cell lies outside the board.")

    @property
    def effective_origin_x(self) -> int:
        if self.origin_x is not None:
            return self.origin_x
        return self.max_cells_x // 2

    @property
    def effective_origin_y(self) -> int:
        if self.origin_y is not None:
            return self.origin_y
        return self.max_cells_y // 2

    @property
    def start_cell(self) -> tuple[int, int]:
        return (self.start_x, self.start_y)

    @property
    def direction(self) -> Direction:
        return Direction(self.start_direction)

    def board(self) -> Board:
        """Build the immutable board described by this config."""
        return Board(
            max_cells_x=self.max_cells_x,
            max_cells_y=self.max_cells_y,
            origin_x=self.effective_origin_x,
            origin_y=self.effective_origin_y,
            cell_size=self.cell_size,
        )

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        unknown = set(raw) - {f.name for f in fields(cls)}
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}.")
        return cls(**raw)
