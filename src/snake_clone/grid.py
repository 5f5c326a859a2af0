"""Toroidal board topology: bounds, wrap-around arithmetic and directions."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np

Coordinate = tuple[int, int]


class InvalidDirection(ValueError):
    """Raised when a value outside :class:`Direction` reaches the delta table."""


class Direction(enum.Enum):
    """Cardinal movement directions."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# (x, y) unit deltas; y grows upwards.
_DELTAS: dict[Direction, Coordinate] = {
    Direction.UP: (0, 1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
}

# Order in which pressed directions are evaluated each frame.
DIRECTION_SCAN_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
)


def direction_delta(direction: Direction) -> Coordinate:
    """Return the unit (dx, dy) step for *direction*."""
    try:
        return _DELTAS[direction]
    except (KeyError, TypeError):
        raise InvalidDirection(f"Invalid direction: {direction!r}") from None


def wrap(value: int, axis_max: int, axis_min: int) -> int:
    """Single-step wrap of *value* into ``[axis_min, axis_max]``.

    Only one overflow is corrected, so callers must move by unit steps.
    """
    if value > axis_max:
        return axis_min
    if value < axis_min:
        return axis_max
    return value


@dataclass(frozen=True)
class Board:
    """Immutable board configuration.

    Cells are addressed relative to the board centre. The snake wraps
    within ``[-max_cells // 2, max_cells // 2]`` on each axis, while food is
    sampled from ``[0, max_cells) - origin``.
    """

    max_cells_x: int
    max_cells_y: int
    origin_x: int
    origin_y: int
    cell_size: int = 30

    def __post_init__(self) -> None:
        if self.max_cells_x < 2 or self.max_cells_y < 2:
            raise ValueError("Board dimensions must be at least 2 cells.")
        if self.cell_size <= 0:
            raise ValueError("cell_size must be positive.")

    @classmethod
    def centered(
        cls, max_cells_x: int, max_cells_y: int, cell_size: int = 30,
    ) -> Board:
        """Build a board whose origin sits in the middle of the cell range."""
        return cls(
            max_cells_x=max_cells_x,
            max_cells_y=max_cells_y,
            origin_x=max_cells_x // 2,
            origin_y=max_cells_y // 2,
            cell_size=cell_size,
        )

    @classmethod
    def from_screen(
        cls,
        width: int,
        height: int,
        cell_size: int = 30,
        hud_height: int = 0,
    ) -> Board:
        """Derive a centered board from a pixel surface size."""
        return cls.centered(
            width // cell_size, (height - hud_height) // cell_size, cell_size,
        )

    @property
    def x_max(self) -> int:
        return self.max_cells_x // 2

    @property
    def x_min(self) -> int:
        return -self.x_max

    @property
    def y_max(self) -> int:
        return self.max_cells_y // 2

    @property
    def y_min(self) -> int:
        return -self.y_max

    def in_bounds(self, cell: Coordinate) -> bool:
        """Check whether *cell* lies inside the wrap bounds."""
        x, y = cell
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max

    def wrap_cell(self, cell: Coordinate) -> Coordinate:
        """Wrap both axes of *cell* independently."""
        x, y = cell
        return (
            wrap(x, self.x_max, self.x_min),
            wrap(y, self.y_max, self.y_min),
        )

    def step(self, cell: Coordinate, direction: Direction) -> Coordinate:
        """Return the neighbour of *cell* one step towards *direction*."""
        dx, dy = direction_delta(direction)
        return self.wrap_cell((cell[0] + dx, cell[1] + dy))

    @property
    def area(self) -> int:
        """Number of cells food can be placed on."""
        return self.max_cells_x * self.max_cells_y

    def placement_cells(self) -> list[Coordinate]:
        """Return every cell of the food sampling extent, row by row."""
        xs = np.arange(self.max_cells_x) - self.origin_x
        ys = np.arange(self.max_cells_y) - self.origin_y
        grid_x, grid_y = np.meshgrid(xs, ys)
        return list(
            zip(grid_x.ravel().tolist(), grid_y.ravel().tolist(), strict=True)
        )

    def to_screen(self, cell: Coordinate) -> tuple[int, int]:
        """Pixel position of the top-left corner of *cell*."""
        x, y = cell
        return (
            (x + self.origin_x) * self.cell_size,
            (y + self.origin_y) * self.cell_size,
        )

    def to_dict(self) -> dict:
        """Serialize board configuration to a dictionary."""
        return {
            "max_cells_x": self.max_cells_x,
            "max_cells_y": self.max_cells_y,
            "origin_x": self.origin_x,
            "origin_y": self.origin_y,
            "cell_size": self.cell_size,
        }
