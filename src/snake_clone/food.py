"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from snake_clone.grid import Board, Coordinate

logger = logging.getLogger(__name__)


class PlacementExhausted(RuntimeError):
    """Raised when no free cell is left for the food."""


class SegmentSource(Protocol):
    """Read-only view of the cells the snake occupies."""

    def segments_snapshot(self) -> list[Coordinate]: ...


class Food:
    """A single food item placed on a cell the snake does not occupy.

    Placement draws uniformly random cells from a seeded NumPy RNG and
    rejects occupied ones. After ``max_attempts`` misses it falls back to
    choosing among the remaining free cells, so relocation always
    terminates.
    """

    def __init__(
        self,
        snake: SegmentSource,
        board: Board,
        rng: np.random.Generator | None = None,
        max_attempts: int = 1000,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.snake = snake
        self.board = board
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts
        self._position: Coordinate | None = None
        self.relocate()

    @property
    def position(self) -> Coordinate:
        """Return the food cell."""
        return self._position

    def is_valid_placement(self, cell: Coordinate) -> bool:
        """Check that *cell* is not covered by the snake."""
        return tuple(cell) not in self.snake.segments_snapshot()

    def relocate(self) -> Coordinate:
        """Move the food to a random free cell and return it.

        Raises :class:`PlacementExhausted` if the snake covers every cell of
        the board; the previous position is kept in that case.
        """
        occupied = set(self.snake.segments_snapshot())
        board = self.board

        for _ in range(self.max_attempts):
            cell = (
                int(self.rng.integers(board.max_cells_x)) - board.origin_x,
                int(self.rng.integers(board.max_cells_y)) - board.origin_y,
            )
            if cell not in occupied:
                self._position = cell
                return cell

        free = [c for c in board.placement_cells() if c not in occupied]
        if not free:
            logger.warning("No free cells available for food placement.")
            raise PlacementExhausted("Snake occupies every board cell.")

        logger.debug(
            "Rejection sampling missed %d times; choosing among %d free cells.",
            self.max_attempts, len(free),
        )
        self._position = free[int(self.rng.integers(len(free)))]
        return self._position

    def debug_summary(self) -> str:
        x, y = self._position
        return f"\n\tPosition: ({x}, {y})"

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {"position": list(self._position)}
