"""Tests for the Food module."""

import numpy as np
import pytest

from snake_clone.food import Food, PlacementExhausted
from snake_clone.grid import Board, Direction
from snake_clone.snake import Snake


class _FixedBody:
    """Segment source with a fixed set of occupied cells."""

    def __init__(self, cells):
        self.cells = list(cells)

    def segments_snapshot(self):
        return list(self.cells)


def _board(cells: int = 8) -> Board:
    return Board(max_cells_x=cells, max_cells_y=cells, origin_x=0, origin_y=0)


class TestFoodInit:
    def test_placed_on_creation(self):
        board = Board.centered(10, 10)
        snake = Snake((0, 0), Direction.RIGHT, board)
        food = Food(snake, board, rng=np.random.default_rng(0))
        assert food.position is not None
        assert food.position != (0, 0)

    def test_invalid_max_attempts(self):
        with pytest.raises(ValueError, match="at least 1"):
            Food(_FixedBody([]), _board(), max_attempts=0)


class TestFoodPlacement:
    def test_position_within_sampling_extent(self):
        board = Board.centered(6, 4)
        food = Food(_FixedBody([]), board, rng=np.random.default_rng(3))
        extent = set(board.placement_cells())
        for _ in range(200):
            assert food.relocate() in extent

    def test_never_overlaps_body(self):
        board = Board.centered(6, 6)
        body = [(x, 0) for x in range(-3, 3)] + [(0, y) for y in range(1, 3)]
        food = Food(_FixedBody(body), board, rng=np.random.default_rng(7))
        for _ in range(200):
            food.relocate()
            assert food.position not in body
            assert food.is_valid_placement(food.position)

    def test_single_free_cell_always_found(self):
        board = _board(8)
        body = [c for c in board.placement_cells() if c != (3, 3)]
        food = Food(_FixedBody(body), board, rng=np.random.default_rng(1))
        assert food.position == (3, 3)
        for _ in range(20):
            assert food.relocate() == (3, 3)

    def test_fallback_after_max_attempts(self):
        board = _board(8)
        body = [c for c in board.placement_cells() if c != (3, 3)]
        food = Food(
            _FixedBody(body), board,
            rng=np.random.default_rng(5), max_attempts=1,
        )
        for _ in range(20):
            assert food.relocate() == (3, 3)

    def test_full_board_raises(self):
        board = _board(4)
        body = _FixedBody([])
        food = Food(body, board, rng=np.random.default_rng(0))
        previous = food.position
        body.cells = board.placement_cells()
        with pytest.raises(PlacementExhausted):
            food.relocate()
        assert food.position == previous

    def test_full_board_on_creation(self):
        board = _board(4)
        with pytest.raises(PlacementExhausted):
            Food(_FixedBody(board.placement_cells()), board)

    def test_sees_snake_movement(self):
        board = _board(4)
        snake = Snake((0, 0), Direction.RIGHT, board)
        food = Food(snake, board, rng=np.random.default_rng(2))
        snake.update(float(board.cell_size))
        for _ in range(50):
            food.relocate()
            assert food.position not in snake.segments_snapshot()

    def test_deterministic(self):
        """Same seed produces the same sequence of positions."""
        assert self._positions(42) == self._positions(42)

    def test_different_seeds(self):
        assert self._positions(1) != self._positions(2)

    @staticmethod
    def _positions(seed: int) -> list[tuple[int, int]]:
        board = Board.centered(20, 20)
        food = Food(_FixedBody([(0, 0)]), board, rng=np.random.default_rng(seed))
        return [food.relocate() for _ in range(10)]


class TestFoodSerialization:
    def test_debug_summary(self):
        board = Board.centered(8, 8)
        body = [c for c in board.placement_cells() if c != (-1, 2)]
        food = Food(_FixedBody(body), board)
        assert food.debug_summary() == "\n\tPosition: (-1, 2)"

    def test_to_dict(self):
        board = _board(8)
        body = [c for c in board.placement_cells() if c != (2, 1)]
        food = Food(_FixedBody(body), board)
        assert food.to_dict() == {"position": [2, 1]}
