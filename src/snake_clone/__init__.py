"""Snake Clone — toroidal snake simulation engine."""

from snake_clone.config import GameConfig
from snake_clone.engine import GameEngine, GameState, InputState
from snake_clone.food import Food, PlacementExhausted
from snake_clone.grid import Board, Direction, InvalidDirection
from snake_clone.snake import Snake

__all__ = [
    "Board",
    "Direction",
    "Food",
    "GameConfig",
    "GameEngine",
    "GameState",
    "InputState",
    "InvalidDirection",
    "PlacementExhausted",
    "Snake",
]
