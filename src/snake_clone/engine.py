"""Frame-driven game loop composing the snake and food simulations."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

import numpy as np

from snake_clone.config import GameConfig
from snake_clone.food import Food, PlacementExhausted
from snake_clone.grid import Direction
from snake_clone.snake import Snake

logger = logging.getLogger(__name__)


class GameState(enum.Enum):
    """Top-level game state."""

    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class InputState:
    """Input sampled for a single frame.

    ``restart`` and ``debug`` are edge-triggered: set them only on the
    frame the key was first pressed.
    """

    pressed: frozenset[Direction] = field(default_factory=frozenset)
    restart: bool = False
    debug: bool = False

    def is_direction_pressed(self, direction: Direction) -> bool:
        return direction in self.pressed


class GameEngine:
    """Single-snake, frame-driven game engine.

    The engine owns the snake, the food and the level counter. Each call
    to :meth:`update` consumes one frame of elapsed time and input and
    returns the updated state dictionary.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.board = self.config.board()
        self.rng = rng if rng is not None else np.random.default_rng(
            self.config.seed,
        )
        self.frame = 0
        self.steps = 0
        self._reset()

    def _reset(self) -> None:
        cfg = self.config
        self.snake = Snake(
            cfg.start_cell,
            cfg.direction,
            self.board,
            start_length=cfg.start_length,
            growth=cfg.growth,
            initial_speed=cfg.initial_speed,
            max_speed=cfg.max_speed,
        )
        self.food = Food(
            self.snake,
            self.board,
            rng=self.rng,
            max_attempts=cfg.max_placement_attempts,
        )
        self.level = 0
        self.state = GameState.PLAYING

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def restart(self) -> None:
        """Put a fresh snake and food on the board and zero the level."""
        logger.info("Restarting game (previous level %d).", self.level)
        self._reset()

    def has_self_collision(self) -> bool:
        return self.snake.has_self_collision()

    def has_eaten_food(self) -> bool:
        return self.snake.head == self.food.position

    def update(
        self, elapsed_ms: float, controls: InputState | None = None,
    ) -> dict:
        """Advance the game by one frame.

        Returns the full game state as a serializable dict.
        """
        if elapsed_ms < 0:
            raise ValueError("elapsed_ms must be non-negative.")
        controls = controls if controls is not None else InputState()
        self.frame += 1

        if controls.debug:
            logger.info("%s", self.debug_summary())

        if self.game_over:
            # The restarted game starts moving on the next frame.
            if controls.restart:
                self.restart()
            return self.get_state()

        if self.snake.update(
            elapsed_ms / self.config.time_scale, controls.pressed,
        ):
            self.steps += 1

        if self.has_self_collision():
            self._end_game("self-collision")
        elif self.has_eaten_food():
            self._eat_food()

        return self.get_state()

    def _eat_food(self) -> None:
        try:
            self.food.relocate()
        except PlacementExhausted:
            logger.warning("Board is full at level %d.", self.level)
            self._end_game("board full")
            return
        self.snake.increase_difficulty(self.level)
        self.level += 1
        logger.debug(
            "Food eaten; level %d, speed %.2f.",
            self.level, self.snake.speed_multiplier,
        )

    def _end_game(self, reason: str) -> None:
        self.state = GameState.GAME_OVER
        logger.info(
            "Game over (%s) at frame %d with level %d.",
            reason, self.frame, self.level,
        )

    def debug_summary(self) -> str:
        return (
            f"Level: {self.level}"
            f"\nSnake state: {self.snake.debug_summary()}"
            f"\nFood state: {self.food.debug_summary()}"
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "frame": self.frame,
            "steps": self.steps,
            "level": self.level,
            "state": self.state.value,
            "board": self.board.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
        }
