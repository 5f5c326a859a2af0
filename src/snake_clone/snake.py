"""Snake representation, stepped movement and difficulty progression."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from snake_clone.grid import DIRECTION_SCAN_ORDER, Board, Coordinate, Direction

START_LENGTH = 8
GROWTH_PER_FOOD = 3
INITIAL_SPEED = 4.0
MAX_SPEED = 17.5

_HORIZONTAL = frozenset({Direction.LEFT, Direction.RIGHT})
_VERTICAL = frozenset({Direction.UP, Direction.DOWN})


def speed_increase(level: int) -> float:
    """Speed multiplier gained when food is eaten at *level*.

    Positive and decreasing, levelling off at 0.2 for high levels.
    """
    if level < 0:
        raise ValueError("level must be non-negative.")
    return 2.0 / (level + 1) + 0.2


class Snake:
    """A snake stored as a deque of (x, y) segments, head first.

    The body only moves in discrete steps: every :meth:`update` drains a
    cooldown by ``elapsed * speed_multiplier`` and, once it drops below
    zero, prepends one cell and trims the tail down to ``target_length``.
    """

    def __init__(
        self,
        start: Coordinate,
        direction: Direction,
        board: Board,
        *,
        start_length: int = START_LENGTH,
        growth: int = GROWTH_PER_FOOD,
        initial_speed: float = INITIAL_SPEED,
        max_speed: float = MAX_SPEED,
    ) -> None:
        if start_length < 1:
            raise ValueError("start_length must be at least 1.")
        if initial_speed > max_speed:
            raise ValueError("initial_speed must not exceed max_speed.")
        if not board.in_bounds(start):
            raise ValueError(f"Start cell {start} is outside the board.")
        self.board = board
        self.direction = direction
        self.target_length = start_length
        self.growth = growth
        self.speed_multiplier = initial_speed
        self.max_speed = max_speed
        self.cooldown = float(board.cell_size)
        self.segments: deque[Coordinate] = deque([tuple(start)])

    @classmethod
    def from_segments(
        cls,
        segments: Iterable[Coordinate],
        direction: Direction,
        board: Board,
        **kwargs,
    ) -> Snake:
        """Build a snake from an explicit head-first body."""
        body = [tuple(seg) for seg in segments]
        if not body:
            raise ValueError("A snake needs at least one segment.")
        snake = cls(body[0], direction, board, **kwargs)
        snake.segments = deque(body)
        snake.target_length = max(snake.target_length, len(body))
        return snake

    @property
    def head(self) -> Coordinate:
        """Return the head coordinate."""
        return self.segments[0]

    def is_facing(self, direction: Direction) -> bool:
        """Check the head-to-neck geometry against *direction*.

        Uses the body layout rather than :attr:`direction`, so a snake with
        a single segment faces nowhere.
        """
        if len(self.segments) < 2:
            return False
        (x1, y1), (x2, y2) = self.segments[0], self.segments[1]
        if direction is Direction.UP:
            return x1 == x2 and y1 > y2
        if direction is Direction.RIGHT:
            return x1 > x2 and y1 == y2
        if direction is Direction.DOWN:
            return x1 == x2 and y1 < y2
        if direction is Direction.LEFT:
            return x1 < x2 and y1 == y2
        return False

    def handle_direction_intent(self, requested: Direction) -> bool:
        """Turn towards *requested* if it is perpendicular to the current heading.

        Returns True when the turn was accepted.
        """
        if requested in _HORIZONTAL:
            crossing = _VERTICAL
        elif requested in _VERTICAL:
            crossing = _HORIZONTAL
        else:
            return False
        if any(self.is_facing(d) for d in crossing):
            self.direction = requested
            return True
        return False

    def update(
        self, elapsed_units: float, pressed: Iterable[Direction] = (),
    ) -> bool:
        """Advance the step timer, moving one cell when it runs out.

        Returns True if the snake took a step this frame.
        """
        if elapsed_units < 0:
            raise ValueError("elapsed_units must be non-negative.")

        # Geometry only changes on a step, so every pressed key is checked
        # against the same heading and the last accepted one wins.
        held = set(pressed)
        for direction in DIRECTION_SCAN_ORDER:
            if direction in held:
                self.handle_direction_intent(direction)

        self.cooldown -= elapsed_units * self.speed_multiplier
        if self.cooldown >= 0:
            return False

        self.cooldown = float(self.board.cell_size)
        self.segments.appendleft(self.board.step(self.head, self.direction))
        if len(self.segments) > self.target_length:
            self.segments.pop()
        return True

    def increase_difficulty(self, level: int) -> None:
        """Grow the target length and speed up, capped at ``max_speed``."""
        self.target_length += self.growth
        self.speed_multiplier = min(
            self.speed_multiplier + speed_increase(level), self.max_speed,
        )

    def occupies(self, cell: Coordinate) -> bool:
        """Check whether the snake occupies a given cell."""
        return tuple(cell) in self.segments

    def has_self_collision(self) -> bool:
        """Check whether the head overlaps any other body segment."""
        head = self.head
        return any(seg == head for seg in list(self.segments)[1:])

    def segments_snapshot(self) -> list[Coordinate]:
        """Return a copy of the body, head first."""
        return list(self.segments)

    def debug_summary(self) -> str:
        cells = ", ".join(f"({x}, {y})" for x, y in self.segments)
        return (
            f"\n\tSize: {self.target_length}"
            f"\n\tSpeed multiplier: {self.speed_multiplier}"
            f"\n\tSegments: {cells}"
        )

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "segments": [list(seg) for seg in self.segments],
            "direction": self.direction.value,
            "target_length": self.target_length,
            "speed_multiplier": self.speed_multiplier,
            "cooldown": self.cooldown,
        }
