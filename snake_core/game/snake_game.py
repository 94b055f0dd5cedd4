"""
Snake Game Core - Pure rule engine without rendering.
The host drives it by requesting direction changes and calling tick().
"""
from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Deque, Dict, List, Optional, Tuple

from ..core.random_source import RandomSource, DefaultRandomSource


class Direction(IntEnum):
    """Snake movement directions."""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def opposite(self) -> "Direction":
        """The direction pointing the other way."""
        return Direction((self + 2) % 4)

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit step (dx, dy) on the grid; y grows downwards."""
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


@dataclass(frozen=True)
class Position:
    """A cell on the game grid."""
    x: int
    y: int

    def moved(self, direction: Direction) -> "Position":
        """Neighbouring cell in the given direction (may be off the board)."""
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}


class BoardSizeError(ValueError):
    """Raised when a board is created with a non-positive dimension."""


class GameState:
    """
    Snake game state and its per-tick transition.

    The snake starts as a single cell on the right side of the board,
    heading left towards the food. Each tick moves the head one cell;
    eating food grows the snake by one. The game finishes when the head
    leaves the board, runs into the body, or there is no room left for
    new food.
    """

    def __init__(self, width: int, height: int,
                 random_source: Optional[RandomSource] = None):
        """
        Initialize the game.

        Args:
            width: Grid width in cells (at least 1)
            height: Grid height in cells (at least 1)
            random_source: Source used to place food; defaults to an
                unseeded DefaultRandomSource

        Raises:
            BoardSizeError: If width or height is less than 1
        """
        if width < 1 or height < 1:
            raise BoardSizeError(
                f"Board must be at least 1x1, got {width}x{height}"
            )

        self._width = width
        self._height = height
        self._random = random_source if random_source is not None else DefaultRandomSource()

        start = Position(max(width - 3, 0), height // 2)
        self._snake: Deque[Position] = deque([start])
        self._direction = Direction.LEFT
        self._next_direction = Direction.LEFT
        self._finished = False
        self.frame_count = 0

        self._food = Position(min(2, width - 1), height // 2)
        if self._food == start:
            # Width 1 and width 5 put the food on the snake
            free = self._free_positions()
            if free:
                self._food = self._pick(free)

        # For replay recording
        self.history: List[Dict[str, Any]] = []
        self.recording: bool = False

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def snake(self) -> Tuple[Position, ...]:
        """Body cells, head first."""
        return tuple(self._snake)

    @property
    def head(self) -> Position:
        return self._snake[0]

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def pending_direction(self) -> Direction:
        """Direction that the next tick will commit."""
        return self._next_direction

    @property
    def food(self) -> Position:
        return self._food

    @property
    def finished(self) -> bool:
        return self._finished

    def request_direction_change(self, direction: Direction) -> None:
        """
        Queue a direction for the next tick.

        Turning into the current direction or reversing straight into the
        body is ignored, as is any request once the game has finished.
        Among accepted requests, the last one before the tick wins.

        Args:
            direction: The requested direction
        """
        if self._finished:
            return
        if direction == self._direction or direction == self._direction.opposite:
            return
        self._next_direction = direction

    def is_valid(self, position: Position) -> bool:
        """Check whether a position lies on the board."""
        return 0 <= position.x < self._width and 0 <= position.y < self._height

    def tick(self) -> None:
        """Advance the simulation by one step."""
        if self._finished:
            return

        self._direction = self._next_direction
        self.frame_count += 1

        new_head = self.head.moved(self._direction)

        if not self.is_valid(new_head) or new_head in self._snake:
            self._finished = True
        elif new_head != self._food:
            self._snake.pop()
            self._snake.appendleft(new_head)
        else:
            # Tail stays put so the snake grows
            free = self._free_positions(exclude=new_head)
            if not free:
                self._finished = True
            else:
                self._food = self._pick(free)
                self._snake.appendleft(new_head)

        if self.recording:
            self._record_frame()

    def _free_positions(self, exclude: Optional[Position] = None) -> List[Position]:
        """Cells not covered by the snake, in row-major order."""
        occupied = set(self._snake)
        if exclude is not None:
            occupied.add(exclude)
        return [
            Position(x, y)
            for y in range(self._height)
            for x in range(self._width)
            if Position(x, y) not in occupied
        ]

    def _pick(self, free: List[Position]) -> Position:
        return free[self._random.random_range(0, len(free))]

    def start_recording(self):
        """Start recording game history for replay."""
        self.recording = True
        self.history = []
        self._record_frame()

    def stop_recording(self) -> List[Dict[str, Any]]:
        """Stop recording and return the history."""
        self.recording = False
        return self.history

    def _record_frame(self):
        """Record the current frame to history."""
        self.history.append({
            "snake": [p.to_dict() for p in self._snake],
            "food": self._food.to_dict(),
            "direction": int(self._direction),
            "length": len(self._snake),
            "finished": self._finished,
            "frame": self.frame_count,
        })

    def get_state(self) -> Dict[str, Any]:
        """
        Get current game state for rendering.

        Returns:
            Dictionary containing full game state
        """
        return {
            "snake": [p.to_dict() for p in self._snake],
            "food": self._food.to_dict(),
            "direction": int(self._direction),
            "length": len(self._snake),
            "finished": self._finished,
            "frame": self.frame_count,
            "width": self._width,
            "height": self._height,
        }
