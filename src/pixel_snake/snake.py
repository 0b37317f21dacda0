"""Snake body representation and movement primitives."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable

Cell = tuple[int, int]


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    ``y`` grows downward, so UP decreases it.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. A set of packed
    indices (``y * width + x``) mirrors the body for O(1) occupancy checks.
    """

    def __init__(
        self,
        start_x: int,
        start_y: int,
        width: int,
        direction: Direction | None = None,
    ) -> None:
        if width < 1:
            raise ValueError("Snake board width must be at least 1.")
        self.width = width
        self.body: deque[Cell] = deque()
        self._occupied: set[int] = set()
        self._direction: Direction | None = None
        self.advance_head((start_x, start_y))
        if direction is not None:
            self.change_direction(direction)

    @classmethod
    def from_segments(
        cls,
        segments: Iterable[Cell],
        width: int,
        direction: Direction | None = None,
    ) -> Snake:
        """Build a snake from explicit head-first segments.

        *direction* is set as-is, without the reversal check.
        """
        cells = [tuple(seg) for seg in segments]
        if not cells:
            raise ValueError("Snake needs at least one segment.")
        if len(set(cells)) != len(cells):
            raise ValueError("Snake segments must not repeat.")
        snake = cls(cells[-1][0], cells[-1][1], width)
        for cell in reversed(cells[:-1]):
            snake.advance_head(cell)
        snake._direction = direction
        return snake

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def direction(self) -> Direction | None:
        """Last accepted direction, or ``None`` if none was ever set."""
        return self._direction

    @property
    def segments(self) -> list[Cell]:
        """Head-first copy of the body."""
        return list(self.body)

    def __len__(self) -> int:
        return len(self.body)

    def pack(self, cell: Cell) -> int:
        x, y = cell
        return y * self.width + x

    def propose_move(self, direction: Direction) -> Cell:
        """Compute the head's neighbour in *direction* without moving.

        The result is not clamped to the board.
        """
        dx, dy = direction.value
        x, y = self.head
        return x + dx, y + dy

    def change_direction(self, direction: Direction) -> bool:
        """Accept *direction* unless the step would land on the body.

        This blocks 180° reversals whenever the snake is longer than one
        segment. Unknown values are ignored. Returns True when accepted.
        """
        if not isinstance(direction, Direction):
            return False
        if self.occupies(self.propose_move(direction)):
            return False
        self._direction = direction
        return True

    def occupies(self, cell: Cell) -> bool:
        """Check whether the snake occupies a given cell."""
        x, _ = cell
        if not 0 <= x < self.width:
            return False
        return self.pack(cell) in self._occupied

    def advance_head(self, cell: Cell) -> None:
        """Prepend *cell* as the new head. The caller validates the move."""
        cell = (int(cell[0]), int(cell[1]))
        self.body.appendleft(cell)
        self._occupied.add(self.pack(cell))

    def remove_tail(self) -> Cell:
        """Drop the last segment and return it."""
        tail = self.body.pop()
        self._occupied.discard(self.pack(tail))
        return tail

    def occupied_indices(self) -> frozenset[int]:
        """Packed indices of every body cell."""
        return frozenset(self._occupied)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": (
                self._direction.name.lower() if self._direction else None
            ),
            "length": len(self.body),
        }
