"""Food placement on the board interior."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from pixel_snake.board import Board
    from pixel_snake.snake import Cell

logger = logging.getLogger(__name__)

# Random draws tried before falling back to scanning the free cells.
_MAX_SPAWN_ATTEMPTS = 32


class FoodSpawner:
    """Owns the set of uneaten food cells, stored as packed indices.

    Uses a seeded NumPy RNG for deterministic, reproducible placement. With
    ``unique=True`` a new item never lands on the snake or on existing food.
    """

    def __init__(
        self,
        board: Board,
        rng: np.random.Generator | None = None,
        unique: bool = True,
    ) -> None:
        self.board = board
        self.rng = rng if rng is not None else np.random.default_rng()
        self.unique = unique
        self.positions: set[int] = set()

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, cell: Cell) -> bool:
        return self.board.in_bounds(cell) and self.board.pack(cell) in self.positions

    def cells(self) -> set[Cell]:
        """Return the food cells as (x, y) pairs."""
        return {self.board.unpack(idx) for idx in self.positions}

    def _random_interior(self) -> int:
        x = int(self.rng.integers(1, self.board.width - 1))
        y = int(self.rng.integers(1, self.board.height - 1))
        return self.board.pack((x, y))

    def spawn(
        self,
        is_occupied: Callable[[int], bool] | None = None,
    ) -> Cell | None:
        """Add one food item on a uniformly random interior cell.

        *is_occupied* reports whether a packed index is taken by the snake.
        Returns the new cell, or ``None`` when no free interior cell is left.
        """
        if not self.unique:
            idx = self._random_interior()
            self.positions.add(idx)
            return self.board.unpack(idx)

        def taken(i: int) -> bool:
            return i in self.positions or (
                is_occupied is not None and is_occupied(i)
            )

        for _ in range(_MAX_SPAWN_ATTEMPTS):
            idx = self._random_interior()
            if not taken(idx):
                self.positions.add(idx)
                return self.board.unpack(idx)

        free = [int(i) for i in self.board.interior_indices() if not taken(int(i))]
        if not free:
            logger.warning("No free interior cells available for food.")
            return None
        idx = free[int(self.rng.integers(len(free)))]
        self.positions.add(idx)
        return self.board.unpack(idx)

    def place(self, cell: Cell) -> None:
        """Put food on an explicit cell, bypassing the interior rule."""
        self.positions.add(self.board.pack(cell))

    def remove(self, cell: Cell) -> bool:
        """Remove food at the given cell. Returns True if removed."""
        idx = self.board.pack(cell)
        if idx in self.positions:
            self.positions.discard(idx)
            return True
        return False

    def clear(self) -> None:
        self.positions.clear()

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {"positions": [list(c) for c in sorted(self.cells())]}
