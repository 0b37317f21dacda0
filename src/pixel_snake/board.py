"""Board geometry: bounds, interior cells, packing and rasterisation."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np

from pixel_snake.snake import Cell

MIN_SIZE = 3


class CellType(enum.IntEnum):
    """Integer codes stored in a rasterised board."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2
    HEAD = 3


def check_dimensions(width: int, height: int) -> None:
    """Raise ValueError unless both dimensions are ints of at least MIN_SIZE."""
    for value in (width, height):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError("Board dimensions must be integers.")
    if width < MIN_SIZE or height < MIN_SIZE:
        raise ValueError(
            f"Board dimensions must be at least {MIN_SIZE}x{MIN_SIZE}."
        )


class Board:
    """Fixed-size rectangular board addressed by (x, y).

    Cells pack to ``y * width + x`` for set membership. The board holds no
    game state itself; :meth:`rasterize` paints a NumPy array on demand for
    renderers, indexed ``[y, x]``.
    """

    def __init__(self, width: int = 40, height: int = 40) -> None:
        check_dimensions(width, height)
        self.width = width
        self.height = height

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a coordinate lies within the board."""
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def is_interior(self, cell: Cell) -> bool:
        """Check whether a coordinate lies off the outermost border."""
        x, y = cell
        return 1 <= x <= self.width - 2 and 1 <= y <= self.height - 2

    def pack(self, cell: Cell) -> int:
        x, y = cell
        return y * self.width + x

    def unpack(self, index: int) -> Cell:
        y, x = divmod(int(index), self.width)
        return x, y

    def interior_indices(self) -> np.ndarray:
        """Packed indices of every interior cell, in row-major order."""
        xs = np.arange(1, self.width - 1)
        ys = np.arange(1, self.height - 1)
        return (ys[:, None] * self.width + xs[None, :]).ravel()

    def rasterize(
        self,
        snake: Iterable[Cell],
        food: Iterable[Cell],
    ) -> np.ndarray:
        """Paint snake and food cells onto a fresh ``(height, width)`` array.

        The first snake cell is painted as the head.
        """
        cells = np.full((self.height, self.width), CellType.EMPTY, dtype=np.int8)
        for x, y in food:
            cells[y, x] = CellType.FOOD
        for i, (x, y) in enumerate(snake):
            cells[y, x] = CellType.HEAD if i == 0 else CellType.SNAKE
        return cells

    def to_dict(self) -> dict:
        """Serialize board geometry to a dictionary."""
        return {"width": self.width, "height": self.height}
