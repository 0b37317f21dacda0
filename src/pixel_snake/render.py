"""Plain-text renderer built on the engine's read-only queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pixel_snake.board import Board, CellType
from pixel_snake.engine import GameState

if TYPE_CHECKING:
    from pixel_snake.engine import GameEngine

_GLYPHS: dict[int, str] = {
    CellType.EMPTY: ".",
    CellType.SNAKE: "o",
    CellType.HEAD: "@",
    CellType.FOOD: "*",
}

_OVERLAYS: dict[GameState, str] = {
    GameState.DEAD: "Game Over",
    GameState.PAUSED: "Pause",
}


class TextRenderer:
    """Draws one frame per call as a block of text."""

    def __init__(self, border: bool = True) -> None:
        self.border = border

    def draw(self, engine: GameEngine) -> str:
        width, height = engine.board_dimensions()
        cells = Board(width, height).rasterize(
            engine.snake_segments(), engine.food_cells(),
        )
        rows = ["".join(_GLYPHS[int(v)] for v in row) for row in cells]
        if self.border:
            edge = "+" + "-" * width + "+"
            rows = [edge, *(f"|{r}|" for r in rows), edge]

        lines = [f"Score: {engine.current_score()}", *rows]
        overlay = _OVERLAYS.get(engine.current_state())
        if overlay:
            lines.append(overlay)
        return "\n".join(lines)
