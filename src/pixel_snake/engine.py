"""Fixed-timestep game engine composing board, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING

import numpy as np

from pixel_snake.board import Board
from pixel_snake.food import FoodSpawner
from pixel_snake.snake import Cell, Direction, Snake

if TYPE_CHECKING:
    from pixel_snake.config import GameConfig

logger = logging.getLogger(__name__)


class GameState(str, enum.Enum):
    """Lifecycle states of a single game."""

    ALIVE = "alive"
    PAUSED = "paused"
    DEAD = "dead"


class GameEngine:
    """Single-snake game engine driven by an external clock.

    The engine owns the board, snake, and food spawner. A clock driver calls
    :meth:`tick` with a timestamp at frame cadence; the engine runs at most
    one :meth:`step` per call once ``time_step`` has elapsed. An input source
    pushes commands through :meth:`change_direction` and
    :meth:`toggle_pause`, and a renderer pulls read-only state between
    ticks.
    """

    def __init__(
        self,
        width: int = 40,
        height: int = 40,
        time_step: float = 100.0,
        seed: int | None = None,
        start: Cell = (0, 0),
        unique_food: bool = True,
    ) -> None:
        if time_step <= 0:
            raise ValueError("time_step must be positive.")
        self.board = Board(width=width, height=height)
        if not self.board.in_bounds(start):
            raise ValueError(f"Start cell {start} lies outside the board.")
        self.time_step = time_step
        self.start = start
        self.rng = np.random.default_rng(seed)
        self.food = FoodSpawner(self.board, rng=self.rng, unique=unique_food)
        self._new_game()

    @classmethod
    def from_config(cls, config: GameConfig) -> GameEngine:
        return cls(
            width=config.width,
            height=config.height,
            time_step=config.time_step_ms,
            seed=config.seed,
            unique_food=config.unique_food,
        )

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    def _new_game(self) -> None:
        x, y = self.start
        self.snake = Snake(x, y, self.board.width, Direction.RIGHT)
        self.food.clear()
        self.score = 0
        self.steps = 0
        self.state = GameState.ALIVE
        self._last_step_time: float | None = None
        self.spawn_food()

    def reset(self) -> None:
        """Start a new game on the same board."""
        self._new_game()
        logger.info("New game started on a %dx%d board.", self.width, self.height)

    # --- commands -----------------------------------------------------

    def change_direction(self, direction: Direction) -> bool:
        """Forward a direction request to the snake while alive."""
        if self.state != GameState.ALIVE:
            return False
        return self.snake.change_direction(direction)

    def toggle_pause(self) -> GameState:
        """Switch between alive and paused. Dead games stay dead."""
        if self.state == GameState.ALIVE:
            self.state = GameState.PAUSED
        elif self.state == GameState.PAUSED:
            self.state = GameState.ALIVE
        return self.state

    on_direction_request = change_direction
    on_toggle_pause = toggle_pause

    # --- simulation ---------------------------------------------------

    def tick(self, now: float) -> bool:
        """Advance the clock to *now*; step once if a time step has elapsed.

        The first tick after construction or reset only anchors the clock.
        The anchor is kept across a pause, so a resumed game steps on its
        first tick once a time step has passed since the last step. Surplus
        time is dropped rather than replayed as extra steps. Returns True if
        a step ran.
        """
        if self.state != GameState.ALIVE:
            return False
        if self._last_step_time is None:
            self._last_step_time = now
            return False
        if now - self._last_step_time < self.time_step:
            return False
        self._last_step_time = now
        self.step()
        return True

    def step(self) -> dict:
        """Resolve one simulation step and return the game state."""
        if self.state != GameState.ALIVE:
            return self.get_state()

        direction = self.snake.direction
        if direction is None:
            return self.get_state()

        nxt = self.snake.propose_move(direction)
        self.steps += 1

        if not self.board.in_bounds(nxt):
            self._kill("wall", nxt)
            return self.get_state()
        if self.snake.occupies(nxt):
            self._kill("body", nxt)
            return self.get_state()

        if self.food.remove(nxt):
            self.snake.advance_head(nxt)
            self.score += 1
            # Spawn after the head moves so the new item avoids it.
            self.spawn_food()
        else:
            self.snake.advance_head(nxt)
            self.snake.remove_tail()

        return self.get_state()

    def spawn_food(self) -> Cell | None:
        """Place one food item on a random interior cell."""
        return self.food.spawn(self._occupied_index)

    def _occupied_index(self, index: int) -> bool:
        return self.snake.occupies(self.board.unpack(index))

    def _kill(self, cause: str, cell: Cell) -> None:
        self.state = GameState.DEAD
        logger.info(
            "Snake hit %s at %s after %d steps with score %d.",
            cause, cell, self.steps, self.score,
        )

    # --- renderer queries ---------------------------------------------

    def board_dimensions(self) -> tuple[int, int]:
        return self.board.dimensions

    def snake_segments(self) -> list[Cell]:
        return self.snake.segments

    def food_cells(self) -> set[Cell]:
        return self.food.cells()

    def current_state(self) -> GameState:
        return self.state

    def current_score(self) -> int:
        return self.score

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "state": self.state.value,
            "score": self.score,
            "steps": self.steps,
            "board": self.board.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
        }
