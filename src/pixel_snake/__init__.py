"""Pixel Snake: fixed-timestep snake game engine."""

from pixel_snake.board import Board, CellType
from pixel_snake.config import GameConfig
from pixel_snake.engine import GameEngine, GameState
from pixel_snake.food import FoodSpawner
from pixel_snake.render import TextRenderer
from pixel_snake.snake import Direction, Snake

__all__ = [
    "Board",
    "CellType",
    "Direction",
    "FoodSpawner",
    "GameConfig",
    "GameEngine",
    "GameState",
    "Snake",
    "TextRenderer",
]
