"""Key-code mapping from browser keyboard events to engine commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pixel_snake.snake import Direction

if TYPE_CHECKING:
    from pixel_snake.engine import GameEngine

PAUSE = "pause"

# ``KeyboardEvent.code`` values.
KEY_BINDINGS: dict[str, Direction | str] = {
    "KeyW": Direction.UP,
    "ArrowUp": Direction.UP,
    "KeyS": Direction.DOWN,
    "ArrowDown": Direction.DOWN,
    "KeyA": Direction.LEFT,
    "ArrowLeft": Direction.LEFT,
    "KeyD": Direction.RIGHT,
    "ArrowRight": Direction.RIGHT,
    "KeyP": PAUSE,
    "Escape": PAUSE,
}

DIRECTION_NAMES: dict[str, Direction] = {
    d.name.lower(): d for d in Direction
}


def parse_direction(name: str) -> Direction | None:
    """Map ``"up"``/``"UP"`` style names to a direction."""
    return DIRECTION_NAMES.get(name.lower())


def dispatch_key(engine: GameEngine, code: str) -> bool:
    """Apply the command bound to *code*. Returns False for unbound keys."""
    action = KEY_BINDINGS.get(code)
    if action is None:
        return False
    if action == PAUSE:
        engine.on_toggle_pause()
    else:
        engine.on_direction_request(action)
    return True
