"""Tests for keyboard bindings."""

import pytest

from pixel_snake.controls import dispatch_key, parse_direction
from pixel_snake.engine import GameEngine, GameState
from pixel_snake.snake import Direction


@pytest.fixture()
def engine():
    return GameEngine(width=10, height=10, seed=0, start=(5, 5))


class TestDispatchKey:
    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("KeyW", Direction.UP),
            ("ArrowUp", Direction.UP),
            ("KeyS", Direction.DOWN),
            ("ArrowDown", Direction.DOWN),
            ("KeyA", Direction.LEFT),
            ("ArrowLeft", Direction.LEFT),
        ],
    )
    def test_direction_keys(self, engine, code, expected):
        assert dispatch_key(engine, code)
        assert engine.snake.direction == expected

    def test_pause_keys_toggle(self, engine):
        assert dispatch_key(engine, "KeyP")
        assert engine.current_state() == GameState.PAUSED
        assert dispatch_key(engine, "Escape")
        assert engine.current_state() == GameState.ALIVE

    def test_direction_ignored_while_paused(self, engine):
        dispatch_key(engine, "KeyP")
        dispatch_key(engine, "KeyS")
        assert engine.snake.direction == Direction.RIGHT

    def test_unbound_key(self, engine):
        assert not dispatch_key(engine, "KeyQ")
        assert engine.snake.direction == Direction.RIGHT
        assert engine.current_state() == GameState.ALIVE


class TestParseDirection:
    def test_names(self):
        assert parse_direction("up") == Direction.UP
        assert parse_direction("RIGHT") == Direction.RIGHT

    def test_unknown(self):
        assert parse_direction("diagonal") is None
