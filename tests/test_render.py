"""Tests for the text renderer."""

from pixel_snake.engine import GameEngine
from pixel_snake.render import TextRenderer
from pixel_snake.snake import Direction


def _engine() -> GameEngine:
    engine = GameEngine(width=4, height=3, seed=0)
    engine.food.clear()
    engine.food.place((2, 1))
    return engine


class TestTextRenderer:
    def test_frame_layout(self):
        frame = TextRenderer().draw(_engine())
        assert frame.splitlines() == [
            "Score: 0",
            "+----+",
            "|@...|",
            "|..*.|",
            "|....|",
            "+----+",
        ]

    def test_body_and_score(self):
        engine = _engine()
        engine.food.place((1, 0))
        engine.step()
        lines = TextRenderer(border=False).draw(engine).splitlines()
        assert lines[0] == "Score: 1"
        assert lines[1] == "o@.."

    def test_pause_overlay(self):
        engine = _engine()
        engine.toggle_pause()
        assert TextRenderer().draw(engine).endswith("Pause")

    def test_game_over_overlay(self):
        engine = _engine()
        engine.change_direction(Direction.UP)
        engine.step()
        assert TextRenderer().draw(engine).endswith("Game Over")
