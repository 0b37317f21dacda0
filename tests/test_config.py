"""Tests for the game configuration dataclass."""

import json

import pytest

from pixel_snake.config import GameConfig


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.width == 40
        assert cfg.height == 40
        assert cfg.time_step_ms == 100.0
        assert cfg.unique_food is True
        assert cfg.seed is None

    @pytest.mark.parametrize(
        ("kwargs", "match"),
        [
            ({"width": 2}, "at least 3"),
            ({"height": 1}, "at least 3"),
            ({"time_step_ms": 0}, "time_step_ms"),
            ({"frame_interval_ms": -1}, "frame_interval_ms"),
            ({"width": 5.5}, "integers"),
            ({"height": True}, "integers"),
        ],
    )
    def test_validation(self, kwargs, match):
        with pytest.raises(ValueError, match=match):
            GameConfig(**kwargs)

    def test_to_dict_serializable(self):
        assert isinstance(json.dumps(GameConfig().to_dict()), str)

    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(width=15, height=12, seed=7, unique_food=False)
        path = tmp_path / "nested" / "config.json"
        cfg.save(path)
        assert path.exists()
        assert GameConfig.load(path) == cfg
