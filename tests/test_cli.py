"""Tests for the command-line entry point."""

from pixel_snake.cli import _build_parser, main
from pixel_snake.config import GameConfig


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_simulate_defaults(self):
        args = _build_parser().parse_args(["simulate"])
        assert args.command == "simulate"
        assert args.config is None
        assert args.time_step == 100.0
        assert args.frame_interval == 16.0
        assert args.render is False

    def test_simulate_flags(self):
        args = _build_parser().parse_args([
            "simulate", "--width", "12", "--steps", "50", "--seed", "3",
            "--time-step", "40", "--render",
        ])
        assert args.width == 12
        assert args.steps == 50
        assert args.seed == 3
        assert args.time_step == 40.0
        assert args.render is True


class TestCLISimulate:
    def test_simulate_runs(self, capsys):
        assert main(["simulate", "--seed", "1", "--steps", "50"]) == 0
        out = capsys.readouterr().out
        assert "Simulation: score=" in out

    def test_simulate_render(self, capsys):
        result = main([
            "simulate", "--width", "6", "--height", "6", "--seed", "2",
            "--steps", "3", "--render",
        ])
        assert result == 0
        assert "Score: " in capsys.readouterr().out

    def test_simulate_from_config(self, tmp_path, capsys):
        path = tmp_path / "cfg.json"
        GameConfig(width=8, height=8, time_step_ms=30, seed=4).save(path)
        assert main(["simulate", "--config", str(path), "--steps", "5"]) == 0
        assert "Simulation: score=" in capsys.readouterr().out

    def test_simulate_bad_board(self, capsys):
        assert main(["simulate", "--width", "2"]) == 2
        assert "at least 3" in capsys.readouterr().err

    def test_simulate_bad_steps(self):
        assert main(["simulate", "--steps", "0"]) == 2
