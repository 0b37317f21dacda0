"""Command-line entry point: run headless games on a simulated clock."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixel-snake",
        description="Pixel Snake headless simulator.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play one game with a random player.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON game config file (overrides other flags).",
    )
    sim_p.add_argument("--width", type=int, default=20)
    sim_p.add_argument("--height", type=int, default=20)
    sim_p.add_argument("--time-step", type=float, default=100.0)
    sim_p.add_argument("--frame-interval", type=float, default=16.0)
    sim_p.add_argument("--steps", type=int, default=500)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument(
        "--render", action="store_true",
        help="Print a text frame after every step.",
    )

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    import numpy as np

    from pixel_snake.config import GameConfig
    from pixel_snake.engine import GameEngine, GameState
    from pixel_snake.render import TextRenderer
    from pixel_snake.snake import Direction

    if args.steps < 1:
        print("--steps must be at least 1.", file=sys.stderr)  # noqa: T201
        return 2
    try:
        config = (
            GameConfig.load(args.config) if args.config else GameConfig(
                width=args.width,
                height=args.height,
                time_step_ms=args.time_step,
                frame_interval_ms=args.frame_interval,
                seed=args.seed,
            )
        )
        engine = GameEngine(
            width=config.width,
            height=config.height,
            time_step=config.time_step_ms,
            seed=config.seed,
            start=(config.width // 2, config.height // 2),
            unique_food=config.unique_food,
        )
    except ValueError as exc:
        print(str(exc), file=sys.stderr)  # noqa: T201
        return 2

    rng = np.random.default_rng(config.seed)
    directions = list(Direction)
    renderer = TextRenderer()
    now = 0.0

    # One loop pass per display frame; the engine throttles itself.
    while engine.steps < args.steps:
        # Turn now and then; rejected turns keep the current heading.
        if rng.random() < 0.05:
            engine.on_direction_request(directions[int(rng.integers(4))])
        stepped = engine.tick(now)
        now += config.frame_interval_ms
        if stepped and args.render:
            print(renderer.draw(engine), end="\n\n")  # noqa: T201
        if engine.current_state() == GameState.DEAD:
            break

    print(  # noqa: T201
        f"Simulation: score={engine.current_score()} steps={engine.steps} "
        f"state={engine.current_state().value}"
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``pixel-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
