"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from pixel_snake.board import check_dimensions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Settings fixed at engine construction, plus the clock cadence.

    Supports JSON serialization for reproducible runs.
    """

    # Board
    width: int = 40
    height: int = 40

    # Simulation
    time_step_ms: float = 100.0
    seed: int | None = None
    unique_food: bool = True

    # Clock driver
    frame_interval_ms: float = 16.0

    def __post_init__(self) -> None:
        check_dimensions(self.width, self.height)
        if self.time_step_ms <= 0:
            raise ValueError("time_step_ms must be positive.")
        if self.frame_interval_ms <= 0:
            raise ValueError("frame_interval_ms must be positive.")

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
