"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Rules and board settings for a single-player game.

    Supports JSON serialization so a session can be reproduced.
    """

    # Board
    grid_width: int = 32
    grid_height: int = 32

    # Speed, in seconds per simulation step
    tick_interval: float = 0.1

    # Growth
    growth_rate: int = 4
    initial_bonus: int = 4

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError("grid_width and grid_height must be positive.")
        if self.grid_width * self.grid_height < 2:
            raise ValueError("grid must contain at least 2 cells.")
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive.")
        if self.growth_rate < 0:
            raise ValueError("growth_rate must be non-negative.")
        if self.initial_bonus < 0:
            raise ValueError("initial_bonus must be non-negative.")

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
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
