"""Session driver: owns the current game and its play-again cycle."""

from __future__ import annotations

import enum
import logging

import numpy as np

from gridsnake.config import GameConfig
from gridsnake.engine import GameState, StepOutcome
from gridsnake.snake import Direction

logger = logging.getLogger(__name__)


class SessionPhase(str, enum.Enum):
    """Lifecycle states for a play session."""

    ACTIVE = "active"
    GAME_OVER = "game_over"


class Session:
    """Feeds frames and inputs into one :class:`GameState` at a time.

    A finished game is never resumed; :meth:`restart` replaces it with a
    new instance built from the same config.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config or GameConfig()
        # Shared by every game of the session.
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.games_played = 0
        self.best_score = 0
        self.game = self._new_game()
        self.phase = SessionPhase.ACTIVE

    def _new_game(self) -> GameState:
        self.games_played += 1
        logger.info("Starting game %d.", self.games_played)
        return GameState.from_config(self.config, rng=self.rng)

    def update(self, dt: float) -> SessionPhase:
        """Forward one frame's elapsed time to the active game."""
        if self.phase != SessionPhase.ACTIVE:
            return self.phase
        if self.game.advance(dt) is StepOutcome.TERMINATED:
            self._mark_game_over()
        return self.phase

    def press(self, direction: Direction) -> bool:
        """Forward a directional input. Ignored after game over."""
        if self.phase != SessionPhase.ACTIVE:
            return False
        return self.game.set_direction(direction)

    def end(self) -> None:
        """End the active game without a collision (e.g. the player quit)."""
        if self.phase == SessionPhase.ACTIVE:
            self._mark_game_over()

    def restart(self) -> GameState:
        """Start a fresh game once the current one has ended."""
        if self.phase != SessionPhase.GAME_OVER:
            raise ValueError("Game is still active.")
        self.game = self._new_game()
        self.phase = SessionPhase.ACTIVE
        return self.game

    def _mark_game_over(self) -> None:
        """Transition to game over exactly once."""
        self.phase = SessionPhase.GAME_OVER
        self.best_score = max(self.best_score, self.game.score)
        logger.info(
            "Game %d over with score %d (best %d).",
            self.games_played, self.game.score, self.best_score,
        )
