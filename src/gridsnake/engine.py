"""Real-time game state composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING

import numpy as np

from gridsnake.food import FoodSpawner
from gridsnake.grid import Grid
from gridsnake.snake import Direction, Snake, can_move

if TYPE_CHECKING:
    from gridsnake.config import GameConfig

logger = logging.getLogger(__name__)


class StepOutcome(enum.Enum):
    """Result of :meth:`GameState.advance`."""

    OK = "ok"
    TERMINATED = "terminated"


class Collision(enum.Enum):
    """What ended a game. Only used for reporting."""

    WALL = "wall"
    SELF = "self"


class GameState:
    """Single-snake game driven by elapsed time.

    Frames feed elapsed seconds into :meth:`advance`, which fires one
    discrete step each time the accumulated time reaches ``tick_interval``.
    Input events go through :meth:`set_direction`; at most one turn is
    taken per step.
    """

    def __init__(
        self,
        width: int = 32,
        height: int = 32,
        tick_interval: float = 0.1,
        growth_rate: int = 4,
        initial_bonus: int = 4,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> None:
        if tick_interval <= 0:
            raise ValueError("tick_interval must be positive.")
        if growth_rate < 0:
            raise ValueError("growth_rate must be non-negative.")
        if initial_bonus < 0:
            raise ValueError("initial_bonus must be non-negative.")

        self.grid = Grid(width, height)
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.tick_interval = tick_interval
        self.growth_rate = growth_rate

        start_x, start_y = self.grid.center
        self.snake = Snake(start_x, start_y, growth=initial_bonus)
        self.food_spawner = FoodSpawner(self.grid, rng=self.rng)
        self.food = self.food_spawner.initial()

        self.elapsed = 0.0
        self.ticks = 0
        self.food_eaten = 0
        self.collision: Collision | None = None
        self._dir_changed = False

    @classmethod
    def from_config(
        cls,
        config: GameConfig,
        rng: np.random.Generator | None = None,
    ) -> GameState:
        """Build a fresh game from a :class:`GameConfig`."""
        return cls(
            width=config.grid_width,
            height=config.grid_height,
            tick_interval=config.tick_interval,
            growth_rate=config.growth_rate,
            initial_bonus=config.initial_bonus,
            rng=rng,
            seed=config.seed,
        )

    # -- read-only view -------------------------------------------------

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def body(self) -> tuple[tuple[int, int], ...]:
        """Body cells, tail first and head last."""
        return tuple(self.snake.body)

    @property
    def head(self) -> tuple[int, int]:
        return self.snake.head

    @property
    def direction(self) -> Direction:
        return self.snake.direction

    @property
    def growing(self) -> int:
        return self.snake.growing

    @property
    def score(self) -> int:
        """The score is the current body length."""
        return len(self.snake)

    @property
    def terminated(self) -> bool:
        return self.collision is not None

    # -- input ----------------------------------------------------------

    def set_direction(self, requested: Direction) -> bool:
        """Apply a directional input.

        Reversals and a second turn within the same step are ignored.
        Returns True if the heading was updated.
        """
        if self.terminated or self._dir_changed:
            return False
        if not can_move(self.snake.direction, requested):
            return False
        self.snake.direction = requested
        self._dir_changed = True
        return True

    def grow(self, segments: int = 1) -> None:
        """Debug input: add *segments* directly to pending growth."""
        self.snake.schedule_growth(segments)

    # -- simulation -----------------------------------------------------

    def advance(self, dt: float) -> StepOutcome:
        """Accumulate *dt* seconds and run every step that became due.

        Several steps may run when *dt* spans more than one tick interval.
        Returns ``StepOutcome.TERMINATED`` as soon as a step collides.
        """
        if dt < 0:
            raise ValueError("dt must be non-negative.")
        if self.terminated:
            return StepOutcome.TERMINATED

        self.elapsed += dt
        while self.elapsed >= self.tick_interval:
            self.elapsed -= self.tick_interval
            if self._step() is StepOutcome.TERMINATED:
                return StepOutcome.TERMINATED
        return StepOutcome.OK

    def _step(self) -> StepOutcome:
        self.ticks += 1
        self._dir_changed = False
        if self.snake.direction is Direction.NONE:
            return StepOutcome.OK

        next_x, next_y = self.snake.next_head()

        # --- boundary check ---
        if not self.grid.in_bounds(next_x, next_y):
            return self._terminate(Collision.WALL)

        # --- food ---
        # Food is consumed before the self-collision check.
        nxt = (next_x, next_y)
        ate = nxt == self.food
        if ate:
            occupied = set(self.snake.body)
            occupied.add(nxt)
            self.food = self.food_spawner.resample(occupied)
            self.snake.schedule_growth(self.growth_rate)
            self.food_eaten += 1

        # --- self-collision check ---
        # The tail only blocks when pending growth keeps it in place.
        if self.snake.blocks(nxt):
            return self._terminate(Collision.SELF)

        self.snake.advance(nxt)
        if ate:
            logger.info("Score: %d", self.score)
        return StepOutcome.OK

    def _terminate(self, collision: Collision) -> StepOutcome:
        self.collision = collision
        logger.info(
            "Game over (%s collision) at tick %d with score %d.",
            collision.value, self.ticks, self.score,
        )
        return StepOutcome.TERMINATED

    # -- snapshots ------------------------------------------------------

    def render(self) -> np.ndarray:
        """Return a ``(height, width)`` array of :class:`CellType` codes."""
        return self.grid.render(self.snake.body, self.food)

    def to_dict(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.ticks,
            "score": self.score,
            "food_eaten": self.food_eaten,
            "terminated": self.terminated,
            "collision": self.collision.value if self.collision else None,
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            "food": list(self.food),
        }
