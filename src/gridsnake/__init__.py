"""gridsnake: real-time snake simulation core."""

from gridsnake.config import GameConfig
from gridsnake.engine import Collision, GameState, StepOutcome
from gridsnake.grid import CellType, Grid
from gridsnake.session import Session, SessionPhase
from gridsnake.snake import Direction, Snake, can_move

__all__ = [
    "CellType",
    "Collision",
    "Direction",
    "GameConfig",
    "GameState",
    "Grid",
    "Session",
    "SessionPhase",
    "Snake",
    "StepOutcome",
    "can_move",
]
