"""Command-line tools for headless gridsnake runs."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass

import numpy as np

from gridsnake.config import GameConfig
from gridsnake.session import Session, SessionPhase
from gridsnake.snake import Direction

logger = logging.getLogger(__name__)

_CARDINALS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]


@dataclass
class SimulationResult:
    """Scores collected from a batch of headless games."""

    scores: list[int]
    frames: int

    @property
    def best(self) -> int:
        return max(self.scores, default=0)

    @property
    def mean(self) -> float:
        return float(np.mean(self.scores)) if self.scores else 0.0

    def summary(self) -> str:
        return (
            f"Simulated {len(self.scores)} game(s) over {self.frames} frames | "
            f"best score {self.best}, mean score {self.mean:.1f}"
        )


def simulate(
    config: GameConfig,
    *,
    games: int = 1,
    frame_dt: float = 1 / 60,
    max_frames: int = 10_000,
    turn_chance: float = 0.05,
    seed: int | None = None,
) -> SimulationResult:
    """Play *games* games with a random input policy.

    Each frame presses a random direction with probability *turn_chance*.
    A game still running after *max_frames* frames is scored as it stands.
    """
    if games < 1:
        raise ValueError("games must be at least 1.")
    if frame_dt <= 0:
        raise ValueError("frame_dt must be positive.")

    policy_rng = np.random.default_rng(seed)
    session = Session(config)
    scores: list[int] = []
    total_frames = 0

    for game_idx in range(games):
        if game_idx > 0:
            session.restart()
        # The snake stays put until the first input.
        session.press(_CARDINALS[int(policy_rng.integers(len(_CARDINALS)))])
        for _ in range(max_frames):
            total_frames += 1
            if policy_rng.random() < turn_chance:
                session.press(
                    _CARDINALS[int(policy_rng.integers(len(_CARDINALS)))],
                )
            if session.update(frame_dt) == SessionPhase.GAME_OVER:
                break
        else:
            logger.info(
                "Game %d hit the frame limit (%d).", game_idx + 1, max_frames,
            )
            session.end()
        scores.append(session.game.score)

    result = SimulationResult(scores=scores, frames=total_frames)
    logger.info(result.summary())
    return result


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridsnake",
        description="Headless tools for the gridsnake simulation core.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play games with a random input policy.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--games", type=int, default=1)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--frame-dt", type=float, default=1 / 60)
    sim_p.add_argument("--max-frames", type=int, default=10_000)
    sim_p.add_argument("--turn-chance", type=float, default=0.05)

    # --- init-config ---
    init_p = sub.add_parser(
        "init-config", help="Write the default config as JSON.",
    )
    init_p.add_argument("path", help="Destination file.")

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    config = GameConfig.load(args.config) if args.config else GameConfig()
    if args.seed is not None:
        d = config.to_dict()
        d["seed"] = args.seed
        config = GameConfig(**d)

    try:
        result = simulate(
            config,
            games=args.games,
            frame_dt=args.frame_dt,
            max_frames=args.max_frames,
            turn_chance=args.turn_chance,
            seed=args.seed,
        )
    except ValueError as exc:
        logger.error("%s", exc)
        return 2
    print(result.summary())  # noqa: T201
    return 0


def _run_init_config(args: argparse.Namespace) -> int:
    GameConfig().save(args.path)
    print(f"Wrote default config to {args.path}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``gridsnake`` CLI."""
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
        "init-config": _run_init_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
