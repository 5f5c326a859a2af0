"""Headless command-line runner for the snake simulation."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import dataclass

import numpy as np

from snake_clone.config import GameConfig
from snake_clone.engine import GameEngine, InputState
from snake_clone.grid import DIRECTION_SCAN_ORDER

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Results from a headless simulation run."""

    frames: int
    steps: int
    games: int
    best_level: int
    final_level: int
    final_state: str
    wall_time_seconds: float

    def summary(self) -> str:
        return (
            f"Simulation: {self.frames} frames, {self.steps} steps, "
            f"{self.games} game(s) | best level {self.best_level}, "
            f"final level {self.final_level} ({self.final_state}) in "
            f"{self.wall_time_seconds:.2f}s"
        )


def _autopilot_input(
    rng: np.random.Generator, turn_prob: float, restart: bool,
) -> InputState:
    """Randomly hold one direction key, roughly *turn_prob* of the frames."""
    pressed = frozenset()
    if rng.random() < turn_prob:
        pressed = frozenset({DIRECTION_SCAN_ORDER[int(rng.integers(4))]})
    return InputState(pressed=pressed, restart=restart)


def run_simulation(
    config: GameConfig,
    *,
    frames: int = 1000,
    frame_ms: float = 16.0,
    turn_prob: float = 0.1,
    auto_restart: bool = False,
) -> SimulationResult:
    """Drive a :class:`GameEngine` with random input for *frames* frames.

    The autopilot shares the engine's seed, so a seeded config yields a
    reproducible run.
    """
    if frames < 0:
        raise ValueError("frames must be non-negative.")
    engine = GameEngine(config)
    rng = np.random.default_rng(config.seed)

    games = 1
    best_level = 0
    start = time.perf_counter()

    for _ in range(frames):
        restart = auto_restart and engine.game_over
        if restart:
            games += 1
        engine.update(frame_ms, _autopilot_input(rng, turn_prob, restart))
        best_level = max(best_level, engine.level)

    result = SimulationResult(
        frames=frames,
        steps=engine.steps,
        games=games,
        best_level=best_level,
        final_level=engine.level,
        final_state=engine.state.value,
        wall_time_seconds=time.perf_counter() - start,
    )
    logger.info(result.summary())
    return result


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-clone",
        description="Headless tools for the toroidal snake simulation.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Run the game with a random autopilot.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--frames", type=int, default=1000)
    sim_p.add_argument("--frame-ms", type=float, default=16.0)
    sim_p.add_argument("--turn-prob", type=float, default=0.1)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument(
        "--restart", action="store_true",
        help="Restart automatically after a game over.",
    )

    # --- config ---
    cfg_p = sub.add_parser("config", help="Write a config file.")
    cfg_p.add_argument("output", help="Path for the JSON config.")
    cfg_p.add_argument("--cells-x", type=int, default=None)
    cfg_p.add_argument("--cells-y", type=int, default=None)
    cfg_p.add_argument("--cell-size", type=int, default=None)
    cfg_p.add_argument("--seed", type=int, default=None)

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    config = GameConfig.load(args.config) if args.config else GameConfig()
    if args.seed is not None:
        d = config.to_dict()
        d["seed"] = args.seed
        config = GameConfig(**d)

    result = run_simulation(
        config,
        frames=args.frames,
        frame_ms=args.frame_ms,
        turn_prob=args.turn_prob,
        auto_restart=args.restart,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    overrides: dict = {}
    flag_map = {
        "cells_x": "max_cells_x",
        "cells_y": "max_cells_y",
        "cell_size": "cell_size",
        "seed": "seed",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    config = GameConfig(**overrides)
    config.save(args.output)
    print(f"Wrote config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-clone`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "config": _run_config,
    }
    try:
        return handlers[args.command](args)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    sys.exit(main())
