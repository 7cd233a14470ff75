"""simulate.py

Monte Carlo evaluation of final-choice strategies.

Each trial is an independent :class:`~montyhall.game.GameController` with a random
prize and a random first pick; after the host reveal the strategy decides whether
to switch. With N doors, staying should win about ``1/N`` of the games and switching
about ``(N-1)/N``.

Example:
    >>> from montyhall.config import SimulationConfig
    >>> from montyhall.simulate import simulate
    >>> result = simulate(SimulationConfig(n_doors=3, strategy="switch", trials=10_000, seed=0))
    >>> round(result.win_rate, 2)
    0.67
"""
from __future__ import annotations

import time
from dataclasses import dataclass

import numpy as np
from loguru import logger

from .config import MIN_DOORS, STRATEGIES, SimulationConfig
from .errors import InvalidArgument
from .game import new_game


@dataclass(slots=True, frozen=True)
class SimulationResult:
    """Outcome of a strategy run.

    Attributes:
        strategy (str): the final-choice policy that was played.
        n_doors (int): doors per game.
        trials (int): games played.
        wins (int): games won.
    """
    strategy: str
    n_doors: int
    trials: int
    wins: int

    @property
    def win_rate(self) -> float:
        return self.wins / self.trials

    @property
    def expected_win_rate(self) -> float:
        return expected_win_rate(self.strategy, self.n_doors)


def expected_win_rate(strategy: str, n_doors: int) -> float:
    """Theoretical win probability of ``strategy`` with ``n_doors`` doors."""
    if strategy == "stay":
        return 1.0 / n_doors
    if strategy == "switch":
        return (n_doors - 1) / n_doors
    if strategy == "random":
        return 0.5
    raise InvalidArgument(f"Unknown strategy {strategy!r}, expected one of {STRATEGIES}.")


def play_once(n_doors: int, strategy: str, rng: np.random.Generator) -> bool:
    """Plays a single game with a random prize and a random first pick."""
    game = new_game(n_doors, rng=rng)
    game.make_initial_pick(int(rng.integers(1, n_doors + 1)))
    game.reveal_empty_doors()

    if strategy == "random":
        switch = bool(rng.integers(2))
    else:
        switch = strategy == "switch"
    return game.make_final_choice(switch)


def simulate(config: SimulationConfig) -> SimulationResult:
    """Plays ``config.trials`` games with one seeded generator.

    Raises:
        InvalidArgument: for an unknown strategy, fewer than two doors or fewer than one trial.
    """
    if config.strategy not in STRATEGIES:
        raise InvalidArgument(f"Unknown strategy {config.strategy!r}, expected one of {STRATEGIES}.")
    if config.n_doors < MIN_DOORS:
        raise InvalidArgument(f"Number of doors must be at least {MIN_DOORS}.")
    if config.trials < 1:
        raise InvalidArgument("At least one trial is required.")

    log = logger.bind(component="Simulation", strategy=config.strategy)
    rng = np.random.default_rng(config.seed)
    start_time = time.perf_counter()

    wins = 0
    for trial_idx in range(config.trials):
        wins += play_once(config.n_doors, config.strategy, rng)

        if config.log_interval and (trial_idx + 1) % config.log_interval == 0:
            log.info(
                "Trial {idx:>6d} | {strategy:<6} | win rate: {rate:.3f}",
                idx=trial_idx + 1,
                strategy=config.strategy,
                rate=wins / (trial_idx + 1),
            )

    result = SimulationResult(config.strategy, config.n_doors, config.trials, wins)
    log.success(
        "{strategy} won {wins}/{trials} ({rate:.3f}, expected {expected:.3f}) in {t:.2f}s",
        strategy=config.strategy,
        wins=wins,
        trials=config.trials,
        rate=result.win_rate,
        expected=result.expected_win_rate,
        t=time.perf_counter() - start_time,
    )
    return result


def compare_strategies(n_doors: int = 3, trials: int = 10_000, seed: int | None = None) -> dict[str, SimulationResult]:
    """Runs ``stay`` and ``switch`` with the same settings, keyed by strategy name."""
    return {
        strategy: simulate(SimulationConfig(n_doors=n_doors, strategy=strategy, trials=trials, seed=seed))
        for strategy in ("stay", "switch")
    }
