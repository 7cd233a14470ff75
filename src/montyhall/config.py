"""Configuration objects and game-wide constants."""

from dataclasses import dataclass
from typing import Literal

MIN_DOORS = 2
MAX_CONSOLE_DOORS = 10  # console art gets unreadable beyond this
WIDE_DISPLAY_WARNING = 8
DEFAULT_DOORS = 3
PROBABILITY_TOLERANCE = 1e-10

Strategy = Literal["stay", "switch", "random"]
STRATEGIES: tuple[str, ...] = ("stay", "switch", "random")


@dataclass(slots=True)
class GameConfig:
    """Settings for constructing a single game.

    Attributes:
        n_doors (int): Number of doors, at least ``MIN_DOORS``.
        prize_door (int | None): 1-based prize location. ``None`` (or an id outside
            ``[1..n_doors]``) places the prize uniformly at random.
        seed (int | None): Seed of the game's random generator. ``None`` for fresh entropy.
    """
    n_doors: int = DEFAULT_DOORS
    prize_door: int | None = None
    seed: int | None = None


@dataclass(slots=True)
class SimulationConfig:
    """Settings for a Monte Carlo strategy run.

    Attributes:
        n_doors (int): Number of doors in every simulated game.
        strategy (Strategy): Final-choice policy: ``stay``, ``switch`` or ``random``.
        trials (int): Number of independent games to play.
        seed (int | None): RNG seed for reproducibility. ``None`` disables seeding.
        log_interval (int): Frequency (in games) at which progress is written to the log.
    """
    n_doors: int = DEFAULT_DOORS
    strategy: Strategy = "switch"
    trials: int = 10_000
    seed: int | None = None
    log_interval: int = 2_500
