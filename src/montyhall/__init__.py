"""N-door Monty Hall game with Bayesian door probabilities."""

from .config import GameConfig, SimulationConfig
from .doors import DoorSet
from .errors import InconsistentState, InvalidArgument, MontyHallError
from .game import GameController, game_from_config, new_game
from .simulate import SimulationResult, compare_strategies, simulate
from .state import DoorState, Phase

__all__ = [
    "DoorSet",
    "DoorState",
    "GameConfig",
    "GameController",
    "InconsistentState",
    "InvalidArgument",
    "MontyHallError",
    "Phase",
    "SimulationConfig",
    "SimulationResult",
    "compare_strategies",
    "game_from_config",
    "new_game",
    "simulate",
]
