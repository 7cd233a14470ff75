"""
The door vector of one game: open/closed flags, the hidden prize, the player's selection
and the per-door win probabilities, which are recomputed whenever a door is opened.
"""
from __future__ import annotations

import numbers

import numpy as np

from . import probability
from .config import MIN_DOORS
from .errors import InvalidArgument
from .state import DoorState


def is_door_number(value: object, n_doors: int) -> bool:
    """True iff ``value`` is an integer (not a bool) in ``[1..n_doors]``."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        return False
    return 1 <= value <= n_doors


class DoorSet:
    """N doors with Bayesian win probabilities. Door ids are 1-based."""

    def __init__(
        self,
        number_of_doors: int,
        prize_door: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        """Creates a closed door vector with uniform probabilities.

        Args:
            number_of_doors (int): Total number of doors, at least two.
            prize_door (int | None, optional): 1-based prize location. ``None`` or an id
              outside ``[1..number_of_doors]`` means uniform-random placement. Defaults to None.
            rng (np.random.Generator | None, optional): random source used for the prize
              placement. Defaults to None (a fresh ``np.random.default_rng()``).

        Raises:
            InvalidArgument: if fewer than two doors are requested.
        """
        if number_of_doors < MIN_DOORS:
            raise InvalidArgument(f"Number of doors must be at least {MIN_DOORS}.")

        self._n_doors = int(number_of_doors)
        self._open = np.zeros(self._n_doors, dtype=bool)
        self._probabilities = np.full(self._n_doors, 1.0 / self._n_doors)
        self._selection: int | None = None

        if is_door_number(prize_door, self._n_doors):
            self._prize_door = int(prize_door)
        else:
            rng = rng if rng is not None else np.random.default_rng()
            self._prize_door = int(rng.integers(1, self._n_doors + 1))

    # ──────────────────────────────────────────────────────────────────────────────── #
    #                                   Mutators                                       #
    # ──────────────────────────────────────────────────────────────────────────────── #
    def open(self, door_id: int) -> None:
        """Opens a door and conditions the probabilities on what it reveals.

        Opening an already open door does nothing.
        """
        idx = self._index(door_id)
        if self._open[idx]:
            return

        self._open[idx] = True
        if door_id == self._prize_door:
            self._probabilities = probability.update_on_prize_reveal(self._probabilities, idx)
        else:
            self._probabilities = probability.update_on_empty_reveal(self._probabilities, idx)

    def set_probability(self, door_id: int, value: float) -> None:
        """Overwrites a single door's probability (used for closed-form updates)."""
        self._probabilities[self._index(door_id)] = float(value)

    def select(self, door_id: int) -> None:
        self._index(door_id)
        self._selection = int(door_id)

    def clear_selection(self) -> None:
        self._selection = None

    def reset_all(self) -> None:
        """Closes every door and restores uniform probabilities. The prize stays where it is."""
        closed = np.zeros(self._n_doors, dtype=bool)
        uniform = np.full(self._n_doors, 1.0 / self._n_doors)
        self._open, self._probabilities = closed, uniform

    # ──────────────────────────────────────────────────────────────────────────────── #
    #                                  Read-only view                                  #
    # ──────────────────────────────────────────────────────────────────────────────── #
    def is_open(self, door_id: int) -> bool:
        return bool(self._open[self._index(door_id)])

    def probability_of(self, door_id: int) -> float:
        return float(self._probabilities[self._index(door_id)])

    def all_probabilities(self) -> np.ndarray:
        """Returns a copy of the probability vector, indexed by ``door_id - 1``."""
        return self._probabilities.copy()

    def number_of_doors(self) -> int:
        return self._n_doors

    def prize_door_id(self) -> int:
        return self._prize_door

    def selection(self) -> int | None:
        return self._selection

    def has_won(self, door_id: int) -> bool:
        """True iff ``door_id`` is the prize door and it has been opened."""
        return door_id == self._prize_door and self.is_open(door_id)

    def closed_doors(self) -> list[int]:
        return [int(i) + 1 for i in np.flatnonzero(~self._open)]

    def states(self) -> np.ndarray:
        """Returns the visible :class:`DoorState` of every door as an int vector."""
        states = np.full(self._n_doors, DoorState.CLOSED, dtype=int)
        if self._selection is not None:
            states[self._selection - 1] = DoorState.CHOSEN
        states[self._open] = DoorState.EMPTY
        if self._open[self._prize_door - 1]:
            states[self._prize_door - 1] = DoorState.PRIZE
        return states

    def _index(self, door_id: int) -> int:
        if not is_door_number(door_id, self._n_doors):
            raise InvalidArgument(f"Door number must be between 1 and {self._n_doors}, got {door_id!r}.")
        return int(door_id) - 1

    def __len__(self) -> int:
        return self._n_doors

    def __repr__(self) -> str:
        return (
            f"DoorSet(n_doors={self._n_doors}, open={self._open.tolist()}, "
            f"selection={self._selection})"
        )
