"""
The two-phase Monty Hall protocol for N doors: initial pick, host reveal, final choice.
"""
from __future__ import annotations

import numpy as np
from loguru import logger

from .config import GameConfig
from .doors import DoorSet, is_door_number
from .state import Phase


class GameController:
    """Drives one game over a :class:`DoorSet` and enforces the phase transitions.

    Calls made in the wrong phase are ordinary events for an interactive caller:
    they are rejected with ``False`` (or ignored) and leave the game untouched.
    Invalid constructor arguments raise :class:`~montyhall.errors.InvalidArgument`.

    Args:
        doors (DoorSet): The door vector this controller plays on.
        rng (np.random.Generator | None): random source for the host's choice when the
            player's first pick already holds the prize. Defaults to ``np.random.default_rng()``.
    """

    def __init__(self, doors: DoorSet, rng: np.random.Generator | None = None) -> None:
        self._doors = doors
        self._rng = rng if rng is not None else np.random.default_rng()

        self._phase = Phase.INITIAL_PICK
        self._remaining_door: int | None = None
        self._final_door: int | None = None

        self.log = logger.bind(component="GameController")

    # ──────────────────────────────────────────────────────────────────────────────── #
    #                                  Player moves                                    #
    # ──────────────────────────────────────────────────────────────────────────────── #
    def make_initial_pick(self, door_id: int) -> bool:
        """Records the player's first pick.

        Returns:
            bool: ``False`` if out of phase, a pick was already made, or ``door_id``
              is not an integer in ``[1..N]``. Nothing is changed in that case.
        """
        if self._phase is not Phase.INITIAL_PICK or self._doors.selection() is not None:
            return False
        if not is_door_number(door_id, self._doors.number_of_doors()):
            return False

        self._doors.select(door_id)
        self.log.debug("Initial pick: door {door}", door=door_id)
        return True

    def reveal_empty_doors(self, rng: np.random.Generator | None = None) -> bool:
        """The host opens every door except the player's pick and one other.

        If the pick holds the prize, the door left closed is drawn uniformly from the
        N-1 empty doors; otherwise it is the prize door. Each opening conditions the
        probabilities in turn, then the two survivors are pinned to the closed form
        ``1/N`` (pick) and ``(N-1)/N`` (remaining door).

        Args:
            rng (np.random.Generator | None, optional): overrides the controller's random
              source for this call. Defaults to None.

        Returns:
            bool: ``True`` if the reveal happened and the game moved to ``FINAL_CHOICE``,
              ``False`` if the call was ignored (out of phase or no initial pick yet).
        """
        pick = self._doors.selection()
        if self._phase is not Phase.INITIAL_PICK or pick is None:
            return False

        rng = rng if rng is not None else self._rng
        n_doors = self._doors.number_of_doors()
        prize = self._doors.prize_door_id()

        if pick == prize:
            empty_doors = [door for door in range(1, n_doors + 1) if door != prize]
            remaining = int(empty_doors[rng.integers(len(empty_doors))])
        else:
            remaining = prize

        for door in range(1, n_doors + 1):
            if door not in (pick, remaining):
                self._doors.open(door)

        self._doors.set_probability(pick, 1.0 / n_doors)
        self._doors.set_probability(remaining, 1.0 - 1.0 / n_doors)

        self._remaining_door = remaining
        self._phase = Phase.FINAL_CHOICE
        self.log.debug(
            "Host opened {opened} doors, door {remaining} left closed",
            opened=n_doors - 2,
            remaining=remaining,
        )
        return True

    def make_final_choice(self, switch_door: bool) -> bool:
        """Opens the switch target or the original pick and reports whether it held the prize.

        Returns:
            bool: ``True`` on a win. ``False`` on a loss, or when the call is rejected
              because the game is not in ``FINAL_CHOICE`` or the final choice was already made.
        """
        if self._phase is not Phase.FINAL_CHOICE or self._final_door is not None:
            return False

        final_door = self._remaining_door if switch_door else self._doors.selection()
        self._doors.open(final_door)
        self._final_door = final_door

        won = self._doors.has_won(final_door)
        self.log.debug(
            "Final choice: {action} to door {door} -> {result}",
            action="switch" if switch_door else "stay",
            door=final_door,
            result="win" if won else "loss",
        )
        return won

    def reset_game(self) -> None:
        """Closes all doors, forgets the picks and returns to ``INITIAL_PICK``.

        The prize door is kept, so the same hidden setup can be replayed.
        """
        self._doors.reset_all()
        self._doors.clear_selection()
        self._remaining_door = None
        self._final_door = None
        self._phase = Phase.INITIAL_PICK
        self.log.debug("Game reset")

    # ──────────────────────────────────────────────────────────────────────────────── #
    #                                   Accessors                                      #
    # ──────────────────────────────────────────────────────────────────────────────── #
    @property
    def doors(self) -> DoorSet:
        return self._doors

    def current_phase(self) -> Phase:
        return self._phase

    def user_pick(self) -> int | None:
        return self._doors.selection()

    def remaining_door(self) -> int | None:
        return self._remaining_door

    def prize_door(self) -> int:
        return self._doors.prize_door_id()

    def final_door(self) -> int | None:
        return self._final_door

    def is_finished(self) -> bool:
        return self._final_door is not None

    def number_of_doors(self) -> int:
        return self._doors.number_of_doors()

    def all_probabilities(self) -> np.ndarray:
        return self._doors.all_probabilities()

    def is_open(self, door_id: int) -> bool:
        return self._doors.is_open(door_id)

    def door_states(self) -> np.ndarray:
        return self._doors.states()

    def has_user_won(self) -> bool:
        """True once a final choice has opened the prize door."""
        if self._final_door is None:
            return False
        return self._doors.has_won(self._final_door)

    def status(self) -> str:
        """One-line description of what the player is expected to do next."""
        if self._phase is Phase.INITIAL_PICK:
            return "Phase 1: Make your initial pick"
        if self._final_door is None:
            return (
                f"Phase 2: Switch to door {self._remaining_door} "
                f"or stay with door {self.user_pick()}?"
            )
        return f"Game over: you {'won' if self.has_user_won() else 'lost'} with door {self._final_door}"


def new_game(
    number_of_doors: int,
    prize_door: int | None = None,
    *,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
) -> GameController:
    """Builds a fresh game.

    Args:
        number_of_doors (int): at least two doors.
        prize_door (int | None, optional): 1-based prize location; ``None`` or invalid ids
          mean uniform-random placement. Defaults to None.
        rng (np.random.Generator | None, optional): shared random source for the prize
          placement and the host. Takes precedence over ``seed``. Defaults to None.
        seed (int | None, optional): seed for a new generator when ``rng`` is not given.

    Raises:
        InvalidArgument: if fewer than two doors are requested.

    Returns:
        GameController: a game in the ``INITIAL_PICK`` phase.
    """
    rng = rng if rng is not None else np.random.default_rng(seed)
    return GameController(DoorSet(number_of_doors, prize_door, rng=rng), rng=rng)


def game_from_config(config: GameConfig) -> GameController:
    return new_game(config.n_doors, config.prize_door, seed=config.seed)
