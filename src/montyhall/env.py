"""
A Monty Hall environment in Gymnasium built on :class:`~montyhall.game.GameController`,
customizable with the number of doors and exposing the Bayesian door probabilities.
"""
from __future__ import annotations

from typing import Literal, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces
from gymnasium.envs.registration import register

from .config import MIN_DOORS
from .game import GameController, new_game
from .rendering.text import render_doors
from .state import DoorState, Phase


class MontyHallEnv(gym.Env):
    """A two-step Monty Hall game that follows Gymnasium's API.

    Step 1 is the initial pick (the host reveals right after it), step 2 is the final
    choice, which must be either the original pick or the remaining closed door.
    """

    metadata = {
        "render_modes": ["human", "rgb_array", "ansi"],
        "render_fps": 4,
    }

    def __init__(
        self,
        *,
        n_doors: int = 3,
        prize_door: int | None = None,
        render_mode: Literal["human", "rgb_array", "ansi"] | None = None,
        seed: int | None = None,
    ) -> None:
        """Initialises the customizable Monty Hall environment.

        Args:
            n_doors (int, optional): Number of total doors in the environment. Defaults to 3.
            prize_door (int | None, optional): 1-based door that always holds the prize.
              Defaults to None (re-drawn on every reset).
            render_mode (Literal or None): rendering mode of the environment. Defaults to None (no rendering needed).
            seed (int or None): controls the random number generation. Defaults to None (random seed).

        Raises:
            ValueError: for fewer than two doors, a prize door outside ``[1..n_doors]``
             or an invalid render mode.
        """
        # ─── Logical assertions ─── #
        if n_doors < MIN_DOORS:
            raise ValueError(f"Monty Hall requires at least {MIN_DOORS} doors.")
        if prize_door is not None and not 1 <= prize_door <= n_doors:
            raise ValueError(f"prize_door must be between 1 and {n_doors}.")
        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render_mode '{render_mode}'.")

        # ─── Core parameters ─── #
        self.n_doors = int(n_doors)
        self.prize_door = prize_door
        self.render_mode = render_mode

        # ─── Gym spaces ─── #
        # Observation: 1D vector of DoorState values, one per door
        self.observation_space = spaces.MultiDiscrete(
            np.full(self.n_doors, len(DoorState), dtype=np.int64)
        )
        # Action: 0-based door index, for the initial pick and the final choice alike
        self.action_space = spaces.Discrete(self.n_doors)

        # ─── renderer (optional) ─── #
        self._renderer = None
        if render_mode in ("human", "rgb_array"):
            from .rendering.pygame_renderer import MontyHallPygameRenderer

            self._renderer = MontyHallPygameRenderer(self.n_doors, self.metadata, render_mode)

        self._game: GameController | None = None
        self.reset(seed=seed)

    # ──────────────────────────────────────────────────────────────────────────────── #
    #                                 Gymnasium API                                    #
    # ──────────────────────────────────────────────────────────────────────────────── #
    def reset(self, *, seed: Optional[int] = None, options=None):
        """Starts a new game, with a fresh prize location unless one was fixed.

        Args:
            seed (Optional[int]): reset the environment with a specific seed value. Defaults to None.
            options: unused, mandated by the Gymnasium interface. Defaults to None.

        Returns:
            Pair: 1D vector of DoorStates, and info (dict) from _get_info()
        """
        super().reset(seed=seed)
        self._game = new_game(self.n_doors, self.prize_door, rng=self.np_random)

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        """Plays the initial pick or the final choice, depending on the phase.

        Raises:
            RuntimeError: if an action is performed on an already completed episode.
            ValueError: if the action is not a door index, or the final choice names a
              door other than the original pick or the remaining door.

        Returns:
            observation (1d Numpy): next observation of door states
            reward (float): 1.0 when the final choice wins the prize, else 0.0
            terminated (bool): whether the episode is terminated
            truncated (bool): always False, the game has exactly two steps
            info (dict): auxiliary information from _get_info()
        """
        if self._game.is_finished():
            raise RuntimeError(
                "Episode is already completed! Call reset() to start a new one."
            )
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action {action!r}.")

        door = int(action) + 1
        reward = 0.0
        terminated = False

        if self._game.current_phase() is Phase.INITIAL_PICK:
            self._game.make_initial_pick(door)
            self._game.reveal_empty_doors()
        else:
            if door not in (self._game.user_pick(), self._game.remaining_door()):
                raise ValueError("Final pick must be one of the remaining closed doors.")
            won = self._game.make_final_choice(switch_door=door != self._game.user_pick())
            reward = 1.0 if won else 0.0
            terminated = True

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), reward, terminated, False, self._get_info()

    def render(self):
        """Renders the current game.

        Returns:
            str | np.ndarray | None: text for ``ansi``, an RGB frame for ``rgb_array``,
              None for ``human`` or when no render mode was set.
        """
        if self.render_mode is None:
            return None
        if self.render_mode == "ansi":
            return render_doors(self._game.door_states(), self._game.all_probabilities())
        return self._renderer.render(self._game.door_states(), self._game.all_probabilities())

    def close(self):
        """Closes the environment, performing some basic cleanup of resources."""
        if self._renderer:
            self._renderer.close()
            self._renderer = None

    @property
    def game(self) -> GameController:
        """The game behind the current episode (read it, don't drive it directly)."""
        return self._game

    # ──────────────────────────────────────────────────────────────────────────────── #
    #                                 Private helpers                                  #
    # ──────────────────────────────────────────────────────────────────────────────── #
    def _action_mask(self) -> np.ndarray:
        mask = np.zeros(self.n_doors, dtype=np.int8)
        if self._game.is_finished():
            return mask
        if self._game.current_phase() is Phase.INITIAL_PICK:
            mask[:] = 1
        else:
            mask[self._game.user_pick() - 1] = 1
            mask[self._game.remaining_door() - 1] = 1
        return mask

    def _get_obs(self):
        return self._game.door_states()

    def _get_info(self):
        """Provides full information of the currently running game.

        Returns:
            dict: consisting of
              - the progress phase,
              - the chosen and remaining doors (1-based, None until known),
              - a copy of the door probabilities,
              - the legal-action mask for the next step.
        """
        return {
            "phase": self._game.current_phase().name,
            "chosen_door": self._game.user_pick(),
            "remaining_door": self._game.remaining_door(),
            "probabilities": self._game.all_probabilities(),
            "action_mask": self._action_mask(),
        }


# Register the environment to allow usage with `gym.make`
register(
    id="MontyHallBayes-v0",
    entry_point="montyhall.env:MontyHallEnv",
)
