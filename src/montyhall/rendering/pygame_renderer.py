"""pygame_renderer.py

A minimal PyGame renderer for the Monty Hall environment.

Usage (inside an env):
    self.renderer = MontyHallPygameRenderer(n_doors, metadata, render_mode)
    ...
    rgb = self.renderer.render(states, probabilities)   # np.ndarray if render_mode=="rgb_array"
    self.renderer.close()                               # clean-up
"""
from __future__ import annotations

from typing import Literal

import numpy as np

from ..state import DoorState

_DOOR_COLORS = {
    DoorState.CLOSED: (160, 160, 160),
    DoorState.EMPTY: (240, 240, 240),
    DoorState.PRIZE: (240, 210, 80),
    DoorState.CHOSEN: (80, 160, 240),
}


class MontyHallPygameRenderer:
    def __init__(
        self,
        n_doors: int,
        metadata: dict,
        render_mode: Literal["human", "rgb_array"],
    ):
        """Self-contained PyGame renderer for the Monty Hall Gymnasium environment.

        Args:
            n_doors (int): Total number of doors to draw (60 x 100 px rectangle + padding).
            metadata (dict): Environment metadata containing *at minimum* the key ``"render_fps"``.
            render_mode (Literal["human", "rgb_array"]): in human, draws in a PyGame window;
                in rgb_array, simply returns the frame array.
        """
        import pygame  # Lazily imported, only needed for graphical render modes

        self._pygame = pygame
        self._n_doors = n_doors
        self._fps = metadata["render_fps"]
        self._mode = render_mode

        pygame.init()
        pygame.font.init()

        width = n_doors * 80 + 20
        height = 190

        self._font = pygame.font.SysFont(None, 36)
        self._small_font = pygame.font.SysFont(None, 22)
        self._surface = pygame.Surface((width, height))

        self._window = None
        if render_mode == "human":
            self._window = pygame.display.set_mode((width, height))
            pygame.display.set_caption("Monty Hall")

    # ──────────────────────────────────────────────────────────────────────────────── #
    #                                 Public API                                       #
    # ──────────────────────────────────────────────────────────────────────────────── #
    def render(self, states: np.ndarray, probabilities: np.ndarray) -> None | np.ndarray:
        """Render *one* frame of the current game.

        Args:
            states (np.ndarray): :class:`DoorState` value of every door.
            probabilities (np.ndarray): win probability of every door, drawn under each door.

        Returns:
            np.ndarray: for ``render_mode=rgb_array``, a RGB uint8 array of shape ``(H, W, 3)``.
        """
        self._draw_frame(states, probabilities)

        if self._mode == "human":
            self._window.blit(self._surface, (0, 0))
            self._pygame.display.flip()
            self._pygame.time.delay(int(1000 / self._fps))
            return None

        arr = self._pygame.surfarray.array3d(self._surface)  # (W,H,3)
        return np.transpose(arr, (1, 0, 2))  # (H,W,3)

    def close(self) -> None:
        """Cleans up resources of the renderer, intended for environment exit."""
        self._pygame.quit()
        self._pygame = self._window = self._surface = self._font = self._small_font = None

    # ──────────────────────────────────────────────────────────────────────────────── #
    #                                 Private helpers                                  #
    # ──────────────────────────────────────────────────────────────────────────────── #
    def _draw_frame(self, states: np.ndarray, probabilities: np.ndarray) -> None:
        pg = self._pygame
        self._surface.fill((30, 30, 30))

        for idx, (symbol, prob) in enumerate(zip(states, probabilities)):
            state = DoorState(symbol)
            rect = pg.Rect(10 + idx * 80, 20, 60, 100)
            pg.draw.rect(self._surface, _DOOR_COLORS[state], rect)

            if state is DoorState.PRIZE:
                txt = self._font.render("$", True, (0, 0, 0))
                self._surface.blit(txt, txt.get_rect(center=rect.center))

            pg.draw.rect(self._surface, (0, 0, 0), rect, width=2)

            label = self._small_font.render(f"{100 * prob:.1f}%", True, (230, 230, 230))
            self._surface.blit(label, label.get_rect(center=(rect.centerx, rect.bottom + 25)))
