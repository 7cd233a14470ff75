"""text.py

Console box-art for the door vector.

Usage:
    print(render_doors(game.door_states(), game.all_probabilities()))

The renderer only reads a :class:`~montyhall.state.DoorState` vector and a probability
vector; it never touches the game objects and never writes to the terminal itself.
"""
from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from ..config import WIDE_DISPLAY_WARNING
from ..state import DoorState

DOOR_HEIGHT = 8
DOOR_WIDTH = 11
DOOR_SPACING = 3

LEGEND = "Legend: [█] = Closed Door, [ ] = Opened Door, [X] = Your Pick, [$] = Prize!"

_CLOSED = ("┌─────┐", "│ ███ │", "└─────┘")
_CHOSEN = ("╔═════╗", "║ ███ ║", "╚═════╝")
_EMPTY = ("┌─┬─┬─┐", "│─   ─│", "└─┴─┴─┘")
_PRIZE = ("┌─┬─┬─┐", "│─ $ ─│", "└─┴─┴─┘")

_ART = {
    DoorState.CLOSED: _CLOSED,
    DoorState.CHOSEN: _CHOSEN,
    DoorState.EMPTY: _EMPTY,
    DoorState.PRIZE: _PRIZE,
}


def door_row(state: DoorState, row: int) -> str:
    """One text row (``0 .. DOOR_HEIGHT-1``) of a door, left-padded to ``DOOR_WIDTH - 1``."""
    top, body, bottom = _ART[DoorState(state)]
    if row == 0:
        line = top
    elif row == DOOR_HEIGHT - 1:
        line = bottom
    else:
        line = body
    return "   " + line


def center_text(text: str, width: int) -> str:
    padding = max(width - len(text), 0) // 2
    return " " * padding + text + " " * max(width - len(text) - padding, 0)


def render_doors(states: Sequence[int] | np.ndarray, probabilities: Sequence[float] | np.ndarray) -> str:
    """Draws the header, the doors, their probabilities and the legend.

    Args:
        states (Sequence[int] | np.ndarray): :class:`DoorState` value of every door.
        probabilities (Sequence[float] | np.ndarray): win probability of every door.

    Returns:
        str: the complete frame, lines separated by ``\\n``.
    """
    n_doors = len(states)
    lines: list[str] = []

    # ─── Header ─── #
    lines.append(f"Monty Hall Problem - {n_doors} Doors")
    lines.append("=" * (25 + len(str(n_doors))))
    if n_doors > WIDE_DISPLAY_WARNING:
        lines.append(f"Warning: Display may be wide with {n_doors} doors")
    lines.append("")

    # ─── Door captions ─── #
    lines.append("".join(f"   Door {door}   " for door in range(1, n_doors + 1)))
    lines.append("   =======   " * n_doors)
    lines.append("")

    # ─── Door bodies ─── #
    spacer = " " * DOOR_SPACING
    for row in range(DOOR_HEIGHT):
        lines.append(spacer.join(door_row(state, row) for state in states))
    lines.append("")

    # ─── Probabilities & legend ─── #
    lines.append(spacer.join(center_text(f"{100 * p:.1f}%", DOOR_WIDTH) for p in probabilities))
    lines.append("")
    lines.append(LEGEND)
    return "\n".join(lines)
