from enum import Enum, IntEnum, auto


class DoorState(IntEnum):
    """Visible state of each door in a read-only door vector."""

    CLOSED = 0  # Door still shut, not the player's pick
    EMPTY = 1  # Host or player opened it, no prize behind
    PRIZE = 2  # Opened on the prize
    CHOSEN = 3  # The player's pick, not yet opened


class Phase(Enum):
    """Progress phase of a single game."""

    INITIAL_PICK = auto()
    FINAL_CHOICE = auto()
