"""Exceptions raised for contract violations (bad door ids, degenerate probability inputs).

Phase mismatches are not errors: the game reports those with a ``False`` return value.
"""


class MontyHallError(Exception):
    """Base class of every exception raised by this package."""


class InvalidArgument(MontyHallError, ValueError):
    """An argument is outside its valid domain, e.g. a door id not in ``[1..N]``."""


class InconsistentState(MontyHallError, RuntimeError):
    """The inputs describe a state a well-formed game can never reach."""
