"""probability.py

Stateless Bayesian updates over a per-door probability vector.

Every function takes a 1-D NumPy vector of non-negative entries summing to one
and returns a *new* vector; inputs are never modified in place. Indices here are
0-based positions in the vector, the 1-based door ids live in :mod:`montyhall.doors`.

Example:
    >>> import numpy as np
    >>> from montyhall.probability import update_on_empty_reveal
    >>> update_on_empty_reveal(np.full(4, 0.25), 3)
    array([0.33333333, 0.33333333, 0.33333333, 0.        ])
"""
from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .config import MIN_DOORS, PROBABILITY_TOLERANCE
from .errors import InconsistentState, InvalidArgument


def _as_vector(probs: Sequence[float] | np.ndarray, index: int) -> np.ndarray:
    """Copy ``probs`` into a float64 vector after checking its length and ``index``."""
    vector = np.array(probs, dtype=np.float64)
    if vector.ndim != 1 or vector.size < MIN_DOORS:
        raise InvalidArgument(f"Must have at least {MIN_DOORS} doors, got {vector.size}.")
    if not 0 <= index < vector.size:
        raise InvalidArgument(f"Invalid door index {index!r} for {vector.size} doors.")
    return vector


def update_on_empty_reveal(probs: Sequence[float] | np.ndarray, opened_index: int) -> np.ndarray:
    """Condition the vector on "the door at ``opened_index`` was opened and is empty".

    The opened door's mass is redistributed proportionally to the prior mass of
    the other doors, i.e. ``p'[i] = p[i] / (1 - p[opened_index])``.

    Args:
        probs (Sequence[float] | np.ndarray): Current probabilities for each door.
        opened_index (int): 0-based index of the door that was opened.

    Raises:
        InvalidArgument: if fewer than two doors are given or the index is out of range.
        InconsistentState: if the unopened doors carry no probability mass at all.

    Returns:
        np.ndarray: the updated probabilities, ``0.0`` at ``opened_index``.
    """
    updated = _as_vector(probs, opened_index)

    remaining_mass = updated.sum() - updated[opened_index]
    if remaining_mass == 0.0:
        raise InconsistentState("No remaining probability after opening door.")

    updated[opened_index] = 0.0
    return updated / remaining_mass


def update_on_prize_reveal(probs: Sequence[float] | np.ndarray, prize_index: int) -> np.ndarray:
    """Collapse the vector to a one-hot distribution on ``prize_index``.

    Raises:
        InvalidArgument: if fewer than two doors are given or the index is out of range.
    """
    updated = _as_vector(probs, prize_index)
    updated[:] = 0.0
    updated[prize_index] = 1.0
    return updated


def posterior(prior: float, likelihood: float, evidence: float) -> float:
    """Bayes' theorem, ``P(A|B) = P(B|A) * P(A) / P(B)``.

    Args:
        prior (float): Prior probability ``P(A)``.
        likelihood (float): Likelihood ``P(B|A)``.
        evidence (float): Evidence ``P(B)``.

    Raises:
        InvalidArgument: if ``evidence`` is zero.

    Returns:
        float: the posterior probability ``P(A|B)``.
    """
    if evidence == 0.0:
        raise InvalidArgument("Evidence probability cannot be zero.")
    return likelihood * prior / evidence


def normalize(probs: Sequence[float] | np.ndarray) -> np.ndarray:
    """Rescale ``probs`` so that it sums to one."""
    vector = np.array(probs, dtype=np.float64)
    total = vector.sum()
    if total == 0.0:
        raise InvalidArgument("Sum of probabilities cannot be zero.")
    return vector / total


def validate_sums(probs: Sequence[float] | np.ndarray, tolerance: float = PROBABILITY_TOLERANCE) -> bool:
    """Return ``True`` iff ``|sum(probs) - 1| < tolerance``."""
    return bool(abs(float(np.sum(probs)) - 1.0) < tolerance)
