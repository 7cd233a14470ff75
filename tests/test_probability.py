import numpy as np
import pytest

from montyhall.errors import InconsistentState, InvalidArgument
from montyhall.probability import (
    normalize,
    posterior,
    update_on_empty_reveal,
    update_on_prize_reveal,
    validate_sums,
)

empty_reveal_cases = [
    # ─── Uniform priors ───
    ((np.full(3, 1 / 3), 2), np.array([0.5, 0.5, 0.0]), "3 doors, open last"),
    ((np.full(4, 0.25), 0), np.full(4, 1 / 3) * np.array([0, 1, 1, 1]), "4 doors, open first"),
    ((np.array([0.5, 0.5]), 1), np.array([1.0, 0.0]), "2 doors leaves a certainty"),

    # ─── Non-uniform priors: proportional, not uniform, redistribution ───
    ((np.array([0.2, 0.3, 0.5]), 0), np.array([0.0, 0.375, 0.625]), "weighted by prior mass"),
    ((np.array([0.1, 0.6, 0.3]), 2), np.array([1 / 7, 6 / 7, 0.0]), "remaining mass 0.7"),
    ((np.array([0.0, 0.5, 0.5]), 0), np.array([0.0, 0.5, 0.5]), "re-open a zero door"),
]


@pytest.mark.parametrize("inp, expected, desc", empty_reveal_cases, ids=[c[2] for c in empty_reveal_cases])
def test_update_on_empty_reveal(inp, expected, desc):
    np.testing.assert_allclose(update_on_empty_reveal(*inp), expected, rtol=1e-12, atol=1e-15)


@pytest.mark.parametrize("n_doors", range(2, 12))
def test_empty_reveal_keeps_unit_mass_for_every_index(n_doors):
    rng = np.random.default_rng(n_doors)
    probs = rng.dirichlet(np.ones(n_doors))
    for idx in range(n_doors):
        result = update_on_empty_reveal(probs, idx)
        assert result[idx] == 0.0
        assert abs(result.sum() - 1.0) < 1e-9


def test_empty_reveal_does_not_mutate_input():
    probs = np.full(3, 1 / 3)
    update_on_empty_reveal(probs, 1)
    np.testing.assert_array_equal(probs, np.full(3, 1 / 3))


@pytest.mark.parametrize(
    "probs, idx",
    [([1.0], 0), ([0.5, 0.5], -1), ([0.5, 0.5], 2), ([], 0)],
    ids=["one door", "negative index", "index past end", "empty"],
)
def test_empty_reveal_rejects_bad_arguments(probs, idx):
    with pytest.raises(InvalidArgument):
        update_on_empty_reveal(probs, idx)


def test_empty_reveal_with_no_remaining_mass():
    with pytest.raises(InconsistentState):
        update_on_empty_reveal([1.0, 0.0, 0.0], 0)


def test_update_on_prize_reveal_is_one_hot():
    np.testing.assert_array_equal(update_on_prize_reveal([0.2, 0.3, 0.5], 1), [0.0, 1.0, 0.0])
    with pytest.raises(InvalidArgument):
        update_on_prize_reveal([0.5, 0.5], 5)


posterior_cases = [
    ((1 / 3, 1.0, 0.5), 2 / 3, "switch door in the classic game"),
    ((1 / 3, 0.5, 0.5), 1 / 3, "player's own door"),
    ((0.01, 0.9, 0.05), 0.18, "disease test"),
]


@pytest.mark.parametrize("inp, expected, desc", posterior_cases, ids=[c[2] for c in posterior_cases])
def test_posterior(inp, expected, desc):
    assert posterior(*inp) == pytest.approx(expected)


def test_posterior_rejects_zero_evidence():
    with pytest.raises(InvalidArgument):
        posterior(0.5, 0.5, 0.0)


def test_normalize():
    np.testing.assert_allclose(normalize([1.0, 1.0, 2.0]), [0.25, 0.25, 0.5])
    with pytest.raises(InvalidArgument):
        normalize([0.0, 0.0])


validate_cases = [
    (([0.5, 0.5], 1e-10), True, "exact"),
    (([1 / 3] * 3, 1e-10), True, "float thirds"),
    (([0.5, 0.6], 1e-10), False, "too much mass"),
    (([0.5, 0.49], 0.1), True, "loose tolerance"),
]


@pytest.mark.parametrize("inp, expected, desc", validate_cases, ids=[c[2] for c in validate_cases])
def test_validate_sums(inp, expected, desc):
    assert validate_sums(*inp) is expected
