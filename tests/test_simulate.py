import pytest

from montyhall.config import SimulationConfig
from montyhall.errors import InvalidArgument
from montyhall.simulate import compare_strategies, expected_win_rate, simulate

expected_rate_cases = [
    (("stay", 3), 1 / 3, "stay, 3 doors"),
    (("switch", 3), 2 / 3, "switch, 3 doors"),
    (("switch", 10), 0.9, "switch, 10 doors"),
    (("random", 7), 0.5, "coin flip"),
]


@pytest.mark.parametrize("inp, expected, desc", expected_rate_cases, ids=[c[2] for c in expected_rate_cases])
def test_expected_win_rate(inp, expected, desc):
    assert expected_win_rate(*inp) == pytest.approx(expected)


@pytest.mark.parametrize("strategy", ["stay", "switch", "random"])
@pytest.mark.parametrize("n_doors", [3, 4])
def test_simulated_rates_match_theory(strategy, n_doors):
    result = simulate(SimulationConfig(n_doors=n_doors, strategy=strategy, trials=10_000, seed=7))
    assert result.trials == 10_000
    assert 0 <= result.wins <= result.trials
    assert abs(result.win_rate - result.expected_win_rate) < 0.02


def test_seeded_runs_are_reproducible():
    config = SimulationConfig(n_doors=5, strategy="switch", trials=500, seed=123)
    assert simulate(config) == simulate(config)


def test_compare_strategies():
    results = compare_strategies(n_doors=3, trials=5_000, seed=1)
    assert set(results) == {"stay", "switch"}
    assert results["switch"].win_rate > results["stay"].win_rate


def test_progress_is_logged(log_messages):
    simulate(SimulationConfig(trials=100, seed=0, log_interval=50))
    info = [m for m in log_messages if m.startswith("INFO")]
    assert len(info) == 2
    assert any(m.startswith("SUCCESS") for m in log_messages)


@pytest.mark.parametrize(
    "config",
    [
        SimulationConfig(strategy="peek"),
        SimulationConfig(n_doors=1),
        SimulationConfig(trials=0),
    ],
    ids=["unknown strategy", "one door", "no trials"],
)
def test_invalid_configs(config):
    with pytest.raises(InvalidArgument):
        simulate(config)
