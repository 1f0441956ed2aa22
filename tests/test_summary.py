from __future__ import annotations

import math

import pytest

from simulations.common import (
    ExperimentResult,
    ExperimentSpec,
    absolute_errors,
    format_summary_lines,
    summarize,
    summarize_estimates,
)
from taxi_estimators.estimators import TrialEstimates


@pytest.mark.parametrize(
    "kwargs,field",
    [
        ({"population": 0, "sample_size": 5}, "population"),
        ({"population": 10, "sample_size": 0}, "sample_size"),
        ({"population": 10, "sample_size": 5, "trials": 0}, "trials"),
    ],
)
def test_experiment_spec_rejects_non_positive(kwargs, field: str) -> None:
    with pytest.raises(ValueError, match=field):
        ExperimentSpec(**kwargs)


def test_experiment_spec_allows_sample_larger_than_population() -> None:
    spec = ExperimentSpec(population=3, sample_size=10, trials=1)
    assert spec.sample_size > spec.population


def test_summarize_estimates_hand_computed() -> None:
    # estimates 8, 10, 12 against N=10
    s = summarize_estimates([8.0, 10.0, 12.0], 10)
    assert math.isclose(s.bias, 0.0, abs_tol=1e-12)
    # sample std = 2, se = 2 / sqrt(3)
    assert math.isclose(s.se, 2.0 / math.sqrt(3), rel_tol=1e-12)
    # |errors| = 2, 0, 2 -> mean 4/3, sample std = sqrt(4/3)
    assert math.isclose(s.mae, 4.0 / 3.0, rel_tol=1e-12)
    assert math.isclose(s.mae_se, math.sqrt(4.0 / 3.0) / math.sqrt(3), rel_tol=1e-12)


def test_summarize_estimates_single_value_has_zero_se() -> None:
    s = summarize_estimates([7.0], 10)
    assert s.bias == -3.0
    assert s.se == 0.0
    assert s.mae == 3.0
    assert s.mae_se == 0.0


def test_summarize_estimates_rejects_empty() -> None:
    with pytest.raises(ValueError, match="non-empty"):
        summarize_estimates([], 10)


def test_summarize_is_order_independent() -> None:
    trials = [TrialEstimates(9.0, 11.0), TrialEstimates(7.0, 8.4), TrialEstimates(10.0, 12.8)]
    a = summarize(trials, 10)
    b = summarize(list(reversed(trials)), 10)
    for name in ("bias1", "bias2", "se1", "se2", "mae1", "mae2", "mae_se1", "mae_se2"):
        assert math.isclose(getattr(a, name), getattr(b, name), rel_tol=1e-12, abs_tol=1e-12)


def test_summarize_columns() -> None:
    trials = [TrialEstimates(8.0, 12.0), TrialEstimates(6.0, 10.0)]
    s = summarize(trials, 10)
    assert s.bias1 == -3.0
    assert s.bias2 == 1.0
    assert s.mae1 == 3.0
    assert s.mae2 == 1.0
    assert s.for_estimator(1).bias == s.bias1
    assert s.for_estimator(2).mae == s.mae2
    with pytest.raises(IndexError):
        s.for_estimator(3)


def test_experiment_result_checks_trial_count() -> None:
    spec = ExperimentSpec(population=10, sample_size=2, trials=3)
    with pytest.raises(ValueError, match="trial count mismatch"):
        ExperimentResult(spec=spec, seed=1, trials=[TrialEstimates(5.0, 6.0)])


def test_absolute_errors_and_format() -> None:
    spec = ExperimentSpec(population=10, sample_size=2, trials=2)
    r = ExperimentResult(
        spec=spec,
        seed=1,
        trials=[TrialEstimates(8.0, 12.0), TrialEstimates(10.0, 9.0)],
        runtime_s=0.5,
    )
    assert absolute_errors(r) == {"max": [2.0, 0.0], "twice_mean": [2.0, 1.0]}

    lines = format_summary_lines(r)
    assert lines[0] == "N=10, n=2, trials=2, seed=1, runtime=0.500s"
    assert lines[1].startswith("max: bias=-1.000")
    assert lines[2].startswith("twice_mean: bias=+0.500")
