# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence
import math
import time

from taxi_estimators.estimators import TrialEstimates

from .methods import estimator_columns, method_names


@dataclass(frozen=True)
class ExperimentSpec:
    """
    Parameters shared by every run of the estimator comparison.
    """
    population: int  # true N
    sample_size: int  # n, draws per trial
    trials: int = 1000

    def __post_init__(self) -> None:
        if self.population < 1:
            raise ValueError("population must be >= 1")
        if self.sample_size < 1:
            raise ValueError("sample_size must be >= 1")
        if self.trials < 1:
            raise ValueError("trials must be >= 1")


@dataclass(frozen=True)
class EstimatorSummary:
    """
    Error metrics for one estimator over all trials.
    """
    bias: float
    se: float  # standard error of the mean estimate
    mae: float
    mae_se: float  # standard error of the mean absolute error


@dataclass(frozen=True)
class ExperimentSummary:
    """
    Error metrics for both estimators, column 1 = max, column 2 = twice_mean.
    """
    bias1: float
    bias2: float
    se1: float
    se2: float
    mae1: float
    mae2: float
    mae_se1: float
    mae_se2: float

    def for_estimator(self, index: int) -> EstimatorSummary:
        if index == 1:
            return EstimatorSummary(self.bias1, self.se1, self.mae1, self.mae_se1)
        if index == 2:
            return EstimatorSummary(self.bias2, self.se2, self.mae2, self.mae_se2)
        raise IndexError("estimator index must be 1 or 2")


def _mean(values: Sequence[float]) -> float:
    total = 0.0
    for v in values:
        total += v
    return total / len(values)


def _sample_std(values: Sequence[float], mean: float) -> float:
    """
    Sample stddev (n - 1 denominator). A single value has no spread: 0.0.
    """
    n = len(values)
    if n < 2:
        return 0.0
    var_acc = 0.0
    for v in values:
        d = v - mean
        var_acc += d * d
    return math.sqrt(var_acc / (n - 1))


def summarize_estimates(estimates: Sequence[float], population: int) -> EstimatorSummary:
    """
    Bias, standard error and mean absolute error of one estimator column.
    Two-pass mean/variance, same as for any other summary here.
    """
    if not estimates:
        raise ValueError("estimates must be non-empty")

    n = len(estimates)
    root_n = math.sqrt(n)

    mean = _mean(estimates)
    std = _sample_std(estimates, mean)

    abs_errors = [abs(e - population) for e in estimates]
    mae = _mean(abs_errors)
    mae_std = _sample_std(abs_errors, mae)

    return EstimatorSummary(
        bias=mean - population,
        se=std / root_n,
        mae=mae,
        mae_se=mae_std / root_n,
    )


def summarize(trials: Sequence[TrialEstimates], population: int) -> ExperimentSummary:
    """
    Summaries for both estimators over a completed trial collection.
    Every metric is order-independent.
    """
    if not trials:
        raise ValueError("trials must be non-empty")

    s1 = summarize_estimates([t.estimate1 for t in trials], population)
    s2 = summarize_estimates([t.estimate2 for t in trials], population)
    return ExperimentSummary(
        bias1=s1.bias,
        bias2=s2.bias,
        se1=s1.se,
        se2=s2.se,
        mae1=s1.mae,
        mae2=s2.mae,
        mae_se1=s1.mae_se,
        mae_se2=s2.mae_se,
    )


@dataclass
class ExperimentResult:
    """
    Common return type for all experiment runs.
    """
    spec: ExperimentSpec
    seed: Optional[int]  # None when the caller supplied the generator
    trials: List[TrialEstimates]

    summary: ExperimentSummary = field(init=False)
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Sanity: one estimate pair per requested trial
        if len(self.trials) != self.spec.trials:
            raise ValueError(
                f"trial count mismatch: expected {self.spec.trials}, got {len(self.trials)}"
            )
        self.summary = summarize(self.trials, self.spec.population)


def absolute_errors(result: ExperimentResult) -> Dict[str, List[float]]:
    """
    |estimate - N| per trial, keyed by estimator name, for box plots.
    """
    n = result.spec.population
    columns = estimator_columns(result.trials)
    return {name: [abs(e - n) for e in col] for name, col in columns.items()}


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.perf_counter() - self._start


def format_summary_lines(r: ExperimentResult) -> List[str]:
    """
    Human-friendly lines for printing in the compare tool, one per estimator.
    """
    s = r.summary
    lines = [
        f"N={r.spec.population}, n={r.spec.sample_size}, trials={r.spec.trials}, "
        + (f"seed={r.seed}" if r.seed is not None else "seed=<caller rng>")
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else ""),
    ]
    for i, name in enumerate(method_names(), start=1):
        e = s.for_estimator(i)
        lines.append(
            f"{name}: bias={e.bias:+.3f} (se {e.se:.3f}), "
            f"mae={e.mae:.3f} (se {e.mae_se:.3f})"
        )
    return lines
