import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence


@dataclass(frozen=True)
class TrialEstimates:
    """
    The two estimates of N computed from a single sample.

      - estimate1: maximum observed value
      - estimate2: twice the sample mean
    """
    estimate1: float
    estimate2: float


# ------------------------------------------------------------
# Sampling
# ------------------------------------------------------------

def _check_params(population: int, sample_size: int) -> None:
    if population < 1:
        raise ValueError("population must be >= 1")
    if sample_size < 1:
        raise ValueError("sample_size must be >= 1")


def draw_sample(population: int, sample_size: int, rng: random.Random) -> List[int]:
    """
    Draw sample_size values uniformly, with replacement, from 1..population.

    The generator is passed in explicitly; nothing here touches the
    module-level random state.
    """
    _check_params(population, sample_size)
    return [rng.randint(1, population) for _ in range(sample_size)]


# ------------------------------------------------------------
# Estimators
# ------------------------------------------------------------

def max_estimate(sample: Sequence[int]) -> float:
    """
    Largest observed value. Never exceeds N, so it is biased low.
    """
    if not sample:
        raise ValueError("sample must be non-empty")
    return float(max(sample))


def twice_mean_estimate(sample: Sequence[int]) -> float:
    """
    Twice the sample mean. E[X] = (N + 1) / 2 for X ~ U{1..N}.
    """
    if not sample:
        raise ValueError("sample must be non-empty")
    total = 0
    for x in sample:
        total += x
    return 2.0 * total / len(sample)


# Order matters: index 0 is estimate1, index 1 is estimate2.
ESTIMATORS: Dict[str, Callable[[Sequence[int]], float]] = {
    "max": max_estimate,
    "twice_mean": twice_mean_estimate,
}


def run_single_trial(population: int, sample_size: int, rng: random.Random) -> TrialEstimates:
    """
    Draw one fresh sample and compute both estimates from it.
    """
    sample = draw_sample(population, sample_size, rng)
    estimate1, estimate2 = (fn(sample) for fn in ESTIMATORS.values())
    return TrialEstimates(estimate1=estimate1, estimate2=estimate2)
