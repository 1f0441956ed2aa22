# simulations/run.py

from __future__ import annotations

import logging
import random
from typing import List, Optional

from taxi_estimators import estimators

from .common import ExperimentSpec, ExperimentResult, Timer


logger = logging.getLogger(__name__)

DEFAULT_SEED = 2021


def run_single_trial(
    population: int,
    sample_size: int,
    seed: int = DEFAULT_SEED,
) -> estimators.TrialEstimates:
    """
    Seeded convenience wrapper: one trial from a fresh generator.
    """
    return estimators.run_single_trial(population, sample_size, random.Random(seed))


def run_experiment(
    population: int,
    sample_size: int,
    trials: int = 1000,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> ExperimentResult:
    """
    Run the draw-and-estimate cycle `trials` times and return an ExperimentResult.

    Parameters
    ----------
    population:
        True N; samples are drawn from 1..N.
    sample_size:
        Draws per trial (n). n > N is fine, sampling is with replacement.
    trials:
        Number of independent repetitions.
    seed:
        Seed for the generator owned by this experiment, DEFAULT_SEED when
        omitted. Must be left out when rng is given; the result then
        records seed=None.
    rng:
        Optional caller-owned generator, advanced sequentially across trials.

    Returns
    -------
    ExperimentResult
    """
    # Validates before any sampling happens
    spec = ExperimentSpec(population=population, sample_size=sample_size, trials=trials)
    if rng is not None:
        if seed is not None:
            raise ValueError("pass either seed or rng, not both")
        gen = rng
    else:
        if seed is None:
            seed = DEFAULT_SEED
        gen = random.Random(seed)

    collection: List[estimators.TrialEstimates] = []
    with Timer() as t:
        for _ in range(spec.trials):
            collection.append(
                estimators.run_single_trial(spec.population, spec.sample_size, gen)
            )

    logger.debug(
        "ran %d trials (N=%d, n=%d) in %.4fs",
        spec.trials, spec.population, spec.sample_size, t.elapsed_s or 0.0,
    )
    return ExperimentResult(
        spec=spec,
        seed=seed,
        trials=collection,
        runtime_s=t.elapsed_s,
        meta={"streams": "single", "external_rng": rng is not None},
    )


def trial_seeds(seed: int, trials: int) -> List[str]:
    """
    One seed key per trial, "<seed>:<trial index>".

    random.Random hashes str seeds with sha512, so keys never collide across
    trials or base seeds (integer seeds would: Random(-k) == Random(k)).
    """
    if trials < 1:
        raise ValueError("trials must be >= 1")
    return [f"{seed}:{i}" for i in range(trials)]


def run_experiment_streams(
    population: int,
    sample_size: int,
    trials: int = 1000,
    seed: int = DEFAULT_SEED,
) -> ExperimentResult:
    """
    Like run_experiment, but trial i draws from its own generator seeded
    from trial_seeds(seed, trials)[i].

    Trials share no state at all, so they can be evaluated in any order or
    handed to separate workers and still reproduce the same collection.
    """
    spec = ExperimentSpec(population=population, sample_size=sample_size, trials=trials)

    collection: List[estimators.TrialEstimates] = []
    with Timer() as t:
        for s in trial_seeds(seed, spec.trials):
            collection.append(
                estimators.run_single_trial(spec.population, spec.sample_size, random.Random(s))
            )

    logger.debug(
        "ran %d per-trial streams (N=%d, n=%d) in %.4fs",
        spec.trials, spec.population, spec.sample_size, t.elapsed_s or 0.0,
    )
    return ExperimentResult(
        spec=spec,
        seed=seed,
        trials=collection,
        runtime_s=t.elapsed_s,
        meta={"streams": "per_trial"},
    )
