"""
Estimators for the upper bound of a discrete uniform population.
"""

from .estimators import (
    ESTIMATORS,
    TrialEstimates,
    draw_sample,
    max_estimate,
    run_single_trial,
    twice_mean_estimate,
)

__all__ = [
    "ESTIMATORS",
    "TrialEstimates",
    "draw_sample",
    "max_estimate",
    "run_single_trial",
    "twice_mean_estimate",
]
