# simulations/methods.py

from __future__ import annotations

from typing import Dict, List, Sequence

from taxi_estimators.estimators import ESTIMATORS, TrialEstimates


def method_names() -> List[str]:
    """
    Estimator names in column order (estimate1 first).
    """
    return list(ESTIMATORS.keys())


def estimator_columns(trials: Sequence[TrialEstimates]) -> Dict[str, List[float]]:
    """
    Split a trial collection into one column of estimates per estimator.
    """
    estimate1 = [t.estimate1 for t in trials]
    estimate2 = [t.estimate2 for t in trials]
    names = method_names()
    return {names[0]: estimate1, names[1]: estimate2}
