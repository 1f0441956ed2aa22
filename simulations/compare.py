# simulations/compare.py

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt

from .common import ExperimentResult, absolute_errors, format_summary_lines
from .run import DEFAULT_SEED, run_experiment, run_experiment_streams


DEFAULT_POPULATION = 100
DEFAULT_SAMPLE_SIZE = 5
DEFAULT_TRIALS = 1000

logger = logging.getLogger(__name__)


def configure_logging(*, level: int = logging.INFO) -> None:
    """Configure a simple root logger that writes to stderr.

    This is safe to call multiple times.
    """

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
    else:
        root.setLevel(level)


def plot_abs_errors(result: ExperimentResult):
    """
    Box plot of |estimate - N| per estimator. Returns the figure.
    """
    errors = absolute_errors(result)
    names = list(errors.keys())

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.boxplot([errors[n] for n in names])
    ax.set_xticks(range(1, len(names) + 1))
    ax.set_xticklabels(names)
    ax.set_ylabel("|estimate - N|")
    ax.set_title(
        f"Absolute error  (N={result.spec.population}, n={result.spec.sample_size}, "
        f"trials={result.spec.trials})"
    )
    fig.tight_layout()
    return fig


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Compare the max and twice-mean estimators of N via Monte Carlo."
    )
    parser.add_argument("--population", type=int, default=DEFAULT_POPULATION, help="true N")
    parser.add_argument("--sample-size", type=int, default=DEFAULT_SAMPLE_SIZE, help="draws per trial (n)")
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS, help="number of trials")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="random seed")
    parser.add_argument("--streams", action="store_true", help="use one independent generator per trial")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--save", type=Path, default=None, help="write the box plot here instead of showing it")
    output.add_argument("--no-plot", action="store_true", help="print the summary only")
    parser.add_argument("--log-level", default="INFO", help="logging level (default: INFO)")

    args = parser.parse_args(argv)
    configure_logging(level=getattr(logging, str(args.log_level).upper(), logging.INFO))

    runner = run_experiment_streams if args.streams else run_experiment
    try:
        result = runner(
            population=args.population,
            sample_size=args.sample_size,
            trials=args.trials,
            seed=args.seed,
        )
    except ValueError as e:
        logger.error("invalid parameters: %s", e)
        return 2

    for line in format_summary_lines(result):
        print(line)

    if args.no_plot:
        return 0

    fig = plot_abs_errors(result)
    save: Optional[Path] = args.save
    if save is not None:
        save.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(save)
        logger.info("wrote box plot to %s", save)
    else:
        plt.show()
    plt.close(fig)

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
