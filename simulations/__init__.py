# simulations/__init__.py
"""
Monte Carlo comparison of estimators for the taxi problem.

Run comparisons via:
    python -m simulations.compare --population 100 --sample-size 5 --trials 1000 --seed 2021
"""
