"""
PySimStats Monte Carlo methods.

Provides the repetition driver, the extreme-value and bootstrap
experiments, and bootstrap confidence intervals.

Usage:
    from pysimstats.montecarlo import replicate, simulate_maxima, bootstrap_mean

    # Repetition driver
    gen = np.random.default_rng(1)
    res = replicate(lambda: gen.normal(5.0, 1.0, 150).max(), R=5000)

    # Extreme values and bootstrap
    maxima = simulate_maxima(size=150, R=5000, mean=5.0, sd=1.0, rng=1)
    maxima.quantile(0.99)

    boot = bootstrap_mean(sample, R=2500, rng=1)
    ci_result = boot_ci(boot, type="perc")
"""

from pysimstats.montecarlo.solution import BootstrapSolution, ReplicateSolution
from pysimstats.montecarlo.solvers import (
    boot_ci,
    bootstrap,
    bootstrap_mean,
    normal_max_quantile,
    replicate,
    simulate_maxima,
    standard_error,
)

__all__ = [
    "replicate",
    "simulate_maxima",
    "normal_max_quantile",
    "bootstrap",
    "bootstrap_mean",
    "standard_error",
    "boot_ci",
    "ReplicateSolution",
    "BootstrapSolution",
]
