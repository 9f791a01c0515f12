"""
Bootstrap confidence interval computation.

- normal: bias-corrected normal approximation
- basic: basic (pivotal) bootstrap interval
- perc: percentile method

Quantiles of the replicates use the same type-7 definition as
descriptive.quantile().
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pysimstats.core.exceptions import InvalidInputError
from pysimstats.descriptive._moments import sample_sd
from pysimstats.descriptive._quantile_types import hf_quantile

CI_TYPES = ("normal", "basic", "perc")


def compute_ci(
    t0: float,
    t: NDArray,
    types: list[str],
    conf_level: float,
) -> dict[str, tuple[float, float]]:
    """
    Compute bootstrap confidence intervals.

    Args:
        t0: Statistic on the original data.
        t: Bootstrap replicates, shape (R,).
        types: CI types to compute.
        conf_level: Confidence level (e.g., 0.95).

    Returns:
        Dict mapping CI type name to (lower, upper).
    """
    alpha = 1.0 - conf_level
    t_sorted = np.sort(t)

    ci_dict: dict[str, tuple[float, float]] = {}
    for ci_type in types:
        if ci_type == "normal":
            ci_dict["normal"] = _ci_normal(t0, t, alpha)
        elif ci_type == "basic":
            ci_dict["basic"] = _ci_basic(t0, t_sorted, alpha)
        elif ci_type == "perc":
            ci_dict["perc"] = _ci_percentile(t_sorted, alpha)
        else:
            raise InvalidInputError(
                f"Unknown CI type: {ci_type!r}. Must be one of {list(CI_TYPES)}.",
                parameter='type',
                value=ci_type,
            )

    return ci_dict


def _tail_quantiles(t_sorted: NDArray, alpha: float) -> tuple[float, float]:
    q = hf_quantile(t_sorted, np.array([alpha / 2.0, 1.0 - alpha / 2.0]), 7)
    return float(q[0]), float(q[1])


def _ci_normal(t0: float, t: NDArray, alpha: float) -> tuple[float, float]:
    """
    Normal approximation CI with bias correction.

    CI = [2*t0 - mean(t) + z_{alpha/2} * se,
          2*t0 - mean(t) + z_{1-alpha/2} * se]

    Centered at 2*t0 - mean(t) (bias-corrected), not at t0.
    """
    center = 2.0 * t0 - float(np.mean(t))
    se = sample_sd(t)
    z_lo = sp_stats.norm.ppf(alpha / 2.0)
    z_hi = sp_stats.norm.ppf(1.0 - alpha / 2.0)
    return center + z_lo * se, center + z_hi * se


def _ci_basic(t0: float, t_sorted: NDArray, alpha: float) -> tuple[float, float]:
    """
    Basic (pivotal) bootstrap CI.

    CI = [2*t0 - Q(1-alpha/2), 2*t0 - Q(alpha/2)]

    Note: upper quantile of bootstrap gives lower bound.
    """
    q_lo, q_hi = _tail_quantiles(t_sorted, alpha)
    return 2.0 * t0 - q_hi, 2.0 * t0 - q_lo


def _ci_percentile(t_sorted: NDArray, alpha: float) -> tuple[float, float]:
    """
    Percentile bootstrap CI.

    CI = [Q(alpha/2), Q(1-alpha/2)]
    """
    return _tail_quantiles(t_sorted, alpha)
