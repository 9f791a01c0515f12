"""
Solver dispatch for summary statistics.

Provides describe() as the comprehensive entry point, plus scalar
helpers: quantile(), sd(), mean(), sem(), histogram().
"""

from __future__ import annotations

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pysimstats.core.defaults import (
    DEFAULT_BINS,
    DEFAULT_QUANTILE_TYPE,
    DEFAULT_SUMMARY_PROBS,
)
from pysimstats.core.exceptions import InvalidInputError
from pysimstats.core.validation import (
    check_min_samples,
    check_positive_int,
    check_probabilities,
)
from pysimstats.descriptive._moments import sample_sd
from pysimstats.descriptive.backends.cpu import CPUDescriptiveBackend
from pysimstats.descriptive.design import DescriptiveDesign
from pysimstats.descriptive.solution import DescriptiveSolution


def _ensure_design(values: ArrayLike | DescriptiveDesign) -> DescriptiveDesign:
    """Convert raw values to DescriptiveDesign if needed."""
    if isinstance(values, DescriptiveDesign):
        return values
    return DescriptiveDesign.from_values(values)


def _check_type(qtype) -> int:
    if isinstance(qtype, bool) or not isinstance(qtype, numbers.Integral) \
            or qtype not in range(1, 10):
        raise InvalidInputError(
            f"Quantile type must be 1-9, got {qtype!r}",
            parameter='type',
            value=qtype,
        )
    return int(qtype)


def describe(
    values: ArrayLike | DescriptiveDesign,
    *,
    probs: ArrayLike = DEFAULT_SUMMARY_PROBS,
    type: int = DEFAULT_QUANTILE_TYPE,
    bins: int = DEFAULT_BINS,
) -> DescriptiveSolution:
    """
    Summarize a collection of trial results.

    Computes n, mean, sd (n-1), standard error of the mean, min, max,
    quantiles at ``probs`` and an equal-width histogram.

    Parameters
    ----------
    values : array-like or DescriptiveDesign
        Non-empty 1D collection of finite scalars. Trial collections and
        samples (anything with a ``values`` attribute) are accepted.
    probs : array-like
        Quantile probabilities, each strictly inside (0, 1).
    type : int
        Hyndman & Fan quantile type 1-9. Default 7 (linear interpolation
        between order statistics).
    bins : int
        Number of histogram bins, >= 1.

    Returns
    -------
    DescriptiveSolution with every field populated.
    """
    design = _ensure_design(values)
    q_probs = check_probabilities(probs, 'probs')
    q_probs.setflags(write=False)
    qtype = _check_type(type)
    bins = check_positive_int(bins, 'bins')

    result = CPUDescriptiveBackend().solve(
        design,
        compute={'moments', 'range', 'quantiles', 'histogram'},
        quantile_probs=q_probs,
        quantile_type=qtype,
        bins=bins,
    )
    return DescriptiveSolution(_result=result, _design=design)


def quantile(
    values: ArrayLike | DescriptiveDesign,
    probs: float | ArrayLike,
    *,
    type: int = DEFAULT_QUANTILE_TYPE,
) -> float | NDArray[np.floating]:
    """
    Empirical quantile(s) of a collection.

    With the default type 7 the p-quantile of sorted x[1..n] is
    x[j] + (h - j) * (x[j+1] - x[j]) with h = (n - 1) p + 1, j = floor(h).
    For p = 0.5 this is the usual median. Quantiles are non-decreasing
    in p.

    Parameters
    ----------
    values : array-like or DescriptiveDesign
        Non-empty 1D collection.
    probs : float or array-like
        Probability or probabilities, each strictly inside (0, 1).
    type : int
        Hyndman & Fan type 1-9.

    Returns
    -------
    float for a scalar ``probs``, otherwise an array aligned with probs.

    Raises
    ------
    InvalidInputError
        If values is empty or any p is outside (0, 1).
    """
    design = _ensure_design(values)
    scalar = np.ndim(probs) == 0
    q_probs = check_probabilities(probs, 'probs')
    qtype = _check_type(type)

    result = CPUDescriptiveBackend().solve(
        design,
        compute={'quantiles'},
        quantile_probs=q_probs,
        quantile_type=qtype,
    )
    q = result.params.quantiles
    if scalar:
        return float(q[0])
    return np.array(q)


def sd(values: ArrayLike | DescriptiveDesign) -> float:
    """
    Sample standard deviation with the unbiased n-1 denominator.

    A collection of identical values has sd exactly 0.

    Raises
    ------
    InvalidInputError
        If fewer than 2 values are given.
    """
    design = _ensure_design(values)
    check_min_samples(design.values, 2, 'values')
    return sample_sd(design.values)


def mean(values: ArrayLike | DescriptiveDesign) -> float:
    """Arithmetic mean of a non-empty collection."""
    design = _ensure_design(values)
    return float(np.mean(design.values))


def sem(values: ArrayLike | DescriptiveDesign) -> float:
    """
    Standard error of the mean, sd(values) / sqrt(n).

    Raises
    ------
    InvalidInputError
        If fewer than 2 values are given.
    """
    design = _ensure_design(values)
    return sd(design) / np.sqrt(design.n)


def histogram(
    values: ArrayLike | DescriptiveDesign,
    bins: int = DEFAULT_BINS,
) -> tuple[NDArray[np.integer], NDArray[np.floating]]:
    """
    Equal-width histogram of a collection.

    This is the shape description handed to plotting code.

    Returns
    -------
    (counts, edges) with len(edges) == len(counts) + 1 and
    counts.sum() == n.
    """
    design = _ensure_design(values)
    bins = check_positive_int(bins, 'bins')
    result = CPUDescriptiveBackend().solve(
        design, compute={'histogram'}, bins=bins,
    )
    return result.params.hist_counts, result.params.hist_edges
