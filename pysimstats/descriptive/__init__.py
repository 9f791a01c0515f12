"""
Summary statistics for trial collections.

Public API:
    describe(values)        - All summaries at once (moments, range,
                              quantiles, histogram)
    quantile(values, p)     - Empirical quantiles (Hyndman & Fan types 1-9)
    sd(values)              - Sample standard deviation (n-1)
    mean(values)            - Arithmetic mean
    sem(values)             - Standard error of the mean
    histogram(values, bins) - Counts and bin edges
"""

from pysimstats.descriptive.design import DescriptiveDesign
from pysimstats.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pysimstats.descriptive.solvers import (
    describe,
    quantile,
    sd,
    mean,
    sem,
    histogram,
)

__all__ = [
    "describe",
    "quantile",
    "sd",
    "mean",
    "sem",
    "histogram",
    "DescriptiveDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
]
