"""
PySimStats random sampling.

Usage:
    from pysimstats.sampling import resample, draw

    boot_sample = resample(data, rng=rng)           # k = n, with replacement
    normals = draw('normal', 150, mean=5.0, sd=1.0, rng=rng)
"""

from pysimstats.sampling.distributions import FAMILIES
from pysimstats.sampling.solution import SampleParams, SampleSolution
from pysimstats.sampling.solvers import draw, resample

__all__ = [
    "resample",
    "draw",
    "FAMILIES",
    "SampleParams",
    "SampleSolution",
]
