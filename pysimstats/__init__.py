"""
PySimStats: Monte Carlo simulation and bootstrap resampling for Python.

Small, reproducible building blocks for simulation studies: sampling
from datasets and parametric families, a repetition driver, and
summaries of the resulting trial collections.

Submodules:
    sampling: Sampling with replacement and parametric draws
    montecarlo: Repetition driver, extreme-value simulation, bootstrap
    descriptive: Quantiles, standard deviation and histograms
"""

__version__ = "0.1.0"

from pysimstats import sampling
from pysimstats import descriptive
from pysimstats import montecarlo

__all__ = [
    "__version__",
    "sampling",
    "descriptive",
    "montecarlo",
]
