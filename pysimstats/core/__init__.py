"""
Core infrastructure for PySimStats.

Shared abstractions used by the sampling, montecarlo and descriptive
subpackages.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    random: Explicit random source resolution
    defaults: Library-wide defaults and tolerance tiers
    compute: Timing
"""

from pysimstats.core.result import Result
from pysimstats.core.exceptions import (
    PySimStatsError,
    InvalidInputError,
    DimensionError,
)
from pysimstats.core.random import RandomSource, resolve_rng

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PySimStatsError",
    "InvalidInputError",
    "DimensionError",
    # Random source
    "RandomSource",
    "resolve_rng",
]
