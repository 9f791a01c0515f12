"""
Common data structures for Monte Carlo methods.

ReplicateParams and BootParams are the parameter payloads
wrapped by Result[P] and exposed through Solution classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class ReplicateParams:
    """
    Parameter payload for a repetition run.

    - values: one scalar per trial, in call order, read-only, shape (R,)
    - R: number of trials
    """
    values: NDArray[np.floating[Any]]           # shape (R,)
    R: int


@dataclass(frozen=True)
class BootParams:
    """
    Parameter payload for bootstrap results.

    - t0: statistic on the original data
    - t: bootstrap replicates, shape (R,)
    - bias: mean(t) - t0
    - se: sd(t), n-1 denominator
    - ci: confidence intervals keyed by type (populated by boot_ci)
    """
    t0: float
    t: NDArray[np.floating[Any]]                # shape (R,)
    R: int
    bias: float
    se: float
    ci: dict[str, tuple[float, float]] | None = None
    ci_conf_level: float | None = None
