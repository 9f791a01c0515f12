"""
Sample moments shared by the summary and resampling backends.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def sample_sd(x: NDArray) -> float:
    """
    Sample standard deviation with the n-1 denominator.

    Constant input returns exactly 0.0. np.std alone can leave a residue
    of order 1e-16 when the mean is not representable (e.g. all 0.1).
    Requires len(x) >= 2.
    """
    if np.min(x) == np.max(x):
        return 0.0
    return float(np.std(x, ddof=1))
