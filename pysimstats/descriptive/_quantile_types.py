"""
The nine Hyndman & Fan sample quantile definitions.

Types 1-3 are discontinuous (step functions).
Types 4-9 are continuous (linear interpolation with varying definitions of
the plotting position p(k)). Type 7, the default, interpolates linearly
between order statistics x[floor(h)] and x[floor(h) + 1] with
h = (n - 1) p + 1.

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import NDArray

from pysimstats.core.exceptions import InvalidInputError

# Plotting-position constants (a, b) for the continuous types:
# nppm = a + p * (n + 1 - a - b)
_CONTINUOUS = {
    4: (0.0, 1.0),
    5: (0.5, 0.5),
    6: (0.0, 0.0),
    7: (1.0, 1.0),
    8: (1.0 / 3.0, 1.0 / 3.0),
    9: (3.0 / 8.0, 3.0 / 8.0),
}


def hf_quantile(x: NDArray, probs: NDArray, qtype: int) -> NDArray:
    """
    Compute sample quantiles for one of the Hyndman & Fan types.

    Parameters
    ----------
    x : NDArray
        1D sorted array, non-empty, no NaN values.
    probs : NDArray
        1D array of probabilities.
    qtype : int
        Hyndman & Fan type 1-9.

    Returns
    -------
    NDArray
        Quantile values, one per probability.
    """
    if qtype not in range(1, 10):
        raise InvalidInputError(
            f"Quantile type must be 1-9, got {qtype}",
            parameter='type',
            value=qtype,
        )

    n = len(x)
    probs = np.asarray(probs, dtype=np.float64)
    if n == 1:
        return np.full(len(probs), x[0], dtype=np.float64)

    result = np.empty(len(probs), dtype=np.float64)

    # 4 * machine epsilon, absorbs rounding in n * p
    fuzz = 4.0 * np.finfo(np.float64).eps

    if qtype <= 3:
        for i, p in enumerate(probs):
            nppm = n * p - 0.5 if qtype == 3 else n * p
            j = int(math.floor(nppm + fuzz))

            if qtype == 1:
                h = 1.0 if (nppm > j + fuzz) else 0.0
            elif qtype == 2:
                h = 0.5 if abs(nppm - j) < fuzz else (1.0 if nppm > j else 0.0)
            else:
                # round half to even on the order statistic
                h = 0.0 if (abs(nppm - j) < fuzz and j % 2 == 0) else 1.0

            # order statistic j is x[j - 1], clamped at both ends
            lo = max(0, min(j - 1, n - 1))
            hi = max(0, min(j, n - 1))
            result[i] = (1.0 - h) * x[lo] + h * x[hi]

    else:
        a, b = _CONTINUOUS[qtype]
        for i, p in enumerate(probs):
            nppm = a + p * (n + 1.0 - a - b)
            j = int(math.floor(nppm + fuzz))
            h = nppm - j

            if abs(h) < fuzz:
                h = 0.0
            elif abs(h - 1.0) < fuzz:
                h = 1.0

            if j < 1:
                result[i] = x[0]
            elif j >= n:
                result[i] = x[n - 1]
            else:
                result[i] = (1.0 - h) * x[j - 1] + h * x[j]

    return result
