"""
Design classes for random sampling.

ResampleDesign and DrawDesign encapsulate all inputs needed by the
sampling backends. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pysimstats.core.exceptions import InvalidInputError
from pysimstats.core.random import RandomSource
from pysimstats.core.validation import (
    check_1d,
    check_array,
    check_positive_int,
)
from pysimstats.sampling.distributions import get_family, resolve_params


@dataclass(frozen=True)
class ResampleDesign:
    """
    Frozen design for sampling with replacement.

    Attributes:
        data: Source dataset, shape (n,). Read-only copy of the input.
        size: Number of elements to draw (k). Defaults to n.
        rng: Random source (Generator, int seed, or None).
    """
    data: NDArray[np.floating[Any]]
    size: int
    rng: RandomSource

    @property
    def n(self) -> int:
        return self.data.shape[0]

    @classmethod
    def for_resample(
        cls,
        data,
        size: int | None = None,
        *,
        rng: RandomSource = None,
    ) -> ResampleDesign:
        """
        Create a resampling design with validation.

        Args:
            data: Source dataset, 1D array-like of real values.
            size: Output size k. None means k = n (the bootstrap case).
            rng: Random source.

        Raises:
            InvalidInputError: If data is empty or size < 1.
            DimensionError: If data is not 1D.
        """
        data_arr = np.array(check_array(data, 'data'), dtype=np.float64)
        check_1d(data_arr, 'data')
        if data_arr.shape[0] == 0:
            raise InvalidInputError(
                "data: cannot resample from an empty dataset",
                parameter='data',
            )
        data_arr.setflags(write=False)

        if size is None:
            size = data_arr.shape[0]
        size = check_positive_int(size, 'size')

        return cls(data=data_arr, size=size, rng=rng)


@dataclass(frozen=True)
class DrawDesign:
    """
    Frozen design for parametric sampling.

    Attributes:
        family: Distribution family name (see sampling.distributions).
        params: Validated family parameters.
        size: Number of independent draws (k).
        rng: Random source (Generator, int seed, or None).
    """
    family: str
    params: dict[str, float]
    size: int
    rng: RandomSource

    @classmethod
    def for_draw(
        cls,
        family: str,
        size: int,
        *,
        rng: RandomSource = None,
        **params: Any,
    ) -> DrawDesign:
        """
        Create a parametric sampling design with validation.

        Args:
            family: 'normal', 'uniform', 'exponential', 'lognormal', 'poisson'.
            size: Number of draws. Must be >= 1.
            rng: Random source.
            **params: Family parameters, e.g. mean=5.0, sd=1.0.

        Raises:
            InvalidInputError: If family is unknown, size < 1, or a
                parameter is unknown or out of its domain.
        """
        fam = get_family(family)
        size = check_positive_int(size, 'size')
        checked = resolve_params(fam, params)
        return cls(family=fam.name, params=checked, size=size, rng=rng)
