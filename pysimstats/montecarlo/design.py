"""
Design classes for Monte Carlo methods.

ReplicateDesign and BootstrapDesign encapsulate all inputs needed
by backends to run repeated trials. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pysimstats.core.exceptions import InvalidInputError
from pysimstats.core.random import RandomSource
from pysimstats.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_positive_int,
)

# Marks "call trial() with no argument"; None is a legitimate dataset value
NO_DATA = object()


def _check_callable(fn, name: str) -> Callable:
    if not callable(fn):
        raise InvalidInputError(
            f"{name} must be callable, got {type(fn).__name__}",
            parameter=name,
            value=fn,
        )
    return fn


@dataclass(frozen=True)
class ReplicateDesign:
    """
    Frozen design for the repetition driver.

    Attributes:
        trial: fn() -> scalar, or fn(data) -> scalar when data is given.
        R: Number of repetitions.
        data: Argument passed to every call of trial, or NO_DATA.
    """
    trial: Callable
    R: int
    data: Any = NO_DATA

    @property
    def takes_data(self) -> bool:
        return self.data is not NO_DATA

    @classmethod
    def for_replicate(
        cls,
        trial: Callable,
        R: int,
        *,
        data: Any = NO_DATA,
    ) -> ReplicateDesign:
        """
        Create a repetition design with validation.

        Args:
            trial: Trial function returning one scalar per call.
            R: Number of repetitions. Must be a positive integer.
            data: Optional dataset handed to each trial call.

        Raises:
            InvalidInputError: If trial is not callable or R < 1.
        """
        _check_callable(trial, 'trial')
        R = check_positive_int(R, 'R')
        return cls(trial=trial, R=R, data=data)


@dataclass(frozen=True)
class BootstrapDesign:
    """
    Frozen design for nonparametric bootstrap of a scalar statistic.

    Attributes:
        data: Original data, shape (n,), read-only.
        statistic: fn(sample) -> scalar, applied to each resample.
        R: Number of bootstrap replicates.
        rng: Random source.
    """
    data: NDArray[np.floating[Any]]
    statistic: Callable
    R: int
    rng: RandomSource

    @classmethod
    def for_bootstrap(
        cls,
        data,
        statistic: Callable,
        R: int = 999,
        *,
        rng: RandomSource = None,
    ) -> BootstrapDesign:
        """
        Create a bootstrap design with validation.

        Args:
            data: 1D array-like of finite values, at least 1 observation.
            statistic: Function computing the scalar statistic of interest.
            R: Number of bootstrap replicates. Must be >= 1.
            rng: Random source.

        Raises:
            InvalidInputError: If inputs are invalid.
        """
        data_arr = np.array(check_array(data, 'data'), dtype=np.float64)
        check_1d(data_arr, 'data')
        if data_arr.shape[0] == 0:
            raise InvalidInputError(
                "data: cannot bootstrap an empty dataset",
                parameter='data',
            )
        check_finite(data_arr, 'data')
        data_arr.setflags(write=False)

        _check_callable(statistic, 'statistic')
        R = check_positive_int(R, 'R')

        return cls(data=data_arr, statistic=statistic, R=R, rng=rng)
