"""
DescriptiveDesign: data wrapper for summary computations.

Wraps a completed trial collection (or any 1D sample) and validates it
once, so every statistic computed from it sees the same frozen data.
"""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Mapping
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pysimstats.core.exceptions import InvalidInputError
from pysimstats.core.validation import check_1d, check_array, check_finite


@dataclass(frozen=True)
class DescriptiveDesign:
    """
    Design for summary statistics over a 1D collection of scalars.

    Holds a read-only copy of the input; the caller's array is never
    touched, so summaries never mutate a trial collection.

    Construction:
        DescriptiveDesign.from_values(values)
    """
    _values: NDArray[np.floating[Any]]
    _sorted: NDArray[np.floating[Any]]

    @classmethod
    def from_values(cls, values, name: str = 'values') -> DescriptiveDesign:
        """
        Build a DescriptiveDesign from array-like data.

        Objects exposing a ``values`` attribute (trial collections,
        samples, pandas Series) are unwrapped first.

        Raises
        ------
        InvalidInputError
            If the collection is empty or contains NaN/Inf.
        DimensionError
            If the input is not one-dimensional.
        """
        if isinstance(values, Mapping):
            raise InvalidInputError(
                f"{name}: expected a 1D sequence of numbers, got "
                f"{type(values).__name__}; pass list(d.values()) explicitly",
                parameter=name,
            )
        # dict.values is a method, not data
        wrapped = getattr(values, 'values', None)
        if wrapped is not None and not callable(wrapped) \
                and not isinstance(values, np.ndarray):
            values = wrapped
        arr = np.array(check_array(values, name), dtype=np.float64)
        check_1d(arr, name)
        if arr.shape[0] == 0:
            raise InvalidInputError(
                f"{name}: cannot summarize an empty collection",
                parameter=name,
            )
        check_finite(arr, name)

        sorted_arr = np.sort(arr)
        arr.setflags(write=False)
        sorted_arr.setflags(write=False)
        return cls(_values=arr, _sorted=sorted_arr)

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """The collection in original order, read-only."""
        return self._values

    @property
    def sorted(self) -> NDArray[np.floating[Any]]:
        """Order statistics, read-only."""
        return self._sorted

    @property
    def n(self) -> int:
        return int(self._values.shape[0])
