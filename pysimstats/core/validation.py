"""
Input validation utilities for PySimStats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pysimstats.core.exceptions import InvalidInputError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a floating point numpy array.

    Rejects inputs that result in object dtype (indicating mixed types
    or non-numeric data) and non-numeric dtypes such as strings.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        InvalidInputError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise InvalidInputError(
            f"{name}: cannot convert to array: {e}", parameter=name,
        ) from e

    if result.dtype == object:
        raise InvalidInputError(
            f"{name}: converted to object dtype, indicating mixed types "
            f"or non-numeric data",
            parameter=name,
        )

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise InvalidInputError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data",
            parameter=name,
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        InvalidInputError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise InvalidInputError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
            parameter=name,
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape "
            f"{array.shape}",
            parameter=name,
        )


def check_min_samples(
    array: NDArray[np.floating[Any]], min_samples: int, name: str,
) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        InvalidInputError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise InvalidInputError(
            f"{name}: requires at least {min_samples} samples, got {n}",
            parameter=name,
            value=n,
        )


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify value is a positive integer and return it as int.

    Booleans and integral floats are rejected; counts must be given as
    integers.

    Raises:
        InvalidInputError: If value is not an integer or is < 1
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise InvalidInputError(
            f"{name} must be a positive integer, got {value!r}",
            parameter=name,
            value=value,
        )
    if value < 1:
        raise InvalidInputError(
            f"{name} must be >= 1, got {value}",
            parameter=name,
            value=value,
        )
    return int(value)


def check_probability(p: Any, name: str) -> float:
    """
    Verify p is a real number strictly inside (0, 1).

    Raises:
        InvalidInputError: If p is not a number or lies outside (0, 1)
    """
    if isinstance(p, (bool, np.bool_)) or not isinstance(p, numbers.Real):
        raise InvalidInputError(
            f"{name} must be a number in (0, 1), got {p!r}",
            parameter=name,
            value=p,
        )
    p = float(p)
    if not (0.0 < p < 1.0):
        raise InvalidInputError(
            f"{name} must lie strictly between 0 and 1, got {p}",
            parameter=name,
            value=p,
        )
    return p


def check_probabilities(probs: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Verify every entry of probs lies strictly inside (0, 1).

    Scalars are promoted to a length-1 array.

    Raises:
        InvalidInputError: If probs is empty or any entry is outside (0, 1)
    """
    arr = np.atleast_1d(check_array(probs, name)).astype(np.float64)
    check_1d(arr, name)
    if arr.size == 0:
        raise InvalidInputError(
            f"{name}: at least one probability is required", parameter=name,
        )
    bad = ~((arr > 0.0) & (arr < 1.0))
    if np.any(bad):
        raise InvalidInputError(
            f"{name}: probabilities must lie strictly between 0 and 1, "
            f"got {arr[bad].tolist()}",
            parameter=name,
            value=arr[bad].tolist(),
        )
    return arr


def check_non_negative(value: Any, name: str) -> float:
    """
    Verify value is a finite real number >= 0.

    Raises:
        InvalidInputError: If value is negative, non-finite or non-numeric
    """
    checked = check_real(value, name)
    if checked < 0:
        raise InvalidInputError(
            f"{name} must be >= 0, got {checked}",
            parameter=name,
            value=value,
        )
    return checked


def check_positive(value: Any, name: str) -> float:
    """
    Verify value is a finite real number > 0.

    Raises:
        InvalidInputError: If value is <= 0, non-finite or non-numeric
    """
    checked = check_real(value, name)
    if checked <= 0:
        raise InvalidInputError(
            f"{name} must be > 0, got {checked}",
            parameter=name,
            value=value,
        )
    return checked


def check_real(value: Any, name: str) -> float:
    """
    Verify value is a finite real number and return it as float.

    Raises:
        InvalidInputError: If value is non-numeric, NaN or infinite
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise InvalidInputError(
            f"{name} must be a real number, got {value!r}",
            parameter=name,
            value=value,
        )
    value = float(value)
    if not np.isfinite(value):
        raise InvalidInputError(
            f"{name} must be finite, got {value}",
            parameter=name,
            value=value,
        )
    return value
