"""
Random source handling.

Every sampling operation takes an explicit ``rng`` argument instead of
touching numpy's legacy global state. Accepted forms:

    - np.random.Generator: used as-is (state advances in the caller's object)
    - int or np.random.SeedSequence: a new PCG64 generator is seeded from it
    - None: a new generator seeded from OS entropy (not reproducible)

Scope of the seed is therefore one call when an int is passed, and the
lifetime of the Generator object when a Generator is passed.
"""

from __future__ import annotations

import numbers
from typing import Union

import numpy as np

from pysimstats.core.exceptions import InvalidInputError

RandomSource = Union[np.random.Generator, np.random.SeedSequence, int, None]


def resolve_rng(rng: RandomSource, name: str = "rng") -> np.random.Generator:
    """
    Turn a seed-like value into a numpy Generator.

    Raises:
        InvalidInputError: If rng is a negative int or an unsupported type
            (including numpy's legacy RandomState).
    """
    if isinstance(rng, np.random.Generator):
        return rng
    if rng is None or isinstance(rng, np.random.SeedSequence):
        return np.random.default_rng(rng)
    if isinstance(rng, numbers.Integral) and not isinstance(rng, (bool, np.bool_)):
        if rng < 0:
            raise InvalidInputError(
                f"{name}: seed must be non-negative, got {rng}",
                parameter=name,
                value=rng,
            )
        return np.random.default_rng(int(rng))
    raise InvalidInputError(
        f"{name}: expected np.random.Generator, int seed or None, "
        f"got {type(rng).__name__}",
        parameter=name,
        value=rng,
    )


def describe_source(rng: RandomSource) -> str:
    """Short label recorded in Result.info for the random source used."""
    if isinstance(rng, np.random.Generator):
        return f"generator:{type(rng.bit_generator).__name__}"
    if rng is None:
        return "entropy"
    if isinstance(rng, np.random.SeedSequence):
        return "seed_sequence"
    return f"seed:{rng}"
