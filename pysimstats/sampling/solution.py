"""
Solution types for random sampling.

SampleParams is the payload wrapped by Result[P]; SampleSolution is the
user-facing wrapper returned by resample() and draw().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pysimstats.core.result import Result
from pysimstats.sampling.distributions import get_family


@dataclass(frozen=True)
class SampleParams:
    """
    Parameter payload for a drawn sample.

    - values: the sample, read-only, shape (k,)
    - indices: positions in the source dataset (resample only), shape (k,)
    """
    values: NDArray[np.floating[Any]]
    indices: NDArray[np.integer[Any]] | None = None


@dataclass
class SampleSolution:
    """User-facing sample. Immutable once drawn."""
    _result: Result[SampleParams]

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """The drawn sample, shape (k,)."""
        return self._result.params.values

    @property
    def indices(self) -> NDArray[np.integer[Any]] | None:
        """Source positions for resampled data, None for parametric draws."""
        return self._result.params.indices

    @property
    def size(self) -> int:
        return int(self.values.shape[0])

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def reference(self):
        """
        Frozen scipy.stats distribution the sample was drawn from.

        Returns None for resampled data, whose source is an empirical
        dataset rather than a parametric family.
        """
        if self.info.get('method') != 'draw':
            return None
        family = get_family(self.info['family'])
        return family.frozen(**self.info['params'])

    @property
    def expected_mean(self) -> float | None:
        """Theoretical mean of the generating family (parametric draws only)."""
        ref = self.reference()
        return None if ref is None else float(ref.mean())

    @property
    def expected_sd(self) -> float | None:
        """Theoretical sd of the generating family (parametric draws only)."""
        ref = self.reference()
        return None if ref is None else float(ref.std())

    def __len__(self) -> int:
        return self.size

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self.values
        return self.values.astype(dtype)

    def summary(self) -> str:
        """Short description of how the sample was produced."""
        info = self.info
        if info.get('method') == 'resample':
            head = (
                f"Resample with replacement: k={self.size} from n={info['n']} "
                f"({info['n_unique']} distinct source rows)"
            )
        else:
            params = ", ".join(f"{k}={v:g}" for k, v in info['params'].items())
            head = f"Draw: {self.size} x {info['family']}({params})"
        lines = [
            head,
            f"Random source: {info['source']}",
            f"Sample mean: {np.mean(self.values):.6g}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SampleSolution(size={self.size}, "
            f"method={self.info.get('method')!r})"
        )
