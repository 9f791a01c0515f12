"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pysimstats.core.result import Result

if TYPE_CHECKING:
    from pysimstats.descriptive.design import DescriptiveDesign


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for summary statistics.

    Fields are None when not requested. describe() populates all of them.
    """
    n: int
    mean: float | None = None
    sd: float | None = None
    sem: float | None = None
    minimum: float | None = None
    maximum: float | None = None

    # Quantiles: shape (n_probs,)
    quantiles: NDArray[np.floating[Any]] | None = None
    quantile_probs: NDArray[np.floating[Any]] | None = None
    quantile_type: int | None = None

    # Histogram: counts shape (bins,), edges shape (bins + 1,)
    hist_counts: NDArray[np.integer[Any]] | None = None
    hist_edges: NDArray[np.floating[Any]] | None = None


@dataclass
class DescriptiveSolution:
    """
    User-facing summary of a trial collection.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    The histogram fields are the hand-off to plotting code: counts and
    bin edges are all a renderer needs.
    """
    _result: Result[DescriptiveParams]
    _design: 'DescriptiveDesign'

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def mean(self) -> float | None:
        return self._result.params.mean

    @property
    def sd(self) -> float | None:
        """Sample standard deviation (n-1 denominator)."""
        return self._result.params.sd

    @property
    def sem(self) -> float | None:
        """Standard error of the mean, sd / sqrt(n)."""
        return self._result.params.sem

    @property
    def minimum(self) -> float | None:
        return self._result.params.minimum

    @property
    def maximum(self) -> float | None:
        return self._result.params.maximum

    @property
    def quantiles(self) -> NDArray[np.floating[Any]] | None:
        """Quantile values, aligned with quantile_probs."""
        return self._result.params.quantiles

    @property
    def quantile_probs(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.quantile_probs

    @property
    def quantile_type(self) -> int | None:
        return self._result.params.quantile_type

    @property
    def hist_counts(self) -> NDArray[np.integer[Any]] | None:
        return self._result.params.hist_counts

    @property
    def hist_edges(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.hist_edges

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """The summarized collection, read-only."""
        return self._design.values

    def quantile_at(self, p: float) -> float:
        """Look up a computed quantile by its probability."""
        probs = self.quantile_probs
        if probs is None:
            raise KeyError("no quantiles were computed")
        hits = np.flatnonzero(np.isclose(probs, p, rtol=0.0, atol=1e-12))
        if hits.size == 0:
            raise KeyError(f"quantile at p={p} was not computed")
        return float(self.quantiles[hits[0]])

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

    def summary(self) -> str:
        """
        Text summary of the collection.

        Produces:
            n = 5000
            mean = 7.6523   sd = 0.4261   se(mean) = 0.006026
            min = 6.4810    max = 9.6150

            Quantiles (type 7):
                  1%        5%       25% ...
        """
        def fmt(v):
            return "NA" if v is None or not np.isfinite(v) else f"{v:.6g}"

        lines = [f"n = {self.n}"]
        if self.mean is not None:
            lines.append(
                f"mean = {fmt(self.mean)}   sd = {fmt(self.sd)}   "
                f"se(mean) = {fmt(self.sem)}"
            )
        if self.minimum is not None:
            lines.append(f"min = {fmt(self.minimum)}   max = {fmt(self.maximum)}")

        if self.quantiles is not None:
            lines.append("")
            lines.append(f"Quantiles (type {self.quantile_type}):")
            labels = [f"{p * 100:g}%" for p in self.quantile_probs]
            lines.append("  " + " ".join(f"{lab:>10s}" for lab in labels))
            lines.append(
                "  " + " ".join(f"{q:10.5g}" for q in self.quantiles)
            )

        if self.hist_counts is not None:
            lines.append("")
            lines.append(f"Histogram: {len(self.hist_counts)} bins over "
                         f"[{self.hist_edges[0]:.5g}, {self.hist_edges[-1]:.5g}]")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"DescriptiveSolution(n={self.n}, backend={self.backend_name!r})"
