"""
Solution wrappers for Monte Carlo results.

ReplicateSolution and BootstrapSolution wrap Result[P] and provide
convenient accessors and R-style summary output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pysimstats.core.result import Result
from pysimstats import descriptive
from pysimstats.descriptive.solution import DescriptiveSolution
from pysimstats.montecarlo._common import BootParams, ReplicateParams

if TYPE_CHECKING:
    from pysimstats.montecarlo.design import BootstrapDesign, ReplicateDesign


@dataclass
class ReplicateSolution:
    """
    A completed trial collection.

    ``values`` holds one scalar per trial in call order and is read-only.
    Summaries are computed on demand and never modify it.
    """
    _result: Result[ReplicateParams]
    _design: 'ReplicateDesign'

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Trial results, shape (R,)."""
        return self._result.params.values

    @property
    def R(self) -> int:
        """Number of trials."""
        return self._result.params.R

    def __len__(self) -> int:
        return self.R

    # --- Summaries (delegate to pysimstats.descriptive) ---

    def describe(self, **kwargs) -> DescriptiveSolution:
        """Full summary of the collection; see descriptive.describe()."""
        return descriptive.describe(self.values, **kwargs)

    def quantile(self, probs, **kwargs):
        """Empirical quantile(s); see descriptive.quantile()."""
        return descriptive.quantile(self.values, probs, **kwargs)

    def sd(self) -> float:
        """Sample standard deviation of the trial results."""
        return descriptive.sd(self.values)

    # --- Metadata ---

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
        """Short description of the run."""
        lines = [
            "\nMONTE CARLO REPLICATION\n",
            f"Trial function: {self.info.get('trial')}",
            f"Number of trials: {self.R}",
        ]
        if self.timing is not None:
            lines.append(f"Elapsed: {self.timing['total_seconds']:.4g} s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"ReplicateSolution(R={self.R}, trial={self.info.get('trial')!r})"


@dataclass
class BootstrapSolution:
    """
    User-facing bootstrap results.

    Matches R's boot object output: t0, t, bias, SE, plus CI if computed.
    summary() produces R's print.boot format.
    """
    _result: Result[BootParams]
    _design: 'BootstrapDesign'

    # --- Core boot fields ---

    @property
    def t0(self) -> float:
        """Observed statistic on the original data."""
        return self._result.params.t0

    @property
    def t(self) -> NDArray[np.floating[Any]]:
        """Bootstrap replicates, shape (R,)."""
        return self._result.params.t

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Alias of t: the trial collection of bootstrap replicates."""
        return self._result.params.t

    @property
    def R(self) -> int:
        """Number of bootstrap replicates."""
        return self._result.params.R

    @property
    def bias(self) -> float:
        """Bootstrap bias estimate: mean(t) - t0."""
        return self._result.params.bias

    @property
    def se(self) -> float:
        """Bootstrap standard error: sd(t)."""
        return self._result.params.se

    @property
    def ci(self) -> dict[str, tuple[float, float]] | None:
        """Confidence intervals keyed by type, or None if not computed."""
        return self._result.params.ci

    @property
    def ci_conf_level(self) -> float | None:
        """Confidence level used for CI computation."""
        return self._result.params.ci_conf_level

    # --- Metadata ---

    @property
    def data(self) -> NDArray:
        """Original data."""
        return self._design.data

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

    def describe(self, **kwargs) -> DescriptiveSolution:
        """Full summary of the replicates; see descriptive.describe()."""
        return descriptive.describe(self.t, **kwargs)

    # --- Display ---

    def summary(self) -> str:
        """
        R-style print.boot output.

        Produces:
            ORDINARY NONPARAMETRIC BOOTSTRAP

            Bootstrap Statistics :
                     original           bias     std. error
                 t1*  5.12345        0.01234        0.56789
        """
        lines = ["\nORDINARY NONPARAMETRIC BOOTSTRAP\n"]
        lines.append(
            f"Call: boot(data, {self.info.get('statistic')}, R={self.R})"
        )
        lines.append("")
        lines.append("Bootstrap Statistics :")
        lines.append(
            f"{'':>8s} {'original':>14s} {'bias':>14s} {'std. error':>14s}"
        )
        lines.append(
            f"{'t1*':>8s} {self.t0:14.5f} {self.bias:14.5f} {self.se:14.5f}"
        )

        if self.ci is not None:
            lines.append("")
            conf_pct = int(round((self.ci_conf_level or 0.95) * 100))
            for ci_type, (lo, hi) in self.ci.items():
                lines.append(f"{conf_pct}% {ci_type} CI: ({lo:.5f}, {hi:.5f})")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"BootstrapSolution(R={self.R}, t0={self.t0:.4g}, "
            f"se={self.se:.4g}, backend={self.backend_name!r})"
        )
