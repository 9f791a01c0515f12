"""
CPU backend for summary statistics.
"""

from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import NDArray

from pysimstats.core.defaults import MIN_TAIL_OBSERVATIONS
from pysimstats.core.result import Result
from pysimstats.core.compute.timing import Timer
from pysimstats.descriptive.design import DescriptiveDesign
from pysimstats.descriptive.solution import DescriptiveParams
from pysimstats.descriptive._moments import sample_sd
from pysimstats.descriptive._quantile_types import hf_quantile


class CPUDescriptiveBackend:
    """CPU reference backend for summary statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(
        self,
        design: DescriptiveDesign,
        *,
        compute: set[str],
        quantile_probs: NDArray | None = None,
        quantile_type: int = 7,
        bins: int = 30,
    ) -> Result[DescriptiveParams]:
        """
        Compute requested summary statistics.

        Parameters
        ----------
        design : DescriptiveDesign
        compute : set of str
            Any of 'moments' (mean, sd, sem), 'range', 'quantiles',
            'histogram'.
        quantile_probs : NDArray or None
            Probabilities, already validated to lie in (0, 1).
        quantile_type : int
            Hyndman & Fan type 1-9.
        bins : int
            Number of equal-width histogram bins.
        """
        timer = Timer()
        timer.start()

        x = design.values
        n = design.n
        warnings_list: list[str] = []

        mean = sd = sem = None
        minimum = maximum = None
        quantiles = None
        counts = edges = None

        if 'moments' in compute:
            with timer.section('moments'):
                mean = float(np.mean(x))
                if n >= 2:
                    sd = sample_sd(x)
                    sem = sd / np.sqrt(n)
                else:
                    sd = sem = float('nan')
                    warnings_list.append(
                        "standard deviation undefined for a single value"
                    )

        if 'range' in compute:
            minimum = float(design.sorted[0])
            maximum = float(design.sorted[-1])

        if 'quantiles' in compute:
            with timer.section('quantiles'):
                quantiles = hf_quantile(design.sorted, quantile_probs, quantile_type)
                quantiles.setflags(write=False)
            tail = float(np.min(np.minimum(quantile_probs, 1.0 - quantile_probs)))
            if n * tail < MIN_TAIL_OBSERVATIONS:
                warnings_list.append(
                    f"only {n * tail:.3g} observations beyond the most extreme "
                    f"requested quantile; tail estimate is unstable"
                )

        if 'histogram' in compute:
            with timer.section('histogram'):
                counts, edges = np.histogram(x, bins=bins)
                counts.setflags(write=False)
                edges.setflags(write=False)

        timer.stop()

        for msg in warnings_list:
            warnings.warn(msg, RuntimeWarning, stacklevel=3)

        params = DescriptiveParams(
            n=n,
            mean=mean,
            sd=sd,
            sem=sem,
            minimum=minimum,
            maximum=maximum,
            quantiles=quantiles,
            quantile_probs=quantile_probs,
            quantile_type=quantile_type if quantiles is not None else None,
            hist_counts=counts,
            hist_edges=edges,
        )

        return Result(
            params=params,
            info={'n': n, 'compute': sorted(compute)},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
