"""
CPU backends for the repetition driver and the bootstrap.

CPUReplicateBackend: calls a trial function R times, collecting scalars.
CPUBootstrapBackend: resamples the data R times and applies a statistic.
"""

from __future__ import annotations

import warnings
from typing import Any, Callable

import numpy as np

from pysimstats.core.exceptions import InvalidInputError
from pysimstats.core.result import Result
from pysimstats.core.compute.timing import Timer
from pysimstats.core.random import describe_source, resolve_rng
from pysimstats.descriptive._moments import sample_sd
from pysimstats.montecarlo._common import BootParams, ReplicateParams
from pysimstats.montecarlo.design import BootstrapDesign, ReplicateDesign
from pysimstats.sampling import resample


def as_scalar(out: Any, where: str) -> float:
    """Convert one trial output to float, rejecting anything but a scalar."""
    try:
        arr = np.asarray(out, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(
            f"{where} returned a non-numeric value {out!r}",
            parameter='trial',
            value=out,
        ) from e
    if arr.size != 1:
        raise InvalidInputError(
            f"{where} must return a scalar, got shape {arr.shape}",
            parameter='trial',
            value=out,
        )
    return float(arr.reshape(()))


class CPUReplicateBackend:
    """
    CPU backend for the repetition driver.

    Purely mechanical: no aggregation happens here. The first exception
    raised by the trial function propagates and remaining repetitions
    are not run.
    """

    @property
    def name(self) -> str:
        return 'cpu_replicate'

    def solve(self, design: ReplicateDesign) -> Result[ReplicateParams]:
        """Run design.R trials and return Result[ReplicateParams]."""
        timer = Timer()
        timer.start()

        R = design.R
        trial: Callable = design.trial
        values = np.empty(R, dtype=np.float64)

        with timer.section('trials'):
            if design.takes_data:
                data = design.data
                for b in range(R):
                    values[b] = as_scalar(trial(data), f"trial {b}")
            else:
                for b in range(R):
                    values[b] = as_scalar(trial(), f"trial {b}")

        values.setflags(write=False)
        timer.stop()

        warnings_list: list[str] = []
        n_bad = int(np.sum(~np.isfinite(values)))
        if n_bad:
            msg = f"{n_bad} of {R} trials returned NaN or Inf"
            warnings_list.append(msg)
            warnings.warn(msg, RuntimeWarning, stacklevel=3)

        return Result(
            params=ReplicateParams(values=values, R=R),
            info={
                'R': R,
                'trial': getattr(trial, '__name__', type(trial).__name__),
                'takes_data': design.takes_data,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


class CPUBootstrapBackend:
    """
    CPU backend for ordinary nonparametric bootstrap.

    Each replicate is resample(data) with k = n followed by the statistic.
    """

    @property
    def name(self) -> str:
        return 'cpu_bootstrap'

    def solve(self, design: BootstrapDesign) -> Result[BootParams]:
        """Run bootstrap and return Result[BootParams]."""
        timer = Timer()
        timer.start()

        data = design.data
        statistic = design.statistic
        R = design.R
        n = data.shape[0]
        rng = resolve_rng(design.rng)
        warnings_list: list[str] = []

        if n == 1:
            warnings_list.append(
                "bootstrap of a single observation has zero variability"
            )

        with timer.section('t0_computation'):
            t0 = as_scalar(statistic(data), "statistic")

        t = np.empty(R, dtype=np.float64)
        with timer.section('bootstrap_replicates'):
            with warnings.catch_warnings():
                # the n == 1 case is reported once above, not per replicate
                warnings.filterwarnings(
                    'ignore', message='resampling from a single observation',
                )
                for b in range(R):
                    sample = resample(data, rng=rng).values
                    t[b] = as_scalar(statistic(sample), f"statistic (replicate {b})")

        with timer.section('summary_statistics'):
            bias = float(np.mean(t) - t0)
            se = sample_sd(t) if R > 1 else float('nan')

        if R == 1:
            warnings_list.append("standard error undefined for R=1")

        t.setflags(write=False)
        timer.stop()

        for msg in warnings_list:
            warnings.warn(msg, RuntimeWarning, stacklevel=3)

        return Result(
            params=BootParams(t0=t0, t=t, R=R, bias=bias, se=se),
            info={
                'sim': 'ordinary',
                'n': n,
                'statistic': getattr(statistic, '__name__', type(statistic).__name__),
                'source': describe_source(design.rng),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
