"""
CPU backends for random sampling.

CPUResampleBackend: uniform sampling with replacement from a dataset.
CPUDrawBackend: independent draws from a parametric family.
"""

from __future__ import annotations

import warnings

import numpy as np

from pysimstats.core.result import Result
from pysimstats.core.compute.timing import Timer
from pysimstats.core.random import describe_source, resolve_rng
from pysimstats.sampling.design import DrawDesign, ResampleDesign
from pysimstats.sampling.distributions import get_family
from pysimstats.sampling.solution import SampleParams


class CPUResampleBackend:
    """CPU backend for sampling with replacement."""

    @property
    def name(self) -> str:
        return 'cpu_resample'

    def solve(self, design: ResampleDesign) -> Result[SampleParams]:
        """Draw design.size indices uniformly from range(n) and gather."""
        timer = Timer()
        timer.start()

        rng = resolve_rng(design.rng)
        n = design.n
        warnings_list: list[str] = []

        if n == 1:
            msg = "resampling from a single observation always returns it"
            warnings_list.append(msg)
            warnings.warn(msg, RuntimeWarning, stacklevel=3)

        with timer.section('draw_indices'):
            indices = rng.integers(0, n, size=design.size)

        with timer.section('gather'):
            values = design.data[indices]

        values.setflags(write=False)
        indices.setflags(write=False)

        timer.stop()

        return Result(
            params=SampleParams(values=values, indices=indices),
            info={
                'method': 'resample',
                'n': n,
                'size': design.size,
                'n_unique': int(np.unique(indices).size),
                'source': describe_source(design.rng),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


class CPUDrawBackend:
    """CPU backend for parametric sampling."""

    @property
    def name(self) -> str:
        return 'cpu_draw'

    def solve(self, design: DrawDesign) -> Result[SampleParams]:
        """Draw design.size values from the design's family."""
        timer = Timer()
        timer.start()

        rng = resolve_rng(design.rng)
        family = get_family(design.family)

        with timer.section('draw'):
            values = np.asarray(
                family.sample(rng, design.size, **design.params),
                dtype=np.float64,
            )

        values.setflags(write=False)

        timer.stop()

        return Result(
            params=SampleParams(values=values, indices=None),
            info={
                'method': 'draw',
                'family': design.family,
                'params': dict(design.params),
                'size': design.size,
                'source': describe_source(design.rng),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
