"""
Solver dispatch for Monte Carlo methods.

replicate() is the repetition driver; bootstrap() and simulate_maxima()
are the two illustrative experiments built on resampling and parametric
draws; boot_ci() adds confidence intervals to a bootstrap result.
"""

from __future__ import annotations

import dataclasses
import warnings
from typing import Any, Callable, Sequence

import numpy as np
from numpy.typing import ArrayLike
from scipy import stats as sp_stats

from pysimstats.core.defaults import DEFAULT_CONF_LEVEL
from pysimstats.core.exceptions import InvalidInputError
from pysimstats.core.random import RandomSource, resolve_rng
from pysimstats.core.validation import (
    check_non_negative,
    check_positive_int,
    check_probability,
    check_real,
)
from pysimstats.descriptive import sem
from pysimstats.montecarlo._ci import compute_ci
from pysimstats.montecarlo.backends.cpu import (
    CPUBootstrapBackend,
    CPUReplicateBackend,
)
from pysimstats.montecarlo.design import NO_DATA, BootstrapDesign, ReplicateDesign
from pysimstats.montecarlo.solution import BootstrapSolution, ReplicateSolution
from pysimstats.sampling import draw
from pysimstats.sampling.design import DrawDesign


def replicate(
    trial: Callable[..., Any],
    R: int,
    *,
    data: Any = NO_DATA,
) -> ReplicateSolution:
    """
    Call a trial function R times and collect its scalar results.

    Parameters
    ----------
    trial : callable
        ``trial()`` returning one scalar, or ``trial(data)`` when
        ``data`` is given. Randomness should come from a Generator the
        trial closes over.
    R : int
        Number of repetitions, a positive integer. Checked before the
        first call.
    data : optional
        Passed unchanged to every call.

    Returns
    -------
    ReplicateSolution whose ``values`` has length exactly R, in call order.

    Raises
    ------
    InvalidInputError
        If R is not a positive integer, trial is not callable, or a trial
        returns something other than a scalar.
    Exception
        Whatever the trial function raises. The first failure aborts the
        run; no partial collection is returned.

    Examples
    --------
    >>> gen = np.random.default_rng(1)
    >>> res = replicate(lambda: gen.normal(size=150).max(), 5000)
    >>> len(res.values)
    5000
    """
    design = ReplicateDesign.for_replicate(trial, R, data=data)
    result = CPUReplicateBackend().solve(design)
    return ReplicateSolution(_result=result, _design=design)


def simulate_maxima(
    size: int = 150,
    R: int = 5000,
    *,
    mean: float = 5.0,
    sd: float = 1.0,
    rng: RandomSource = None,
) -> ReplicateSolution:
    """
    Empirical distribution of the maximum of a normal sample.

    Each trial draws ``size`` values from Normal(mean, sd) and keeps the
    largest; this is repeated R times.

    Parameters
    ----------
    size : int
        Sample size per trial.
    R : int
        Number of trials.
    mean, sd : float
        Normal parameters; sd must be >= 0.
    rng : np.random.Generator, int or None
        Random source shared by all trials. The same int seed gives a
        bit-identical collection.

    Returns
    -------
    ReplicateSolution of R maxima.

    See Also
    --------
    normal_max_quantile : closed-form quantiles of the same distribution.
    """
    # validate everything before the first trial runs
    params = DrawDesign.for_draw('normal', size, mean=mean, sd=sd).params
    R = check_positive_int(R, 'R')
    gen = resolve_rng(rng)

    def normal_max():
        return float(np.max(draw('normal', size, rng=gen, **params).values))

    return replicate(normal_max, R)


def normal_max_quantile(
    p: float,
    size: int,
    *,
    mean: float = 0.0,
    sd: float = 1.0,
) -> float:
    """
    Quantile of the maximum of ``size`` iid Normal(mean, sd) draws.

    P(max <= x) = Phi((x - mean) / sd) ** size, so the p-quantile is
    mean + sd * Phi^{-1}(p ** (1 / size)).
    """
    p = check_probability(p, 'p')
    size = check_positive_int(size, 'size')
    mean = check_real(mean, 'mean')
    sd = check_non_negative(sd, 'sd')
    return mean + sd * float(sp_stats.norm.ppf(p ** (1.0 / size)))


def bootstrap(
    data: ArrayLike,
    statistic: Callable[[np.ndarray], Any],
    R: int = 999,
    *,
    rng: RandomSource = None,
) -> BootstrapSolution:
    """
    Ordinary nonparametric bootstrap of a scalar statistic.

    Parameters
    ----------
    data : array-like
        1D sample, at least one finite observation.
    statistic : callable
        fn(sample) -> scalar. Called once on ``data`` (giving t0) and once
        per replicate on a same-size resample with replacement.
    R : int
        Number of bootstrap replicates.
    rng : np.random.Generator, int or None
        Random source.

    Returns
    -------
    BootstrapSolution with t0, t (shape (R,)), bias and se.
    """
    design = BootstrapDesign.for_bootstrap(data, statistic, R, rng=rng)
    result = CPUBootstrapBackend().solve(design)
    return BootstrapSolution(_result=result, _design=design)


def bootstrap_mean(
    data: ArrayLike,
    R: int = 2500,
    *,
    rng: RandomSource = None,
) -> BootstrapSolution:
    """
    Bootstrap sampling distribution of the mean.

    Its ``se`` approximates standard_error(data) for moderate n.
    """
    return bootstrap(data, np.mean, R, rng=rng)


def standard_error(data: ArrayLike) -> float:
    """Analytic standard error of the mean, sd(data) / sqrt(n)."""
    return sem(data)


def boot_ci(
    boot_out: BootstrapSolution,
    conf_level: float = DEFAULT_CONF_LEVEL,
    type: str | Sequence[str] = "perc",
) -> BootstrapSolution:
    """
    Bootstrap confidence intervals.

    Parameters
    ----------
    boot_out : BootstrapSolution
        Result of bootstrap() or bootstrap_mean().
    conf_level : float
        Confidence level in (0, 1).
    type : str or sequence of str
        "perc", "basic", "normal", or "all".

    Returns
    -------
    A new BootstrapSolution with ``ci`` populated; boot_out is unchanged.
    """
    conf_level = check_probability(conf_level, 'conf_level')

    if isinstance(type, str):
        types = ["normal", "basic", "perc"] if type == "all" else [type]
    else:
        types = list(type)

    if boot_out.R < 2:
        raise InvalidInputError(
            f"confidence intervals need R >= 2, got R={boot_out.R}",
            parameter='R',
            value=boot_out.R,
        )

    ci = compute_ci(boot_out.t0, boot_out.t, types, conf_level)

    result = boot_out._result
    new_warnings = list(result.warnings)
    alpha = 1.0 - conf_level
    if boot_out.R * alpha / 2.0 < 5:
        msg = (
            f"only {boot_out.R * alpha / 2.0:.3g} replicates per tail; "
            f"increase R for stable interval endpoints"
        )
        new_warnings.append(msg)
        warnings.warn(msg, RuntimeWarning, stacklevel=2)

    new_params = dataclasses.replace(
        result.params, ci=ci, ci_conf_level=conf_level,
    )
    new_result = dataclasses.replace(
        result, params=new_params, warnings=tuple(new_warnings),
    )
    return BootstrapSolution(_result=new_result, _design=boot_out._design)
