"""
Parametric distribution families for draw().

Each family names its parameters, validates their domain, draws from a
numpy Generator, and maps to the equivalent frozen scipy.stats
distribution so results can report the theoretical mean and sd.

    family        parameters          domain
    -----------   -----------------   ------------------------------
    normal        mean, sd            sd >= 0
    uniform       low, high           low < high
    exponential   rate                rate > 0
    lognormal     meanlog, sdlog      sdlog >= 0
    poisson       lam                 lam >= 0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pysimstats.core.exceptions import InvalidInputError
from pysimstats.core.validation import (
    check_non_negative,
    check_positive,
    check_real,
)


@dataclass(frozen=True)
class Family:
    """
    A named parametric family.

    Attributes:
        name: Family identifier accepted by draw().
        params: Parameter names in canonical order.
        defaults: Default values for parameters that may be omitted.
        validate: fn(**params) -> dict of checked float parameters.
        sample: fn(rng, size, **params) -> NDArray of length size.
        frozen: fn(**params) -> frozen scipy.stats distribution.
    """
    name: str
    params: tuple[str, ...]
    defaults: dict[str, float]
    validate: Callable[..., dict[str, float]]
    sample: Callable[..., NDArray]
    frozen: Callable[..., Any]


def _validate_normal(mean, sd):
    return {
        'mean': check_real(mean, 'mean'),
        'sd': check_non_negative(sd, 'sd'),
    }


def _validate_uniform(low, high):
    low = check_real(low, 'low')
    high = check_real(high, 'high')
    if not low < high:
        raise InvalidInputError(
            f"uniform requires low < high, got low={low}, high={high}",
            parameter='high',
            value=high,
        )
    return {'low': low, 'high': high}


def _validate_exponential(rate):
    return {'rate': check_positive(rate, 'rate')}


def _validate_lognormal(meanlog, sdlog):
    return {
        'meanlog': check_real(meanlog, 'meanlog'),
        'sdlog': check_non_negative(sdlog, 'sdlog'),
    }


def _validate_poisson(lam):
    return {'lam': check_non_negative(lam, 'lam')}


FAMILIES: dict[str, Family] = {
    'normal': Family(
        name='normal',
        params=('mean', 'sd'),
        defaults={'mean': 0.0, 'sd': 1.0},
        validate=_validate_normal,
        sample=lambda rng, size, mean, sd: rng.normal(mean, sd, size=size),
        frozen=lambda mean, sd: sp_stats.norm(loc=mean, scale=sd),
    ),
    'uniform': Family(
        name='uniform',
        params=('low', 'high'),
        defaults={'low': 0.0, 'high': 1.0},
        validate=_validate_uniform,
        sample=lambda rng, size, low, high: rng.uniform(low, high, size=size),
        frozen=lambda low, high: sp_stats.uniform(loc=low, scale=high - low),
    ),
    'exponential': Family(
        name='exponential',
        params=('rate',),
        defaults={'rate': 1.0},
        validate=_validate_exponential,
        sample=lambda rng, size, rate: rng.exponential(1.0 / rate, size=size),
        frozen=lambda rate: sp_stats.expon(scale=1.0 / rate),
    ),
    'lognormal': Family(
        name='lognormal',
        params=('meanlog', 'sdlog'),
        defaults={'meanlog': 0.0, 'sdlog': 1.0},
        validate=_validate_lognormal,
        sample=lambda rng, size, meanlog, sdlog: rng.lognormal(
            meanlog, sdlog, size=size
        ),
        frozen=lambda meanlog, sdlog: sp_stats.lognorm(
            s=sdlog, scale=np.exp(meanlog)
        ),
    ),
    'poisson': Family(
        name='poisson',
        params=('lam',),
        defaults={'lam': 1.0},
        validate=_validate_poisson,
        sample=lambda rng, size, lam: rng.poisson(lam, size=size).astype(
            np.float64
        ),
        frozen=lambda lam: sp_stats.poisson(mu=lam),
    ),
}


def get_family(name: str) -> Family:
    """Look up a family by name."""
    try:
        return FAMILIES[name]
    except (KeyError, TypeError):
        raise InvalidInputError(
            f"Unknown distribution family: {name!r}. "
            f"Must be one of {sorted(FAMILIES)}.",
            parameter='family',
            value=name,
        ) from None


def resolve_params(family: Family, params: dict[str, Any]) -> dict[str, float]:
    """
    Fill defaults, reject unknown names, and validate parameter domains.

    Returns:
        Validated parameters in the family's canonical order.
    """
    unknown = set(params) - set(family.params)
    if unknown:
        raise InvalidInputError(
            f"{family.name}: unknown parameter(s) {sorted(unknown)}; "
            f"expected {list(family.params)}",
            parameter=sorted(unknown)[0],
        )
    merged = {**family.defaults, **params}
    return family.validate(**{k: merged[k] for k in family.params})
