"""
Library-wide defaults and tolerance tiers.

Every public function takes these as keyword defaults; nothing here is
read from files or the environment.
"""

from dataclasses import dataclass


# Hyndman & Fan type 7: linear interpolation between order statistics
DEFAULT_QUANTILE_TYPE = 7

DEFAULT_BINS = 30

DEFAULT_CONF_LEVEL = 0.95

# Probabilities reported by describe()
DEFAULT_SUMMARY_PROBS = (0.01, 0.05, 0.25, 0.5, 0.75, 0.95, 0.99)

# Fewer observations than this beyond a requested quantile triggers a warning
MIN_TAIL_OBSERVATIONS = 1


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Closed-form quantities (mean, sd, order statistics)
EXACT = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='exact',
    description='Deterministic arithmetic on a fixed sample',
)

# Monte Carlo estimate vs analytic value
MONTE_CARLO = ToleranceTier(
    rtol=0.3,
    atol=0.0,
    name='monte_carlo',
    description='Resampling estimate vs closed form, generous relative tolerance',
)
