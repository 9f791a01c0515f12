"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def sample32():
    """Fixed 32-point sample used by the bootstrap scenarios."""
    gen = np.random.default_rng(2024)
    return gen.normal(loc=10.0, scale=2.0, size=32)
