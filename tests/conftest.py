"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from homerange import Dataset


def normal_scores(n, loc=0.0, scale=1.0):
    """Evenly spaced normal quantiles: a deterministic Gaussian-shaped sample."""
    return loc + scale * sp_stats.norm.ppf((np.arange(n) + 0.5) / n)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def separated_dataset():
    """Three males and three females with clearly separated means (12 vs 6)."""
    return Dataset.from_records(
        [("M", 10.0), ("M", 12.0), ("M", 14.0),
         ("F", 5.0), ("F", 6.0), ("F", 7.0)]
    )


@pytest.fixture
def identical_dataset():
    """Every record has the same value, so the groups cannot differ."""
    return Dataset.from_records(
        [("M", 3.0)] * 4 + [("F", 3.0)] * 5
    )


@pytest.fixture
def gaussian_dataset():
    """40 + 40 normal-shaped values, sd 15, male mean 5 above female."""
    males = normal_scores(40, 105.0, 15.0)
    females = normal_scores(40, 100.0, 15.0)
    return Dataset.from_arrays(
        groups=["M"] * 40 + ["F"] * 40,
        values=np.concatenate([males, females]),
    )


@pytest.fixture
def null_dataset():
    """Both groups hold the same 30 normal-shaped values."""
    values = normal_scores(30, 100.0, 15.0)
    return Dataset.from_arrays(
        groups=["M"] * 30 + ["F"] * 30,
        values=np.concatenate([values, values[::-1]]),
    )
