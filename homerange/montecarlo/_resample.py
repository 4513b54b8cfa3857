"""
Resampling primitives.

Everything in the montecarlo subpackage is built from two draws:
resample_indices (with replacement, for the bootstrap) and
shuffle_labels (without replacement, for the permutation test). Both take
an explicit Generator; nothing here touches global random state.
"""

from __future__ import annotations

from typing import Union

import numpy as np
from numpy.typing import NDArray


SeedLike = Union[int, np.random.Generator, None]


def make_rng(seed: SeedLike) -> np.random.Generator:
    """
    Resolve a seed into a Generator.

    An existing Generator is returned unchanged, so callers that pass one
    in share its stream across calls.
    """
    return np.random.default_rng(seed)


def resample_indices(n: int, rng: np.random.Generator) -> NDArray[np.intp]:
    """Draw n indices uniformly from [0, n) with replacement."""
    return rng.choice(n, size=n, replace=True)


def shuffle_labels(labels: NDArray, rng: np.random.Generator) -> NDArray:
    """Return a full random permutation of the label column. Input is not modified."""
    return rng.permutation(labels)
