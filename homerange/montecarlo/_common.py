"""
Common data structures for Monte Carlo methods.

BootParams and PermutationParams are the parameter payloads
wrapped by Result[P] and exposed through Solution classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


DEFAULT_BOOT_R = 10000
DEFAULT_PERM_R = 10000
DEFAULT_CONF_LEVEL = 0.95

VALID_ALTERNATIVES = ("two.sided", "less", "greater")
VALID_CI_TYPES = ("perc", "norm")

# Relative slack when comparing permuted statistics against the observed
# one, so floating-point ties count as "at least as extreme".
TIE_RTOL = 1e-12


@dataclass(frozen=True)
class ConfidenceInterval:
    """
    Bootstrap confidence interval.

    type is "perc" (empirical quantiles of the replicates) or "norm"
    (t0 +/- z * se).
    """
    lower: float
    upper: float
    type: str
    conf_level: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.lower, self.upper)

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper

    @property
    def width(self) -> float:
        return self.upper - self.lower

    @property
    def midpoint(self) -> float:
        return 0.5 * (self.lower + self.upper)


@dataclass(frozen=True)
class BootParams:
    """
    Parameter payload for bootstrap results.

    - t0: statistic on the original sample
    - t: bootstrap replicates, one per resample
    - bias: mean(t) - t0
    - se: sd(t) with ddof=1 (NaN when R == 1)
    - ci: confidence intervals keyed by type (populated by boot_ci)
    """
    t0: float
    t: NDArray[np.floating[Any]]               # shape (R,)
    R: int
    bias: float
    se: float
    ci: dict[str, ConfidenceInterval] | None = None
    ci_conf_level: float | None = None


@dataclass(frozen=True)
class PermutationParams:
    """
    Parameter payload for permutation test results.

    - observed_stat: mean(group_a) - mean(group_b) on the original labels
    - perm_stats: the same difference under R label shuffles
    - p_value: count of permuted stats at least as extreme, divided by R
    """
    observed_stat: float
    perm_stats: NDArray[np.floating[Any]]      # shape (R,)
    p_value: float
    R: int
    alternative: str                            # "two.sided" | "less" | "greater"
    group_a: str
    group_b: str
