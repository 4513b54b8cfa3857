"""
Bootstrap confidence interval computation.

Two methods:
- perc: percentile method, empirical alpha/2 and 1-alpha/2 quantiles
- norm: normal approximation, t0 +/- z_{1-alpha/2} * se
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from homerange.core.exceptions import ValidationError
from homerange.montecarlo._common import ConfidenceInterval, VALID_CI_TYPES


def compute_ci(
    t0: float,
    t: NDArray,
    se: float,
    types: tuple[str, ...],
    conf_level: float,
) -> dict[str, ConfidenceInterval]:
    """
    Compute bootstrap confidence intervals.

    Args:
        t0: Statistic on the original sample.
        t: Bootstrap replicates, shape (R,).
        se: Bootstrap standard error.
        types: CI types to compute.
        conf_level: Confidence level (e.g., 0.95).

    Returns:
        Dict mapping CI type name to ConfidenceInterval.
    """
    alpha = 1.0 - conf_level
    ci_dict: dict[str, ConfidenceInterval] = {}

    for ci_type in types:
        if ci_type == "perc":
            lo, hi = _ci_percentile(t, alpha)
        elif ci_type == "norm":
            lo, hi = _ci_normal(t0, se, alpha)
        else:
            raise ValidationError(
                f"Unknown CI type: {ci_type!r}. Use one of {VALID_CI_TYPES}"
            )
        ci_dict[ci_type] = ConfidenceInterval(
            lower=lo, upper=hi, type=ci_type, conf_level=conf_level,
        )

    return ci_dict


def _ci_percentile(t: NDArray, alpha: float) -> tuple[float, float]:
    """
    Percentile CI: [Q(alpha/2), Q(1-alpha/2)] of the replicates.

    Linear interpolation between order statistics (R's quantile type 7).
    """
    lo, hi = np.quantile(t, [alpha / 2.0, 1.0 - alpha / 2.0])
    return float(lo), float(hi)


def _ci_normal(t0: float, se: float, alpha: float) -> tuple[float, float]:
    """
    Normal approximation CI centred on the point estimate.

    CI = [t0 - z_{1-alpha/2} * se, t0 + z_{1-alpha/2} * se]
    """
    z = sp_stats.norm.ppf(1.0 - alpha / 2.0)
    return float(t0 - z * se), float(t0 + z * se)
