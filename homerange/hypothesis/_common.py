"""
Common types for hypothesis testing.

Defines HTestParams, which maps to R's htest class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


VALID_ALTERNATIVES = ("two.sided", "less", "greater")


@dataclass(frozen=True)
class HTestParams:
    """
    Parameter payload for hypothesis tests.

    Attributes
    ----------
    statistic : float
        Test statistic value (NaN for constant data).
    statistic_name : str
        Name of the test statistic ("t").
    parameter : dict
        Distribution parameters, e.g. {"df": 4.0}.
    p_value : float
        p-value of the test.
    conf_int : ndarray
        Confidence interval for the difference in means, shape (2,).
    conf_level : float
        Confidence level (e.g. 0.95).
    estimate : dict
        Group means, e.g. {"mean of M": 12.0, "mean of F": 6.0}.
    null_value : dict
        Hypothesized value under H0, e.g. {"difference in means": 0}.
    alternative : str
        "two.sided", "less", or "greater".
    method : str
        Human-readable method name, e.g. " Two Sample t-test".
    data_name : str
        Description of the data, e.g. "M and F".
    """
    statistic: float
    statistic_name: str
    parameter: dict[str, float]
    p_value: float
    conf_int: NDArray[np.floating[Any]]
    conf_level: float
    estimate: dict[str, float]
    null_value: dict[str, float]
    alternative: str
    method: str
    data_name: str
