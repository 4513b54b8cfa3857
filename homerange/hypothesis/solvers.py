"""
Solver dispatch for hypothesis tests.

Provides t_test() for raw samples and t_test_groups() for two groups of
a Dataset. Used to cross-check the permutation test analytically.
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from homerange.core.dataset import Dataset
from homerange.hypothesis.design import HypothesisDesign
from homerange.hypothesis.solution import HTestSolution
from homerange.hypothesis.backends.cpu import CPUHypothesisBackend


Alternative = Literal["two.sided", "less", "greater"]


def t_test(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    alternative: Alternative = "two.sided",
    mu: float = 0.0,
    var_equal: bool = True,
    conf_level: float = 0.95,
) -> HTestSolution:
    """
    Two-sample t-test. Matches R t.test(x, y, var.equal=TRUE) by default.

    Parameters
    ----------
    x, y : array-like
        The two independent samples, each with at least 2 values.
        x may instead be a prebuilt HypothesisDesign.
    alternative : str
        "two.sided" (default), "less", or "greater".
    mu : float
        Hypothesized difference in means. Default 0.
    var_equal : bool
        True (default) pools the variances with df = n_x + n_y - 2.
        False uses Welch's approximation.
    conf_level : float
        Confidence level for the interval. Default 0.95.

    Returns
    -------
    HTestSolution
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        if y is None:
            raise TypeError("t_test() requires both x and y samples")
        design = HypothesisDesign.for_t_test(
            x, y,
            mu=mu,
            var_equal=var_equal,
            alternative=alternative,
            conf_level=conf_level,
        )

    result = CPUHypothesisBackend().solve(design)
    return HTestSolution(_result=result, _design=design)


def t_test_groups(
    dataset: Dataset,
    group_a: str,
    group_b: str,
    *,
    alternative: Alternative = "two.sided",
    mu: float = 0.0,
    var_equal: bool = True,
    conf_level: float = 0.95,
) -> HTestSolution:
    """t-test of mean(group_a) - mean(group_b) on two groups of a Dataset."""
    design = HypothesisDesign.for_groups(
        dataset, group_a, group_b,
        mu=mu,
        var_equal=var_equal,
        alternative=alternative,
        conf_level=conf_level,
    )
    return t_test(design)
