"""
Hypothesis testing module.

Public API:
    t_test(x, y)                        - Two-sample t-test (pooled or Welch)
    t_test_groups(dataset, "M", "F")    - Same, on two groups of a Dataset
"""

from homerange.hypothesis.solvers import t_test, t_test_groups
from homerange.hypothesis.design import HypothesisDesign
from homerange.hypothesis._common import HTestParams
from homerange.hypothesis.solution import HTestSolution

__all__ = [
    "t_test",
    "t_test_groups",
    "HypothesisDesign",
    "HTestParams",
    "HTestSolution",
]
