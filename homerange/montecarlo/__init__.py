"""
homerange Monte Carlo methods.

Provides bootstrap resampling of a single sample with percentile and
normal-approximation intervals, and a two-group label-permutation test.

Usage:
    from homerange.montecarlo import bootstrap, boot_ci, permutation_test

    # Bootstrap
    result = bootstrap(values, R=10000, seed=42)
    ci_result = boot_ci(result, type="perc")

    # Permutation test
    result = permutation_test(dataset, "M", "F", R=10000, seed=42)
"""

from homerange.montecarlo.solvers import (
    bootstrap,
    bootstrap_group,
    boot_ci,
    permutation_test,
)
from homerange.montecarlo._common import ConfidenceInterval
from homerange.montecarlo._resample import resample_indices, shuffle_labels
from homerange.montecarlo.design import BootstrapDesign, PermutationDesign
from homerange.montecarlo.solution import BootstrapSolution, PermutationSolution

__all__ = [
    "bootstrap",
    "bootstrap_group",
    "boot_ci",
    "permutation_test",
    "resample_indices",
    "shuffle_labels",
    "ConfidenceInterval",
    "BootstrapDesign",
    "PermutationDesign",
    "BootstrapSolution",
    "PermutationSolution",
]
