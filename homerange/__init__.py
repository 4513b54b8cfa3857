"""
homerange: resampling inference for spider monkey home-range sizes.

Compares kernel95 home-range areas between two groups (male and female)
with bootstrap confidence intervals, a label-permutation test and a
pooled two-sample t-test.

Submodules:
    core: Dataset, Result envelope, exceptions, validation
    descriptive: Per-group summary statistics
    montecarlo: Bootstrap and permutation test
    hypothesis: Two-sample t-test
    analysis: End-to-end two-group comparison
"""

__version__ = "0.1.0"

from homerange.core import (
    Dataset,
    HomeRangeError,
    ValidationError,
    EmptyGroupError,
    InsufficientGroupsError,
    InsufficientSampleSizeError,
    InvalidReplicateCountError,
)
from homerange import descriptive
from homerange import montecarlo
from homerange import hypothesis
from homerange.analysis import GroupComparison, compare_groups

__all__ = [
    "__version__",
    "Dataset",
    "HomeRangeError",
    "ValidationError",
    "EmptyGroupError",
    "InsufficientGroupsError",
    "InsufficientSampleSizeError",
    "InvalidReplicateCountError",
    "descriptive",
    "montecarlo",
    "hypothesis",
    "GroupComparison",
    "compare_groups",
]
