"""
Core infrastructure for homerange.

Shared abstractions used by the descriptive, montecarlo and hypothesis
subpackages.

Key components:
    dataset: Dataset of (group label, value) records
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing
"""

from homerange.core.dataset import Dataset
from homerange.core.result import Result
from homerange.core.exceptions import (
    HomeRangeError,
    ValidationError,
    DimensionError,
    EmptyGroupError,
    InsufficientGroupsError,
    InsufficientSampleSizeError,
    InvalidReplicateCountError,
)

__all__ = [
    # Data
    "Dataset",
    # Result
    "Result",
    # Exceptions
    "HomeRangeError",
    "ValidationError",
    "DimensionError",
    "EmptyGroupError",
    "InsufficientGroupsError",
    "InsufficientSampleSizeError",
    "InvalidReplicateCountError",
]
