"""
Exception hierarchy for homerange.

All exceptions inherit from HomeRangeError to allow catching any
library-specific error. Every input problem is a ValidationError raised
before computation begins; the subclasses name the specific precondition
that failed so callers can react to it.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import Sequence


class HomeRangeError(Exception):
    """Base exception for all homerange errors."""
    pass


class ValidationError(HomeRangeError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class EmptyGroupError(ValidationError):
    """
    A required group has zero records.

    Attributes:
        label: The group label that was requested, or None for an
            unlabelled sample
    """

    def __init__(self, message: str, label: str | None = None):
        super().__init__(message)
        self.label = label


class InsufficientGroupsError(ValidationError):
    """
    A two-group comparison did not find exactly two distinct labels.

    Attributes:
        labels: The distinct labels actually present
        expected: Number of labels required (always 2 today)
    """

    def __init__(
        self,
        message: str,
        labels: Sequence[str] = (),
        expected: int = 2,
    ):
        super().__init__(message)
        self.labels = tuple(labels)
        self.expected = expected


class InsufficientSampleSizeError(ValidationError):
    """
    Too few records for a statistic that needs a sample variance.

    Attributes:
        n: Number of records available
        required: Minimum number of records required
        label: Group label, if the sample came from a Dataset group
    """

    def __init__(
        self,
        message: str,
        n: int,
        required: int = 2,
        label: str | None = None,
    ):
        super().__init__(message)
        self.n = n
        self.required = required
        self.label = label


class InvalidReplicateCountError(ValidationError):
    """
    Replicate count for a resampling procedure is below 1.

    Attributes:
        R: The rejected replicate count
    """

    def __init__(self, message: str, R: int):
        super().__init__(message)
        self.R = R
