"""
Input validation utilities for homerange.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from homerange.core.exceptions import (
    DimensionError,
    EmptyGroupError,
    InsufficientSampleSizeError,
    InvalidReplicateCountError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (mixed types) or any
    other non-numeric dtype.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray, name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_consistent_length(
    *arrays: NDArray,
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_not_empty(
    array: NDArray,
    name: str,
    label: str | None = None,
) -> None:
    """
    Verify a sample has at least one record.

    Raises:
        EmptyGroupError: If the sample is empty
    """
    if array.shape[0] == 0:
        where = f" (group {label!r})" if label is not None else ""
        raise EmptyGroupError(f"{name}{where}: has no records", label=label)


def check_min_samples(
    array: NDArray,
    min_samples: int,
    name: str,
    label: str | None = None,
) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        InsufficientSampleSizeError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        where = f" (group {label!r})" if label is not None else ""
        raise InsufficientSampleSizeError(
            f"{name}{where}: requires at least {min_samples} samples, got {n}",
            n=n,
            required=min_samples,
            label=label,
        )


def check_replicates(R: int, name: str = "R") -> int:
    """
    Verify a resampling replicate count is an integer >= 1.

    Raises:
        InvalidReplicateCountError: If R < 1
        ValidationError: If R is not an integer
    """
    if isinstance(R, bool) or not isinstance(R, (int, np.integer)):
        raise ValidationError(f"{name} must be an integer, got {type(R).__name__}")
    if R < 1:
        raise InvalidReplicateCountError(f"{name} must be >= 1, got {R}", R=int(R))
    return int(R)


def check_conf_level(conf_level: float) -> float:
    """
    Verify a confidence level lies strictly inside (0, 1).

    Raises:
        ValidationError: If conf_level is outside (0, 1)
    """
    if not (0.0 < conf_level < 1.0):
        raise ValidationError(
            f"conf_level must be in (0, 1), got {conf_level}"
        )
    return float(conf_level)
