"""
Design classes for Monte Carlo methods.

BootstrapDesign and PermutationDesign encapsulate all inputs needed
by backends to perform resampling. Immutable, validated at construction,
so every precondition failure surfaces before any replicate is drawn.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from homerange.core.dataset import Dataset
from homerange.core.exceptions import (
    EmptyGroupError,
    InsufficientGroupsError,
    ValidationError,
)
from homerange.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_not_empty,
    check_replicates,
)
from homerange.montecarlo._common import (
    DEFAULT_BOOT_R,
    DEFAULT_PERM_R,
    VALID_ALTERNATIVES,
)
from homerange.montecarlo._resample import SeedLike


@dataclass(frozen=True)
class BootstrapDesign:
    """
    Frozen design for bootstrap resampling of a single sample.

    Attributes:
        data: Sample values, shape (n,).
        statistic: fn(sample) -> float. Defaults to the mean.
        R: Number of bootstrap replicates.
        seed: int, Generator, or None.
        label: Group label the sample came from, if any.
    """
    data: NDArray[np.floating[Any]]
    statistic: Callable
    R: int
    seed: SeedLike
    label: str | None

    @classmethod
    def for_bootstrap(
        cls,
        data: ArrayLike,
        R: int = DEFAULT_BOOT_R,
        *,
        statistic: Callable | None = None,
        seed: SeedLike = None,
        label: str | None = None,
    ) -> BootstrapDesign:
        """
        Create a bootstrap design with validation.

        Args:
            data: 1D array-like of sample values.
            R: Number of bootstrap replicates. Must be >= 1.
            statistic: fn(sample) -> float. Default np.mean.
            seed: Random seed or an existing Generator.
            label: Group label, used in error messages and summaries.

        Raises:
            EmptyGroupError: If data has no values.
            InvalidReplicateCountError: If R < 1.
            ValidationError: If data is non-numeric or non-finite.
        """
        data_arr = check_array(data, "data").astype(np.float64).copy()
        check_1d(data_arr, "data")
        check_not_empty(data_arr, "data", label=label)
        check_finite(data_arr, "data")
        R = check_replicates(R, "R")

        if statistic is not None and not callable(statistic):
            raise ValidationError(
                f"statistic must be callable, got {type(statistic).__name__}"
            )

        return cls(
            data=data_arr,
            statistic=statistic if statistic is not None else np.mean,
            R=R,
            seed=seed,
            label=label,
        )

    @classmethod
    def for_group(
        cls,
        dataset: Dataset,
        label: str,
        R: int = DEFAULT_BOOT_R,
        *,
        statistic: Callable | None = None,
        seed: SeedLike = None,
    ) -> BootstrapDesign:
        """Bootstrap design for the values of one Dataset group."""
        return cls.for_bootstrap(
            dataset.group(label),
            R,
            statistic=statistic,
            seed=seed,
            label=str(label),
        )


@dataclass(frozen=True)
class PermutationDesign:
    """
    Frozen design for a two-group label-permutation test.

    Attributes:
        values: Measurement per record, shape (n,). Never permuted.
        groups: Label per record, shape (n,). Shuffled per replicate.
        group_a: Label whose mean is the minuend.
        group_b: Label whose mean is the subtrahend.
        R: Number of permutations.
        alternative: "two.sided", "less", or "greater".
        seed: int, Generator, or None.
    """
    values: NDArray[np.floating[Any]]
    groups: NDArray[np.str_]
    group_a: str
    group_b: str
    R: int
    alternative: str
    seed: SeedLike

    @property
    def n_a(self) -> int:
        return int(np.sum(self.groups == self.group_a))

    @property
    def n_b(self) -> int:
        return int(np.sum(self.groups == self.group_b))

    @classmethod
    def for_permutation_test(
        cls,
        dataset: Dataset,
        group_a: str,
        group_b: str,
        R: int = DEFAULT_PERM_R,
        *,
        alternative: str = "two.sided",
        seed: SeedLike = None,
    ) -> PermutationDesign:
        """
        Create a permutation test design with validation.

        Args:
            dataset: Dataset with exactly two distinct labels.
            group_a: Label on the left of mean(A) - mean(B).
            group_b: Label on the right.
            R: Number of permutations. Must be >= 1.
            alternative: "two.sided", "less", or "greater".
            seed: Random seed or an existing Generator.

        Raises:
            InsufficientGroupsError: If the dataset does not have exactly
                two distinct labels.
            EmptyGroupError: If group_a or group_b is not one of them.
            InvalidReplicateCountError: If R < 1.
            ValidationError: If group_a == group_b or alternative is unknown.
        """
        if not isinstance(dataset, Dataset):
            raise ValidationError(
                f"dataset must be a Dataset, got {type(dataset).__name__}"
            )

        group_a, group_b = str(group_a), str(group_b)
        if group_a == group_b:
            raise ValidationError(
                f"group_a and group_b must differ, both are {group_a!r}"
            )

        labels = dataset.labels
        if len(labels) != 2:
            raise InsufficientGroupsError(
                f"Permutation test needs exactly 2 distinct groups, "
                f"got {len(labels)}: {labels}",
                labels=labels,
            )

        for label in (group_a, group_b):
            if label not in labels:
                raise EmptyGroupError(
                    f"group {label!r} has no records. Available: {labels}",
                    label=label,
                )

        R = check_replicates(R, "R")

        if alternative not in VALID_ALTERNATIVES:
            raise ValidationError(
                f"alternative must be one of {VALID_ALTERNATIVES}, "
                f"got {alternative!r}"
            )

        return cls(
            values=np.array(dataset.values, dtype=np.float64),
            groups=np.array(dataset.groups),
            group_a=group_a,
            group_b=group_b,
            R=R,
            alternative=alternative,
            seed=seed,
        )
