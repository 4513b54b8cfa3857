"""
Solver dispatch for Monte Carlo methods.

Public entry points: bootstrap(), bootstrap_group(), boot_ci() and
permutation_test(). Each builds a validated design, hands it to the CPU
backend and wraps the Result in a Solution.
"""

from __future__ import annotations

import warnings
from dataclasses import replace
from typing import Callable, Literal, Sequence

from numpy.typing import ArrayLike

from homerange.core.dataset import Dataset
from homerange.core.exceptions import InsufficientGroupsError, ValidationError
from homerange.core.validation import check_conf_level
from homerange.montecarlo._ci import compute_ci
from homerange.montecarlo._common import (
    DEFAULT_BOOT_R,
    DEFAULT_CONF_LEVEL,
    DEFAULT_PERM_R,
    VALID_CI_TYPES,
)
from homerange.montecarlo._resample import SeedLike
from homerange.montecarlo.backends.cpu import (
    CPUBootstrapBackend,
    CPUPermutationBackend,
)
from homerange.montecarlo.design import BootstrapDesign, PermutationDesign
from homerange.montecarlo.solution import BootstrapSolution, PermutationSolution


def bootstrap(
    data: ArrayLike | BootstrapDesign,
    R: int = DEFAULT_BOOT_R,
    *,
    statistic: Callable | None = None,
    seed: SeedLike = None,
    label: str | None = None,
) -> BootstrapSolution:
    """
    Ordinary nonparametric bootstrap of a single sample.

    Parameters
    ----------
    data : array-like or BootstrapDesign
        1D sample values.
    R : int
        Number of bootstrap replicates. Default 10000. R == 1 is allowed
        but leaves the standard error undefined.
    statistic : callable, optional
        fn(sample) -> float. Default np.mean.
    seed : int, numpy.random.Generator or None
        Random source. A Generator is used as-is and advanced.
    label : str, optional
        Group label carried into summaries.

    Returns
    -------
    BootstrapSolution
    """
    if isinstance(data, BootstrapDesign):
        design = data
    else:
        design = BootstrapDesign.for_bootstrap(
            data, R, statistic=statistic, seed=seed, label=label,
        )
    return _solve_bootstrap(design)


def bootstrap_group(
    dataset: Dataset,
    label: str,
    R: int = DEFAULT_BOOT_R,
    *,
    statistic: Callable | None = None,
    seed: SeedLike = None,
) -> BootstrapSolution:
    """Bootstrap the values of one group of a Dataset."""
    design = BootstrapDesign.for_group(
        dataset, label, R, statistic=statistic, seed=seed,
    )
    return _solve_bootstrap(design)


def _solve_bootstrap(design: BootstrapDesign) -> BootstrapSolution:
    result = CPUBootstrapBackend().solve(design)
    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=3)
    return BootstrapSolution(_result=result, _design=design)


def boot_ci(
    boot_out: BootstrapSolution,
    *,
    conf_level: float = DEFAULT_CONF_LEVEL,
    type: str | Sequence[str] = VALID_CI_TYPES,
) -> BootstrapSolution:
    """
    Bootstrap confidence intervals.

    Parameters
    ----------
    boot_out : BootstrapSolution
        Output of bootstrap().
    conf_level : float
        Confidence level in (0, 1). Default 0.95.
    type : str or sequence of str
        "perc" (percentile), "norm" (t0 +/- z * se), or both.

    Returns
    -------
    BootstrapSolution
        A copy of boot_out with ci populated. The replicates are shared.
    """
    if not isinstance(boot_out, BootstrapSolution):
        raise ValidationError(
            f"boot_out must be a BootstrapSolution, "
            f"got {boot_out.__class__.__name__}"
        )
    conf_level = check_conf_level(conf_level)

    types = (type,) if isinstance(type, str) else tuple(type)
    if not types:
        raise ValidationError("type must name at least one CI type")
    for ci_type in types:
        if ci_type not in VALID_CI_TYPES:
            raise ValidationError(
                f"Unknown CI type: {ci_type!r}. Use one of {VALID_CI_TYPES}"
            )

    ci = compute_ci(boot_out.t0, boot_out.t, boot_out.se, types, conf_level)

    params = replace(
        boot_out._result.params, ci=ci, ci_conf_level=conf_level,
    )
    result = replace(boot_out._result, params=params)
    return BootstrapSolution(_result=result, _design=boot_out._design)


def permutation_test(
    dataset: Dataset | PermutationDesign,
    group_a: str | None = None,
    group_b: str | None = None,
    R: int = DEFAULT_PERM_R,
    *,
    alternative: Literal["two.sided", "less", "greater"] = "two.sided",
    seed: SeedLike = None,
) -> PermutationSolution:
    """
    Two-group permutation test for a difference in means.

    The statistic is mean(group_a) - mean(group_b). The null distribution
    comes from R full shuffles of the label column with values held fixed.

    Parameters
    ----------
    dataset : Dataset or PermutationDesign
        Dataset with exactly two distinct labels.
    group_a, group_b : str
        Labels for the two sides of the difference. If both are omitted
        the dataset's labels are used in order of first appearance.
    R : int
        Number of permutations. Default 10000.
    alternative : str
        "two.sided" (default), "less", or "greater".
    seed : int, numpy.random.Generator or None
        Random source.

    Returns
    -------
    PermutationSolution
    """
    if isinstance(dataset, PermutationDesign):
        design = dataset
    else:
        if group_a is None and group_b is None:
            group_a, group_b = _default_groups(dataset)
        elif group_a is None or group_b is None:
            raise ValidationError(
                "group_a and group_b must be given together"
            )
        design = PermutationDesign.for_permutation_test(
            dataset, group_a, group_b, R,
            alternative=alternative, seed=seed,
        )

    result = CPUPermutationBackend().solve(design)
    return PermutationSolution(_result=result, _design=design)


def _default_groups(dataset: Dataset) -> tuple[str, str]:
    """The dataset's two labels in order of first appearance."""
    if not isinstance(dataset, Dataset):
        raise ValidationError(
            f"dataset must be a Dataset, got {dataset.__class__.__name__}"
        )
    labels = dataset.labels
    if len(labels) != 2:
        raise InsufficientGroupsError(
            f"Permutation test needs exactly 2 distinct groups, "
            f"got {len(labels)}: {labels}",
            labels=labels,
        )
    return labels[0], labels[1]
