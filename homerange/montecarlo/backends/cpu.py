"""
CPU backends for bootstrap and permutation test.

CPUBootstrapBackend: ordinary nonparametric bootstrap of one sample.
CPUPermutationBackend: two-group label-permutation test.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from homerange.core.result import Result
from homerange.core.compute.timing import Timer
from homerange.montecarlo._common import BootParams, PermutationParams, TIE_RTOL
from homerange.montecarlo._resample import make_rng, resample_indices, shuffle_labels
from homerange.montecarlo.design import BootstrapDesign, PermutationDesign


class CPUBootstrapBackend:
    """
    CPU backend for bootstrap resampling.

    Each replicate draws n indices with replacement and evaluates the
    statistic on the selected values.
    """

    @property
    def name(self) -> str:
        return 'cpu_bootstrap'

    def solve(self, design: BootstrapDesign) -> Result[BootParams]:
        """Run bootstrap and return Result[BootParams]."""
        timer = Timer()
        timer.start()

        data = design.data
        statistic = design.statistic
        R = design.R
        n = data.shape[0]
        rng = make_rng(design.seed)
        warnings_list: list[str] = []

        with timer.section('t0_computation'):
            t0 = float(statistic(data))

        with timer.section('bootstrap_replicates'):
            t = np.empty(R, dtype=np.float64)
            for b in range(R):
                indices = resample_indices(n, rng)
                t[b] = statistic(data[indices])
            if statistic is np.mean and n > 0:
                # A mean of repeated values can round one ulp past the data.
                np.clip(t, data.min(), data.max(), out=t)

        with timer.section('summary_statistics'):
            bias = float(np.mean(t) - t0)
            if R > 1:
                se = float(np.std(t, ddof=1))
            else:
                se = float('nan')
                warnings_list.append(
                    "R = 1: bootstrap standard error is undefined"
                )

        timer.stop()

        params = BootParams(
            t0=t0,
            t=t,
            R=R,
            bias=bias,
            se=se,
        )

        return Result(
            params=params,
            info={
                'n': n,
                'label': design.label,
                'statistic': getattr(statistic, '__name__', repr(statistic)),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


class CPUPermutationBackend:
    """
    CPU backend for permutation testing.

    Shuffles the label column R times, keeping values fixed, and
    recomputes mean(group_a) - mean(group_b) under each shuffle.
    """

    @property
    def name(self) -> str:
        return 'cpu_permutation'

    def solve(self, design: PermutationDesign) -> Result[PermutationParams]:
        """Run permutation test and return Result[PermutationParams]."""
        timer = Timer()
        timer.start()

        values = design.values
        groups = design.groups
        group_a = design.group_a
        R = design.R
        alternative = design.alternative
        rng = make_rng(design.seed)

        with timer.section('observed_stat'):
            observed = _mean_difference(values, groups == group_a)

        with timer.section('permutation_replicates'):
            perm_stats = np.empty(R, dtype=np.float64)
            for b in range(R):
                shuffled = shuffle_labels(groups, rng)
                perm_stats[b] = _mean_difference(values, shuffled == group_a)

        with timer.section('p_value'):
            p_value = permutation_p_value(observed, perm_stats, alternative)

        timer.stop()

        params = PermutationParams(
            observed_stat=observed,
            perm_stats=perm_stats,
            p_value=p_value,
            R=R,
            alternative=alternative,
            group_a=group_a,
            group_b=design.group_b,
        )

        return Result(
            params=params,
            info={
                'n_a': design.n_a,
                'n_b': design.n_b,
                'group_a': group_a,
                'group_b': design.group_b,
                'alternative': alternative,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )


def _mean_difference(values: NDArray, in_a: NDArray[np.bool_]) -> float:
    """mean(values[in_a]) - mean(values[~in_a]); the dataset holds exactly two labels."""
    return float(np.mean(values[in_a]) - np.mean(values[~in_a]))


def permutation_p_value(
    observed: float,
    perm_stats: NDArray,
    alternative: str,
) -> float:
    """
    Proportion of permuted statistics at least as extreme as observed.

    two.sided counts values >= |observed| plus values <= -|observed|,
    each value counted once, so identical groups (observed == 0) give
    exactly 1.
    """
    tol = TIE_RTOL * max(1.0, abs(observed))
    if alternative == "two.sided":
        count = np.sum(np.abs(perm_stats) >= abs(observed) - tol)
    elif alternative == "greater":
        count = np.sum(perm_stats >= observed - tol)
    elif alternative == "less":
        count = np.sum(perm_stats <= observed + tol)
    else:
        raise ValueError(f"Unknown alternative: {alternative!r}")

    return float(count) / float(len(perm_stats))
