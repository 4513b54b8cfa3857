"""
End-to-end two-group home-range comparison.

compare_groups() runs the whole analysis on one Dataset: per-group
summary statistics, a bootstrap of each group's mean with percentile and
normal intervals, the label-permutation test, and the pooled t-test as an
analytic cross-check. A single Generator drives every random draw, so a
fixed seed reproduces the full comparison.

Usage:
    from homerange import Dataset, compare_groups

    ds = Dataset.from_dataframe(df)        # columns 'sex', 'kernel95'
    comparison = compare_groups(ds, "M", "F", seed=42)
    print(comparison.summary())
"""

from __future__ import annotations

from dataclasses import dataclass

from homerange.core.dataset import Dataset
from homerange.core.validation import check_replicates
from homerange.descriptive import GroupSummarySolution, group_summary
from homerange.hypothesis import HTestSolution, t_test_groups
from homerange.montecarlo import (
    BootstrapSolution,
    PermutationDesign,
    PermutationSolution,
    boot_ci,
    bootstrap_group,
    permutation_test,
)
from homerange.montecarlo._common import (
    DEFAULT_BOOT_R,
    DEFAULT_CONF_LEVEL,
    DEFAULT_PERM_R,
)
from homerange.montecarlo._resample import SeedLike, make_rng


@dataclass(frozen=True)
class GroupComparison:
    """Every result of one compare_groups() run."""
    group_a: str
    group_b: str
    groups: GroupSummarySolution
    bootstrap_a: BootstrapSolution
    bootstrap_b: BootstrapSolution
    permutation: PermutationSolution
    t_test: HTestSolution

    @property
    def observed_difference(self) -> float:
        """mean(group_a) - mean(group_b)."""
        return self.permutation.observed_stat

    @property
    def p_values(self) -> dict[str, float]:
        return {
            'permutation': self.permutation.p_value,
            't_test': self.t_test.p_value,
        }

    def summary(self) -> str:
        sections = [
            f"HOME-RANGE COMPARISON: {self.group_a} vs {self.group_b}",
            "",
            self.groups.summary(),
            self.bootstrap_a.summary(),
            self.bootstrap_b.summary(),
            self.permutation.summary(),
            self.t_test.summary(),
        ]
        return "\n".join(sections)


def compare_groups(
    dataset: Dataset,
    group_a: str = "M",
    group_b: str = "F",
    *,
    R: int = DEFAULT_BOOT_R,
    P: int = DEFAULT_PERM_R,
    conf_level: float = DEFAULT_CONF_LEVEL,
    seed: SeedLike = None,
) -> GroupComparison:
    """
    Compare the mean value of two groups.

    Parameters
    ----------
    dataset : Dataset
        Exactly two labels, each with at least 2 records (the t-test
        needs a variance per group).
    group_a, group_b : str
        Labels; differences are always group_a minus group_b.
    R : int
        Bootstrap replicates per group.
    P : int
        Permutations.
    conf_level : float
        Level for the bootstrap and t-test intervals.
    seed : int, numpy.random.Generator or None
        Random source shared by all resampling steps.

    Raises
    ------
    InsufficientGroupsError, EmptyGroupError, InsufficientSampleSizeError,
    InvalidReplicateCountError, ValidationError
        Before any resampling is done.
    """
    # All preconditions are checked before the first random draw.
    PermutationDesign.for_permutation_test(dataset, group_a, group_b, P)
    check_replicates(R, "R")
    t_result = t_test_groups(dataset, group_a, group_b, conf_level=conf_level)

    rng = make_rng(seed)
    summary = group_summary(dataset, labels=(group_a, group_b))

    boots = []
    for label in (group_a, group_b):
        boot = bootstrap_group(dataset, label, R, seed=rng)
        boots.append(boot_ci(boot, conf_level=conf_level, type=("perc", "norm")))

    perm = permutation_test(dataset, group_a, group_b, P, seed=rng)

    return GroupComparison(
        group_a=str(group_a),
        group_b=str(group_b),
        groups=summary,
        bootstrap_a=boots[0],
        bootstrap_b=boots[1],
        permutation=perm,
        t_test=t_result,
    )
