"""
Tests for the end-to-end compare_groups() analysis.
"""

import numpy as np
import pytest

from homerange import (
    Dataset,
    GroupComparison,
    InsufficientGroupsError,
    InsufficientSampleSizeError,
    InvalidReplicateCountError,
    compare_groups,
)


class TestCompareGroups:

    def test_separated(self, separated_dataset):
        result = compare_groups(separated_dataset, "M", "F", R=1000, P=1000, seed=42)

        assert isinstance(result, GroupComparison)
        assert result.observed_difference == pytest.approx(6.0)
        assert result.groups["M"].mean == pytest.approx(12.0)

        assert result.bootstrap_a.label == "M"
        assert np.mean(result.bootstrap_a.t) == pytest.approx(12.0, abs=0.2)
        assert np.mean(result.bootstrap_b.t) == pytest.approx(6.0, abs=0.2)
        assert set(result.bootstrap_a.ci) == {"perc", "norm"}

        assert result.p_values["t_test"] < 0.05
        assert result.p_values["permutation"] == pytest.approx(0.1, abs=0.04)

    def test_reproducible(self, separated_dataset):
        r1 = compare_groups(separated_dataset, R=200, P=200, seed=3)
        r2 = compare_groups(separated_dataset, R=200, P=200, seed=3)
        np.testing.assert_array_equal(r1.bootstrap_a.t, r2.bootstrap_a.t)
        np.testing.assert_array_equal(r1.bootstrap_b.t, r2.bootstrap_b.t)
        np.testing.assert_array_equal(r1.permutation.perm_stats, r2.permutation.perm_stats)

    def test_groups_use_distinct_draws(self, separated_dataset):
        result = compare_groups(separated_dataset, R=200, P=50, seed=3)
        # Same shared stream: group B's resample indices differ from A's.
        a_idx = (result.bootstrap_a.t - 10.0) / 2.0
        b_idx = result.bootstrap_b.t - 5.0
        assert not np.allclose(a_idx, b_idx)

    def test_conf_level(self, separated_dataset):
        result = compare_groups(
            separated_dataset, R=300, P=50, conf_level=0.9, seed=0,
        )
        assert result.bootstrap_a.ci_conf_level == 0.9
        assert result.t_test.conf_level == 0.9

    def test_summary(self, separated_dataset):
        text = compare_groups(separated_dataset, R=100, P=100, seed=1).summary()
        assert "HOME-RANGE COMPARISON: M vs F" in text
        assert "PERMUTATION TEST" in text
        assert "Two Sample t-test" in text


class TestCompareGroupsValidation:

    def test_single_group(self):
        ds = Dataset.from_records([("M", 10.0)])
        with pytest.raises(InsufficientGroupsError):
            compare_groups(ds, R=10, P=10)

    def test_group_too_small_for_t_test(self):
        ds = Dataset.from_records([("M", 10.0), ("M", 11.0), ("F", 5.0)])
        with pytest.raises(InsufficientSampleSizeError):
            compare_groups(ds, R=10, P=10)

    def test_bad_permutation_count(self, separated_dataset):
        with pytest.raises(InvalidReplicateCountError):
            compare_groups(separated_dataset, R=10, P=0)

    def test_bad_bootstrap_count(self, separated_dataset):
        with pytest.raises(InvalidReplicateCountError):
            compare_groups(separated_dataset, R=0, P=10)
