"""
Tests for bootstrap resampling of a single sample.

Verifies replicate count and range, seed reproducibility, bias/SE
properties and input validation.
"""

import numpy as np
import pytest

from homerange.core.exceptions import (
    EmptyGroupError,
    InvalidReplicateCountError,
    ValidationError,
)
from homerange.montecarlo import BootstrapDesign, bootstrap, bootstrap_group


class TestBootstrap:

    def test_basic_mean(self):
        data = np.arange(1.0, 11.0)
        result = bootstrap(data, R=999, seed=42)

        assert result.t0 == pytest.approx(5.5, rel=1e-12)
        assert result.t.shape == (999,)
        assert result.R == 999
        assert abs(result.bias) < 0.5
        # True SE of the mean = sd/sqrt(n) ~ 0.96
        assert 0.5 < result.se < 1.5

    @pytest.mark.parametrize("n, R", [(1, 1), (1, 50), (3, 1), (6, 200), (20, 500)])
    def test_length_and_range(self, rng, n, R):
        data = rng.uniform(0, 100, n)
        with np.errstate(all="ignore"):
            result = _quiet_bootstrap(data, R, seed=1)
        assert len(result.t) == R
        assert np.all(result.t >= data.min())
        assert np.all(result.t <= data.max())

    def test_mean_replicates_never_leave_data_range(self):
        """Means of repeated draws stay within [min, max] exactly."""
        gen = np.random.default_rng(0)
        for trial in range(300):
            data = gen.uniform(0, 100, 3)
            result = bootstrap(data, R=300, seed=trial)
            assert result.t.min() >= data.min()
            assert result.t.max() <= data.max()

    def test_se_is_sample_sd_of_replicates(self):
        result = bootstrap([1.0, 4.0, 9.0, 16.0], R=500, seed=3)
        assert result.se == pytest.approx(np.std(result.t, ddof=1), rel=1e-12)
        assert result.bias == pytest.approx(np.mean(result.t) - result.t0, abs=1e-12)

    def test_large_R(self):
        data = np.arange(1.0, 101.0)
        result = bootstrap(data, R=5000, seed=42)
        # True SE ~ 28.87/sqrt(100) ~ 2.887
        assert result.se == pytest.approx(2.887, rel=0.1)

    def test_single_observation(self):
        result = bootstrap([5.0], R=100, seed=42)
        assert result.t0 == 5.0
        np.testing.assert_allclose(result.t, 5.0)
        assert result.se == 0.0

    def test_custom_statistic(self):
        data = np.array([1.0, 2.0, 3.0, 100.0])
        result = bootstrap(data, R=200, statistic=np.median, seed=0)
        assert result.t0 == pytest.approx(2.5)
        assert result.info["statistic"] == "median"

    def test_input_not_modified(self):
        data = np.array([3.0, 1.0, 2.0])
        bootstrap(data, R=50, seed=0)
        np.testing.assert_array_equal(data, [3.0, 1.0, 2.0])

    def test_timing_and_backend(self):
        result = bootstrap([1.0, 2.0, 3.0], R=10, seed=0)
        assert result.backend_name == "cpu_bootstrap"
        assert "bootstrap_replicates" in result.timing
        assert result.ci is None


class TestDegenerateR:

    def test_R_one_warns_and_se_is_nan(self):
        with pytest.warns(RuntimeWarning, match="standard error is undefined"):
            result = bootstrap([1.0, 2.0, 3.0], R=1, seed=0)
        assert len(result.t) == 1
        assert np.isnan(result.se)
        assert result.warnings


class TestReproducibility:

    def test_same_seed_same_distribution(self):
        data = [1.0, 2.0, 3.0, 4.0, 5.0]
        r1 = bootstrap(data, R=100, seed=42)
        r2 = bootstrap(data, R=100, seed=42)
        np.testing.assert_array_equal(r1.t, r2.t)
        assert r1.se == r2.se

    def test_different_seeds_differ(self):
        data = [1.0, 2.0, 3.0, 4.0, 5.0]
        r1 = bootstrap(data, R=100, seed=42)
        r2 = bootstrap(data, R=100, seed=99)
        assert not np.allclose(r1.t, r2.t)

    def test_injected_generator_advances(self):
        gen = np.random.default_rng(5)
        data = [1.0, 2.0, 3.0, 4.0, 5.0]
        r1 = bootstrap(data, R=100, seed=gen)
        r2 = bootstrap(data, R=100, seed=gen)
        assert not np.array_equal(r1.t, r2.t)

        replay = np.random.default_rng(5)
        np.testing.assert_array_equal(bootstrap(data, R=100, seed=replay).t, r1.t)


class TestValidation:

    def test_empty_sample(self):
        with pytest.raises(EmptyGroupError):
            bootstrap([], R=10)

    @pytest.mark.parametrize("R", [0, -3])
    def test_bad_R(self, R):
        with pytest.raises(InvalidReplicateCountError):
            bootstrap([1.0, 2.0], R=R)

    def test_non_finite(self):
        with pytest.raises(ValidationError):
            bootstrap([1.0, np.inf], R=10)

    def test_2d_rejected(self):
        with pytest.raises(ValidationError):
            bootstrap(np.ones((3, 2)), R=10)

    def test_statistic_not_callable(self):
        with pytest.raises(ValidationError, match="callable"):
            bootstrap([1.0, 2.0], R=10, statistic="mean")


class TestBootstrapGroup:

    def test_centered_on_group_mean(self, separated_dataset):
        result = bootstrap_group(separated_dataset, "M", R=1000, seed=42)
        assert result.label == "M"
        assert result.t0 == pytest.approx(12.0)
        assert np.mean(result.t) == pytest.approx(12.0, abs=0.2)
        assert np.all((result.t >= 10.0) & (result.t <= 14.0))

    def test_missing_group(self, separated_dataset):
        with pytest.raises(EmptyGroupError):
            bootstrap_group(separated_dataset, "X", R=10)

    def test_design_passthrough(self, separated_dataset):
        design = BootstrapDesign.for_group(separated_dataset, "F", R=20, seed=1)
        result = bootstrap(design)
        assert result.R == 20
        assert result.label == "F"

    def test_summary(self, separated_dataset):
        result = bootstrap_group(separated_dataset, "F", R=100, seed=1)
        text = result.summary()
        assert "ORDINARY NONPARAMETRIC BOOTSTRAP" in text
        assert "group='F'" in text
        assert "std. error" in text


def _quiet_bootstrap(data, R, seed):
    if R == 1:
        with pytest.warns(RuntimeWarning):
            return bootstrap(data, R=R, seed=seed)
    return bootstrap(data, R=R, seed=seed)
