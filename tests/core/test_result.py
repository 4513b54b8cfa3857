"""
Tests for the Result envelope and Timer.
"""

import dataclasses

import pytest

from homerange.core.compute.timing import Timer, timed
from homerange.core.result import Result


class TestResult:

    def test_frozen(self):
        result = Result(params=1.0, info={}, timing=None, backend_name="cpu")
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.params = 2.0

    def test_default_warnings(self):
        result = Result(params=None, info={}, timing=None, backend_name="cpu")
        assert result.warnings == ()

    def test_has_warning(self):
        result = Result(
            params=None, info={}, timing=None, backend_name="cpu",
            warnings=("R = 1: bootstrap standard error is undefined",),
        )
        assert result.has_warning("standard error")
        assert not result.has_warning("constant")


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section("work"):
            pass
        with timer.section("work"):
            pass
        timer.stop()
        out = timer.result()
        assert set(out) == {"total_seconds", "work"}
        assert out["total_seconds"] >= 0.0

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_timed(self):
        with timed() as timer:
            pass
        assert "total_seconds" in timer.result()
