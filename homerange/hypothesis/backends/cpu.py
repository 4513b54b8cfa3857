"""
CPU reference backend for hypothesis tests.

Dispatches to the test implementation named by design.test_type.
"""

from __future__ import annotations

from homerange.core.result import Result
from homerange.core.compute.timing import Timer
from homerange.hypothesis._common import HTestParams
from homerange.hypothesis.backends._t_test import t_two_sample
from homerange.hypothesis.design import HypothesisDesign


class CPUHypothesisBackend:
    """CPU reference backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result[HTestParams]:
        timer = Timer()
        timer.start()

        test_type = design.test_type

        with timer.section(test_type):
            if test_type == "t_two_sample":
                params, warnings_list = t_two_sample(design)
            else:
                raise ValueError(f"Unknown test_type: {test_type!r}")

        timer.stop()

        return Result(
            params=params,
            info={
                'test_type': test_type,
                'n_x': len(design.x),
                'n_y': len(design.y),
                'var_equal': design.var_equal,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
