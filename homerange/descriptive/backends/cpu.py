"""
CPU backend for per-group descriptive statistics.
"""

from __future__ import annotations

import numpy as np

from homerange.core.compute.timing import Timer
from homerange.core.dataset import Dataset
from homerange.core.result import Result
from homerange.descriptive.solution import GroupStats, GroupSummaryParams


class CPUGroupSummaryBackend:
    """Computes n, mean, sd, se, min, median and max for each label."""

    @property
    def name(self) -> str:
        return 'cpu_group_summary'

    def solve(
        self,
        dataset: Dataset,
        labels: tuple[str, ...],
    ) -> Result[GroupSummaryParams]:
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        groups = []
        with timer.section('group_statistics'):
            for label in labels:
                x = dataset.group(label)
                n = len(x)
                if n > 1:
                    sd = float(np.std(x, ddof=1))
                    se = sd / np.sqrt(n)
                else:
                    sd = se = float('nan')
                    warnings_list.append(
                        f"group {label!r} has 1 record: sd and se are undefined"
                    )
                groups.append(GroupStats(
                    label=label,
                    n=n,
                    mean=float(np.mean(x)),
                    sd=sd,
                    se=float(se),
                    min=float(np.min(x)),
                    median=float(np.median(x)),
                    max=float(np.max(x)),
                ))

        timer.stop()

        return Result(
            params=GroupSummaryParams(groups=tuple(groups)),
            info={'n': dataset.n_observations, 'labels': labels},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
