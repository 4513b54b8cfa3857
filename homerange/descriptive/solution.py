"""
Group summary solution types.

Contains the per-group payload and the user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, TYPE_CHECKING

from homerange.core.exceptions import EmptyGroupError
from homerange.core.result import Result

if TYPE_CHECKING:
    from homerange.core.dataset import Dataset


@dataclass(frozen=True)
class GroupStats:
    """
    Summary of one group's values.

    sd uses ddof=1 and is NaN for a single record, as is se.
    """
    label: str
    n: int
    mean: float
    sd: float
    se: float
    min: float
    median: float
    max: float


@dataclass(frozen=True)
class GroupSummaryParams:
    """Per-group statistics in label order."""
    groups: tuple[GroupStats, ...]


@dataclass
class GroupSummarySolution:
    """
    User-facing per-group summary statistics.

    Index by label: ``solution["M"].mean``.
    """
    _result: Result[GroupSummaryParams]
    _design: 'Dataset'

    @property
    def groups(self) -> tuple[GroupStats, ...]:
        return self._result.params.groups

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(g.label for g in self.groups)

    def __getitem__(self, label: str) -> GroupStats:
        for stats in self.groups:
            if stats.label == label:
                return stats
        raise EmptyGroupError(
            f"No summary for group {label!r}. Available: {self.labels}",
            label=label,
        )

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """{label: {n, mean, sd, se, min, median, max}}."""
        out = {}
        for stats in self.groups:
            row = asdict(stats)
            row.pop('label')
            out[stats.label] = row
        return out

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """One row per group: n, mean, sd, se, min, median, max."""
        header = ("n", "mean", "sd", "se", "min", "median", "max")
        label_width = max([len("group")] + [len(lbl) for lbl in self.labels])
        lines = [
            f"{'group':<{label_width}s} {header[0]:>5s} "
            + " ".join(f"{h:>12s}" for h in header[1:])
        ]
        for g in self.groups:
            nums = (g.mean, g.sd, g.se, g.min, g.median, g.max)
            lines.append(
                f"{g.label:<{label_width}s} {g.n:>5d} "
                + " ".join(f"{v:12.5g}" for v in nums)
            )
        return "\n".join(lines)

    def __repr__(self) -> str:
        counts = {g.label: g.n for g in self.groups}
        return f"GroupSummarySolution(counts={counts})"
