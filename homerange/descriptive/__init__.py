"""
Descriptive statistics module.

Public API:
    group_summary(dataset)  - n, mean, sd, se, min, median, max per group
"""

from homerange.descriptive.solution import (
    GroupStats,
    GroupSummaryParams,
    GroupSummarySolution,
)
from homerange.descriptive.solvers import group_summary

__all__ = [
    "group_summary",
    "GroupStats",
    "GroupSummaryParams",
    "GroupSummarySolution",
]
