"""
Solver dispatch for descriptive statistics.
"""

from __future__ import annotations

from typing import Sequence

from homerange.core.dataset import Dataset
from homerange.core.exceptions import EmptyGroupError, ValidationError
from homerange.descriptive.backends.cpu import CPUGroupSummaryBackend
from homerange.descriptive.solution import GroupSummarySolution


def group_summary(
    dataset: Dataset,
    labels: Sequence[str] | None = None,
) -> GroupSummarySolution:
    """
    Per-group summary statistics.

    Parameters
    ----------
    dataset : Dataset
        Labelled measurements.
    labels : sequence of str, optional
        Groups to summarise, in output order. Default: every label in
        order of first appearance.

    Returns
    -------
    GroupSummarySolution

    Raises
    ------
    EmptyGroupError
        If the dataset is empty or a requested label has no records.
    """
    if not isinstance(dataset, Dataset):
        raise ValidationError(
            f"dataset must be a Dataset, got {dataset.__class__.__name__}"
        )
    if len(dataset) == 0:
        raise EmptyGroupError("dataset has no records")

    labels = dataset.labels if labels is None else tuple(str(l) for l in labels)

    result = CPUGroupSummaryBackend().solve(dataset, labels)
    return GroupSummarySolution(_result=result, _design=dataset)
