"""
Grouped measurement table for homerange.

Dataset is the "I have labelled measurements" abstraction: an ordered
sequence of records, each carrying one categorical group label and one
finite real value. For the spider monkey data the label is the `sex`
column (M/F) and the value is `kernel95`, the 95% kernel home-range area.

Usage:
    from homerange import Dataset

    ds = Dataset.from_records([("M", 10.0), ("F", 5.0)])
    ds = Dataset.from_arrays(groups=["M", "F"], values=[10.0, 5.0])
    ds = Dataset.from_dataframe(df)          # columns 'sex' and 'kernel95'

    ds.labels          # ('M', 'F')
    ds.group("M")      # array([10.])
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from homerange.core.exceptions import EmptyGroupError, ValidationError
from homerange.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
)

if TYPE_CHECKING:
    import pandas as pd


DEFAULT_GROUP_COLUMN = "sex"
DEFAULT_VALUE_COLUMN = "kernel95"


def _readonly(arr: NDArray) -> NDArray:
    arr = arr.copy()
    arr.setflags(write=False)
    return arr


@dataclass(eq=False)
class Dataset:
    """
    Immutable table of (group label, value) records.

    Construct via factory classmethods, not directly. Arrays are copied on
    construction and exposed read-only; resampling code works on copies.
    """
    _groups: NDArray[np.str_]
    _values: NDArray[np.floating[Any]]
    _metadata: dict[str, Any] = field(default_factory=dict)

    # === Array Access ===

    @property
    def groups(self) -> NDArray[np.str_]:
        """Group label of every record, in record order."""
        return self._groups

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Measured value of every record, in record order."""
        return self._values

    @property
    def labels(self) -> tuple[str, ...]:
        """Distinct group labels in order of first appearance."""
        _, first = np.unique(self._groups, return_index=True)
        return tuple(str(self._groups[i]) for i in sorted(first))

    def group(self, label: str) -> NDArray[np.floating[Any]]:
        """
        Values belonging to one group.

        Raises:
            EmptyGroupError: If no record carries the label
        """
        mask = self._groups == str(label)
        if not mask.any():
            raise EmptyGroupError(
                f"Dataset has no records for group {label!r}. "
                f"Available: {self.labels}",
                label=str(label),
            )
        return self._values[mask].copy()

    def counts(self) -> dict[str, int]:
        """Number of records per label, in label order."""
        return {
            label: int(np.sum(self._groups == label)) for label in self.labels
        }

    def __len__(self) -> int:
        return self._values.shape[0]

    # === Properties ===

    @property
    def n_observations(self) -> int:
        """Number of records."""
        return len(self)

    @property
    def metadata(self) -> dict[str, Any]:
        return self._metadata.copy()

    # === Factory Methods ===

    @classmethod
    def from_arrays(
        cls,
        *,
        groups: ArrayLike,
        values: ArrayLike,
        **metadata: Any,
    ) -> Dataset:
        """
        Construct from a label column and a value column.

        Raises:
            DimensionError: If the columns are not 1D or differ in length
            ValidationError: If values are non-numeric or non-finite
        """
        groups_arr = np.asarray(groups)
        check_1d(groups_arr, "groups")
        groups_arr = groups_arr.astype(str)

        values_arr = check_array(values, "values")
        check_1d(values_arr, "values")
        check_finite(values_arr, "values")
        check_consistent_length(groups_arr, values_arr, names=("groups", "values"))

        metadata.setdefault('source', 'arrays')
        return cls(
            _groups=_readonly(groups_arr),
            _values=_readonly(values_arr.astype(np.float64)),
            _metadata=metadata,
        )

    @classmethod
    def from_records(cls, records: Iterable[tuple[Any, float]]) -> Dataset:
        """Construct from an iterable of (label, value) pairs."""
        records = list(records)
        for i, record in enumerate(records):
            if len(record) != 2:
                raise ValidationError(
                    f"record {i}: expected (label, value), got {record!r}"
                )
        groups = [label for label, _ in records]
        values = [value for _, value in records]
        return cls.from_arrays(
            groups=np.asarray(groups, dtype=str),
            values=values,
            source='records',
        )

    @classmethod
    def from_dataframe(
        cls,
        df: 'pd.DataFrame',
        *,
        group_column: str = DEFAULT_GROUP_COLUMN,
        value_column: str = DEFAULT_VALUE_COLUMN,
    ) -> Dataset:
        """
        Construct from an already-parsed pandas DataFrame.

        Only the two named columns are read; every other column is ignored.
        """
        missing = [c for c in (group_column, value_column) if c not in df.columns]
        if missing:
            raise ValidationError(
                f"DataFrame is missing column(s) {missing}. "
                f"Available: {list(df.columns)}"
            )
        if df[group_column].isna().any():
            raise ValidationError(f"{group_column}: contains missing labels")

        return cls.from_arrays(
            groups=df[group_column].astype(str).to_numpy(),
            values=df[value_column].to_numpy(),
            source='dataframe',
            columns=(group_column, value_column),
        )

    def __repr__(self) -> str:
        return f"Dataset(n={len(self)}, counts={self.counts()})"
