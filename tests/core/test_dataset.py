"""
Tests for the Dataset container.
"""

import numpy as np
import pytest

from homerange import Dataset
from homerange.core.exceptions import (
    DimensionError,
    EmptyGroupError,
    ValidationError,
)


class TestConstruction:

    def test_from_records(self, separated_dataset):
        ds = separated_dataset
        assert len(ds) == 6
        assert ds.n_observations == 6
        assert ds.labels == ("M", "F")
        assert ds.counts() == {"M": 3, "F": 3}
        assert ds.metadata["source"] == "records"

    def test_from_arrays(self):
        ds = Dataset.from_arrays(groups=["F", "M", "F"], values=[1, 2, 3])
        assert ds.labels == ("F", "M")
        np.testing.assert_array_equal(ds.group("F"), [1.0, 3.0])
        assert ds.values.dtype == np.float64

    def test_labels_first_appearance_order(self):
        ds = Dataset.from_records([("F", 1.0), ("M", 2.0), ("F", 3.0)])
        assert ds.labels == ("F", "M")

    def test_non_string_labels_become_strings(self):
        ds = Dataset.from_arrays(groups=[1, 2, 1], values=[1.0, 2.0, 3.0])
        assert ds.labels == ("1", "2")
        np.testing.assert_array_equal(ds.group("1"), [1.0, 3.0])

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            Dataset.from_arrays(groups=["M", "F"], values=[1.0])

    def test_rejects_nan(self):
        with pytest.raises(ValidationError, match="non-finite"):
            Dataset.from_records([("M", 1.0), ("F", float("nan"))])

    def test_rejects_bad_record(self):
        with pytest.raises(ValidationError, match="record 1"):
            Dataset.from_records([("M", 1.0), ("F",)])

    def test_rejects_non_numeric_record_value(self):
        with pytest.raises(ValidationError, match="values"):
            Dataset.from_records([("M", "abc"), ("F", 1.0)])

    def test_rejects_missing_record_value(self):
        with pytest.raises(ValidationError):
            Dataset.from_records([("M", None), ("F", 1.0)])

    def test_empty_dataset_allowed(self):
        ds = Dataset.from_records([])
        assert len(ds) == 0
        assert ds.labels == ()


class TestImmutability:

    def test_arrays_read_only(self, separated_dataset):
        with pytest.raises(ValueError):
            separated_dataset.values[0] = 99.0
        with pytest.raises(ValueError):
            separated_dataset.groups[0] = "F"

    def test_input_copied(self):
        values = np.array([1.0, 2.0])
        ds = Dataset.from_arrays(groups=["M", "F"], values=values)
        values[0] = 100.0
        assert ds.values[0] == 1.0

    def test_group_returns_copy(self, separated_dataset):
        m = separated_dataset.group("M")
        m[0] = -1.0
        assert separated_dataset.group("M")[0] == 10.0


class TestEquality:

    def test_identity(self, separated_dataset):
        assert separated_dataset == separated_dataset

    def test_distinct_instances_compare_without_error(self):
        records = [("M", 1.0), ("F", 2.0)]
        assert (Dataset.from_records(records) == Dataset.from_records(records)) is False


class TestGroupAccess:

    def test_missing_group(self, separated_dataset):
        with pytest.raises(EmptyGroupError) as exc_info:
            separated_dataset.group("X")
        assert exc_info.value.label == "X"


class TestFromDataFrame:

    def test_default_columns(self):
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame({
            "id": [1, 2, 3],
            "sex": ["M", "F", "M"],
            "kernel95": [2.5, 1.0, 3.5],
        })
        ds = Dataset.from_dataframe(df)
        assert ds.labels == ("M", "F")
        np.testing.assert_array_equal(ds.group("M"), [2.5, 3.5])
        assert ds.metadata["columns"] == ("sex", "kernel95")

    def test_custom_columns(self):
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame({"g": ["a", "b"], "v": [1.0, 2.0]})
        ds = Dataset.from_dataframe(df, group_column="g", value_column="v")
        assert ds.labels == ("a", "b")

    def test_missing_column(self):
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame({"sex": ["M"], "area": [1.0]})
        with pytest.raises(ValidationError, match="kernel95"):
            Dataset.from_dataframe(df)

    def test_string_value_column(self):
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame({"sex": ["M", "F"], "kernel95": ["big", "1.0"]})
        with pytest.raises(ValidationError, match="values"):
            Dataset.from_dataframe(df)

    def test_missing_label(self):
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame({"sex": ["M", None], "kernel95": [1.0, 2.0]})
        with pytest.raises(ValidationError, match="missing labels"):
            Dataset.from_dataframe(df)
