"""
Tests for the Dataset container and variable domains.

Run with:
    pytest code/tests/test_dataset.py -v
"""

import sys
from pathlib import Path

# Add code directory to path for imports
code_dir = Path(__file__).parent.parent
sys.path.insert(0, str(code_dir))

import numpy as np
import pytest


class TestDataset:
    """Test Dataset construction and validation."""

    def test_from_rows(self):
        from matrix import Dataset

        dataset = Dataset.from_rows([[1, 2], [2, 5], [3, 4]], names=["a", "b"])

        assert dataset.n_rows == 3
        assert dataset.n_variables == 2
        assert dataset.values.dtype == float
        np.testing.assert_array_equal(dataset.column(1), [2.0, 5.0, 4.0])

    def test_paths_default_to_names(self):
        from matrix import Dataset

        dataset = Dataset.from_rows([[1, 2]], names=["a", "b"])
        assert dataset.paths == ("a", "b")

    def test_explicit_paths(self):
        from matrix import Dataset

        dataset = Dataset.from_rows([[1, 2]], names=["a", "b"], paths=["src/a", "src/b"])
        assert dataset.paths == ("src/a", "src/b")

    def test_ragged_rows_rejected(self):
        from matrix import Dataset, DatasetError

        with pytest.raises(DatasetError):
            Dataset.from_rows([[1, 2], [3]], names=["a", "b"])

    def test_name_count_must_match_columns(self):
        from matrix import Dataset, DatasetError

        with pytest.raises(DatasetError):
            Dataset.from_rows([[1, 2, 3]], names=["a", "b"])

    def test_path_count_must_match_names(self):
        from matrix import Dataset, DatasetError

        with pytest.raises(DatasetError):
            Dataset.from_rows([[1, 2]], names=["a", "b"], paths=["only-one"])

    def test_needs_a_variable(self):
        from matrix import Dataset, DatasetError

        with pytest.raises(DatasetError):
            Dataset(values=np.zeros((0, 0)), names=())

    def test_empty_dataset_keeps_shape(self):
        from matrix import Dataset

        dataset = Dataset(values=np.array([]), names=("a", "b"))
        assert dataset.n_rows == 0
        assert dataset.n_variables == 2

    def test_require_rows(self):
        from matrix import MIN_ROWS, Dataset, DatasetTooSmallError

        dataset = Dataset.from_rows([[1.0]] * (MIN_ROWS - 1), names=["a"])

        with pytest.raises(DatasetTooSmallError) as exc_info:
            dataset.require_rows()

        assert exc_info.value.n_rows == MIN_ROWS - 1
        assert exc_info.value.min_rows == MIN_ROWS
        assert "too small" in str(exc_info.value)

    def test_too_small_is_a_dataset_error(self):
        from matrix import DatasetError, DatasetTooSmallError

        assert issubclass(DatasetTooSmallError, DatasetError)
        assert issubclass(DatasetError, ValueError)


class TestDomain:
    """Test per-variable domains."""

    def test_domain_is_min_and_max(self):
        from matrix import Dataset, variable_domain

        dataset = Dataset.from_rows([[3, -1], [1, 7], [2, 0]], names=["a", "b"])

        assert variable_domain(dataset, 0) == (1.0, 3.0)
        assert variable_domain(dataset, 1) == (-1.0, 7.0)

    def test_domains_cover_every_variable(self):
        from matrix import Dataset, variable_domains

        dataset = Dataset.from_rows([[1, 2, 3], [4, 5, 6]], names=["a", "b", "c"])
        assert variable_domains(dataset) == [(1.0, 4.0), (2.0, 5.0), (3.0, 6.0)]

    def test_constant_column(self):
        from matrix import Dataset, variable_domain

        dataset = Dataset.from_rows([[5], [5], [5]], names=["a"])
        assert variable_domain(dataset, 0) == (5.0, 5.0)

    def test_domain_bounds_every_value(self):
        from matrix import Dataset, variable_domain

        rng = np.random.default_rng(1)
        dataset = Dataset(values=rng.normal(size=(50, 3)), names=("a", "b", "c"))
        for index in range(3):
            low, high = variable_domain(dataset, index)
            assert np.all(dataset.column(index) >= low)
            assert np.all(dataset.column(index) <= high)
