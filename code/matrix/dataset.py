"""
Dataset container for the scatterplot matrix.

A dataset is a 2D array of observations (rows) by variables (columns), plus a
display name and a source path per variable. Rows are expected to be finite;
non-numeric rows are dropped by the data layer before a Dataset is built.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np

# Smallest number of rows a matrix is rendered for
MIN_ROWS = 4


class DatasetError(ValueError):
    """Raised when a dataset violates its shape invariants."""


class DatasetTooSmallError(DatasetError):
    """Raised when a dataset has fewer rows than a render requires."""

    def __init__(self, n_rows: int, min_rows: int = MIN_ROWS):
        super().__init__(f"Dataset too small: {n_rows} rows, at least {min_rows} required")
        self.n_rows = n_rows
        self.min_rows = min_rows


@dataclass(frozen=True)
class Dataset:
    """
    Observations for N variables.

    Attributes:
        values: Float array of shape (n_rows, n_variables)
        names: Display name per variable
        paths: Source identifier per variable (defaults to the names)
    """

    values: np.ndarray
    names: tuple[str, ...]
    paths: tuple[str, ...] = ()

    def __post_init__(self):
        values = np.asarray(self.values, dtype=float)
        names = tuple(str(name) for name in self.names)
        paths = tuple(str(path) for path in self.paths) if self.paths else names

        if not names:
            raise DatasetError("Dataset needs at least one variable")
        if values.size == 0:
            values = values.reshape(0, len(names))
        if values.ndim != 2:
            raise DatasetError(f"Expected a 2D array of observations, got {values.ndim}D")
        if values.shape[1] != len(names):
            raise DatasetError(
                f"Every observation needs {len(names)} values, got {values.shape[1]}"
            )
        if len(paths) != len(names):
            raise DatasetError(f"Expected {len(names)} paths, got {len(paths)}")

        object.__setattr__(self, "values", values)
        object.__setattr__(self, "names", names)
        object.__setattr__(self, "paths", paths)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[float]],
        names: Sequence[str],
        paths: Sequence[str] | None = None,
    ) -> "Dataset":
        """Build a dataset from row lists, e.g. ``[[1, 2], [2, 5]]``."""
        lengths = {len(row) for row in rows}
        if len(lengths) > 1:
            raise DatasetError(f"Observations have differing lengths: {sorted(lengths)}")
        return cls(values=np.array(rows, dtype=float), names=tuple(names), paths=tuple(paths or ()))

    @property
    def n_rows(self) -> int:
        return int(self.values.shape[0])

    @property
    def n_variables(self) -> int:
        return len(self.names)

    def column(self, index: int) -> np.ndarray:
        return self.values[:, index]

    def require_rows(self, min_rows: int = MIN_ROWS) -> None:
        """Raise DatasetTooSmallError unless the dataset has `min_rows` rows."""
        if self.n_rows < min_rows:
            raise DatasetTooSmallError(self.n_rows, min_rows)
