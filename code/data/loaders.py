"""
Data loader classes for the Scatterplot Matrix Explorer.

This module provides abstract and concrete data loader implementations
for fetching tabular data (CSV files, uploads, synthetic demos), and the
conversion from a DataFrame to the matrix Dataset.
"""

import io
import logging
from abc import ABC, abstractmethod
from pathlib import Path

import numpy as np
import pandas as pd
import panel as pn

from matrix.dataset import Dataset

logger = logging.getLogger(__name__)

# Cache settings
CACHE_MAX_ITEMS = 20
CACHE_POLICY = "LRU"
CACHE_TTL = 3600  # 1 hour TTL so edited files are picked up


class DataLoader(ABC):
    """
    Abstract base class for data loaders.

    Each data source implements this interface so the app can load data
    without knowing where it comes from.
    """

    _load_cached: object | None = None

    @property
    def source_name(self) -> str:
        """Name used as the prefix of every variable's source path."""
        return type(self).__name__

    @abstractmethod
    def load(self) -> pd.DataFrame:
        """
        Load data from the data source.

        Returns:
            DataFrame with the loaded data
        """
        pass

    def clear_cache(self) -> None:
        """Clear the cache for this loader (if applicable)."""
        load_cached = getattr(self, "_load_cached", None)
        if load_cached is not None and hasattr(load_cached, "clear"):
            load_cached.clear()


class CsvDataLoader(DataLoader):
    """
    Data loader for CSV files on disk.

    Reads are memoized on the path and read options.
    """

    def __init__(self, path: str | Path, separator: str = ","):
        """
        Initialize the data loader.

        Args:
            path: Path to the CSV file
            separator: Column separator
        """
        self.path = Path(path)
        self.separator = separator

    @property
    def source_name(self) -> str:
        return self.path.stem

    def load(self) -> pd.DataFrame:
        """Load the CSV file (cached)."""
        return self._load_cached(str(self.path), self.separator)

    @staticmethod
    @pn.cache(max_items=CACHE_MAX_ITEMS, policy=CACHE_POLICY, ttl=CACHE_TTL)
    def _load_cached(path: str, separator: str) -> pd.DataFrame:
        """Cached CSV read - memoized based on path and separator."""
        logger.info(f"Reading CSV file: {path}")
        return pd.read_csv(path, sep=separator)


class UploadedCsvLoader(DataLoader):
    """Data loader for CSV content uploaded through the browser."""

    def __init__(self, content: bytes, filename: str = "upload.csv"):
        self.content = content
        self.filename = filename

    @property
    def source_name(self) -> str:
        return Path(self.filename).stem

    def load(self) -> pd.DataFrame:
        return pd.read_csv(io.BytesIO(self.content))


class DemoDataLoader(DataLoader):
    """
    Synthetic data loader for demos and tests.

    Generates `n_variables` columns that share one latent factor, so every
    pair is correlated by roughly `correlation`. A fraction of the rows can
    be replaced by far-off points to exercise the outlier filter.
    """

    def __init__(
        self,
        name: str = "demo",
        n_rows: int = 200,
        n_variables: int = 4,
        correlation: float = 0.7,
        outlier_fraction: float = 0.0,
        seed: int = 0,
    ):
        """
        Initialize the demo loader.

        Args:
            name: Source name used in variable paths
            n_rows: Number of observations
            n_variables: Number of numeric columns
            correlation: Target pairwise correlation in [0, 1)
            outlier_fraction: Share of rows turned into outliers
            seed: Random seed, identical seeds give identical frames
        """
        self.name = name
        self.n_rows = n_rows
        self.n_variables = n_variables
        self.correlation = correlation
        self.outlier_fraction = outlier_fraction
        self.seed = seed

    @property
    def source_name(self) -> str:
        return self.name

    def load(self) -> pd.DataFrame:
        rng = np.random.default_rng(self.seed)
        latent = rng.standard_normal(self.n_rows)
        weight = np.sqrt(self.correlation)
        noise_weight = np.sqrt(1.0 - self.correlation)

        columns = {}
        for k in range(self.n_variables):
            noise = rng.standard_normal(self.n_rows)
            columns[f"var_{k + 1}"] = (weight * latent + noise_weight * noise) * (k + 1) + 10 * k

        df = pd.DataFrame(columns)

        n_outliers = int(round(self.n_rows * self.outlier_fraction))
        if n_outliers:
            rows = rng.choice(self.n_rows, size=n_outliers, replace=False)
            for column in df.columns:
                spread = df[column].std()
                signs = rng.choice([-1.0, 1.0], size=n_outliers)
                df.loc[rows, column] = df[column].mean() + signs * spread * rng.uniform(4, 6, n_outliers)
        return df


def frame_to_dataset(
    df: pd.DataFrame,
    columns: list[str],
    source_name: str = "",
) -> Dataset:
    """
    Convert selected DataFrame columns into a matrix Dataset.

    Values are coerced to numbers and every row holding a non-numeric or
    non-finite value in any selected column is dropped.

    Args:
        df: Source DataFrame
        columns: Columns to use as matrix variables, in order
        source_name: Prefix of each variable's source path

    Returns:
        Dataset with one variable per column
    """
    numeric = df[list(columns)].apply(pd.to_numeric, errors="coerce")
    numeric = numeric.replace([np.inf, -np.inf], np.nan).dropna()

    n_dropped = len(df) - len(numeric)
    if n_dropped:
        logger.info(f"Dropped {n_dropped} rows with non-numeric values")

    paths = [f"{source_name}/{column}" if source_name else str(column) for column in columns]
    return Dataset(values=numeric.to_numpy(dtype=float), names=tuple(columns), paths=tuple(paths))
