"""
Statistical core for the scatterplot matrix.

Computes everything a matrix render needs (domains, outlier filtering,
correlations, regression lines, descriptive statistics) and emits it as a
plain scene description. Rendering lives in the `components` package.
"""

from .correlation import format_value, pearson, spearman
from .dataset import MIN_ROWS, Dataset, DatasetError, DatasetTooSmallError
from .domain import variable_domain, variable_domains
from .options import MatrixOptions
from .outliers import (
    SingularCovarianceError,
    filter_outliers,
    mahalanobis_distances,
    outlier_mask,
)
from .regression import LinearRegression, RegressionSegment, clip_to_domain, linear_regression
from .scene import CellScene, MatrixScene, build_scene
from .statistics import BasicStatistics, basic_statistics

__version__ = "0.3.0"

__all__ = [
    "MIN_ROWS",
    "BasicStatistics",
    "CellScene",
    "Dataset",
    "DatasetError",
    "DatasetTooSmallError",
    "LinearRegression",
    "MatrixOptions",
    "MatrixScene",
    "RegressionSegment",
    "SingularCovarianceError",
    "basic_statistics",
    "build_scene",
    "clip_to_domain",
    "filter_outliers",
    "format_value",
    "linear_regression",
    "mahalanobis_distances",
    "outlier_mask",
    "pearson",
    "spearman",
    "variable_domain",
    "variable_domains",
]
