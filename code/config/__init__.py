"""
Configuration module for the Scatterplot Matrix Explorer.

Submodules:
    - models: Configuration dataclasses (AppConfig, MatrixStyle, etc.)
    - sources: Built-in data source configurations and registry

Note: DataLoader classes are in the `data` package.
"""

from data import (
    CsvDataLoader,
    DataLoader,
    DemoDataLoader,
    UploadedCsvLoader,
)
from .models import (
    AppConfig,
    FilterConfig,
    MatrixOptions,
    MatrixStyle,
)
from .sources import (
    CORRELATED_DEMO_CONFIG,
    OUTLIER_DEMO_CONFIG,
    PLANTS_CSV_CONFIG,
    SOURCE_REGISTRY,
    WEAK_CORRELATION_DEMO_CONFIG,
)

__all__ = [
    # Loaders
    "DataLoader",
    "CsvDataLoader",
    "DemoDataLoader",
    "UploadedCsvLoader",
    # Models
    "AppConfig",
    "FilterConfig",
    "MatrixOptions",
    "MatrixStyle",
    # Sources
    "SOURCE_REGISTRY",
    "CORRELATED_DEMO_CONFIG",
    "OUTLIER_DEMO_CONFIG",
    "PLANTS_CSV_CONFIG",
    "WEAK_CORRELATION_DEMO_CONFIG",
]
