"""
Data layer for the Scatterplot Matrix Explorer.

This package provides data loading and transformation utilities.
"""

from .loaders import (
    CACHE_MAX_ITEMS,
    CACHE_POLICY,
    CACHE_TTL,
    CsvDataLoader,
    DataLoader,
    DemoDataLoader,
    UploadedCsvLoader,
    frame_to_dataset,
)

__all__ = [
    "DataLoader",
    "CsvDataLoader",
    "DemoDataLoader",
    "UploadedCsvLoader",
    "frame_to_dataset",
    "CACHE_MAX_ITEMS",
    "CACHE_POLICY",
    "CACHE_TTL",
]
