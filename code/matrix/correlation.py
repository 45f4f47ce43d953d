"""Pearson and Spearman correlation coefficients."""

import numpy as np
from scipy.stats import rankdata


def pearson(x, y) -> float:
    """
    Product-moment correlation coefficient of two equal-length arrays.

    Returns NaN when either array is constant or has fewer than 2 values.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if len(x) < 2:
        return float("nan")
    dx = x - x.mean()
    dy = y - y.mean()
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.sum(dx * dy) / np.sqrt(np.sum(dx * dx) * np.sum(dy * dy)))


def spearman(x, y) -> float:
    """Pearson coefficient of the ranks; ties get their average rank."""
    return pearson(rankdata(x, method="average"), rankdata(y, method="average"))


def format_value(value: float) -> str:
    """Format a number with 3 significant digits for display."""
    return format(float(value), ".3g")
