"""Descriptive statistics shown on the diagonal cells."""

from dataclasses import dataclass

import numpy as np
from scipy import stats


@dataclass(frozen=True)
class BasicStatistics:
    """Population statistics of one variable."""

    mean: float
    median: float
    range: float
    standard_deviation: float
    variance: float
    skewness: float
    kurtosis: float

    def as_rows(self) -> list[tuple[str, float]]:
        """(label, value) pairs in display order."""
        return [
            ("Mean", self.mean),
            ("Median", self.median),
            ("Range", self.range),
            ("Standard Deviation", self.standard_deviation),
            ("Variance", self.variance),
            ("Skewness", self.skewness),
            ("Kurtosis", self.kurtosis),
        ]


def basic_statistics(values) -> BasicStatistics:
    """
    Compute descriptive statistics of a variable.

    Standard deviation and variance use the population formula (ddof=0).
    Skewness and kurtosis sum the 3rd and 4th powers of the deviations and
    divide by (n - 1) times the population deviation to that power; kurtosis
    is reported in excess of 3. Both are NaN for constant input.
    """
    values = np.asarray(values, dtype=float)
    n = len(values)
    with np.errstate(divide="ignore", invalid="ignore"):
        # scipy's biased moments divide by n
        scale = np.float64(n) / (n - 1)
        skewness = stats.skew(values, bias=True) * scale
        kurtosis = stats.kurtosis(values, fisher=False, bias=True) * scale - 3

    return BasicStatistics(
        mean=float(np.mean(values)),
        median=float(np.median(values)),
        range=float(np.ptp(values)),
        standard_deviation=float(np.std(values)),
        variance=float(np.var(values)),
        skewness=float(skewness),
        kurtosis=float(kurtosis),
    )
