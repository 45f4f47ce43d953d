"""
Least-squares regression line and its clipping to a cell's visible domain.
"""

import math
from dataclasses import dataclass

import numpy as np

from .correlation import format_value


@dataclass(frozen=True)
class LinearRegression:
    """
    Fitted line ``y = slope * x + intercept``.

    A zero-variance x leaves slope and intercept non-finite; callers detect
    that through `clip_to_domain` rather than by catching an exception.
    """

    slope: float
    intercept: float
    r2: float

    def fnx(self, x: float) -> float:
        """Evaluate y for a given x."""
        return self.slope * x + self.intercept

    def fny(self, y: float) -> float:
        """Evaluate x for a given y."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(y - self.intercept) / np.float64(self.slope))

    @property
    def equation(self) -> str:
        if self.intercept >= 0:
            return f"f(x) = {format_value(self.slope)}x+{format_value(self.intercept)}"
        return f"f(x) = {format_value(self.slope)}x{format_value(self.intercept)}"


@dataclass(frozen=True)
class RegressionSegment:
    """Regression line endpoints clipped to a cell's domain, in data units."""

    regression: LinearRegression
    x0: float
    y0: float
    x1: float
    y1: float


def linear_regression(y, x) -> LinearRegression:
    """
    Fit an ordinary least-squares line through (x, y).

    Note the argument order: dependent values first.

    Args:
        y: Dependent values
        x: Independent values, same length as y

    Returns:
        LinearRegression with slope, intercept and r²
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    n = len(y)

    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = (x * y).sum()
    sum_xx = (x * x).sum()
    sum_yy = (y * y).sum()

    covariance_term = n * sum_xy - sum_x * sum_y
    x_term = n * sum_xx - sum_x * sum_x
    y_term = n * sum_yy - sum_y * sum_y

    with np.errstate(divide="ignore", invalid="ignore"):
        slope = covariance_term / x_term
        intercept = (sum_y - slope * sum_x) / n
        r2 = (covariance_term / np.sqrt(x_term * y_term)) ** 2

    return LinearRegression(slope=float(slope), intercept=float(intercept), r2=float(r2))


def clip_to_domain(
    regression: LinearRegression,
    x_domain: tuple[float, float],
    y_domain: tuple[float, float],
) -> RegressionSegment | None:
    """
    Clip the regression line to the visible domain of a cell.

    Each end starts at an x-domain bound. When the line leaves the y-domain
    there, x is recomputed from the crossed y bound instead.

    Returns:
        The clipped segment, or None when any endpoint is non-finite
    """
    y_low, y_high = y_domain

    def endpoint(x: float) -> tuple[float, float]:
        y = regression.fnx(x)
        if y < y_low:
            x, y = regression.fny(y_low), y_low
        if y > y_high:
            x, y = regression.fny(y_high), y_high
        return x, y

    x0, y0 = endpoint(x_domain[0])
    x1, y1 = endpoint(x_domain[1])

    if not all(math.isfinite(value) for value in (x0, y0, x1, y1)):
        return None
    return RegressionSegment(regression=regression, x0=x0, y0=y0, x1=x1, y1=y1)
