"""
Mahalanobis outlier filtering for a pair of variables.

The filter strength maps to the critical distance as ``mean × (3 − m)``, so a
larger multiplier gives a smaller critical value and a stricter filter. The
UI presents the multiplier as "strength" in the range [1, 2].
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_MULTIPLIER = 1.5
RECOMMENDED_MULTIPLIER_RANGE = (1.0, 2.0)


class SingularCovarianceError(ValueError):
    """Raised when the pair's covariance matrix cannot be inverted."""


def mahalanobis_distances(x, y) -> np.ndarray:
    """
    Compute the Mahalanobis distance of every (x, y) pair from the joint mean.

    Uses the sample covariance (ddof=1) of the pair.

    Args:
        x: Values of the first variable
        y: Values of the second variable, same length as x

    Returns:
        Array of distances, one per pair

    Raises:
        SingularCovarianceError: If the covariance matrix is singular
            (constant or exactly collinear data)
    """
    points = np.column_stack([np.asarray(x, dtype=float), np.asarray(y, dtype=float)])
    if len(points) < 3:
        raise SingularCovarianceError(f"Need at least 3 pairs, got {len(points)}")

    covariance = np.cov(points, rowvar=False)
    if np.linalg.matrix_rank(covariance) < 2:
        raise SingularCovarianceError("Covariance matrix is singular")

    inverse = np.linalg.inv(covariance)
    deltas = points - points.mean(axis=0)
    squared = np.einsum("ij,jk,ik->i", deltas, inverse, deltas)
    # Rounding can push tiny squared distances below zero
    return np.sqrt(np.clip(squared, 0.0, None))


def outlier_mask(x, y, multiplier: float = DEFAULT_MULTIPLIER) -> np.ndarray:
    """Boolean mask of the pairs within the critical distance."""
    low, high = RECOMMENDED_MULTIPLIER_RANGE
    if not low <= multiplier <= high:
        logger.warning(
            f"Filter multiplier {multiplier} is outside the recommended range [{low}, {high}]"
        )

    distances = mahalanobis_distances(x, y)
    critical_value = distances.mean() * (3 - multiplier)
    return distances <= critical_value


def filter_outliers(
    x, y, multiplier: float = DEFAULT_MULTIPLIER
) -> tuple[np.ndarray, np.ndarray]:
    """
    Drop pairs whose Mahalanobis distance exceeds the critical value.

    Survivors keep their relative order.

    Args:
        x: Values of the first variable
        y: Values of the second variable
        multiplier: Filter strength; larger is stricter

    Returns:
        Tuple of (x, y) arrays holding only the retained pairs
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    mask = outlier_mask(x, y, multiplier)
    return x[mask], y[mask]
