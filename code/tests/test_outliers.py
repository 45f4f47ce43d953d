"""
Tests for Mahalanobis outlier filtering.

Run with:
    pytest code/tests/test_outliers.py -v
"""

import sys
from pathlib import Path

# Add code directory to path for imports
code_dir = Path(__file__).parent.parent
sys.path.insert(0, str(code_dir))

import numpy as np
import pytest
from scipy.spatial import distance


def _circle(n=12, radius=2.0):
    """Points evenly spaced on a circle: every distance from the mean is equal."""
    angles = np.linspace(0, 2 * np.pi, n, endpoint=False)
    return radius * np.cos(angles) + 5, radius * np.sin(angles) - 3


class TestMahalanobisDistances:
    """Test the distance computation."""

    def test_matches_scipy(self):
        from matrix import mahalanobis_distances

        rng = np.random.default_rng(0)
        x = rng.normal(size=30)
        y = 0.5 * x + rng.normal(size=30)

        points = np.column_stack([x, y])
        inverse = np.linalg.inv(np.cov(points, rowvar=False))
        mean = points.mean(axis=0)
        expected = [distance.mahalanobis(point, mean, inverse) for point in points]

        np.testing.assert_allclose(mahalanobis_distances(x, y), expected)

    def test_circle_distances_are_equal(self):
        from matrix import mahalanobis_distances

        distances = mahalanobis_distances(*_circle())
        np.testing.assert_allclose(distances, distances[0])

    def test_identical_points_are_singular(self):
        from matrix import SingularCovarianceError, mahalanobis_distances

        with pytest.raises(SingularCovarianceError):
            mahalanobis_distances([1, 1, 1, 1], [2, 2, 2, 2])

    def test_collinear_points_are_singular(self):
        from matrix import SingularCovarianceError, mahalanobis_distances

        with pytest.raises(SingularCovarianceError):
            mahalanobis_distances([1, 2, 3, 4], [2, 4, 6, 8])

    def test_too_few_points(self):
        from matrix import SingularCovarianceError, mahalanobis_distances

        with pytest.raises(SingularCovarianceError):
            mahalanobis_distances([1, 2], [3, 1])


class TestFilterOutliers:
    """Test filtering by the critical distance."""

    def test_equal_distances_are_kept(self):
        from matrix import filter_outliers

        x, y = _circle()
        kept_x, kept_y = filter_outliers(x, y, 1.5)

        np.testing.assert_array_equal(kept_x, x)
        np.testing.assert_array_equal(kept_y, y)

    def test_critical_value_is_mean_times_three_minus_multiplier(self, monkeypatch):
        import matrix.outliers as outliers

        # mean distance 2.0; m = 1.5 gives critical value 3.0
        distances = np.array([1.0, 1.0, 1.0, 3.0, 4.0])
        monkeypatch.setattr(outliers, "mahalanobis_distances", lambda x, y: distances)

        mask = outliers.outlier_mask(np.arange(5), np.arange(5), 1.5)
        np.testing.assert_array_equal(mask, [True, True, True, True, False])

        # m = 2.0 gives critical value 2.0
        mask = outliers.outlier_mask(np.arange(5), np.arange(5), 2.0)
        np.testing.assert_array_equal(mask, [True, True, True, False, False])

    def test_larger_multiplier_is_stricter(self):
        from matrix import filter_outliers

        rng = np.random.default_rng(4)
        x = rng.normal(size=200)
        y = x + rng.normal(size=200)

        loose, _ = filter_outliers(x, y, 1.0)
        strict, _ = filter_outliers(x, y, 2.0)
        assert len(strict) <= len(loose)

    def test_survivors_keep_their_order(self):
        from matrix import filter_outliers

        rng = np.random.default_rng(2)
        x = rng.normal(size=60)
        y = rng.normal(size=60)
        x[10], y[10] = 30.0, -30.0

        kept_x, kept_y = filter_outliers(x, y, 1.5)

        assert 30.0 not in kept_x
        positions = [int(np.flatnonzero(x == value)[0]) for value in kept_x]
        assert positions == sorted(positions)
        np.testing.assert_array_equal(kept_y, y[positions])

    def test_warns_outside_recommended_range(self, caplog):
        from matrix import filter_outliers

        x, y = _circle()
        with caplog.at_level("WARNING", logger="matrix.outliers"):
            filter_outliers(x, y, 2.5)

        assert "outside the recommended range" in caplog.text
