"""
Render options for the scatterplot matrix.

Options are an immutable value built once per render. `from_mapping` accepts
the dashboard-style option names (``ShowRegression``) as well as the
attribute names (``show_regression``).
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Mapping

logger = logging.getLogger(__name__)

# Dashboard option name -> attribute name
OPTION_ALIASES = {
    "Width": "width",
    "Height": "height",
    "RemoveOutliers": "remove_outliers",
    "FilterMultiplier": "filter_multiplier",
    "ShowBasicStatistics": "show_basic_statistics",
    "ShowRegression": "show_regression",
    "ShowPearson": "show_pearson",
    "ShowSpearman": "show_spearman",
}


@dataclass(frozen=True)
class MatrixOptions:
    """Options recognised by the matrix builder."""

    width: int = 700
    height: int = 700
    remove_outliers: bool = False
    filter_multiplier: float = 1.5
    show_basic_statistics: bool = False
    show_regression: bool = False
    show_pearson: bool = False
    show_spearman: bool = False

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None = None) -> "MatrixOptions":
        """
        Build options from a plain mapping.

        Unknown keys are ignored and None values keep the default.

        Args:
            options: Mapping of option name to value (may be None)

        Returns:
            New MatrixOptions instance
        """
        if not options:
            return cls()

        field_names = {f.name for f in dataclasses.fields(cls)}
        values = {}
        for key, value in options.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in field_names:
                logger.debug(f"Ignoring unknown matrix option: {key}")
                continue
            if value is None:
                continue
            values[name] = value
        return cls(**values)

    def replace(self, **changes) -> "MatrixOptions":
        return dataclasses.replace(self, **changes)
