"""
Configuration dataclasses for the Scatterplot Matrix Explorer.

This module provides typed configuration classes for the app and the matrix
renderer. Render options themselves (MatrixOptions) live with the statistical
core in `matrix.options` and are re-exported here.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from matrix.options import MatrixOptions

if TYPE_CHECKING:
    from data import DataLoader


@dataclass(frozen=True)
class MatrixStyle:
    """Visual constants for the Bokeh matrix renderer."""

    background_color: str = "#303030"
    text_color: str = "#ffffff"
    frame_color: str = "#aaaaaa"
    grid_color: str = "#000000"

    # Categorical palette cycled through by variable pairs
    palette: str = "Category20"
    diagonal_point_color: str = "#ffffff"

    point_radius: int = 4
    point_alpha: float = 0.7

    regression_color: str = "#ffffff"
    regression_width: float = 2.0

    tick_count: int = 4
    font_size: int = 10
    label_font_size: int = 12


@dataclass
class FilterConfig:
    """Configuration for pandas query filtering."""

    default_placeholder: str = "e.g., var_1 > 0 and var_2 < 20"
    example_queries: list[str] = field(
        default_factory=lambda: [
            "var_1 > 0",
            "var_2 > 5 and var_2 < 15",
            "index % 2 == 0",
        ]
    )


@dataclass
class AppConfig:
    """
    Main application configuration.

    One AppConfig is registered per data source in `config.sources`.
    """

    # App metadata
    app_title: str = "Scatterplot Matrix Explorer"
    doc_title: str = "Scatterplot Matrix Explorer"

    # Data loader - implements the DataLoader interface
    data_loader: "DataLoader | None" = None

    # Sub-configurations
    matrix: MatrixOptions = field(default_factory=MatrixOptions)
    style: MatrixStyle = field(default_factory=MatrixStyle)
    filter: FilterConfig = field(default_factory=FilterConfig)

    # Variables selected on first load (empty = first numeric columns)
    default_columns: list[str] = field(default_factory=list)

    # Upper bound on the number of variables in one matrix
    max_variables: int = 8
