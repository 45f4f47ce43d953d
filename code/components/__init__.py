"""Visualization components for the scatterplot matrix explorer."""

from .base import BaseComponent
from .color_mapping import categorical_color, get_palette
from .data_panel import DataSourcePanel, StatusPanel
from .matrix_renderer import create_scatter_matrix, render_cell, render_scene
from .scatter_matrix import ScatterMatrix

__all__ = [
    "BaseComponent",
    "DataSourcePanel",
    "ScatterMatrix",
    "StatusPanel",
    "categorical_color",
    "create_scatter_matrix",
    "get_palette",
    "render_cell",
    "render_scene",
]
