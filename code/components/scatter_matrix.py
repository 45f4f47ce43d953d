"""
Scatterplot matrix component for exploring pairwise relations across columns.

Renders an N×N grid of scatter plots with optional outlier filtering,
regression lines, correlation labels and diagonal statistics. Computation is
done by the `matrix` package; drawing by `matrix_renderer`.
"""

import logging
from typing import TYPE_CHECKING

import numpy as np
import pandas as pd
import panel as pn

from data import frame_to_dataset
from matrix import MIN_ROWS, DatasetTooSmallError, MatrixOptions

from .base import BaseComponent
from .matrix_renderer import create_scatter_matrix

if TYPE_CHECKING:
    from config import AppConfig
    from core.base_app import DataHolder

logger = logging.getLogger(__name__)


class ScatterMatrix(BaseComponent):
    """
    Scatterplot matrix component with controls for every render option.

    Features:
    - Select the variables (columns) to plot
    - Mahalanobis outlier filter with adjustable strength
    - Regression line, Pearson and Spearman labels per pair
    - Descriptive statistics on the diagonal
    - Widget state synced to URL query params
    """

    def __init__(self, data_holder: "DataHolder", config: "AppConfig"):
        super().__init__(data_holder, config)
        self._init_controls()
        self._url_sync_initialized = False
        self.last_scene = None

    def _sync_url_state(self) -> None:
        """Bidirectionally sync widget state to URL query params."""
        if self._url_sync_initialized:
            return
        self._url_sync_initialized = True

        location = pn.state.location
        if location is None:
            return
        location.sync(self.columns_select, {"value": "sm_cols"})
        location.sync(self.remove_outliers_toggle, {"value": "sm_out"})
        location.sync(self.filter_multiplier_slider, {"value": "sm_mult"})
        location.sync(self.basic_statistics_toggle, {"value": "sm_stats"})
        location.sync(self.regression_toggle, {"value": "sm_reg"})
        location.sync(self.pearson_toggle, {"value": "sm_pear"})
        location.sync(self.spearman_toggle, {"value": "sm_spear"})
        location.sync(self.width_slider, {"value": "sm_w"})
        location.sync(self.height_slider, {"value": "sm_h"})

    def _init_controls(self) -> None:
        """Initialize control widgets from the configured default options."""
        defaults = self.config.matrix

        self.columns_select = pn.widgets.MultiSelect(
            name=f"Variables (max {self.config.max_variables})",
            options=[],
            value=[],
            size=8,
            width=180,
        )

        self.remove_outliers_toggle = pn.widgets.Checkbox(
            name="Remove outliers",
            value=defaults.remove_outliers,
            width=180,
        )
        self.filter_multiplier_slider = pn.widgets.FloatSlider(
            name="Filter strength",
            start=1.0,
            end=2.0,
            step=0.1,
            value=defaults.filter_multiplier,
            width=180,
        )
        self.remove_outliers_toggle.param.watch(self._toggle_filter_controls, "value")
        self._toggle_filter_controls(None)

        self.regression_toggle = pn.widgets.Checkbox(
            name="Regression line",
            value=defaults.show_regression,
            width=180,
        )
        self.pearson_toggle = pn.widgets.Checkbox(
            name="Pearson correlation",
            value=defaults.show_pearson,
            width=180,
        )
        self.spearman_toggle = pn.widgets.Checkbox(
            name="Spearman correlation",
            value=defaults.show_spearman,
            width=180,
        )
        self.basic_statistics_toggle = pn.widgets.Checkbox(
            name="Basic statistics",
            value=defaults.show_basic_statistics,
            width=180,
        )

        # Plot settings
        self.width_slider = pn.widgets.IntSlider(
            name="Width",
            start=300,
            end=1600,
            step=50,
            value=defaults.width,
            width=180,
        )
        self.height_slider = pn.widgets.IntSlider(
            name="Height",
            start=300,
            end=1600,
            step=50,
            value=defaults.height,
            width=180,
        )

    def apply_config(self, config: "AppConfig") -> None:
        """Switch to a new source config and reset every widget to its defaults."""
        self.config = config
        defaults = config.matrix

        self.columns_select.name = f"Variables (max {config.max_variables})"
        self.columns_select.value = []
        self.columns_select.options = []

        self.remove_outliers_toggle.value = defaults.remove_outliers
        self.filter_multiplier_slider.value = defaults.filter_multiplier
        self.regression_toggle.value = defaults.show_regression
        self.pearson_toggle.value = defaults.show_pearson
        self.spearman_toggle.value = defaults.show_spearman
        self.basic_statistics_toggle.value = defaults.show_basic_statistics
        self.width_slider.value = defaults.width
        self.height_slider.value = defaults.height

    def _toggle_filter_controls(self, _event) -> None:
        self.filter_multiplier_slider.visible = self.remove_outliers_toggle.value

    def _update_column_options(self, df: pd.DataFrame) -> None:
        """Update variable options based on available numeric columns."""
        if df is None or df.empty:
            return

        numeric_cols = df.select_dtypes(include=[np.number]).columns.tolist()
        cols_was_empty = not self.columns_select.options
        self.columns_select.options = numeric_cols

        # Set default selection
        if cols_was_empty and not self.columns_select.value:
            defaults = [c for c in self.config.default_columns if c in numeric_cols]
            self.columns_select.value = defaults or numeric_cols[: min(4, self.config.max_variables)]

        # Validate current values
        if self.columns_select.value:
            valid = [c for c in self.columns_select.value if c in numeric_cols]
            if valid != self.columns_select.value:
                self.columns_select.value = valid if valid else numeric_cols[:4]

    def current_options(self) -> MatrixOptions:
        """Collect the widget values into an immutable MatrixOptions."""
        return MatrixOptions(
            width=int(self.width_slider.value),
            height=int(self.height_slider.value),
            remove_outliers=bool(self.remove_outliers_toggle.value),
            filter_multiplier=float(self.filter_multiplier_slider.value),
            show_basic_statistics=bool(self.basic_statistics_toggle.value),
            show_regression=bool(self.regression_toggle.value),
            show_pearson=bool(self.pearson_toggle.value),
            show_spearman=bool(self.spearman_toggle.value),
        )

    def _render_plot(self, df: pd.DataFrame, columns: list[str], **_widget_values):
        """Render the matrix with current settings."""
        try:
            self._update_column_options(df)

            columns = list(self.columns_select.value or columns or [])
            if df is None or df.empty or not columns:
                return pn.pane.Markdown(
                    "Select at least 1 numeric column to create a scatterplot matrix.",
                    css_classes=["alert", "alert-info", "p-3"],
                )

            if len(columns) > self.config.max_variables:
                logger.info(
                    f"Limiting matrix to the first {self.config.max_variables} of {len(columns)} columns"
                )
                columns = columns[: self.config.max_variables]

            dataset = frame_to_dataset(df, columns, source_name=self.data_holder.source_name)

            surface = pn.Column(sizing_mode="stretch_width")
            self.last_scene = create_scatter_matrix(
                dataset, surface, self.current_options(), self.config.style
            )
            return surface
        except DatasetTooSmallError as e:
            logger.error(f"Cannot render scatterplot matrix: {e}")
            return pn.pane.Markdown(
                f"Dataset too small: {e.n_rows} valid rows, at least {MIN_ROWS} needed.",
                css_classes=["alert", "alert-warning", "p-3"],
            )
        except Exception as e:
            logger.error(f"Error rendering scatterplot matrix: {e}")
            return pn.pane.Markdown(
                f"Error rendering scatterplot matrix: {e}",
                css_classes=["alert", "alert-danger", "p-3"],
            )

    def create(self) -> pn.viewable.Viewable:
        """Create the scatterplot matrix component with controls."""
        controls = pn.Column(
            self.columns_select,
            pn.layout.Divider(),
            self.remove_outliers_toggle,
            self.filter_multiplier_slider,
            pn.layout.Divider(),
            self.regression_toggle,
            self.pearson_toggle,
            self.spearman_toggle,
            self.basic_statistics_toggle,
            pn.layout.Divider(),
            pn.Card(
                self.width_slider,
                self.height_slider,
                title="More settings",
                collapsed=True,
                sizing_mode="stretch_width",
            ),
            width=200,
        )

        self._sync_url_state()

        plot = pn.bind(
            self._render_plot,
            df=self.data_holder.param.filtered_df,
            columns=self.columns_select,
            remove_outliers=self.remove_outliers_toggle,
            filter_multiplier=self.filter_multiplier_slider,
            show_basic_statistics=self.basic_statistics_toggle,
            show_regression=self.regression_toggle,
            show_pearson=self.pearson_toggle,
            show_spearman=self.spearman_toggle,
            width=self.width_slider,
            height=self.height_slider,
        )

        return pn.Row(
            controls,
            pn.Spacer(width=20),
            pn.Column(
                pn.pane.Markdown("### Scatterplot Matrix"),
                plot,
                sizing_mode="stretch_width",
            ),
            sizing_mode="stretch_width",
        )
