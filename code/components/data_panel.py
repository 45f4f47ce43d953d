"""Sidebar components for choosing a data source and showing load status."""

import logging
from typing import TYPE_CHECKING, Callable

import numpy as np
import panel as pn

from .base import BaseComponent

if TYPE_CHECKING:
    from config import AppConfig
    from core.base_app import DataHolder

logger = logging.getLogger(__name__)


class DataSourcePanel(BaseComponent):
    """
    Component for picking a built-in data source or uploading a CSV file.
    """

    PLACEHOLDER = "-- Select a data source --"

    def __init__(
        self,
        data_holder: "DataHolder",
        config: "AppConfig",
        source_names: list[str],
        select_source_callback: Callable[[str], str],
        upload_callback: Callable[[bytes, str], str],
    ):
        """
        Initialize the data source panel.

        Args:
            data_holder: Shared state container
            config: Current source configuration
            source_names: Display names of the built-in sources
            select_source_callback: Called with a source name, returns status message
            upload_callback: Called with CSV bytes and filename, returns status message
        """
        super().__init__(data_holder, config)
        self.select_source_callback = select_source_callback
        self.upload_callback = upload_callback

        self.source_select = pn.widgets.Select(
            name="Data source",
            options=[self.PLACEHOLDER] + list(source_names),
            value=self.PLACEHOLDER,
            sizing_mode="stretch_width",
        )
        self.file_input = pn.widgets.FileInput(accept=".csv", sizing_mode="stretch_width")
        self.status = pn.pane.Markdown("", css_classes=["alert", "alert-info", "p-2"])

        self.source_select.param.watch(self._on_source_change, "value")
        self.file_input.param.watch(self._on_upload, "value")

    def _on_source_change(self, event) -> None:
        if event.new in (None, self.PLACEHOLDER):
            return
        self.status.object = "**Loading data...**"
        self.status.object = self.select_source_callback(event.new)

    def _on_upload(self, event) -> None:
        if not event.new:
            return
        filename = self.file_input.filename or "upload.csv"
        self.status.object = f"**Reading {filename}...**"
        self.status.object = self.upload_callback(event.new, filename)

    def create(self) -> pn.Column:
        """Create the data source panel UI."""
        location = pn.state.location
        if location is not None:
            location.sync(self.source_select, {"value": "source"})

        return pn.Column(
            pn.pane.Markdown("### Data Source"),
            self.source_select,
            pn.pane.Markdown("*or upload a CSV file*"),
            self.file_input,
            self.status,
            sizing_mode="stretch_width",
        )


class StatusPanel(BaseComponent):
    """
    Component for displaying counts about the current data.

    Shows row count, numeric column count and the number of complete
    numeric rows (rows the matrix can use).
    """

    def create(self) -> pn.Column:
        """Create the status panel UI with reactive bindings."""

        def render_stats(df):
            if df is None or df.empty:
                return pn.pane.Markdown(
                    "**Rows:** 0  \n**Numeric columns:** 0",
                    css_classes=["alert", "alert-secondary", "p-1"],
                    styles={"font-size": "12px"},
                )

            numeric = df.select_dtypes(include=[np.number])
            complete = numeric.replace([np.inf, -np.inf], np.nan).dropna()
            return pn.pane.Markdown(
                f"**Rows:** {len(df)}  \n"
                f"**Numeric columns:** {numeric.shape[1]}  \n"
                f"**Complete numeric rows:** {len(complete)}",
                css_classes=["alert", "alert-secondary", "p-1"],
                styles={"font-size": "12px"},
            )

        return pn.Column(
            pn.bind(render_stats, df=self.data_holder.param.filtered_df),
            sizing_mode="stretch_width",
            css_classes=["p-2"],
        )
