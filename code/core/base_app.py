"""
Application base with a DataHolder for reactive state.

Subclasses supply a loader and main content; this module owns the shared
state, the global row filter and the page template.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import pandas as pd
import panel as pn
import param

logger = logging.getLogger(__name__)


class DataHolder(param.Parameterized):
    """
    Reactive state shared by every component.

    Attributes:
        filtered_df: Rows that passed the global filter
        is_loaded: Whether a source has been loaded
        load_status: Message from the last load
        source_name: Name of the loaded source, used in variable paths
    """

    filtered_df = param.DataFrame(default=pd.DataFrame(), doc="Rows passing the global filter")
    is_loaded = param.Boolean(default=False, doc="Whether a source has been loaded")
    load_status = param.String(default="", doc="Message from the last load")
    source_name = param.String(default="", doc="Name of the loaded source")


@dataclass(frozen=True)
class FilterResult:
    """Outcome of a global filter request, with its alert level for display."""

    message: str
    level: str = "success"

    @property
    def css_classes(self) -> list[str]:
        return ["alert", f"alert-{self.level}", "p-2"]


class BaseApp(param.Parameterized):
    """
    Base class for the explorer app.

    Subclasses must implement `load_data()` and `create_main_content()`, and
    may extend `create_sidebar()`.
    """

    def __init__(self, **params):
        super().__init__(**params)
        self.data_holder = DataHolder()
        self.df_full: Optional[pd.DataFrame] = None
        self._components: Dict[str, Any] = {}

    def load_data(self) -> str:
        """Load the current source and return a status message."""
        raise NotImplementedError("Subclass must implement load_data()")

    def set_data(self, df: Optional[pd.DataFrame], status: str, source_name: str = "") -> str:
        """
        Publish a loaded frame to the DataHolder.

        An empty or missing frame clears the state and marks the app unloaded.
        """
        loaded = df is not None and not df.empty
        if not loaded:
            logger.warning(f"No data loaded: {status}")
            df = pd.DataFrame()

        self.df_full = df
        self.data_holder.param.update(
            filtered_df=df.copy(),
            is_loaded=loaded,
            load_status=status,
            source_name=source_name if loaded else "",
        )
        return status

    def filter_rows(self, query_string: str) -> FilterResult:
        """
        Restrict the rows every component sees with a pandas query.

        An empty query restores the full frame. A query matching no rows, or
        one pandas cannot evaluate, leaves the current rows untouched.
        """
        if self.df_full is None or self.df_full.empty:
            return FilterResult("No data loaded", "warning")

        query_string = query_string.strip()
        if not query_string:
            self.data_holder.filtered_df = self.df_full.copy()
            return FilterResult(f"Showing all {len(self.df_full)} rows")

        logger.info(f"Applying filter query: '{query_string}'")
        try:
            filtered = self.df_full.query(query_string)
        except Exception as e:
            logger.error(f"Query '{query_string}' failed: {e}")
            return FilterResult(f"Error in query: {e}", "danger")

        if filtered.empty:
            return FilterResult("Query matched no rows; filter not applied.", "warning")

        self.data_holder.filtered_df = filtered
        return FilterResult(f"{len(filtered)} of {len(self.df_full)} rows match.")

    def create_filter_panel(
        self,
        examples: Optional[list] = None,
        placeholder: str = "Enter a pandas query string",
    ) -> pn.Column:
        """
        Build the query input, its buttons and a result alert.

        Clicking an example copies it into the input without applying it.
        """
        query_input = pn.widgets.TextAreaInput(
            name="Query string",
            placeholder=placeholder,
            sizing_mode="stretch_width",
            height=60,
        )
        apply_button = pn.widgets.Button(name="Apply filter", button_type="primary", width=120)
        reset_button = pn.widgets.Button(name="Reset", button_type="light", width=80)
        result_pane = pn.pane.Markdown("", css_classes=["alert", "p-2"], visible=False)

        def show(result: FilterResult):
            result_pane.object = result.message
            result_pane.css_classes = result.css_classes
            result_pane.visible = True

        def on_apply(event):
            show(self.filter_rows(query_input.value))

        def on_reset(event):
            query_input.value = ""
            show(self.filter_rows(""))

        apply_button.on_click(on_apply)
        reset_button.on_click(on_reset)

        example_buttons = []
        for example in examples or []:
            button = pn.widgets.Button(name=example, button_type="light", sizing_mode="stretch_width")
            button.on_click(lambda event, text=example: setattr(query_input, "value", text))
            example_buttons.append(button)

        location = pn.state.location
        if location is not None:
            location.sync(query_input, {"value": "filter"})

        return pn.Column(
            pn.pane.Markdown("### Row Filter"),
            query_input,
            pn.Row(apply_button, reset_button),
            *(
                [pn.pane.Markdown("**Examples:**"), *example_buttons]
                if example_buttons
                else []
            ),
            result_pane,
            sizing_mode="stretch_width",
        )

    def create_main_content(self) -> pn.viewable.Viewable:
        raise NotImplementedError("Subclass must implement create_main_content()")

    def create_sidebar(self) -> list:
        """Sidebar items; the default only shows the row count."""
        return [
            pn.bind(
                lambda df: pn.pane.Markdown(
                    f"**{len(df) if df is not None else 0}** rows",
                    css_classes=["alert", "alert-info", "p-2"],
                ),
                df=self.data_holder.param.filtered_df,
            ),
        ]

    def main_layout(
        self,
        title: str = "Scatterplot Matrix Explorer",
        header_background: str = "#303030",
    ) -> pn.template.BootstrapTemplate:
        """Assemble sidebar and main content into a Bootstrap page."""
        template = pn.template.BootstrapTemplate(
            title=title,
            header_background=header_background,
            main=[self.create_main_content()],
            sidebar=self.create_sidebar(),
        )
        template.sidebar_width = 260
        return template
