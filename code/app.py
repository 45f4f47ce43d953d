"""
Scatterplot Matrix Explorer

A Panel app for exploring pairwise relations between numeric variables.

To run:
    panel serve code/app.py --dev --show
"""

import logging

import pandas as pd
import panel as pn
import param

import matrix
from components import DataSourcePanel, ScatterMatrix, StatusPanel
from config import SOURCE_REGISTRY, AppConfig
from core.base_app import BaseApp
from data import UploadedCsvLoader

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize Panel extensions
pn.extension()


class ScatterMatrixApp(BaseApp):
    """
    Panel app for scatterplot matrices of tabular data.

    Inherits from BaseApp to get:
    - DataHolder for reactive state management
    - Global filtering with pandas query

    This app adds:
    - Source selection (built-in demos or an uploaded CSV)
    - The ScatterMatrix component in the main area
    """

    current_config = param.ClassSelector(
        class_=AppConfig, default=None, doc="Current source config"
    )

    def __init__(self, **params):
        super().__init__(**params)

        first_source = list(SOURCE_REGISTRY.keys())[0]
        self.current_config = SOURCE_REGISTRY[first_source][1]

        self._init_components()

    def _init_components(self):
        """Create component instances for the current config."""
        self._components["data_source"] = DataSourcePanel(
            self.data_holder,
            self.current_config,
            source_names=list(SOURCE_REGISTRY.keys()),
            select_source_callback=self.select_source,
            upload_callback=self.load_upload,
        )
        self._components["status"] = StatusPanel(self.data_holder, self.current_config)
        self._components["scatter_matrix"] = ScatterMatrix(self.data_holder, self.current_config)

    def _set_config(self, config: AppConfig) -> None:
        """Point every component at a new config without recreating widgets."""
        self.current_config = config
        for component in self._components.values():
            component.config = config
        self._components["scatter_matrix"].apply_config(config)

    def _reset_data(self) -> None:
        self.df_full = None
        self.data_holder.filtered_df = pd.DataFrame()
        self.data_holder.is_loaded = False
        self.data_holder.load_status = ""
        self.data_holder.source_name = ""

    def select_source(self, source_name: str) -> str:
        """Switch to a built-in source and load it."""
        if source_name not in SOURCE_REGISTRY:
            logger.warning(f"Unknown data source: {source_name}")
            return f"Unknown data source: {source_name}"

        _, config = SOURCE_REGISTRY[source_name]
        self._set_config(config)
        self._reset_data()
        logger.info(f"Data source changed to: {source_name}")
        return self.load_data()

    def load_upload(self, content: bytes, filename: str) -> str:
        """Load an uploaded CSV file as the current source."""
        base = self.current_config or AppConfig()
        config = AppConfig(
            app_title=base.app_title,
            doc_title=base.doc_title,
            data_loader=UploadedCsvLoader(content, filename),
            matrix=base.matrix,
            style=base.style,
            filter=base.filter,
            max_variables=base.max_variables,
        )
        self._set_config(config)
        self._reset_data()
        logger.info(f"Loading uploaded file: {filename}")
        return self.load_data()

    def load_data(self) -> str:
        """Load data from the current source's loader."""
        if not self.current_config or not self.current_config.data_loader:
            return "Error: No data loader configured"

        loader = self.current_config.data_loader
        try:
            logger.info(f"Loading data from {loader.source_name}")
            self.data_holder.load_status = "Loading..."
            df = loader.load()
        except Exception as e:
            logger.error(f"Failed to load data: {e}")
            return self.set_data(None, f"Error: {e}")

        if df is None or df.empty:
            return self.set_data(None, "No data returned from source")

        logger.info(f"Loaded {len(df)} rows from {loader.source_name}")
        return self.set_data(
            df, f"Loaded {len(df)} rows from `{loader.source_name}`", source_name=loader.source_name
        )

    def create_welcome_content(self) -> pn.Column:
        """Create the placeholder content shown before data is loaded."""
        sources = "\n".join(
            f"<li><strong>{name}</strong> ({config.data_loader.source_name})</li>"
            for name, (_, config) in SOURCE_REGISTRY.items()
        )
        welcome_html = f"""
        <div style="text-align: center; padding: 50px 20px;">
            <h2>Welcome to the Scatterplot Matrix Explorer</h2>
            <p style="font-size: 1.1em; color: #666;">
                Select a data source or upload a CSV file from the sidebar.
            </p>
            <div style="margin-top: 30px; padding: 20px; background: #f8f9fa; border-radius: 8px;">
                <h3 style="margin-top: 0;">Built-in sources:</h3>
                <ul style="text-align: left; max-width: 500px; margin: 0 auto;">
                    {sources}
                </ul>
            </div>
        </div>
        """

        return pn.Column(
            pn.pane.HTML(welcome_html, sizing_mode="stretch_width"),
            sizing_mode="stretch_width",
        )

    def create_main_content(self) -> pn.viewable.Viewable:
        """Create the main content area."""

        def render_content(is_loaded):
            if not is_loaded:
                return self.create_welcome_content()

            count_display = pn.bind(
                lambda df: pn.pane.Markdown(
                    f"**Showing {len(df) if df is not None else 0} rows**",
                    css_classes=["alert", "alert-success", "p-2"],
                ),
                df=self.data_holder.param.filtered_df,
            )

            return pn.Column(
                count_display,
                self._components["scatter_matrix"].create(),
                sizing_mode="stretch_width",
            )

        return pn.bind(render_content, is_loaded=self.data_holder.param.is_loaded)

    def create_sidebar(self) -> list:
        """Create sidebar content."""
        credits = pn.pane.Markdown(
            f"---\n\n**Version** {matrix.__version__}",
            sizing_mode="stretch_width",
        )
        filter_config = self.current_config.filter

        return [
            self._components["data_source"].create(),
            pn.layout.Divider(),
            self.create_filter_panel(
                examples=filter_config.example_queries,
                placeholder=filter_config.default_placeholder,
            ),
            pn.layout.Divider(),
            self._components["status"].create(),
            pn.Spacer(height=20),
            credits,
        ]


# =============================================================================
# App Initialization
# =============================================================================

if __name__.startswith("bokeh"):
    app = ScatterMatrixApp()
    pn.state.curdoc.title = app.current_config.doc_title
    app.main_layout(title=app.current_config.app_title).servable()
