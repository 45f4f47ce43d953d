"""Base component protocol for UI components.

Every panel of the explorer follows this pattern so the app can hand the
same state and configuration to each of them.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import panel as pn

if TYPE_CHECKING:
    from config import AppConfig
    from core.base_app import DataHolder


class BaseComponent(ABC):
    """
    Abstract base class for UI components.

    Components read the loaded data from the shared DataHolder and their
    defaults (matrix options, style, limits) from the AppConfig of the
    active data source.

    Usage:
        class RowCount(BaseComponent):
            def create(self) -> pn.viewable.Viewable:
                return pn.bind(
                    lambda df: pn.pane.Markdown(f"{len(df)} rows"),
                    df=self.data_holder.param.filtered_df,
                )
    """

    def __init__(self, data_holder: "DataHolder", config: "AppConfig"):
        """
        Initialize the component.

        Args:
            data_holder: Shared state container for reactive updates
            config: Configuration of the active data source
        """
        self.data_holder = data_holder
        self.config = config

    @abstractmethod
    def create(self) -> pn.viewable.Viewable:
        """
        Build the component's Panel layout.

        Returns:
            A Panel viewable object (Column, Row, pane, widget, etc.)
        """
        pass
