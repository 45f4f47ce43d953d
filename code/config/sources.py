"""
Data source configurations for the Scatterplot Matrix Explorer.

This module defines one configuration per built-in data source.
Add new sources here to make them available in the app.
"""

from pathlib import Path

from data import CsvDataLoader, DemoDataLoader

from .models import AppConfig, FilterConfig, MatrixOptions


# =============================================================================
# Source Configurations
# =============================================================================

# Four moderately correlated variables, no outliers
CORRELATED_DEMO_CONFIG = AppConfig(
    data_loader=DemoDataLoader(
        name="correlated-demo",
        n_rows=200,
        n_variables=4,
        correlation=0.7,
    ),
    matrix=MatrixOptions(show_pearson=True, show_regression=True),
)


# Same shape with 5% injected outliers, outlier filter and both correlations on
OUTLIER_DEMO_CONFIG = AppConfig(
    app_title="Scatterplot Matrix Explorer - Outlier Demo",
    doc_title="Scatterplot Matrix Explorer - Outlier Demo",
    data_loader=DemoDataLoader(
        name="outlier-demo",
        n_rows=150,
        n_variables=3,
        correlation=0.8,
        outlier_fraction=0.05,
        seed=7,
    ),
    matrix=MatrixOptions(
        remove_outliers=True,
        filter_multiplier=1.5,
        show_pearson=True,
        show_spearman=True,
        show_regression=True,
    ),
    filter=FilterConfig(
        default_placeholder="e.g., var_1 > 0",
        example_queries=["var_1 > 0", "var_3 < 25"],
    ),
)


# Weakly correlated data with diagonal statistics
WEAK_CORRELATION_DEMO_CONFIG = AppConfig(
    data_loader=DemoDataLoader(
        name="weak-demo",
        n_rows=100,
        n_variables=5,
        correlation=0.2,
        seed=3,
    ),
    matrix=MatrixOptions(show_basic_statistics=True, show_spearman=True),
    default_columns=["var_1", "var_2", "var_3"],
)


# Field measurements shipped with the package; includes a text column, a
# blank cell and an "n/a" entry
SAMPLE_CSV_PATH = Path(__file__).resolve().parent.parent / "data" / "samples" / "plants.csv"

PLANTS_CSV_CONFIG = AppConfig(
    data_loader=CsvDataLoader(SAMPLE_CSV_PATH),
    matrix=MatrixOptions(show_regression=True, show_spearman=True),
    filter=FilterConfig(
        default_placeholder="e.g., height_cm > 12",
        example_queries=["height_cm > 12", "height_cm > 12 and dry_mass_g < 4"],
    ),
    default_columns=["height_cm", "stem_diameter_mm", "dry_mass_g"],
)


# =============================================================================
# Source Registry
# =============================================================================
# Maps display names to (source_key, AppConfig) tuples

SOURCE_REGISTRY: dict[str, tuple[str, AppConfig]] = {
    "Correlated demo": ("correlated-demo", CORRELATED_DEMO_CONFIG),
    "Outlier demo": ("outlier-demo", OUTLIER_DEMO_CONFIG),
    "Weak correlation demo": ("weak-demo", WEAK_CORRELATION_DEMO_CONFIG),
    "Plant measurements (CSV)": ("plants", PLANTS_CSV_CONFIG),
}
