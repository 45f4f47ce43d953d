"""
Tests for the Bokeh matrix renderer and the ScatterMatrix component.

Run with:
    pytest code/tests/test_renderer.py -v
"""

import sys
from pathlib import Path

# Add code directory to path for imports
code_dir = Path(__file__).parent.parent
sys.path.insert(0, str(code_dir))

import numpy as np
import pandas as pd
import panel as pn
import pytest
from bokeh.models import Label


@pytest.fixture
def dataset():
    from matrix import Dataset

    rng = np.random.default_rng(8)
    x = rng.normal(size=30)
    values = np.column_stack([x, x + rng.normal(size=30), rng.normal(size=30)])
    return Dataset(values=values, names=("a", "b", "c"))


def _figures(layout):
    return [child[0] for child in layout.children]


def _label_texts(fig):
    return [item.text for item in fig.center if isinstance(item, Label)]


class TestRenderScene:
    """Test the gridplot produced for a scene."""

    def test_one_figure_per_cell(self, dataset):
        from components import render_scene
        from matrix import build_scene

        layout = render_scene(build_scene(dataset))
        figures = _figures(layout)

        assert len(figures) == 9
        assert all(fig.output_backend == "svg" for fig in figures)

    def test_figure_positions_follow_scene(self, dataset):
        from components import render_scene
        from matrix import build_scene

        scene = build_scene(dataset)
        layout = render_scene(scene)

        positions = {(row, col) for _, row, col in layout.children}
        assert positions == {(r, c) for r in range(3) for c in range(3)}

    def test_frame_size(self, dataset):
        from components import render_scene
        from matrix import MatrixOptions, build_scene

        scene = build_scene(dataset, MatrixOptions(width=500, height=500))
        fig = _figures(render_scene(scene))[0]

        assert fig.frame_width == int(scene.cell_size - scene.padding)

    def test_diagonal_label(self, dataset):
        from components import render_cell
        from config import MatrixStyle
        from matrix import build_scene

        scene = build_scene(dataset)
        fig = render_cell(scene.cell(1, 1), scene, MatrixStyle())

        assert "b" in _label_texts(fig)

    def test_diagonal_statistics_text(self, dataset):
        from components import render_cell
        from config import MatrixStyle
        from matrix import MatrixOptions, build_scene

        scene = build_scene(dataset, MatrixOptions(show_basic_statistics=True))
        texts = _label_texts(render_cell(scene.cell(0, 0), scene, MatrixStyle()))

        assert len(texts) == 8
        assert texts[1].startswith("Mean : ")
        assert texts[-1].startswith("Kurtosis : ")

    def test_correlation_labels(self, dataset):
        from components import render_cell
        from config import MatrixStyle
        from matrix import MatrixOptions, build_scene, format_value

        scene = build_scene(dataset, MatrixOptions(show_pearson=True, show_spearman=True))
        cell = scene.cell(0, 1)
        texts = _label_texts(render_cell(cell, scene, MatrixStyle()))

        assert texts == [f"γ : {format_value(cell.pearson)}", f"ρ : {format_value(cell.spearman)}"]

    def test_regression_segment(self, dataset):
        from components import render_cell
        from config import MatrixStyle
        from matrix import MatrixOptions, build_scene

        scene = build_scene(dataset, MatrixOptions(show_regression=True))
        fig = render_cell(scene.cell(0, 1), scene, MatrixStyle())

        sources = [r.data_source.data for r in fig.renderers]
        assert any("equation" in data for data in sources)


class TestCreateScatterMatrix:
    """Test drawing onto a Panel surface."""

    def test_replaces_previous_output(self, dataset):
        from components import create_scatter_matrix

        surface = pn.Column(pn.pane.Markdown("old"))
        create_scatter_matrix(dataset, surface)
        create_scatter_matrix(dataset, surface, {"ShowRegression": True})

        assert len(surface) == 1
        assert isinstance(surface[0], pn.pane.Bokeh)

    def test_mapping_options(self, dataset):
        from components import create_scatter_matrix

        scene = create_scatter_matrix(dataset, pn.Column(), {"ShowPearson": True, "Unknown": 1})

        assert scene.options.show_pearson is True
        assert scene.cell(0, 1).pearson is not None

    def test_too_small_raises(self):
        from components import create_scatter_matrix
        from matrix import Dataset, DatasetTooSmallError

        dataset = Dataset.from_rows([[1, 2], [2, 1]], names=["a", "b"])
        with pytest.raises(DatasetTooSmallError):
            create_scatter_matrix(dataset, pn.Column())


class TestScatterMatrixComponent:
    """Test the ScatterMatrix component outside a server."""

    def _component(self):
        from components import ScatterMatrix
        from config import AppConfig
        from core.base_app import DataHolder

        return ScatterMatrix(DataHolder(), AppConfig())

    def test_options_from_widgets(self):
        component = self._component()
        component.regression_toggle.value = True
        component.filter_multiplier_slider.value = 1.2

        options = component.current_options()

        assert options.show_regression is True
        assert options.filter_multiplier == pytest.approx(1.2)

    def test_multiplier_hidden_until_filter_enabled(self):
        component = self._component()

        assert component.filter_multiplier_slider.visible is False
        component.remove_outliers_toggle.value = True
        assert component.filter_multiplier_slider.visible is True

    def test_render_plot(self):
        component = self._component()
        df = pd.DataFrame({"a": np.arange(10.0), "b": np.arange(10.0) ** 2, "label": list("abcdefghij")})

        result = component._render_plot(df, [])

        assert component.columns_select.options == ["a", "b"]
        assert isinstance(result, pn.Column)
        assert component.last_scene.n == 2

    def test_render_plot_too_small(self):
        component = self._component()
        df = pd.DataFrame({"a": [1.0, 2.0, 3.0], "b": [3.0, 1.0, 2.0]})

        result = component._render_plot(df, ["a", "b"])

        assert isinstance(result, pn.pane.Markdown)
        assert "too small" in result.object

    def test_render_plot_without_data(self):
        component = self._component()

        result = component._render_plot(pd.DataFrame(), [])
        assert "Select at least 1 numeric column" in result.object
