"""
Bokeh renderer for scatterplot matrix scenes.

Consumes a MatrixScene built by `matrix.scene` and draws one figure per cell
into a Bokeh gridplot with SVG output. No statistics are computed here.
"""

import logging
from typing import Any, Mapping

import panel as pn
from bokeh.layouts import gridplot
from bokeh.models import ColumnDataSource, HoverTool, Label, Range1d
from bokeh.plotting import figure

from config.models import MatrixStyle
from matrix import Dataset, MatrixOptions, build_scene, format_value
from matrix.scene import CellScene, MatrixScene

from .color_mapping import categorical_color

logger = logging.getLogger(__name__)

# Vertical spacing of text lines inside a cell, as a fraction of the padding
TEXT_LINE_STEP = 0.8


def _axis_range(domain: tuple[float, float]) -> Range1d:
    """Range for a cell axis; constant domains are widened by 0.5 each way."""
    low, high = domain
    if low == high:
        return Range1d(start=low - 0.5, end=high + 0.5)
    return Range1d(start=low, end=high)


def _add_text(p, text: str, line: int, padding: float, style: MatrixStyle, bold: bool = False):
    frame_height = p.frame_height
    label = Label(
        x=padding / 2,
        y=frame_height - padding / 2 - (line + 1) * padding * TEXT_LINE_STEP,
        x_units="screen",
        y_units="screen",
        text=text,
        text_color=style.text_color,
        text_font_size=f"{style.label_font_size if bold else style.font_size}pt",
        text_font_style="bold" if bold else "normal",
    )
    p.add_layout(label)
    return label


def _style_axes(p, cell: CellScene, n: int, style: MatrixStyle) -> None:
    """Ticks on every cell, tick labels only along the outer edge."""
    for axis in (p.xaxis[0], p.yaxis[0]):
        axis.ticker.desired_num_ticks = style.tick_count
        axis.axis_line_color = None
        axis.major_tick_line_color = style.grid_color
        axis.minor_tick_line_color = None
        axis.major_label_text_color = style.text_color

    show_x_labels = cell.row == n - 1
    show_y_labels = cell.column == 0
    p.xaxis.major_label_text_font_size = f"{style.font_size}pt" if show_x_labels else "0pt"
    p.yaxis.major_label_text_font_size = f"{style.font_size}pt" if show_y_labels else "0pt"

    p.grid.grid_line_color = style.grid_color
    p.outline_line_color = style.frame_color


def _draw_points(p, cell: CellScene, style: MatrixStyle) -> None:
    if len(cell.x) == 0:
        return

    if cell.color_index is None:
        color = style.diagonal_point_color
    else:
        color = categorical_color(cell.color_index, style.palette)

    source = ColumnDataSource(data={"x": cell.x, "y": cell.y})
    renderer = p.scatter(
        x="x", y="y", source=source,
        marker="circle", size=2 * style.point_radius,
        fill_color=color, fill_alpha=style.point_alpha, line_color=None,
    )
    hover = HoverTool(
        tooltips=[
            (cell.x_name, "@x{0.000}"),
            (cell.y_name, "@y{0.000}"),
        ],
        renderers=[renderer],
    )
    p.add_tools(hover)


def _draw_regression(p, cell: CellScene, style: MatrixStyle) -> None:
    segment = cell.regression
    source = ColumnDataSource(
        data={
            "x0": [segment.x0],
            "y0": [segment.y0],
            "x1": [segment.x1],
            "y1": [segment.y1],
            "equation": [segment.regression.equation],
            "r2": [segment.regression.r2],
        }
    )
    renderer = p.segment(
        x0="x0", y0="y0", x1="x1", y1="y1", source=source,
        line_color=style.regression_color, line_width=style.regression_width,
    )
    p.add_tools(HoverTool(tooltips="@equation (R²=@r2{0.000})", renderers=[renderer]))


def _draw_label_tooltip(p, cell: CellScene) -> None:
    """Invisible box over the frame that shows the variable's source path on hover."""
    source = ColumnDataSource(
        data={
            "left": [p.x_range.start],
            "right": [p.x_range.end],
            "bottom": [p.y_range.start],
            "top": [p.y_range.end],
            "path": [cell.label_tooltip or ""],
        }
    )
    renderer = p.quad(
        left="left", right="right", bottom="bottom", top="top", source=source,
        fill_alpha=0, line_alpha=0,
    )
    p.add_tools(HoverTool(tooltips="@path", renderers=[renderer]))


def render_cell(cell: CellScene, scene: MatrixScene, style: MatrixStyle):
    """Create the Bokeh figure for one cell."""
    frame = max(1, int(scene.cell_size - scene.padding))
    p = figure(
        frame_width=frame,
        frame_height=frame,
        x_range=_axis_range(cell.x_domain),
        y_range=_axis_range(cell.y_domain),
        tools="",
        toolbar_location=None,
        output_backend="svg",
        background_fill_color=style.background_color,
        border_fill_color=style.background_color,
    )
    p.min_border = int(scene.padding / 2)
    _style_axes(p, cell, scene.n, style)

    if cell.is_diagonal:
        _draw_label_tooltip(p, cell)
        _add_text(p, cell.label, 0, scene.padding, style, bold=True)
        if cell.statistics is not None:
            for line, (name, value) in enumerate(cell.statistics.as_rows(), start=1):
                _add_text(p, f"{name} : {format_value(value)}", line, scene.padding, style)
        _draw_points(p, cell, style)
        return p

    _draw_points(p, cell, style)

    line = 0
    if cell.pearson is not None:
        _add_text(p, f"γ : {format_value(cell.pearson)}", line, scene.padding, style)
        line += 1
    if cell.spearman is not None:
        _add_text(p, f"ρ : {format_value(cell.spearman)}", line, scene.padding, style)

    if cell.regression is not None:
        _draw_regression(p, cell, style)

    return p


def render_scene(scene: MatrixScene, style: MatrixStyle | None = None):
    """
    Render a matrix scene as a Bokeh gridplot.

    Args:
        scene: Scene built by `build_scene`
        style: Visual constants (defaults when None)

    Returns:
        Bokeh GridPlot with N×N figures placed at their grid positions
    """
    style = style or MatrixStyle()
    rows = [
        [render_cell(cell, scene, style) for cell in grid_row]
        for grid_row in scene.grid()
    ]
    return gridplot(rows, toolbar_location=None)


def create_scatter_matrix(
    dataset: Dataset,
    target: pn.Column,
    options: MatrixOptions | Mapping[str, Any] | None = None,
    style: MatrixStyle | None = None,
) -> MatrixScene:
    """
    Draw a scatterplot matrix onto a Panel surface.

    The surface is cleared first, so every call fully replaces the previous
    output.

    Args:
        dataset: Observations to plot
        target: Panel layout (e.g. pn.Column) that receives the plot
        options: MatrixOptions or a mapping of option names to values
        style: Visual constants for the renderer

    Returns:
        The MatrixScene that was drawn

    Raises:
        DatasetTooSmallError: If the dataset has too few rows
    """
    if not isinstance(options, MatrixOptions):
        options = MatrixOptions.from_mapping(options)

    target.clear()
    scene = build_scene(dataset, options)
    layout = render_scene(scene, style)
    target.append(pn.pane.Bokeh(layout))

    logger.info(f"Rendered {scene.n}x{scene.n} scatterplot matrix")
    return scene
