"""
Scene builder for the scatterplot matrix.

Turns a Dataset and MatrixOptions into a MatrixScene: plain data describing
every cell (points, labels, overlays, grid position). Renderers consume the
scene and never recompute statistics.

Grid layout:
- Cell (i, j) plots variable i on x and variable j on y
- It sits at grid row j, grid column N - i - 1
- Diagonal cells (i == j) therefore run from top-right to bottom-left
"""

import logging
from dataclasses import dataclass, field

import numpy as np

from .correlation import pearson, spearman
from .dataset import MIN_ROWS, Dataset
from .domain import variable_domains
from .options import MatrixOptions
from .outliers import SingularCovarianceError, outlier_mask
from .regression import RegressionSegment, clip_to_domain, linear_regression
from .statistics import BasicStatistics, basic_statistics

logger = logging.getLogger(__name__)

# Pixels subtracted from the surface size, and the gap around each frame
SURFACE_MARGIN = 20
PADDING = 20

# Size of the categorical palette pair colours cycle through
PALETTE_SIZE = 20


@dataclass
class CellScene:
    """Everything needed to draw one cell of the matrix."""

    i: int
    j: int
    row: int
    column: int
    x_name: str
    y_name: str
    x_domain: tuple[float, float]
    y_domain: tuple[float, float]
    x: np.ndarray
    y: np.ndarray
    # Palette index for off-diagonal points; None draws uncoloured points
    color_index: int | None = None
    removed_outliers: int = 0
    pearson: float | None = None
    spearman: float | None = None
    regression: RegressionSegment | None = None
    label: str | None = None
    label_tooltip: str | None = None
    statistics: BasicStatistics | None = None

    @property
    def is_diagonal(self) -> bool:
        return self.i == self.j


@dataclass
class MatrixScene:
    """Render tree for a full N×N matrix."""

    names: tuple[str, ...]
    paths: tuple[str, ...]
    domains: list[tuple[float, float]]
    options: MatrixOptions
    cell_size: float
    padding: float
    cells: list[CellScene] = field(default_factory=list)

    @property
    def n(self) -> int:
        return len(self.names)

    def cell(self, i: int, j: int) -> CellScene:
        return self.cells[i * self.n + j]

    def grid(self) -> list[list[CellScene]]:
        """Cells arranged by grid row and column."""
        rows: list[list[CellScene | None]] = [[None] * self.n for _ in range(self.n)]
        for cell in self.cells:
            rows[cell.row][cell.column] = cell
        return rows


class _PairColors:
    """Assigns palette indices to pair keys in order of first use."""

    def __init__(self, palette_size: int = PALETTE_SIZE):
        self._palette_size = palette_size
        self._indices: dict[int, int] = {}

    def index_for(self, key: int) -> int:
        if key not in self._indices:
            self._indices[key] = len(self._indices) % self._palette_size
        return self._indices[key]


def cell_size_for(options: MatrixOptions, n: int) -> float:
    """Edge length in pixels of one cell for an N-variable matrix."""
    width = min(options.width, options.height) - SURFACE_MARGIN
    return (width - 2 * PADDING) / n


def build_scene(dataset: Dataset, options: MatrixOptions | None = None) -> MatrixScene:
    """
    Compute the scene for a scatterplot matrix.

    Args:
        dataset: Observations to plot, already free of non-numeric rows
        options: Render options (defaults when None)

    Returns:
        MatrixScene with one CellScene per ordered variable pair

    Raises:
        DatasetTooSmallError: If the dataset has fewer than MIN_ROWS rows
    """
    options = options or MatrixOptions()
    dataset.require_rows(MIN_ROWS)

    n = dataset.n_variables
    domains = variable_domains(dataset)
    scene = MatrixScene(
        names=dataset.names,
        paths=dataset.paths,
        domains=domains,
        options=options,
        cell_size=cell_size_for(options, n),
        padding=PADDING,
    )

    colors = _PairColors()
    for i in range(n):
        for j in range(n):
            scene.cells.append(_build_cell(dataset, domains, options, colors, i, j))

    logger.debug(f"Built scene for {n} variables and {dataset.n_rows} rows")
    return scene


def _build_cell(
    dataset: Dataset,
    domains: list[tuple[float, float]],
    options: MatrixOptions,
    colors: _PairColors,
    i: int,
    j: int,
) -> CellScene:
    n = dataset.n_variables
    x = dataset.column(i)
    y = dataset.column(j)
    cell = CellScene(
        i=i,
        j=j,
        row=j,
        column=n - i - 1,
        x_name=dataset.names[i],
        y_name=dataset.names[j],
        x_domain=domains[i],
        y_domain=domains[j],
        x=x,
        y=y,
    )

    if cell.is_diagonal:
        cell.label = dataset.names[i]
        cell.label_tooltip = dataset.paths[i]
        if options.show_basic_statistics:
            cell.statistics = basic_statistics(x)
            cell.x = x[:0]
            cell.y = y[:0]
        return cell

    if options.remove_outliers:
        try:
            mask = outlier_mask(x, y, options.filter_multiplier)
        except SingularCovarianceError as e:
            logger.warning(
                f"Outlier filter skipped for {cell.x_name} vs {cell.y_name}: {e}"
            )
        else:
            cell.x = x[mask]
            cell.y = y[mask]
            cell.removed_outliers = int(len(mask) - mask.sum())

    cell.color_index = colors.index_for((i + 1) * (j + 1))

    if options.show_pearson:
        cell.pearson = pearson(cell.x, cell.y)
    if options.show_spearman:
        cell.spearman = spearman(cell.x, cell.y)

    if options.show_regression:
        regression = linear_regression(cell.y, cell.x)
        cell.regression = clip_to_domain(regression, cell.x_domain, cell.y_domain)
        if cell.regression is None:
            logger.warning(
                f"Regression line suppressed for {cell.x_name} vs {cell.y_name}: "
                "non-finite endpoints"
            )

    return cell
