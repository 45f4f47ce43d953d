"""Per-variable axis domains."""

from .dataset import Dataset


def variable_domain(dataset: Dataset, index: int) -> tuple[float, float]:
    """
    Get the (min, max) extent of one variable over all observations.

    Args:
        dataset: Dataset to inspect
        index: Variable index

    Returns:
        Tuple of (min, max); equal when the column is constant
    """
    column = dataset.column(index)
    return float(column.min()), float(column.max())


def variable_domains(dataset: Dataset) -> list[tuple[float, float]]:
    return [variable_domain(dataset, i) for i in range(dataset.n_variables)]
