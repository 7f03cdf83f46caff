"""Collapse dense point clusters onto a grid."""

import numpy as np

from ..exceptions import ConfigurationError
from ..spatial.index import SpatialIndex
from ..types import DataItem, data_to_arrays
from ..utils.rounding import round_half_up
from .statistics import median_value


def combine_data_items(items):
    """
    Merge measurements into one representative item.

    The point is the per-axis median of the member coordinates and the
    value is the rounded median of the member values.

    Parameters
    ----------
    items : sequence of DataItem
        Non-empty group of measurements

    Returns
    -------
    DataItem

    Examples
    --------
    >>> from idwmap.types import make_data_items
    >>> combine_data_items(make_data_items([[0, 0], [2, 4], [4, 2]], [1, 2, 4]))
    DataItem(point=(2.0, 2.0), value=2.0)
    """
    points, values = data_to_arrays(items)
    return DataItem(
        (median_value(points[:, 0]), median_value(points[:, 1])),
        round_half_up(median_value(values)),
    )


def aggregate_data_by_grid(data, grid, min_points_per_cell):
    """
    Aggregate measurements by grid cell.

    Every cell holding at least ``min_points_per_cell`` measurements
    contributes one item built by ``combine_data_items``; sparser cells are
    dropped. Cells are half-open, ``[x1, x2) x [y1, y2)``, so a point on a
    shared line belongs to exactly one cell. The last column and row are
    also closed on their outer edge so points on the domain border are kept.

    Parameters
    ----------
    data : sequence of DataItem
        Raw measurements
    grid : Grid
        Cell boundaries, e.g. from ``build_square_grid``
    min_points_per_cell : int
        Minimum number of members for a cell to be kept (>= 1)

    Returns
    -------
    list of DataItem
        One item per retained cell, in column-major cell order

    Raises
    ------
    ConfigurationError
        If ``min_points_per_cell`` is less than 1

    Examples
    --------
    >>> from idwmap.types import Grid, make_data_items
    >>> grid = Grid(x=(0.0, 10.0, 20.0), y=(0.0, 10.0))
    >>> data = make_data_items([[1, 1], [3, 3], [15, 5]], [10, 20, 30])
    >>> aggregate_data_by_grid(data, grid, 2)
    [DataItem(point=(2.0, 2.0), value=15.0)]
    """
    if min_points_per_cell < 1:
        raise ConfigurationError(
            f"min_points_per_cell must be at least 1, got {min_points_per_cell}"
        )
    if not len(data):
        return []

    points, _ = data_to_arrays(data)
    index = SpatialIndex(points)
    last_column, last_row = grid.shape
    aggregated = []

    for i, j, x1, y1, x2, y2 in grid.cells():
        indices = index.range_query(x1, y1, x2, y2)
        if indices.size < min_points_per_cell:
            continue

        xs = points[indices, 0]
        ys = points[indices, 1]
        keep = np.ones(indices.size, dtype=bool)
        if i < last_column - 1:
            keep &= xs < x2
        if j < last_row - 1:
            keep &= ys < y2
        indices = indices[keep]

        if indices.size < min_points_per_cell:
            continue

        aggregated.append(combine_data_items([data[k] for k in indices]))

    return aggregated
