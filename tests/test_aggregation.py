"""Tests for median reduction, value range and grid aggregation."""

import math

import pytest

from idwmap import ConfigurationError, DataItem, Grid, make_data_items
from idwmap.data_processing import (
    median_value, get_data_range, aggregate_data_by_grid, combine_data_items
)
from idwmap.spatial import build_square_grid


def test_median_of_odd_and_even_sequences():
    assert median_value([3, 1, 2]) == 2
    assert median_value([4, 1, 3, 2]) == 2.5
    assert median_value([7]) == 7


def test_median_sorts_numerically():
    # lexicographic order would put 10 before 2
    assert median_value([10, 9, 1, 2]) == 5.5
    assert median_value([100, 20, 3]) == 20


def test_median_of_empty_sequence_is_zero():
    assert median_value([]) == 0


def test_median_leaves_input_untouched():
    values = [5, 3, 9, 1]
    median_value(values)

    assert values == [5, 3, 9, 1]


def test_data_range():
    data = make_data_items([[0, 0], [1, 1], [2, 2]], [5, -3, 12])

    value_range = get_data_range(data)

    assert (value_range.min, value_range.max) == (-3, 12)
    assert not value_range.is_empty


def test_data_range_of_empty_data_is_the_sentinel():
    value_range = get_data_range([])

    assert value_range.is_empty
    assert value_range.min == math.inf and value_range.max == -math.inf


def test_combined_item_uses_medians_and_rounds_value():
    items = make_data_items([[1, 8], [3, 2], [2, 5], [6, 1]], [1, 2, 2, 3])

    combined = combine_data_items(items)

    assert combined.point == (2.5, 3.5)
    assert combined.value == 2


def test_rounding_of_half_values_goes_up():
    items = make_data_items([[1, 1], [2, 2]], [1, 2])

    assert combine_data_items(items).value == 2


def test_cell_with_exactly_k_points_yields_their_medians():
    grid = Grid(x=(0.0, 10.0, 20.0), y=(0.0, 10.0, 20.0))
    data = make_data_items(
        [[1, 1], [2, 7], [9, 4], [15, 15]],
        [10, 40, 20, 99]
    )

    aggregated = aggregate_data_by_grid(data, grid, 3)

    assert aggregated == [DataItem((2.0, 4.0), 20.0)]


def test_sparse_cells_are_dropped():
    grid = Grid(x=(0.0, 10.0, 20.0), y=(0.0, 10.0))
    data = make_data_items([[1, 1], [2, 2], [15, 5]], [1, 1, 1])

    assert len(aggregate_data_by_grid(data, grid, 1)) == 2
    assert len(aggregate_data_by_grid(data, grid, 2)) == 1
    assert aggregate_data_by_grid(data, grid, 3) == []


def test_point_on_shared_line_is_counted_once():
    grid = Grid(x=(0.0, 10.0, 20.0), y=(0.0, 10.0, 20.0))
    data = make_data_items([[10, 10]] * 3, [5, 6, 7])

    aggregated = aggregate_data_by_grid(data, grid, 1)

    assert aggregated == [DataItem((10.0, 10.0), 6.0)]


def test_points_on_domain_border_are_kept():
    grid = Grid(x=(0.0, 10.0, 20.0), y=(0.0, 10.0))
    data = make_data_items([[20, 10], [20, 0], [0, 10]], [1, 2, 3])

    aggregated = aggregate_data_by_grid(data, grid, 1)

    assert sorted(item.value for item in aggregated) == [2.0, 3.0]
    assert sum(1 for _ in aggregated) == 2


def test_every_point_lands_in_one_cell(random_data):
    grid = build_square_grid(50, 50, 7)

    aggregated = aggregate_data_by_grid(random_data, grid, 1)
    populated = {
        (i, j) for i, j, x1, y1, x2, y2 in grid.cells()
        if any(x1 <= d.point[0] < x2 and y1 <= d.point[1] < y2 for d in random_data)
    }

    assert len(aggregated) == len(populated)
    assert len(aggregate_data_by_grid(random_data, grid, 3)) <= len(populated)


def test_empty_data_aggregates_to_nothing():
    assert aggregate_data_by_grid([], build_square_grid(10, 10, 2), 1) == []


def test_min_points_below_one_is_rejected():
    with pytest.raises(ConfigurationError):
        aggregate_data_by_grid([], build_square_grid(10, 10, 2), 0)
