"""Data reduction modules: statistics and grid aggregation."""

from .statistics import median_value, get_data_range
from .aggregation import aggregate_data_by_grid, combine_data_items

__all__ = [
    'median_value',
    'get_data_range',
    'aggregate_data_by_grid',
    'combine_data_items'
]
