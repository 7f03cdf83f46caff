"""Spatial indexing, grid construction and polygon membership."""

from .index import SpatialIndex
from .grid import build_square_grid
from .polygon import point_in_ring, point_in_multipolygon, multipolygon_mask

__all__ = [
    'SpatialIndex',
    'build_square_grid',
    'point_in_ring',
    'point_in_multipolygon',
    'multipolygon_mask'
]
