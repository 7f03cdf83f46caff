"""
IDW Raster Mapping Package

This package interpolates sparse 2-D point measurements onto a dense raster
using inverse distance weighting, and partitions the resulting value space
into ordered bands that a renderer can color.

Main pieces: spatial indexing, grid aggregation, IDW interpolation (global
power-law and radius-bounded variants) and 1-D value clustering.
"""

__version__ = "1.0.0"

from .exceptions import ConfigurationError
from .types import DataItem, Range, Grid, Cluster, make_data_items

__all__ = [
    'ConfigurationError',
    'DataItem',
    'Range',
    'Grid',
    'Cluster',
    'make_data_items',
]
