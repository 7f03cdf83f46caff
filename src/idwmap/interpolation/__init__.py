"""Spatial interpolation of sparse measurements onto a raster."""

from .idw import (
    BaseWeightOptions,
    ModifiedWeightOptions,
    make_weight_options,
    base_weights,
    modified_weights,
    idw,
    idw_base,
    idw_modified
)

__all__ = [
    'BaseWeightOptions',
    'ModifiedWeightOptions',
    'make_weight_options',
    'base_weights',
    'modified_weights',
    'idw',
    'idw_base',
    'idw_modified'
]
