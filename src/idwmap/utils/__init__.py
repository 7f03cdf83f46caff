"""Utility functions for raster indexing and rounding."""

from .coordinates import (
    serialize_index, deserialize_index, pixel_coordinates, raster_to_image
)
from .rounding import round_half_up

__all__ = [
    'serialize_index',
    'deserialize_index',
    'pixel_coordinates',
    'raster_to_image',
    'round_half_up'
]
