"""Square grid construction over a raster domain."""

import math

import numpy as np

from ..exceptions import ConfigurationError
from ..types import Grid
from ..utils.rounding import round_half_up


def _grid_lines(dimension, cell_size):
    center = round_half_up(dimension / 2)
    half_count = math.ceil(dimension / (2 * cell_size))
    start = center - half_count * cell_size

    # lines at start + k * cell_size strictly inside (0, dimension)
    steps = np.arange(1, math.ceil((dimension - start) / cell_size) + 1)
    lines = start + steps * cell_size
    inner = lines[(lines > 0) & (lines < dimension)]

    return (0.0, *(float(v) for v in inner), float(dimension))


def build_square_grid(width, height, cell_size):
    """
    Build a square grid centered on the domain ``[0, width] x [0, height]``.

    Grid lines are placed outward from the rounded domain center at
    ``cell_size`` spacing. The first line is always 0 and the last is always
    the full dimension, so the outermost cells may be narrower than
    ``cell_size``.

    Parameters
    ----------
    width : float
        Domain width in pixels
    height : float
        Domain height in pixels
    cell_size : float
        Grid cell side length in pixels

    Returns
    -------
    Grid
        Strictly increasing x and y boundaries

    Raises
    ------
    ConfigurationError
        If ``cell_size``, ``width`` or ``height`` is not positive

    Examples
    --------
    >>> build_square_grid(10, 4, 3).x
    (0.0, 2.0, 5.0, 8.0, 10.0)
    >>> build_square_grid(10, 4, 3).y
    (0.0, 2.0, 4.0)
    """
    if not cell_size > 0:
        raise ConfigurationError(f"Grid cell size must be positive, got {cell_size}")
    if not (width > 0 and height > 0):
        raise ConfigurationError(
            f"Grid dimensions must be positive, got {width}x{height}"
        )

    return Grid(x=_grid_lines(width, cell_size), y=_grid_lines(height, cell_size))
