"""Flat raster indexing utilities."""

import numpy as np


def serialize_index(row, col, num_cols):
    """
    Convert 2D raster indices to the flat raster index.

    Parameters
    ----------
    row : int
        Row index (y)
    col : int
        Column index (x)
    num_cols : int
        Raster width

    Returns
    -------
    int
        Flat index ``row * num_cols + col``

    Examples
    --------
    >>> serialize_index(2, 3, 10)
    23
    """
    return row * num_cols + col


def deserialize_index(serialized_index, num_cols):
    """
    Convert a flat raster index back to 2D indices.

    Examples
    --------
    >>> deserialize_index(23, 10)
    (2, 3)
    """
    row = serialized_index // num_cols
    col = serialized_index % num_cols
    return row, col


def pixel_coordinates(width, height):
    """
    Coordinates of every raster cell in flat raster order.

    Parameters
    ----------
    width : int
        Raster width in pixels
    height : int
        Raster height in pixels

    Returns
    -------
    tuple of ndarray
        (xs, ys) float arrays of length ``width * height`` where element
        ``y * width + x`` holds ``(x, y)``

    Examples
    --------
    >>> xs, ys = pixel_coordinates(3, 2)
    >>> xs.tolist(), ys.tolist()
    ([0.0, 1.0, 2.0, 0.0, 1.0, 2.0], [0.0, 0.0, 0.0, 1.0, 1.0, 1.0])
    """
    rows, cols = deserialize_index(np.arange(width * height), max(width, 1))
    return cols.astype(float), rows.astype(float)


def raster_to_image(raster, width, height):
    """
    Reshape a flat raster into a ``(height, width)`` image array.

    Examples
    --------
    >>> raster_to_image(np.arange(6.0), 3, 2).shape
    (2, 3)
    """
    raster = np.asarray(raster, dtype=float)
    if raster.size != width * height:
        raise ValueError(
            f"Raster of length {raster.size} does not match {width}x{height}"
        )
    return raster.reshape(height, width)
