"""Rounding helpers."""

import numpy as np


def round_half_up(value):
    """
    Round to the nearest integer, halves away towards +inf.

    Python's built-in ``round`` uses banker's rounding, which would move grid
    centers and cluster steps for exact halves.

    Parameters
    ----------
    value : float or array-like
        Value(s) to round

    Returns
    -------
    float or ndarray
        Rounded value(s)

    Examples
    --------
    >>> round_half_up(2.5)
    3.0
    >>> round_half_up(-2.5)
    -2.0
    """
    rounded = np.floor(np.asarray(value, dtype=float) + 0.5)
    if rounded.ndim == 0:
        return float(rounded)
    return rounded
