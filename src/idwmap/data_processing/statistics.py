"""Summary statistics over measurement values."""

import numpy as np

from ..types import Range


def median_value(values):
    """
    Median of a numeric sequence.

    Sorts a numeric working copy; the caller's sequence is left untouched.

    Parameters
    ----------
    values : array-like
        Numbers

    Returns
    -------
    float
        Median; mean of the two central elements for even lengths,
        0 for an empty sequence

    Examples
    --------
    >>> median_value([10, 9, 1, 2])
    5.5
    >>> median_value([3, 1, 2])
    2.0
    >>> median_value([])
    0.0
    """
    ordered = np.sort(np.asarray(values, dtype=float).ravel())
    n = ordered.size
    if n == 0:
        return 0.0

    center = (n + 1) // 2
    if n % 2 == 0:
        return float((ordered[center] + ordered[center - 1]) / 2)
    return float(ordered[center - 1])


def get_data_range(data):
    """
    Minimum and maximum value of a data set.

    Parameters
    ----------
    data : sequence of DataItem
        Measurements

    Returns
    -------
    Range
        Value bounds; ``Range(inf, -inf)`` when ``data`` is empty

    Examples
    --------
    >>> from idwmap.types import make_data_items
    >>> get_data_range(make_data_items([[0, 0], [1, 1]], [4, -2]))
    Range(min=-2.0, max=4.0)
    """
    if not len(data):
        return Range.empty()

    values = np.array([item.value for item in data], dtype=float)
    return Range(float(values.min()), float(values.max()))
