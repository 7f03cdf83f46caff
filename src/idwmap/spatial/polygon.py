"""Point-in-multipolygon membership with hole support."""

import numpy as np


def point_in_ring(point, ring):
    """
    Crossing-number test of a point against a closed ring.

    A horizontal ray is cast from the point towards +x and edge crossings
    are counted. The ring may or may not repeat its first vertex at the end.
    Points on the boundary get a consistent but unspecified answer.

    Parameters
    ----------
    point : tuple of float
        (x, y)
    ring : sequence of (x, y)
        Ring vertices

    Returns
    -------
    bool

    Examples
    --------
    >>> square = [(0, 0), (10, 0), (10, 10), (0, 10)]
    >>> point_in_ring((5, 5), square)
    True
    >>> point_in_ring((15, 5), square)
    False
    """
    x, y = point
    inside = False
    n = len(ring)
    j = n - 1
    for i in range(n):
        xi, yi = ring[i][0], ring[i][1]
        xj, yj = ring[j][0], ring[j][1]
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def point_in_multipolygon(point, multipolygon):
    """
    Return True if the point lies inside the multipolygon.

    The point must be inside the outer ring (ring 0) of at least one polygon
    and outside every hole ring of that same polygon.

    Examples
    --------
    >>> outer = [(0, 0), (10, 0), (10, 10), (0, 10)]
    >>> hole = [(4, 4), (6, 4), (6, 6), (4, 6)]
    >>> point_in_multipolygon((5, 5), [[outer, hole]])
    False
    >>> point_in_multipolygon((2, 2), [[outer, hole]])
    True
    """
    for polygon in multipolygon:
        if not polygon or not point_in_ring(point, polygon[0]):
            continue
        if not any(point_in_ring(point, hole) for hole in polygon[1:]):
            return True
    return False


def _ring_mask(xs, ys, ring):
    ring = np.asarray(ring, dtype=float).reshape(-1, 2)
    inside = np.zeros(xs.shape, dtype=bool)
    n = len(ring)
    j = n - 1
    for i in range(n):
        xi, yi = ring[i]
        xj, yj = ring[j]
        straddles = (yi > ys) != (yj > ys)
        if straddles.any():
            with np.errstate(divide='ignore', invalid='ignore'):
                crossing = xs < (xj - xi) * (ys - yi) / (yj - yi) + xi
            inside ^= straddles & crossing
        j = i
    return inside


def multipolygon_mask(xs, ys, multipolygon):
    """
    Vectorised ``point_in_multipolygon`` over many points.

    Uses the same crossing rule as ``point_in_ring`` so both functions agree
    on every point, boundary points included.

    Parameters
    ----------
    xs, ys : array-like
        Point coordinates
    multipolygon : sequence
        Polygons, each a sequence of rings (outer ring first)

    Returns
    -------
    ndarray of bool
        Membership flag per point
    """
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)
    mask = np.zeros(xs.shape, dtype=bool)

    for polygon in multipolygon:
        if not polygon:
            continue
        in_polygon = _ring_mask(xs, ys, polygon[0])
        for hole in polygon[1:]:
            in_polygon &= ~_ring_mask(xs, ys, hole)
        mask |= in_polygon

    return mask
