"""Static 2-D point index for rectangle and radius queries."""

import numpy as np
from scipy.spatial import cKDTree


class SpatialIndex:
    """
    Immutable kd-tree over a set of 2-D points.

    Query results are indices into the point sequence the index was built
    from, so result ``i`` always refers to input point ``i``. Duplicates are
    allowed. An empty point set gives a valid index whose queries return
    nothing.

    Parameters
    ----------
    points : array-like of shape (n, 2)
        Point coordinates. The index keeps its own read-only copy; rebuild it
        when the data set changes.

    Examples
    --------
    >>> index = SpatialIndex([[0, 0], [3, 4], [10, 10]])
    >>> sorted(index.radius_query(0, 0, 5).tolist())
    [0, 1]
    >>> sorted(index.range_query(0, 0, 3, 4).tolist())
    [0, 1]
    """

    def __init__(self, points):
        points = np.array(points, dtype=float).reshape(-1, 2)
        points.setflags(write=False)
        self._points = points
        self._tree = cKDTree(points) if len(points) else None

    def __len__(self):
        return len(self._points)

    @property
    def points(self):
        return self._points

    def range_query(self, x_min, y_min, x_max, y_max):
        """
        Indices of points inside the closed rectangle.

        Uses a Chebyshev ball around the rectangle center to collect
        candidates, then filters them to the exact rectangle.

        Returns
        -------
        ndarray of int
            Point indices, order unspecified
        """
        if self._tree is None or x_min > x_max or y_min > y_max:
            return np.empty(0, dtype=int)

        cx = (x_min + x_max) / 2
        cy = (y_min + y_max) / 2
        half_extent = max(x_max - x_min, y_max - y_min) / 2
        # slack for rounding of the center; the filter below is exact
        half_extent += 1e-9 * (1.0 + half_extent)

        candidates = np.asarray(
            self._tree.query_ball_point([cx, cy], half_extent, p=np.inf),
            dtype=int
        )
        if candidates.size == 0:
            return candidates

        xs = self._points[candidates, 0]
        ys = self._points[candidates, 1]
        inside = (xs >= x_min) & (xs <= x_max) & (ys >= y_min) & (ys <= y_max)
        return candidates[inside]

    def radius_query(self, cx, cy, r):
        """
        Indices of points within Euclidean distance ``r`` of ``(cx, cy)``.

        Points exactly at distance ``r`` are included.

        Returns
        -------
        ndarray of int
            Point indices, order unspecified
        """
        if self._tree is None or r < 0:
            return np.empty(0, dtype=int)
        return np.asarray(self._tree.query_ball_point([cx, cy], r), dtype=int)

    def radius_pairs(self, xs, ys, r):
        """
        Batch radius query for many centers.

        Parameters
        ----------
        xs, ys : array-like
            Query center coordinates
        r : float
            Search radius (inclusive)

        Returns
        -------
        tuple of ndarray
            ``(query_indices, point_indices)``: pair ``k`` says point
            ``point_indices[k]`` lies within ``r`` of center
            ``query_indices[k]``
        """
        xs = np.asarray(xs, dtype=float).ravel()
        ys = np.asarray(ys, dtype=float).ravel()
        if self._tree is None or xs.size == 0 or r < 0:
            return np.empty(0, dtype=int), np.empty(0, dtype=int)

        neighbors = self._tree.query_ball_point(np.column_stack([xs, ys]), r)
        counts = np.fromiter((len(n) for n in neighbors), dtype=int,
                             count=len(neighbors))
        query_indices = np.repeat(np.arange(xs.size), counts)
        if counts.sum() == 0:
            return query_indices, np.empty(0, dtype=int)
        point_indices = np.concatenate(
            [np.asarray(n, dtype=int) for n in neighbors if n]
        )
        return query_indices, point_indices
