"""Centroid selection strategies for 1-D value clustering."""

import numpy as np
from sklearn.cluster import KMeans

from ..types import Cluster
from ..utils.rounding import round_half_up


def centroids_by_value(values, count):
    """
    Equally spaced centroids across the value extent.

    ``step = round((max - min) / count)`` and centroid ``i`` is
    ``min + round(step / 2) + i * step``, so the resulting clusters have
    (nearly) equal width in value space.

    Parameters
    ----------
    values : array-like
        Non-empty values
    count : int
        Number of centroids

    Returns
    -------
    ndarray of shape (count,)

    Examples
    --------
    >>> centroids_by_value([0, 100, 40], 10)[:3]
    array([ 5., 15., 25.])
    """
    ordered = np.sort(np.asarray(values, dtype=float))
    step = round_half_up((ordered[-1] - ordered[0]) / count)
    half_step = round_half_up(step / 2)
    return ordered[0] + half_step + step * np.arange(count)


def empty_clusters_by_count(values, count):
    """
    Clusters holding approximately equal numbers of values.

    The sorted values are cut at ``s = round((i + 1) * n / count)`` and the
    boundary is the midpoint of the two values straddling the cut. The
    outer bounds are the smallest and largest value.

    Parameters
    ----------
    values : array-like
        Values to split
    count : int
        Number of clusters

    Returns
    -------
    list of Cluster
        ``count`` empty clusters in ascending order; empty list for no values

    Examples
    --------
    >>> [(c.min, c.max) for c in empty_clusters_by_count([1, 2, 3, 4, 5, 6], 2)]
    [(1.0, 3.5), (3.5, 6.0)]
    """
    ordered = np.sort(np.asarray(values, dtype=float))
    n = ordered.size
    if n == 0:
        return []

    bounds = [float(ordered[0])]
    for i in range(count - 1):
        if n == 1:
            bounds.append(float(ordered[0]))
            continue
        split = int(round_half_up((i + 1) * n / count))
        split = min(max(split, 1), n - 1)
        bounds.append(float((ordered[split - 1] + ordered[split]) / 2))
    bounds.append(float(ordered[-1]))

    return [Cluster(bounds[i], bounds[i + 1]) for i in range(count)]


def cluster_centroids(clusters):
    """Midpoint of every cluster."""
    return np.array([cluster.midpoint for cluster in clusters], dtype=float)


def kmeans_centroids(values, count, init='k-means++', random_state=None,
                     max_iter=300):
    """
    Refine centroids with 1-D Lloyd's k-means.

    Parameters
    ----------
    values : array-like
        Values to cluster
    count : int
        Number of centroids (k)
    init : {'k-means++', 'random'} or array-like, optional
        Seeding strategy or explicit initial centroids (default: 'k-means++')
    random_state : int, optional
        Seed for the random seeding strategies (default: None)
    max_iter : int, optional
        Maximum Lloyd iterations (default: 300)

    Returns
    -------
    ndarray
        Final centroids, unsorted. When the data has no more distinct values
        than ``count``, every distinct value is its own centroid and the
        estimator is not run.

    Examples
    --------
    >>> np.round(np.sort(kmeans_centroids([1, 1, 2, 10, 11, 12], 2, init=[0, 20])), 3).tolist()
    [1.333, 11.0]
    """
    samples = np.asarray(values, dtype=float).reshape(-1, 1)
    distinct = np.unique(samples)
    if distinct.size <= count:
        return distinct

    if not isinstance(init, str):
        init = np.asarray(init, dtype=float).reshape(-1, 1)

    model = KMeans(n_clusters=count, init=init, n_init=1, max_iter=max_iter,
                   random_state=random_state)
    model.fit(samples)
    return model.cluster_centers_.ravel()
