"""Partition a value distribution into ordered, non-overlapping bands."""

import math

import numpy as np
import pandas as pd

from ..exceptions import ConfigurationError
from ..types import Cluster
from .centroids import (
    centroids_by_value,
    empty_clusters_by_count,
    cluster_centroids,
    kmeans_centroids
)

# Supported centroid algorithms:
# - 'byValues': equal-width bands
# - 'byCount': bands holding roughly equal numbers of values
# - 'kMeansByValues' / 'kMeansByCount': k-means seeded from the above
# - 'kmrand' / 'kmpp': k-means with random / k-means++ seeding
CENTROID_ALGORITHMS = (
    'byValues',
    'byCount',
    'kMeansByValues',
    'kMeansByCount',
    'kmrand',
    'kmpp',
)

_KMEANS_INIT = {
    'kmrand': 'random',
    'kmpp': 'k-means++',
}


def clusters_from_centroids(centroids, value_range):
    """
    Build clusters whose boundaries are the midpoints between centroids.

    Centroids outside ``[value_range.min, value_range.max]`` are dropped
    without notice, so fewer clusters than centroids may come back. The
    first and last clusters extend to the range bounds.

    Parameters
    ----------
    centroids : array-like
        Cluster centers in any order
    value_range : Range
        Bounds of the value space

    Returns
    -------
    list of Cluster
        Empty clusters in ascending order

    Examples
    --------
    >>> from idwmap.types import Range
    >>> clusters = clusters_from_centroids([30, 10, 120], Range(0, 100))
    >>> [(c.min, c.max) for c in clusters]
    [(0, 20.0), (20.0, 100)]
    """
    centroids = np.asarray(centroids, dtype=float)
    inside = (centroids >= value_range.min) & (centroids <= value_range.max)
    centroids = np.sort(centroids[inside])

    clusters = []
    for i, centroid in enumerate(centroids):
        is_first = i == 0
        is_last = i == len(centroids) - 1
        clusters.append(Cluster(
            min=value_range.min if is_first else float((centroids[i - 1] + centroid) / 2),
            max=value_range.max if is_last else float((centroid + centroids[i + 1]) / 2),
        ))
    return clusters


def _check_cluster_params(count, algorithm):
    if algorithm not in CENTROID_ALGORITHMS:
        raise ConfigurationError(
            f"Unknown centroid algorithm '{algorithm}'. "
            f"Supported: {list(CENTROID_ALGORITHMS)}"
        )
    if isinstance(count, bool) or int(count) != count or count < 1:
        raise ConfigurationError(f"Cluster count must be a positive integer, got {count}")


def cluster_values(values, value_range, count, algorithm, random_state=None):
    """
    Split a value distribution into at most ``count`` ordered clusters.

    Parameters
    ----------
    values : array-like
        Values to partition
    value_range : Range
        Bounds of the value space; clamps the outer cluster bounds of every
        centroid-based algorithm and filters out-of-range centroids
    count : int
        Requested number of clusters
    algorithm : str
        One of ``CENTROID_ALGORITHMS``
    random_state : int, optional
        Seed for 'kmrand' and 'kmpp' (default: None)

    Returns
    -------
    list of Cluster
        Empty clusters sorted by ``min``; an empty list when there are no
        values

    Raises
    ------
    ConfigurationError
        For an unknown algorithm or a non-positive count

    Examples
    --------
    >>> from idwmap.types import Range
    >>> clusters = cluster_values([1, 2, 3, 4, 5, 6], Range(1, 6), 2, 'byCount')
    >>> [(c.min, c.max) for c in clusters]
    [(1.0, 3.5), (3.5, 6.0)]
    """
    _check_cluster_params(count, algorithm)
    count = int(count)

    values = np.asarray(values, dtype=float).ravel()
    values = values[~np.isnan(values)]
    if values.size == 0:
        return []

    if algorithm == 'byCount':
        return empty_clusters_by_count(values, count)

    if algorithm == 'byValues':
        centroids = centroids_by_value(values, count)
    elif algorithm == 'kMeansByCount':
        initial = cluster_centroids(empty_clusters_by_count(values, count))
        centroids = kmeans_centroids(values, count, init=initial)
    elif algorithm == 'kMeansByValues':
        initial = centroids_by_value(values, count)
        centroids = kmeans_centroids(values, count, init=initial)
    else:
        centroids = kmeans_centroids(values, count, init=_KMEANS_INIT[algorithm],
                                     random_state=random_state)

    return clusters_from_centroids(centroids, value_range)


def assign_items(clusters, data):
    """
    Fill clusters with the data items whose values they hold.

    An item belongs to cluster ``c`` when ``c.min <= value < c.max``; the
    last cluster also accepts ``value == c.max``.

    Parameters
    ----------
    clusters : sequence of Cluster
        Ascending, non-overlapping clusters
    data : sequence of DataItem
        Items to distribute

    Returns
    -------
    list of Cluster
        New clusters with ``items`` populated; the inputs are not modified
    """
    filled = []
    last = len(clusters) - 1
    for i, cluster in enumerate(clusters):
        items = [item for item in data if cluster.contains(item.value, i == last)]
        filled.append(Cluster(cluster.min, cluster.max, items))
    return filled


def get_data_clusters(data, value_range, count, algorithm, random_state=None):
    """
    Cluster a data set by value and assign every item to its cluster.

    See ``cluster_values`` for the parameters.

    Returns
    -------
    list of Cluster
        Filled clusters in ascending order
    """
    values = [item.value for item in data]
    clusters = cluster_values(values, value_range, count, algorithm, random_state)
    return assign_items(clusters, data)


def find_cluster_index(value, clusters):
    """
    Index of the cluster holding ``value``.

    Values below the first cluster map to the first one and values at or
    above the last ``max`` map to the last one.

    Returns
    -------
    int or None
        None for NaN values or when there are no clusters

    Examples
    --------
    >>> clusters = [Cluster(0, 5), Cluster(5, 10)]
    >>> find_cluster_index(5, clusters), find_cluster_index(-3, clusters)
    (1, 0)
    """
    if not clusters or math.isnan(value):
        return None
    if value < clusters[0].min:
        return 0
    if value >= clusters[-1].max:
        return len(clusters) - 1

    last = len(clusters) - 1
    for i, cluster in enumerate(clusters):
        if cluster.contains(value, i == last):
            return i
    return last


def cluster_summary(clusters):
    """
    Tabulate clusters for legend construction.

    Returns
    -------
    pd.DataFrame
        One row per cluster with columns ``min``, ``max``, ``midpoint`` and
        ``count`` (number of assigned items)
    """
    return pd.DataFrame(
        {
            'min': [c.min for c in clusters],
            'max': [c.max for c in clusters],
            'midpoint': [c.midpoint for c in clusters],
            'count': [len(c.items) for c in clusters],
        },
        columns=['min', 'max', 'midpoint', 'count']
    )
