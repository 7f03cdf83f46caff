"""Value-space clustering into ordered, colorable bands."""

from .centroids import (
    centroids_by_value,
    empty_clusters_by_count,
    cluster_centroids,
    kmeans_centroids
)
from .clusters import (
    CENTROID_ALGORITHMS,
    clusters_from_centroids,
    cluster_values,
    assign_items,
    get_data_clusters,
    find_cluster_index,
    cluster_summary
)

__all__ = [
    'centroids_by_value',
    'empty_clusters_by_count',
    'cluster_centroids',
    'kmeans_centroids',
    'CENTROID_ALGORITHMS',
    'clusters_from_centroids',
    'cluster_values',
    'assign_items',
    'get_data_clusters',
    'find_cluster_index',
    'cluster_summary'
]
